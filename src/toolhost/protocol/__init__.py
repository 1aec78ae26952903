"""Protocol layer — JSON-RPC envelopes, MCP payloads and the wire codec."""

from toolhost.protocol.codec import decode_request, encode_response, parse_error_response
from toolhost.protocol.models import (
    PROTOCOL_VERSION,
    InitializeResult,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    ListToolsResult,
    ServerInfo,
    TextContent,
    ToolCallParams,
    ToolCallResult,
    ToolDescriptor,
    ToolErrorResult,
)

__all__ = [
    "PROTOCOL_VERSION",
    "InitializeResult",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "ListToolsResult",
    "ServerInfo",
    "TextContent",
    "ToolCallParams",
    "ToolCallResult",
    "ToolDescriptor",
    "ToolErrorResult",
    "decode_request",
    "encode_response",
    "parse_error_response",
]
