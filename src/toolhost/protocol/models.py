"""Protocol models — JSON-RPC 2.0 envelopes and MCP payloads.

Implements the message shapes used by the Model Context Protocol for the
handshake (``initialize``), tool discovery (``tools/list``) and execution
(``tools/call``).
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

JSONRPC_VERSION = "2.0"
PROTOCOL_VERSION = "2024-11-05"

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request message.

    ``id`` is opaque: it may be absent, a number, a string or null, and is
    only ever echoed back. ``params`` stays raw until the dispatcher decodes
    it against the method's own model.
    """

    model_config = ConfigDict(extra="ignore")

    jsonrpc: str = JSONRPC_VERSION
    id: Any = None
    method: str = ""
    params: Any = None


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message carrying exactly one of result/error."""

    jsonrpc: str = JSONRPC_VERSION
    id: Any = None
    result: Any = None
    error: JsonRpcError | None = None

    @model_validator(mode="after")
    def _exactly_one_outcome(self) -> JsonRpcResponse:
        if (self.result is None) == (self.error is None):
            msg = "response must carry exactly one of 'result' or 'error'"
            raise ValueError(msg)
        return self

    @classmethod
    def success(cls, request_id: Any, result: Any) -> JsonRpcResponse:
        return cls(id=request_id, result=result)

    @classmethod
    def failure(cls, request_id: Any, error: JsonRpcError) -> JsonRpcResponse:
        return cls(id=request_id, error=error)


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class ToolDescriptor(BaseModel):
    """A tool definition as returned by ``tools/list``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(
        default_factory=lambda: {"type": "object", "properties": {}},
        alias="inputSchema",
    )

    @property
    def required_arguments(self) -> list[str]:
        return list(self.input_schema.get("required", []))


class TextContent(BaseModel):
    """Plain text content block."""

    type: Literal["text"] = "text"
    text: str


class ToolCallResult(BaseModel):
    """Successful output of a tool: a list of content blocks."""

    content: list[TextContent] = []

    @classmethod
    def from_text(cls, text: str) -> ToolCallResult:
        return cls(content=[TextContent(text=text)])


class ToolErrorResult(BaseModel):
    """In-band tool failure, delivered inside a successful envelope."""

    error: str


class ServerInfo(BaseModel):
    name: str
    version: str


class ToolsCapability(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    list_changed: bool = Field(default=True, alias="listChanged")


class ServerCapabilities(BaseModel):
    tools: ToolsCapability = Field(default_factory=ToolsCapability)


class InitializeResult(BaseModel):
    """Result of the ``initialize`` handshake."""

    model_config = ConfigDict(populate_by_name=True)

    protocol_version: str = Field(default=PROTOCOL_VERSION, alias="protocolVersion")
    capabilities: ServerCapabilities = Field(default_factory=ServerCapabilities)
    server_info: ServerInfo = Field(alias="serverInfo")


class ListToolsResult(BaseModel):
    tools: list[ToolDescriptor] = []


# ---------------------------------------------------------------------------
# Per-method params
# ---------------------------------------------------------------------------


class InitializeParams(BaseModel):
    """Client handshake params. Accepted but not acted upon."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    protocol_version: str | None = Field(default=None, alias="protocolVersion")
    client_info: dict[str, Any] | None = Field(default=None, alias="clientInfo")


class EmptyParams(BaseModel):
    model_config = ConfigDict(extra="allow")


class ToolCallParams(BaseModel):
    """``tools/call`` params. ``arguments`` stays raw for the target tool."""

    name: str = ""
    arguments: Any = None
