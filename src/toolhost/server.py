"""ToolServer — the transport-facing core.

Bytes in, bytes out: the HTTP layer forwards raw request bodies to
:meth:`ToolServer.handle` and writes back whatever it returns.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from toolhost import __version__
from toolhost.dispatcher import MethodDispatcher
from toolhost.errors import ParseError
from toolhost.executor import ToolExecutor
from toolhost.protocol.codec import decode_request, encode_response, parse_error_response
from toolhost.protocol.models import PROTOCOL_VERSION, JsonRpcResponse, ServerInfo
from toolhost.registry import ToolRegistry

if TYPE_CHECKING:
    from toolhost.tools.base import Tool

logger = logging.getLogger(__name__)

SERVER_NAME = "toolhost MCP Server"


class ToolServer:
    """Owns the registry, the executor and the dispatcher.

    Tools are added during startup; :meth:`freeze` (called implicitly by
    the first :meth:`handle`) ends registration.

    Usage::

        server = ToolServer()
        server.add_tool(EchoTool())
        server.freeze()
        body = await server.handle(b'{"jsonrpc": "2.0", "id": 1, "method": "tools/list"}')
    """

    def __init__(self, name: str = SERVER_NAME, version: str = __version__) -> None:
        self.info = ServerInfo(name=name, version=version)
        self.registry = ToolRegistry()
        self.executor = ToolExecutor(self.registry)
        self.dispatcher = MethodDispatcher(self.registry, self.executor, self.info)

    def add_tool(self, tool: Tool) -> None:
        """Register *tool*'s descriptor and bind its body."""
        self.registry.register(tool.descriptor)
        self.executor.bind(tool)
        logger.info("Registered tool: %s", tool.descriptor.name)

    def freeze(self) -> None:
        if not self.registry.frozen:
            self.registry.freeze()
            logger.info(
                "Serving %d tool(s): %s", len(self.registry), ", ".join(self.registry.names())
            )

    def describe(self) -> dict[str, object]:
        """Static capability/version summary served on ``GET /mcp``."""
        return {
            "name": self.info.name,
            "version": self.info.version,
            "protocol": PROTOCOL_VERSION,
            "capabilities": {"tools": {"listChanged": True}},
        }

    async def handle_request(self, raw: bytes | str) -> JsonRpcResponse:
        """Decode *raw* and dispatch it; decode failures skip the dispatcher."""
        self.freeze()
        try:
            request = decode_request(raw)
        except ParseError as exc:
            logger.warning("Rejecting request body: %s", exc)
            return parse_error_response(exc)
        return await self.dispatcher.dispatch(request)

    async def handle(self, raw: bytes | str) -> bytes:
        return encode_response(await self.handle_request(raw))


def build_default_server() -> ToolServer:
    """A frozen server carrying the built-in tools."""
    from toolhost.tools import builtin_tools

    server = ToolServer()
    for tool in builtin_tools():
        server.add_tool(tool)
    server.freeze()
    return server
