"""HTTP transport — FastAPI routes around :class:`~toolhost.server.ToolServer`.

``POST /mcp`` carries JSON-RPC. Every other route is static. The transport
makes no protocol decisions: bodies go to the server untouched and its
bytes come back untouched, always with HTTP 200.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

if TYPE_CHECKING:
    from toolhost.server import ToolServer

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"
MCP_PATH = "/mcp"

_CORS_ORIGIN = {"Access-Control-Allow-Origin": "*"}
_MCP_HEADERS = {
    **_CORS_ORIGIN,
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def create_app(server: ToolServer) -> FastAPI:
    """Build the ASGI app serving *server*."""
    started = time.monotonic()
    app = FastAPI(title=server.info.name, version=server.info.version)

    @app.get("/")
    async def root() -> JSONResponse:
        return JSONResponse(
            {
                "message": f"{server.info.name} running",
                "version": server.info.version,
                "endpoints": {"health": "/health", "mcp": MCP_PATH},
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
            headers=_CORS_ORIGIN,
        )

    @app.get("/health")
    async def health() -> JSONResponse:
        return JSONResponse(
            {
                "status": "healthy",
                "server": server.info.name,
                "version": server.info.version,
                "uptime": round(time.monotonic() - started, 3),
            },
            headers=_CORS_ORIGIN,
        )

    @app.options(MCP_PATH)
    async def mcp_preflight() -> Response:
        return Response(status_code=200, headers=_MCP_HEADERS)

    @app.get(MCP_PATH)
    async def mcp_info() -> JSONResponse:
        return JSONResponse(server.describe(), headers=_MCP_HEADERS)

    @app.post(MCP_PATH)
    async def mcp_rpc(request: Request) -> Response:
        body = await request.body()
        logger.debug("POST %s (%d bytes)", MCP_PATH, len(body))
        payload = await server.handle(body)
        return Response(content=payload, media_type=JSON_MEDIA_TYPE, headers=_MCP_HEADERS)

    return app


def serve(server: ToolServer, host: str, port: int, log_level: str = "info") -> None:
    """Run *server* under uvicorn until interrupted."""
    import uvicorn

    uvicorn.run(create_app(server), host=host, port=port, log_level=log_level.lower())
