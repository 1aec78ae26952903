"""toolhost — a small MCP tool server speaking JSON-RPC 2.0 over HTTP."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from toolhost.server import ToolServer as ToolServer
    from toolhost.server import build_default_server as build_default_server

_LAZY_EXPORTS = {
    "ToolServer": "toolhost.server",
    "build_default_server": "toolhost.server",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'toolhost' has no attribute {name!r}")
