"""Built-in tools served by default."""

from __future__ import annotations

from toolhost.tools.base import NoArguments, Tool
from toolhost.tools.echo import EchoArguments, EchoTool
from toolhost.tools.system_info import SystemInfoTool


def builtin_tools() -> list[Tool]:
    """Fresh instances of every built-in tool."""
    return [SystemInfoTool(), EchoTool()]


__all__ = [
    "EchoArguments",
    "EchoTool",
    "NoArguments",
    "SystemInfoTool",
    "Tool",
    "builtin_tools",
]
