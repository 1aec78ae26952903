"""``system_info`` — static facts about the host running the server."""

from __future__ import annotations

import os
import platform
import sys
from typing import ClassVar

from pydantic import BaseModel

from toolhost.protocol.models import ToolCallResult, ToolDescriptor
from toolhost.tools.base import NoArguments


def describe_host() -> str:
    """OS family, CPU architecture, interpreter version and logical CPU count."""
    return (
        f"OS: {sys.platform}\n"
        f"Arch: {platform.machine()}\n"
        f"Python Version: {platform.python_version()}\n"
        f"CPUs: {os.cpu_count() or 1}"
    )


class SystemInfoTool:
    descriptor: ClassVar[ToolDescriptor] = ToolDescriptor(
        name="system_info",
        description="Get system information",
        input_schema={"type": "object", "properties": {}},
    )
    arguments_model: ClassVar[type[BaseModel]] = NoArguments

    async def run(self, arguments: BaseModel) -> ToolCallResult:
        return ToolCallResult.from_text(describe_host())
