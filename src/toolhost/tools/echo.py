"""``echo`` — returns its ``message`` argument behind a fixed label."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from toolhost.protocol.models import ToolCallResult, ToolDescriptor


class EchoArguments(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str = ""


class EchoTool:
    descriptor: ClassVar[ToolDescriptor] = ToolDescriptor(
        name="echo",
        description="Echo back a message",
        input_schema={
            "type": "object",
            "properties": {
                "message": {"type": "string", "description": "Message to echo"},
            },
            "required": ["message"],
        },
    )
    arguments_model: ClassVar[type[BaseModel]] = EchoArguments

    async def run(self, arguments: EchoArguments) -> ToolCallResult:
        return ToolCallResult.from_text(f"Echo: {arguments.message}")
