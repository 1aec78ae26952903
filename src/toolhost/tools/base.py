"""Tool protocol — the interface every served tool implements."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from toolhost.protocol.models import ToolCallResult, ToolDescriptor


class NoArguments(BaseModel):
    """Arguments model for tools that take none."""

    model_config = ConfigDict(extra="ignore")


@runtime_checkable
class Tool(Protocol):
    """A named capability with a declared schema and a content-producing body.

    ``descriptor`` is what ``tools/list`` serves. ``arguments_model`` is the
    pydantic model the executor decodes raw call arguments into; every field
    must have a default so a failed decode can fall back to ``arguments_model()``.
    """

    descriptor: ClassVar[ToolDescriptor]
    arguments_model: ClassVar[type[BaseModel]]

    async def run(self, arguments: BaseModel) -> ToolCallResult:
        """Execute the tool with decoded *arguments*."""
        ...
