"""ToolExecutor — runs the behavior behind a registered tool name.

The executor owns the name-to-callable table; descriptors live separately
in :class:`~toolhost.registry.ToolRegistry` so metadata can be served
without exposing executable code. Every outcome is a result payload: tool
failures never escape as exceptions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

from toolhost.errors import ApplicationFault, ToolExecutionError, ToolNotFoundError
from toolhost.protocol.models import ToolErrorResult
from toolhost.utils.telemetry import ATTR_TOOL_NAME, ATTR_TOOL_OUTCOME, get_tracer

if TYPE_CHECKING:
    from toolhost.registry import ToolRegistry
    from toolhost.tools.base import Tool

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


class ToolExecutor:
    """Dispatches ``tools/call`` invocations to tool bodies.

    Usage::

        executor = ToolExecutor(registry)
        executor.bind(EchoTool())
        result = await executor.execute("echo", {"message": "hi"})
        # {"content": [{"type": "text", "text": "Echo: hi"}]}
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self._registry = registry
        self._handlers: dict[str, Tool] = {}

    def bind(self, tool: Tool) -> None:
        """Attach *tool*'s body under its descriptor name. Last bind wins."""
        self._handlers[tool.descriptor.name] = tool

    async def execute(self, name: str, arguments: Any) -> dict[str, Any]:
        """Run tool *name* on raw *arguments* and return the result payload."""
        with _tracer.start_as_current_span("toolhost.tool.execute") as span:
            span.set_attribute(ATTR_TOOL_NAME, name)
            try:
                tool = self._resolve(name)
                decoded = _decode_arguments(tool, arguments)
                result = await self._run(tool, decoded)
            except ApplicationFault as fault:
                span.set_attribute(ATTR_TOOL_OUTCOME, "error")
                return ToolErrorResult(error=fault.in_band_message).model_dump()
            span.set_attribute(ATTR_TOOL_OUTCOME, "ok")
            return result

    def _resolve(self, name: str) -> Tool:
        try:
            self._registry.get(name)
        except ToolNotFoundError:
            logger.warning("Call to unknown tool %r", name)
            raise
        tool = self._handlers.get(name)
        if tool is None:
            logger.warning("Tool %r is registered but has no bound body", name)
            raise ToolNotFoundError(name)
        return tool

    @staticmethod
    async def _run(tool: Tool, arguments: BaseModel) -> dict[str, Any]:
        name = tool.descriptor.name
        try:
            result = await tool.run(arguments)
        except Exception as exc:
            logger.exception("Tool %s raised", name)
            raise ToolExecutionError(name, str(exc)) from exc
        return result.model_dump()


def _decode_arguments(tool: Tool, arguments: Any) -> BaseModel:
    """Decode raw *arguments* into the tool's model, falling back to defaults.

    Malformed or missing arguments are not rejected: the tool runs with its
    model's default values instead.
    """
    model = tool.arguments_model
    if arguments is None:
        return model()
    try:
        return model.model_validate(arguments)
    except ValidationError as exc:
        logger.warning(
            "Malformed arguments for tool %s (%d error(s)); using defaults",
            tool.descriptor.name,
            exc.error_count(),
        )
        return model()
