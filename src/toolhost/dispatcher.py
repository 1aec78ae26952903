"""MethodDispatcher — routes a decoded request to its method handler.

Each supported method is an entry in a table keyed by method name, pairing
the pydantic model its ``params`` decode into with the coroutine that
produces the result. Params are decoded once, here, before the handler
sees them.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

from toolhost.errors import MethodNotFoundError
from toolhost.protocol.models import (
    EmptyParams,
    InitializeParams,
    InitializeResult,
    JsonRpcResponse,
    ListToolsResult,
    ServerInfo,
    ToolCallParams,
)
from toolhost.utils.telemetry import ATTR_RPC_ERROR_CODE, ATTR_RPC_METHOD, get_tracer

if TYPE_CHECKING:
    from toolhost.executor import ToolExecutor
    from toolhost.protocol.models import JsonRpcRequest
    from toolhost.registry import ToolRegistry

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

Handler = Callable[[Any], Awaitable[Any]]


@dataclass(frozen=True)
class MethodSpec:
    """A supported method: its params model and its handler."""

    params_model: type[BaseModel]
    handler: Handler


class MethodDispatcher:
    """Selects behavior by method name and builds the response envelope.

    Holds no per-request state; the registry and executor it is given are
    only read.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        executor: ToolExecutor,
        server_info: ServerInfo,
    ) -> None:
        self._registry = registry
        self._executor = executor
        self._server_info = server_info
        self._methods: dict[str, MethodSpec] = {
            "initialize": MethodSpec(InitializeParams, self._initialize),
            "tools/list": MethodSpec(EmptyParams, self._list_tools),
            "tools/call": MethodSpec(ToolCallParams, self._call_tool),
        }

    @property
    def methods(self) -> list[str]:
        return list(self._methods)

    async def dispatch(self, request: JsonRpcRequest) -> JsonRpcResponse:
        """Handle *request* and return its response, echoing ``request.id``."""
        with _tracer.start_as_current_span("toolhost.dispatch") as span:
            span.set_attribute(ATTR_RPC_METHOD, request.method)
            spec = self._methods.get(request.method)
            if spec is None:
                fault = MethodNotFoundError(request.method)
                logger.warning("%s (id=%r)", fault, request.id)
                span.set_attribute(ATTR_RPC_ERROR_CODE, fault.code)
                return JsonRpcResponse.failure(request.id, fault.to_error())

            logger.debug("Dispatching %s (id=%r)", request.method, request.id)
            params = _decode_params(request.method, spec.params_model, request.params)
            result = await spec.handler(params)
            return JsonRpcResponse.success(request.id, result)

    # -- handlers ------------------------------------------------------------

    async def _initialize(self, _params: InitializeParams) -> dict[str, Any]:
        return InitializeResult(server_info=self._server_info).model_dump(by_alias=True)

    async def _list_tools(self, _params: EmptyParams) -> dict[str, Any]:
        return ListToolsResult(tools=self._registry.list()).model_dump(by_alias=True)

    async def _call_tool(self, params: ToolCallParams) -> dict[str, Any]:
        return await self._executor.execute(params.name, params.arguments)


def _decode_params(method: str, model: type[BaseModel], raw: Any) -> BaseModel:
    """Decode *raw* params into *model*; malformed params fall back to defaults."""
    if raw is None:
        return model()
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        logger.warning(
            "Malformed params for %s (%d error(s)); using defaults",
            method,
            exc.error_count(),
        )
        return model()
