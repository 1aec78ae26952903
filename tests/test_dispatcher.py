"""Tests for MethodDispatcher routing."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from toolhost.dispatcher import MethodDispatcher
from toolhost.executor import ToolExecutor
from toolhost.protocol.models import PROTOCOL_VERSION, JsonRpcRequest, ServerInfo
from toolhost.registry import ToolRegistry
from toolhost.tools import EchoTool


def _dispatcher(registry: ToolRegistry | None = None) -> MethodDispatcher:
    registry = registry if registry is not None else ToolRegistry()
    executor = ToolExecutor(registry)
    return MethodDispatcher(registry, executor, ServerInfo(name="test-srv", version="9.9"))


class TestInitialize:
    async def test_handshake(self) -> None:
        resp = await _dispatcher().dispatch(JsonRpcRequest(id=1, method="initialize"))
        assert resp.error is None
        assert resp.result["protocolVersion"] == PROTOCOL_VERSION
        assert resp.result["serverInfo"] == {"name": "test-srv", "version": "9.9"}
        assert resp.result["capabilities"]["tools"]["listChanged"] is True

    async def test_client_params_ignored(self) -> None:
        req = JsonRpcRequest(id=2, method="initialize", params="garbage")
        resp = await _dispatcher().dispatch(req)
        assert resp.result["protocolVersion"] == PROTOCOL_VERSION


class TestListTools:
    async def test_empty_registry(self) -> None:
        resp = await _dispatcher().dispatch(JsonRpcRequest(id=1, method="tools/list"))
        assert resp.result == {"tools": []}

    async def test_lists_descriptors_with_alias(self) -> None:
        registry = ToolRegistry()
        registry.register(EchoTool.descriptor)
        resp = await _dispatcher(registry).dispatch(JsonRpcRequest(id=1, method="tools/list"))
        (tool,) = resp.result["tools"]
        assert tool["name"] == "echo"
        assert tool["inputSchema"]["required"] == ["message"]


class TestCallTool:
    async def test_delegates_to_executor(self) -> None:
        dispatcher = _dispatcher()
        dispatcher._executor.execute = AsyncMock(return_value={"content": []})  # type: ignore[method-assign]
        req = JsonRpcRequest(
            id="c", method="tools/call", params={"name": "echo", "arguments": {"message": "hi"}}
        )
        resp = await dispatcher.dispatch(req)
        dispatcher._executor.execute.assert_awaited_once_with("echo", {"message": "hi"})
        assert resp.id == "c"
        assert resp.result == {"content": []}

    @pytest.mark.parametrize("params", [None, "nope", [1], {"name": 7}])
    async def test_malformed_params_fall_back(self, params: object) -> None:
        dispatcher = _dispatcher()
        dispatcher._executor.execute = AsyncMock(return_value={"error": "Unknown tool"})  # type: ignore[method-assign]
        resp = await dispatcher.dispatch(JsonRpcRequest(id=1, method="tools/call", params=params))
        dispatcher._executor.execute.assert_awaited_once_with("", None)
        assert resp.error is None
        assert resp.result == {"error": "Unknown tool"}


class TestUnknownMethod:
    @pytest.mark.parametrize("request_id", [5, "five", None])
    async def test_method_not_found(self, request_id: object) -> None:
        resp = await _dispatcher().dispatch(
            JsonRpcRequest(id=request_id, method="does-not-exist")
        )
        assert resp.result is None
        assert resp.error is not None
        assert resp.error.code == -32601
        assert resp.error.data == {"method": "does-not-exist"}
        assert resp.id == request_id

    async def test_empty_method(self) -> None:
        resp = await _dispatcher().dispatch(JsonRpcRequest(id=1))
        assert resp.error is not None
        assert resp.error.code == -32601

    def test_supported_methods(self) -> None:
        assert _dispatcher().methods == ["initialize", "tools/list", "tools/call"]
