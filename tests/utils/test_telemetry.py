"""Tests for OpenTelemetry tracing helpers."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from opentelemetry import trace

from toolhost.utils.telemetry import (
    _INSTRUMENTATION_NAME,
    ATTR_RPC_METHOD,
    ATTR_TOOL_NAME,
    configure_telemetry,
    get_tracer,
)


class TestGetTracer:
    def test_returns_tracer(self) -> None:
        assert isinstance(get_tracer("test.module"), trace.Tracer)

    def test_default_name(self) -> None:
        assert isinstance(get_tracer(), trace.Tracer)

    def test_noop_span(self) -> None:
        with get_tracer("test.noop").start_as_current_span("test") as span:
            span.set_attribute(ATTR_TOOL_NAME, "echo")


class TestConfigureTelemetry:
    def test_raises_without_sdk(self) -> None:
        with patch.dict("sys.modules", {"opentelemetry.sdk.resources": None}):
            with pytest.raises(ImportError, match="opentelemetry-sdk"):
                configure_telemetry()

    def test_otlp_raises_without_exporter(self) -> None:
        pytest.importorskip("opentelemetry.sdk.trace")
        with patch.dict(
            "sys.modules",
            {"opentelemetry.exporter.otlp.proto.grpc.trace_exporter": None},
        ):
            with pytest.raises(ImportError, match="opentelemetry-exporter-otlp"):
                configure_telemetry(otlp_endpoint="http://localhost:4317")

    def test_console_export_installs_provider(self) -> None:
        sdk_trace = pytest.importorskip("opentelemetry.sdk.trace")
        with patch("opentelemetry.trace.set_tracer_provider") as mock_set:
            configure_telemetry(service_name="toolhost-test")
        (provider,), _ = mock_set.call_args
        assert isinstance(provider, sdk_trace.TracerProvider)
        assert provider.resource.attributes["service.name"] == "toolhost-test"


class TestAttributeConstants:
    def test_prefix(self) -> None:
        for attr in (ATTR_RPC_METHOD, ATTR_TOOL_NAME):
            assert attr.startswith("toolhost.")

    def test_instrumentation_name(self) -> None:
        assert _INSTRUMENTATION_NAME == "toolhost"
