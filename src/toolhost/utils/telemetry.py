"""OpenTelemetry tracing helpers for toolhost.

Thin wrapper around the OpenTelemetry API. Until :func:`configure_telemetry`
installs the SDK, every tracer returned by :func:`get_tracer` is a no-op.

Usage::

    from toolhost.utils.telemetry import ATTR_RPC_METHOD, get_tracer

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("toolhost.dispatch") as span:
        span.set_attribute(ATTR_RPC_METHOD, "tools/list")
"""

from __future__ import annotations

import importlib
from typing import Any

from opentelemetry import trace

# ---------------------------------------------------------------------------
# Semantic attribute keys
# ---------------------------------------------------------------------------

ATTR_RPC_METHOD = "toolhost.rpc.method"
ATTR_RPC_ERROR_CODE = "toolhost.rpc.error_code"
ATTR_TOOL_NAME = "toolhost.tool.name"
ATTR_TOOL_OUTCOME = "toolhost.tool.outcome"

_INSTRUMENTATION_NAME = "toolhost"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a :class:`~opentelemetry.trace.Tracer` for *name*."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(*, otlp_endpoint: str | None = None, service_name: str = "toolhost") -> None:
    """Export spans to the console, or to an OTLP/gRPC collector at *otlp_endpoint*.

    Needs the ``otel`` extra; raises :class:`ImportError` naming the
    missing distribution otherwise.
    """
    sdk_trace = _require("opentelemetry.sdk.trace", "opentelemetry-sdk")
    resources = _require("opentelemetry.sdk.resources", "opentelemetry-sdk")
    export = _require("opentelemetry.sdk.trace.export", "opentelemetry-sdk")

    if otlp_endpoint:
        otlp = _require(
            "opentelemetry.exporter.otlp.proto.grpc.trace_exporter",
            "opentelemetry-exporter-otlp",
        )
        processor = export.BatchSpanProcessor(otlp.OTLPSpanExporter(endpoint=otlp_endpoint))
    else:
        processor = export.SimpleSpanProcessor(export.ConsoleSpanExporter())

    provider = sdk_trace.TracerProvider(
        resource=resources.Resource.create({"service.name": service_name})
    )
    provider.add_span_processor(processor)
    trace.set_tracer_provider(provider)


def _require(module: str, distribution: str) -> Any:
    try:
        return importlib.import_module(module)
    except ImportError as exc:
        msg = f"{distribution} is required to export spans. Install it with: pip install toolhost[otel]"
        raise ImportError(msg) from exc
