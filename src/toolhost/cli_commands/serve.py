"""``toolhost serve`` — run the HTTP server."""

from __future__ import annotations

import sys

import click

from toolhost.cli_commands._output import configure_logging, console
from toolhost.config import ServerConfig
from toolhost.errors import ConfigError


@click.command()
@click.option("--host", default=None, help="Bind address (default 0.0.0.0).")
@click.option("--port", "-p", type=int, default=None, help="Listen port (default $PORT or 8080).")
@click.option(
    "--log-level",
    type=click.Choice(["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"], case_sensitive=False),
    default=None,
    help="Log level (default $TOOLHOST_LOG_LEVEL or INFO).",
)
@click.option("--telemetry", is_flag=True, help="Export OpenTelemetry spans to the console.")
@click.option("--otlp-endpoint", default=None, help="Export spans to this OTLP/gRPC collector.")
def serve(
    host: str | None,
    port: int | None,
    log_level: str | None,
    telemetry: bool,
    otlp_endpoint: str | None,
) -> None:
    """Serve the built-in tools over JSON-RPC on /mcp."""
    from toolhost.server import build_default_server
    from toolhost.transport.http import MCP_PATH
    from toolhost.transport.http import serve as run_http

    try:
        config = ServerConfig.from_env()
        overrides = {
            key: value
            for key, value in {"host": host, "port": port, "log_level": log_level}.items()
            if value is not None
        }
        if overrides:
            config = ServerConfig.model_validate({**config.model_dump(), **overrides})
    except (ConfigError, ValueError) as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)

    configure_logging(config.log_level)

    if telemetry or otlp_endpoint:
        from toolhost.utils.telemetry import configure_telemetry

        try:
            configure_telemetry(otlp_endpoint=otlp_endpoint)
        except ImportError as exc:
            console.print(f"[red]Telemetry error:[/red] {exc}")
            sys.exit(1)

    server = build_default_server()
    base = f"http://localhost:{config.port}"
    console.print(f"[bold]{server.info.name}[/bold] starting on port {config.port}")
    console.print(f"  MCP endpoint: {base}{MCP_PATH}")
    console.print(f"  Health check: {base}/health")
    console.print(f"  Root:         {base}/")

    run_http(server, host=config.host, port=config.port, log_level=config.log_level)
