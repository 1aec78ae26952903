"""``toolhost call`` — dispatch a single JSON-RPC request in-process."""

from __future__ import annotations

import asyncio
import json
import sys

import click

from toolhost.cli_commands._output import console


@click.command()
@click.argument("method")
@click.argument("params", required=False)
@click.option("--id", "request_id", default="1", help="Request id to send (echoed back).")
def call(method: str, params: str | None, request_id: str) -> None:
    """Send METHOD with optional PARAMS (a JSON object) and print the response.

    \b
    Examples:
        toolhost call tools/list
        toolhost call tools/call '{"name": "echo", "arguments": {"message": "hi"}}'
    """
    from toolhost.server import build_default_server

    envelope: dict[str, object] = {"jsonrpc": "2.0", "id": request_id, "method": method}
    if params is not None:
        try:
            envelope["params"] = json.loads(params)
        except json.JSONDecodeError as exc:
            console.print(f"[red]Invalid PARAMS JSON:[/red] {exc}")
            sys.exit(2)

    server = build_default_server()
    body = asyncio.run(server.handle(json.dumps(envelope).encode()))
    console.print_json(body.decode())
