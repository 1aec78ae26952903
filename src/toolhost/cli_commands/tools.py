"""``toolhost tools`` — list the tools the server would expose."""

from __future__ import annotations

import click

from toolhost.cli_commands._output import console, print_tools_table


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Output descriptors as JSON.")
def tools(as_json: bool) -> None:
    """List the built-in tools and their required arguments."""
    from toolhost.server import build_default_server

    server = build_default_server()
    descriptors = server.registry.list()

    if as_json:
        console.print_json(data=[d.model_dump(by_alias=True) for d in descriptors])
        return

    if not descriptors:
        console.print("[yellow]No tools registered.[/yellow]")
        return

    print_tools_table(descriptors)
