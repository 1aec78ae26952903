"""toolhost CLI entrypoint."""

from __future__ import annotations

import click

from toolhost import __version__


@click.group()
@click.version_option(version=__version__, prog_name="toolhost")
def main() -> None:
    """toolhost — MCP tool server over JSON-RPC/HTTP."""


# Register subcommands
from toolhost.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
