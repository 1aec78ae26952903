"""Shared CLI output formatters."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

if TYPE_CHECKING:
    from toolhost.protocol.models import ToolDescriptor

console = Console()


def configure_logging(level: str) -> None:
    """Route stdlib logging through rich on stderr."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def print_tools_table(tools: list[ToolDescriptor]) -> None:
    """Pretty-print tool descriptors as a table."""
    table = Table(title="Registered Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Required")

    for tool in sorted(tools, key=lambda t: t.name):
        table.add_row(
            tool.name,
            _truncate(tool.description),
            ", ".join(tool.required_arguments) or "-",
        )

    console.print(table)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
