"""Shared CLI output formatters."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.table import Table

console = Console()


def print_providers_table(rows: list[dict[str, Any]]) -> None:
    """Pretty-print registered providers with their catalog sizes."""
    table = Table(title="Registered Providers")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Endpoint")
    table.add_column("Tools", justify="right")
    table.add_column("Resources", justify="right")

    for row in rows:
        table.add_row(row["name"], f"/{row['name']}", str(row["tools"]), str(row["resources"]))

    console.print(table)


def print_tools_table(provider: str, tools: list[dict[str, Any]]) -> None:
    """Pretty-print a provider's tool descriptors as a table."""
    table = Table(title=f"{provider} tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Required")
    table.add_column("Description")

    for tool in tools:
        required = tool.get("inputSchema", {}).get("required", [])
        table.add_row(
            tool.get("name", "?"),
            ", ".join(required) or "-",
            _truncate(tool.get("description", "")),
        )

    console.print(table)


def print_json(data: Any) -> None:
    console.print_json(json.dumps(data, default=str))


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
