"""``mcp-pool providers`` — inspect the built-in providers without serving."""

from __future__ import annotations

import asyncio
import sys
from typing import Any

import click

from mcp_pool.cli_commands._output import console, print_providers_table, print_tools_table


@click.group()
def providers() -> None:
    """Inspect registered providers."""


@providers.command("list")
def list_providers() -> None:
    """List the built-in providers and their catalog sizes."""
    from mcp_pool.protocols.dispatcher import MethodDispatcher
    from mcp_pool.providers import build_default_registry

    registry = build_default_registry()
    registry.seal()
    dispatcher = MethodDispatcher(registry)

    async def _collect() -> list[dict[str, Any]]:
        rows: list[dict[str, Any]] = []
        for name in registry.names():
            tools = await dispatcher.dispatch(name, "tools/list")
            resources = await dispatcher.dispatch(name, "resources/list")
            rows.append(
                {
                    "name": name,
                    "tools": len(tools.value["tools"]) if tools.ok else "?",
                    "resources": len(resources.value["resources"]) if resources.ok else "?",
                }
            )
        return rows

    print_providers_table(asyncio.run(_collect()))


@providers.command("tools")
@click.argument("name")
def list_tools(name: str) -> None:
    """Show the tools offered by provider NAME."""
    from mcp_pool.protocols.dispatcher import MethodDispatcher
    from mcp_pool.providers import build_default_registry

    registry = build_default_registry()
    registry.seal()
    outcome = asyncio.run(MethodDispatcher(registry).dispatch(name, "tools/list"))

    if outcome.failure is not None:
        console.print(f"[red]Error:[/red] {outcome.failure.message}")
        sys.exit(1)

    tools = outcome.value["tools"]
    if not tools:
        console.print("[yellow]No tools registered.[/yellow]")
        return
    print_tools_table(name, tools)
