"""``mcp-pool call`` — run one dispatch in-process and print the outcome."""

from __future__ import annotations

import asyncio
import json
import sys

import click

from mcp_pool.cli_commands._output import console, print_json


@click.command()
@click.argument("provider")
@click.argument("method")
@click.option("--params", "-p", default=None, help="JSON object passed as params.")
def call(provider: str, method: str, params: str | None) -> None:
    """Dispatch METHOD on PROVIDER without starting the HTTP server.

    The outcome is printed as the JSON-RPC response the gateway would send.
    """
    from mcp_pool.protocols.dispatcher import MethodDispatcher
    from mcp_pool.providers import build_default_registry

    try:
        parsed = json.loads(params) if params else None
    except json.JSONDecodeError as exc:
        console.print(f"[red]Invalid --params:[/red] {exc}")
        sys.exit(2)

    registry = build_default_registry()
    registry.seal()
    outcome = asyncio.run(MethodDispatcher(registry).dispatch(provider, method, parsed))

    if outcome.no_response:
        console.print("[dim]Notification acknowledged (no response).[/dim]")
        return

    print_json(outcome.to_jsonrpc(None).to_wire())
    if outcome.failure is not None:
        sys.exit(1)
