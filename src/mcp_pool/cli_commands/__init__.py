"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from mcp_pool.cli_commands.call import call
    from mcp_pool.cli_commands.providers import providers
    from mcp_pool.cli_commands.serve import serve

    cli.add_command(serve)
    cli.add_command(providers)
    cli.add_command(call)
