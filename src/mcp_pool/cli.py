"""mcp-pool CLI entrypoint."""

from __future__ import annotations

import click

from mcp_pool import __version__


@click.group()
@click.version_option(version=__version__, prog_name="mcp-pool")
def main() -> None:
    """mcp-pool — multiplexing gateway for MCP tool providers."""


# Register subcommands
from mcp_pool.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
