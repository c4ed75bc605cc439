"""``mcp-pool serve`` — run the gateway over HTTP."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from mcp_pool.cli_commands._output import console


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML settings file.",
)
@click.option("--host", default=None, help="Interface to bind (default 0.0.0.0).")
@click.option("--port", type=int, default=None, help="Port to listen on (default $PORT or 3000).")
@click.option(
    "--provider",
    "providers",
    multiple=True,
    help="Enable only this provider; repeat for several.",
)
@click.option(
    "--log-level",
    type=click.Choice(["critical", "error", "warning", "info", "debug"]),
    default=None,
    help="Logging verbosity.",
)
@click.option("--telemetry", is_flag=True, help="Enable OpenTelemetry tracing.")
def serve(
    config_path: str | None,
    host: str | None,
    port: int | None,
    providers: tuple[str, ...],
    log_level: str | None,
    telemetry: bool,
) -> None:
    """Start the gateway and serve every enabled provider."""
    import uvicorn
    from rich.logging import RichHandler

    from mcp_pool.config import SettingsError, SettingsLoader
    from mcp_pool.gateway.app import create_app
    from mcp_pool.protocols.errors import GatewayError
    from mcp_pool.providers import build_default_registry

    try:
        settings = SettingsLoader(Path(config_path) if config_path else None).load()
    except SettingsError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)

    overrides = {
        "host": host,
        "port": port,
        "log_level": log_level,
        "providers": list(providers) or None,
    }
    settings = settings.model_copy(update={k: v for k, v in overrides.items() if v is not None})
    if telemetry:
        settings.telemetry.enabled = True

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )

    if settings.telemetry.enabled:
        from mcp_pool.utils.telemetry import configure_telemetry

        try:
            configure_telemetry(settings.telemetry)
        except ImportError as exc:
            console.print(f"[red]Telemetry error:[/red] {exc}")
            sys.exit(1)

    try:
        registry = build_default_registry(settings.providers)
    except GatewayError as exc:
        console.print(f"[red]Provider error:[/red] {exc}")
        sys.exit(1)

    app = create_app(registry)
    console.print(f"MCP Pool Server running on port {settings.port}")
    console.print(f"Available MCPs: {', '.join(registry.names())}")
    for name in registry.names():
        console.print(f"  /{name} → http://localhost:{settings.port}/{name}")

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)
