"""Process-wide discovery (``GET /``) and health (``GET /health``) routes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter

from mcp_pool import __version__
from mcp_pool.utils.timestamps import utc_timestamp

if TYPE_CHECKING:
    from mcp_pool.protocols.registry import ProviderRegistry

SERVICE_NAME = "MCP Pool Server"


def build_health_router(registry: ProviderRegistry) -> APIRouter:
    router = APIRouter(tags=["health"])

    @router.get("/")
    async def index() -> dict[str, Any]:
        endpoints = {"/health": "Overall system health"}
        for name in registry.names():
            endpoints[f"/{name}"] = f"{name} MCP endpoint (JSON-RPC)"
        return {
            "service": SERVICE_NAME,
            "version": __version__,
            "description": "Unified HTTP server for multiple MCPs",
            "endpoints": endpoints,
        }

    @router.get("/health")
    async def health() -> dict[str, Any]:
        services = {"mcp-pool-server": "running"}
        services.update({f"{name}-mcp": "running" for name in registry.names()})
        return {"status": "healthy", "timestamp": utc_timestamp(), "services": services}

    return router
