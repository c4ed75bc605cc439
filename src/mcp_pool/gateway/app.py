"""Application factory — wires registry, dispatcher and adapters into FastAPI."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mcp_pool import __version__
from mcp_pool.gateway.health import SERVICE_NAME, build_health_router
from mcp_pool.gateway.rest import build_provider_router
from mcp_pool.gateway.shortcuts import build_shortcut_routers
from mcp_pool.protocols.dispatcher import MethodDispatcher

if TYPE_CHECKING:
    from mcp_pool.protocols.registry import ProviderRegistry

logger = logging.getLogger(__name__)


def create_app(registry: ProviderRegistry) -> FastAPI:
    """Seal *registry* and build the HTTP surface for every provider in it.

    Routes are installed per registered name, so the registry must be
    complete before this is called.
    """
    registry.seal()
    dispatcher = MethodDispatcher(registry)

    app = FastAPI(title=SERVICE_NAME, version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(build_health_router(registry))
    for router in build_shortcut_routers(dispatcher):
        app.include_router(router)
    for name in registry.names():
        app.include_router(build_provider_router(name, dispatcher))

    app.state.registry = registry
    app.state.dispatcher = dispatcher
    logger.info("Gateway ready with providers: %s", ", ".join(registry.names()) or "(none)")
    return app
