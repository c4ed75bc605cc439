"""Shared fixtures for gateway tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from mcp_pool.gateway.app import create_app
from mcp_pool.protocols.dispatcher import MethodDispatcher
from mcp_pool.protocols.models import (
    ResourceContent,
    ResourceDescriptor,
    ToolCallResult,
    ToolDescriptor,
)
from mcp_pool.protocols.registry import ProviderRegistry
from mcp_pool.providers import build_default_registry


def make_mock_provider(
    tools: list[str] | None = None,
    resources: list[str] | None = None,
    result_text: str = "done",
) -> MagicMock:
    """Create a ``MagicMock`` satisfying the Provider protocol."""
    provider = MagicMock()
    provider.list_tools = AsyncMock(
        return_value=[ToolDescriptor(name=name) for name in (tools or ["tool_a"])]
    )
    provider.list_resources = AsyncMock(
        return_value=[ResourceDescriptor(uri=uri) for uri in (resources or ["mock://data"])]
    )
    provider.read_resource = AsyncMock(
        side_effect=lambda uri: [ResourceContent(uri=uri, text='{"ok": true}')]
    )
    provider.call_tool = AsyncMock(return_value=ToolCallResult.from_text(result_text))
    return provider


@pytest.fixture
def mock_provider() -> MagicMock:
    return make_mock_provider()


@pytest.fixture
def mock_registry(mock_provider: MagicMock) -> ProviderRegistry:
    return ProviderRegistry.from_mapping({"mock": mock_provider})


@pytest.fixture
def registry() -> ProviderRegistry:
    registry = build_default_registry()
    registry.seal()
    return registry


@pytest.fixture
def dispatcher(registry: ProviderRegistry) -> MethodDispatcher:
    return MethodDispatcher(registry)


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(build_default_registry()))


def rpc(method: str, params: dict[str, Any] | None = None, id: int | str | None = 1) -> dict[str, Any]:
    """Build a JSON-RPC 2.0 request body."""
    body: dict[str, Any] = {"jsonrpc": "2.0", "method": method}
    if params is not None:
        body["params"] = params
    if id is not None:
        body["id"] = id
    return body


@pytest.fixture
def make_rpc() -> Any:
    return rpc


@pytest.fixture
def provider_factory() -> Any:
    return make_mock_provider
