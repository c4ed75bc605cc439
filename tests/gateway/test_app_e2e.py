"""End-to-end JSON-RPC conversations against the assembled app."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from mcp_pool.gateway.app import create_app
from mcp_pool.protocols.errors import RegistrySealedError
from mcp_pool.providers import ConvexProvider, build_default_registry


class TestJsonRpcRoute:
    def test_initialize(self, client: TestClient, make_rpc: Any) -> None:
        resp = client.post("/material-ui", json=make_rpc("initialize"))
        assert resp.status_code == 200
        result = resp.json()["result"]
        assert result["serverInfo"] == {"name": "material-ui-mcp-server", "version": "1.0.0"}

    def test_create_table(self, client: TestClient, make_rpc: Any) -> None:
        resp = client.post(
            "/convex",
            json=make_rpc("tools/call", {"name": "create_table", "arguments": {"name": "users"}}, id=1),
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["id"] == 1
        assert "Table 'users' created successfully" in body["result"]["content"][0]["text"]

    def test_resources_read(self, client: TestClient, make_rpc: Any) -> None:
        resp = client.post(
            "/material-ui", json=make_rpc("resources/read", {"uri": "material-ui://theme"})
        )
        assert resp.json()["result"]["contents"][0]["uri"] == "material-ui://theme"

    def test_notification(self, client: TestClient, make_rpc: Any) -> None:
        resp = client.post("/convex", json=make_rpc("notifications/initialized", id=None))
        assert resp.status_code == 204
        assert resp.content == b""

    def test_unknown_method(self, client: TestClient, make_rpc: Any) -> None:
        resp = client.post("/convex", json=make_rpc("prompts/list", id=7))
        assert resp.status_code == 400
        assert resp.json()["error"] == {"code": -32601, "message": "Method prompts/list not supported"}

    def test_unknown_tool(self, client: TestClient, make_rpc: Any) -> None:
        resp = client.post("/convex", json=make_rpc("tools/call", {"name": "nope"}))
        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == -32003

    def test_bad_body(self, client: TestClient) -> None:
        resp = client.post(
            "/convex", content=b"not json", headers={"content-type": "application/json"}
        )
        assert resp.status_code == 400
        assert resp.json()["id"] is None

    def test_unregistered_provider_has_no_route(self, client: TestClient, make_rpc: Any) -> None:
        assert client.post("/github", json=make_rpc("ping")).status_code == 404


class TestAppFactory:
    def test_seals_registry(self) -> None:
        registry = build_default_registry(["material-ui"])
        create_app(registry)
        with pytest.raises(RegistrySealedError):
            registry.register("convex", ConvexProvider())

    def test_state(self) -> None:
        app = create_app(build_default_registry())
        assert app.state.registry.names() == ["convex", "material-ui"]
        assert app.state.dispatcher.registry is app.state.registry

    def test_cors(self, client: TestClient) -> None:
        resp = client.get("/health", headers={"Origin": "http://example.com"})
        assert resp.headers["access-control-allow-origin"] == "*"
