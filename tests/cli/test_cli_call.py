"""Tests for ``mcp-pool call``."""

from __future__ import annotations

import json

from click.testing import CliRunner

from mcp_pool.cli import main


class TestCall:
    def test_ping(self) -> None:
        result = CliRunner().invoke(main, ["call", "convex", "ping"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "jsonrpc": "2.0",
            "result": {"status": "pong"},
            "id": None,
        }

    def test_tool_call_with_params(self) -> None:
        params = json.dumps({"name": "create_table", "arguments": {"name": "users"}})
        result = CliRunner().invoke(main, ["call", "convex", "tools/call", "--params", params])
        assert result.exit_code == 0
        assert "created successfully" in result.output

    def test_failure_exits_nonzero(self) -> None:
        result = CliRunner().invoke(main, ["call", "convex", "tools/call", "-p", '{"name": "nope"}'])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == -32003

    def test_notification(self) -> None:
        result = CliRunner().invoke(main, ["call", "convex", "notifications/initialized"])
        assert result.exit_code == 0
        assert "Notification acknowledged" in result.output

    def test_invalid_params_json(self) -> None:
        result = CliRunner().invoke(main, ["call", "convex", "ping", "--params", "{oops"])
        assert result.exit_code == 2
        assert "Invalid --params" in result.output
