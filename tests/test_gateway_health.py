"""Tests for the gateway health component."""

from mission_control.components.gateway_health import GatewayHealthService
from mission_control.core.shell import CommandError

from .helpers import FakeRunner

IS_ACTIVE = "systemctl --user is-active"
SHOW = "systemctl --user show"


class TestGatewayHealthService:
    def test_active_with_uptime(self):
        runner = FakeRunner({
            IS_ACTIVE: "active\n",
            SHOW: "Sat 2026-10-17 09:12:33 UTC\n",
        })
        result = GatewayHealthService("openclaw-gateway.service", runner=runner).get_health()
        assert result == {
            "status": "active",
            "raw": "active",
            "uptime": "Sat 2026-10-17 09:12:33 UTC",
        }

    def test_queries_named_service(self):
        runner = FakeRunner({IS_ACTIVE: "active", SHOW: ""})
        GatewayHealthService("my.service", runner=runner).get_health()
        assert runner.calls[0] == "systemctl --user is-active my.service"
        assert "--property=ActiveEnterTimestamp" in runner.calls[1]
        assert "my.service" in runner.calls[1]

    def test_other_state_is_inactive(self):
        runner = FakeRunner({IS_ACTIVE: "activating\n", SHOW: ""})
        result = GatewayHealthService("svc", runner=runner).get_health()
        assert result["status"] == "inactive"
        assert result["raw"] == "activating"

    def test_uptime_failure_is_silent(self):
        runner = FakeRunner({
            IS_ACTIVE: "active",
            SHOW: CommandError("systemctl --user show", 1, "boom"),
        })
        result = GatewayHealthService("svc", runner=runner).get_health()
        assert result == {"status": "active", "raw": "active", "uptime": ""}

    def test_service_manager_failure(self):
        runner = FakeRunner({IS_ACTIVE: CommandError("systemctl --user is-active svc", 3)})
        result = GatewayHealthService("svc", runner=runner).get_health()
        assert result["status"] == "inactive"
        assert result["raw"] == "error"
        assert "Command failed" in result["error"]
        assert "uptime" not in result

    def test_missing_binary(self):
        def runner(command):
            raise FileNotFoundError("systemctl")

        result = GatewayHealthService("svc", runner=runner).get_health()
        assert result["status"] == "inactive"
        assert result["error"] == "systemctl"


class TestHealthEndpoint:
    def test_active(self, client, runner):
        runner.responses.update({IS_ACTIVE: "active\n", SHOW: "Sat 2026-10-17 09:12:33 UTC\n"})
        resp = client.get("/api/health")
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["status"] == "active"
        assert data["raw"] == "active"
        assert data["uptime"]

    def test_failure_still_returns_200(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["status"] == "inactive"
        assert data["raw"] == "error"
        assert "error" in data
