"""Tests for the plain-text panel renderers."""

from datetime import datetime, timedelta, timezone

from mission_control.core.polling import PollPhase, PollState
from mission_control.panels.text import (
    render_config_panel,
    render_health_panel,
    render_logs_panel,
    render_network_panel,
)

NOW = datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)


def fresh(data, seconds_ago=0):
    return PollState(data=data, loading=False, last_update=NOW - timedelta(seconds=seconds_ago),
                     phase=PollPhase.FRESH)


class TestHealthPanel:
    def test_loading(self):
        lines = render_health_panel(PollState(), now=NOW)
        assert "—" in lines[0]
        assert lines[1].strip() == "Checking service..."

    def test_online(self):
        state = fresh({"status": "active", "raw": "active", "uptime": "2026-10-18T09:00:00Z"},
                      seconds_ago=45)
        text = "\n".join(render_health_panel(state, now=NOW))
        assert "45s ago" in text
        assert "ONLINE" in text
        assert "Uptime: 3h 0m" in text

    def test_offline_with_error(self):
        state = fresh({"status": "inactive", "raw": "error", "error": "Command failed"})
        text = "\n".join(render_health_panel(state, now=NOW))
        assert "OFFLINE" in text
        assert "Uptime: unknown" in text
        assert "⚠ Command failed" in text


class TestNetworkPanel:
    def test_listening(self):
        state = fresh({"listening": True, "port": 18789, "protocol": "WebSocket", "connections": 2})
        text = "\n".join(render_network_panel(state, now=NOW))
        assert "LISTENING  Port 18789 • WebSocket" in text
        assert "Connections: 2" in text

    def test_failure_shape(self):
        state = fresh({"listening": False, "port": 18789, "error": "boom"})
        text = "\n".join(render_network_panel(state, now=NOW))
        assert "CLOSED  Port 18789 • TCP" in text
        assert "Connections: 0" in text

    def test_bind_address(self):
        state = fresh({"listening": True, "port": 18789, "protocol": "WebSocket", "connections": 0})
        assert "  Bind: 127.0.0.1" in render_network_panel(state, now=NOW)
        assert "  Bind: 0.0.0.0" in render_network_panel(state, bind="0.0.0.0", now=NOW)

    def test_loading_has_no_bind(self):
        assert not any("Bind" in line for line in render_network_panel(PollState(), now=NOW))


class TestLogsPanel:
    def test_numbers_lines_from_total(self):
        state = fresh({"lines": ["x", "y"], "totalLines": 40, "path": "/var/log/gw.log"})
        lines = render_logs_panel(state, now=NOW)
        assert "40 lines" in lines[0]
        assert lines[1].split() == ["39", "x"]
        assert lines[2].split() == ["40", "y"]

    def test_error(self):
        state = fresh({"lines": [], "totalLines": 0, "error": "no journal", "source": "journalctl"})
        assert render_logs_panel(state, now=NOW)[1].strip() == "⚠ no journal"

    def test_empty(self):
        state = fresh({"lines": [], "totalLines": 0, "source": "journalctl"})
        assert render_logs_panel(state, now=NOW)[1].strip() == "No log entries found"


class TestConfigPanel:
    def test_error(self):
        lines = render_config_panel(fresh({"error": "No such file"}))
        assert lines[1].strip() == "⚠ No such file"

    def test_projection(self):
        state = fresh({
            "models": {"primary": "anthropic/claude-sonnet"},
            "channels": {"telegram": {"enabled": True}, "discord": {"enabled": False}},
            "gateway": {"port": 18789, "mode": "local", "bind": "loopback"},
            "plugins": {"memory": True},
            "meta": {"lastTouchedVersion": "2026.2.1"},
        })
        lines = render_config_panel(state)
        text = "\n".join(lines)
        assert "v2026.2.1" in lines[0]
        assert "Primary model: anthropic/claude-sonnet" in text
        assert "Channels: telegram ON, discord" in text
        assert "Gateway: :18789  local  loopback" in text
        assert "Plugins: memory ON" in text

    def test_no_plugins_line_when_empty(self):
        lines = render_config_panel(fresh({"plugins": {}, "channels": {}}))
        assert not any("Plugins" in line for line in lines)
