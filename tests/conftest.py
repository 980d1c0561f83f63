"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from mission_control.dashboard_app import create_app

from .helpers import FakeRunner


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Return a path for a temporary openclaw.json."""
    return tmp_path / "openclaw.json"


@pytest.fixture
def write_config(config_file: Path):
    def _write(data) -> Path:
        text = data if isinstance(data, str) else json.dumps(data)
        config_file.write_text(text)
        return config_file
    return _write


@pytest.fixture
def app(runner: FakeRunner, config_file: Path, tmp_path: Path):
    return create_app(
        overrides={
            "TESTING": True,
            "RATELIMIT_ENABLED": False,
            "OPENCLAW_CONFIG_PATH": str(config_file),
            "LOG_FILE_PATH": str(tmp_path / "gateway.log"),
        },
        runner=runner,
    )


@pytest.fixture
def client(app):
    return app.test_client()
