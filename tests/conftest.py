"""
Global test configuration for servicesync.

This module provides global pytest configuration and fixtures.
"""

import json
import sys
from pathlib import Path

import pytest
import structlog

# Ensure the project src directory is importable without relying on external environment.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture(autouse=True)
def _reset_structlog(monkeypatch):
    """
    Keep the CLI from reconfiguring logging globally during tests.

    Tests assert on log events with structlog.testing.capture_logs, which only
    works while the default (uncached) configuration is in place.
    """
    import servicesync.cli.main as cli_main

    monkeypatch.setattr(cli_main, "configure_logging", lambda level=None, fmt=None: None)
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def services_dir(tmp_path: Path) -> Path:
    path = tmp_path / "services"
    path.mkdir()
    return path


@pytest.fixture
def write_legacy(tmp_path: Path):
    """Write a legacy services document and return its path."""

    def _write(services, key: str = "blocked_services") -> Path:
        path = tmp_path / "services.json"
        path.write_text(json.dumps({key: services}), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def touch_services(services_dir: Path):
    """Create placeholder individual files in the services folder."""

    def _touch(*names: str) -> None:
        for name in names:
            (services_dir / name).write_text("id: placeholder\n", encoding="utf-8")

    return _touch
