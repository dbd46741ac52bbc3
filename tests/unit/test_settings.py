"""
Unit tests for settings and logging configuration.
"""

from __future__ import annotations

import logging

import structlog
from structlog.testing import capture_logs

from servicesync.infra.logging import configure_logging, get_logger
from servicesync.infra.settings import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("SERVICES_DIR", "SERVICES_JSON", "SERVICE_FILE_EXTENSION", "LEGACY_COLLECTION_KEY"):
            monkeypatch.delenv(var, raising=False)

        s = Settings(_env_file=None)

        assert s.services_dir == "services"
        assert s.services_json == "assets/services.json"
        assert s.file_extension == ".yml"
        assert s.collection_key == "blocked_services"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SERVICES_DIR", "/data/services")
        monkeypatch.setenv("SERVICE_FILE_EXTENSION", ".yaml")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        s = Settings(_env_file=None)

        assert s.services_dir == "/data/services"
        assert s.file_extension == ".yaml"
        assert s.log_level == "DEBUG"

    def test_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("SERVICES_JSON", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("SERVICES_JSON=legacy/services.json\n", encoding="utf-8")

        s = Settings(_env_file=str(env_file))

        assert s.services_json == "legacy/services.json"


class TestLogging:
    def test_configure_logging_sets_level(self):
        configure_logging(level="debug", fmt="console")

        assert structlog.is_configured()
        assert logging.getLogger().level == logging.DEBUG

    def test_get_logger_binds_service_context(self):
        with capture_logs() as logs:
            get_logger("servicesync.test").info("something_happened", count=2)

        assert logs == [
            {
                "event": "something_happened",
                "log_level": "info",
                "count": 2,
                "service": "servicesync",
                "env": logs[0]["env"],
            }
        ]
