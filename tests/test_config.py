"""Tests for Settings and logging configuration."""

from pathlib import Path

import pytest
import structlog
from structlog.testing import capture_logs

from formvalidator.config import Settings, get_settings
from formvalidator.log_config import configure_logging


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.LOG_LEVEL == "info"
        assert settings.LOG_JSON is True
        assert settings.PRESETS_DIR is None

    def test_env_overrides(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORMVALIDATOR_LOG_LEVEL", "debug")
        monkeypatch.setenv("FORMVALIDATOR_LOG_JSON", "false")
        monkeypatch.setenv("FORMVALIDATOR_PRESETS_DIR", str(tmp_path))
        settings = Settings(_env_file=None)
        assert settings.LOG_LEVEL == "debug"
        assert settings.LOG_JSON is False
        assert settings.PRESETS_DIR == tmp_path

    def test_get_settings_cached(self) -> None:
        assert get_settings() is get_settings()


class TestConfigureLogging:
    def test_filters_below_level(self) -> None:
        configure_logging(Settings(_env_file=None, LOG_LEVEL="warning"))
        logger = structlog.get_logger()
        with capture_logs() as logs:
            logger.info("dropped")
            logger.warning("kept")
        assert [e["event"] for e in logs] == ["kept"]

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging(Settings(_env_file=None, LOG_LEVEL="chatty"))
        logger = structlog.get_logger()
        with capture_logs() as logs:
            logger.debug("dropped")
            logger.info("kept")
        assert [e["event"] for e in logs] == ["kept"]

    def test_console_renderer(self) -> None:
        configure_logging(Settings(_env_file=None, LOG_JSON=False))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_renderer_by_default(self) -> None:
        configure_logging(Settings(_env_file=None))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
