"""Tests for settings and logging configuration."""

import pytest
import structlog
from structlog.testing import capture_logs

from fieldcheck import Settings, configure_logging


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_default_settings(monkeypatch):
    for name in (
        "FIELDCHECK_LOG_LEVEL",
        "FIELDCHECK_DEBUG",
        "FIELDCHECK_LOG_VALIDATION_RUNS",
        "FIELDCHECK_LOG_REGISTRY_BUILDS",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.LOG_LEVEL == "info"
    assert settings.DEBUG is False
    assert settings.LOG_VALIDATION_RUNS is False
    assert settings.LOG_REGISTRY_BUILDS is False


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("FIELDCHECK_LOG_LEVEL", "warning")
    monkeypatch.setenv("FIELDCHECK_DEBUG", "true")

    settings = Settings(_env_file=None)

    assert settings.LOG_LEVEL == "warning"
    assert settings.DEBUG is True


def test_configure_logging_filters_below_level(reset_structlog):
    configure_logging(Settings(_env_file=None, LOG_LEVEL="warning"))
    logger = structlog.get_logger()

    with capture_logs() as logs:
        logger.info("dropped")
        logger.warning("kept")

    assert [e["event"] for e in logs] == ["kept"]


def test_configure_logging_rejects_unknown_level(reset_structlog):
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging(Settings(_env_file=None, LOG_LEVEL="chatty"))
