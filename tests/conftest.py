import pytest
import structlog

from fieldcheck import ModelRegistry, ValidationEngine
from fieldcheck.config import get_settings


@pytest.fixture
def registry():
    """A registry isolated from the module-level singleton."""
    return ModelRegistry()


@pytest.fixture
def engine(registry):
    return ValidationEngine(registry=registry)


@pytest.fixture
def clean_settings(monkeypatch):
    """Default settings and structlog config, regardless of the host environment."""
    for name in ("FIELDCHECK_LOG_VALIDATION_RUNS", "FIELDCHECK_LOG_REGISTRY_BUILDS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    structlog.reset_defaults()
    yield monkeypatch
    get_settings.cache_clear()
