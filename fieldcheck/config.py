"""Library configuration via environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from ``FIELDCHECK_*`` environment variables."""

    # Logging
    LOG_LEVEL: str = "info"
    DEBUG: bool = False  # console renderer instead of JSON

    # Diagnostic events, off unless the host opts in
    LOG_VALIDATION_RUNS: bool = False  # one debug event per validate() call
    LOG_REGISTRY_BUILDS: bool = False  # one info event per model type built

    model_config = {"env_prefix": "FIELDCHECK_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
