"""fieldcheck: declarative field validation for Python models.

Models declare per-field constraints with ``typing.Annotated`` markers or
dataclass field metadata; the engine evaluates them and returns every
violation instead of raising.
"""

from fieldcheck.config import Settings, get_settings
from fieldcheck.logging_config import configure_logging
from fieldcheck.validators import (
    CONSTRAINTS_METADATA_KEY,
    ConfigurationError,
    ConstraintKind,
    DisplayName,
    FieldcheckError,
    LengthBound,
    ModelRegistry,
    ModelValidationError,
    Pattern,
    Required,
    ValidationEngine,
    ValidationOutcome,
    Violation,
    model_registry,
    validate,
    validation_engine,
)

__version__ = "1.0.0"

__all__ = [
    "CONSTRAINTS_METADATA_KEY",
    "ConfigurationError",
    "ConstraintKind",
    "DisplayName",
    "FieldcheckError",
    "LengthBound",
    "ModelRegistry",
    "ModelValidationError",
    "Pattern",
    "Required",
    "Settings",
    "ValidationEngine",
    "ValidationOutcome",
    "Violation",
    "configure_logging",
    "get_settings",
    "model_registry",
    "validate",
    "validation_engine",
]
