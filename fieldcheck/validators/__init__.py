"""Field validation layer: declarations, constraints, registry and engine.

Usage:
    from fieldcheck.validators import validation_engine

    outcome = validation_engine.validate(model)
    if not outcome.is_valid:
        # Report outcome.violations to the caller
"""

from fieldcheck.validators.base import BaseConstraint
from fieldcheck.validators.declarations import (
    CONSTRAINTS_METADATA_KEY,
    Declaration,
    DisplayName,
    LengthBound,
    Pattern,
    Required,
)
from fieldcheck.validators.engine import (
    ValidationContext,
    ValidationEngine,
    ViolationCollector,
    validate,
    validation_engine,
)
from fieldcheck.validators.errors import ConfigurationError, FieldcheckError, ModelValidationError
from fieldcheck.validators.length_constraint import LengthBoundConstraint
from fieldcheck.validators.models import ConstraintKind, ValidationOutcome, Violation
from fieldcheck.validators.pattern_constraint import PatternConstraint
from fieldcheck.validators.registry import FieldDescriptor, ModelRegistry, model_registry
from fieldcheck.validators.required_constraint import RequiredConstraint

__all__ = [
    "BaseConstraint",
    "CONSTRAINTS_METADATA_KEY",
    "ConfigurationError",
    "ConstraintKind",
    "Declaration",
    "DisplayName",
    "FieldDescriptor",
    "FieldcheckError",
    "LengthBound",
    "LengthBoundConstraint",
    "ModelRegistry",
    "ModelValidationError",
    "Pattern",
    "PatternConstraint",
    "Required",
    "RequiredConstraint",
    "ValidationContext",
    "ValidationEngine",
    "ValidationOutcome",
    "Violation",
    "ViolationCollector",
    "model_registry",
    "validate",
    "validation_engine",
]
