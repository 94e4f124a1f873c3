"""Exceptions raised by the validation layer.

Ordinary validation failures are never raised: they travel as violations
inside a ValidationOutcome. These exceptions cover the two other cases:
a broken model declaration and the explicit raise-on-invalid entry point.
"""

from typing import Optional

from fieldcheck.validators.models import ConstraintKind, ValidationOutcome


class FieldcheckError(Exception):
    """Base class for all fieldcheck errors."""


class ConfigurationError(FieldcheckError):
    """A model declares a constraint that can never be evaluated.

    Raised while the registry builds the descriptors for a model type.
    Indicates the model declaration itself must be fixed in code.
    """

    def __init__(
        self,
        reason: str,
        model: Optional[type] = None,
        field_name: Optional[str] = None,
        constraint_kind: Optional[ConstraintKind] = None,
    ):
        self.reason = reason
        self.model = model
        self.field_name = field_name
        self.constraint_kind = constraint_kind
        super().__init__(self._describe())

    def _describe(self) -> str:
        location = ""
        if self.model is not None:
            location = self.model.__qualname__
        if self.field_name:
            location = f"{location}.{self.field_name}" if location else self.field_name

        parts = []
        if self.constraint_kind is not None:
            parts.append(f"Invalid {ConstraintKind(self.constraint_kind).value} constraint")
        else:
            parts.append("Invalid declaration")
        if location:
            parts.append(f"on {location}")
        return f"{' '.join(parts)}: {self.reason}"


class ModelValidationError(FieldcheckError):
    """Raised by ``validate_or_raise`` when an instance has violations."""

    def __init__(self, outcome: ValidationOutcome, model: Optional[type] = None):
        self.outcome = outcome
        self.model = model
        name = model.__qualname__ if model is not None else "instance"
        messages = "; ".join(v.message for v in outcome.violations)
        super().__init__(f"{name} failed validation with {len(outcome.violations)} violation(s): {messages}")
