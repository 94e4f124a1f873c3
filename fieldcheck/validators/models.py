"""Validation models: constraint kinds, violations and the outcome of one validation run.

Outcomes are plain values: validating the same unmutated instance twice
produces two outcomes that compare equal.
"""

from enum import Enum

from pydantic import BaseModel, Field, computed_field


class ConstraintKind(str, Enum):
    """Rule types a field can declare."""

    REQUIRED = "required"
    PATTERN = "pattern"
    LENGTH_BOUND = "length_bound"


class Violation(BaseModel):
    """A single failed constraint on a single field."""

    field_name: str = Field(description="Attribute name on the model, not the display name")
    constraint_kind: ConstraintKind
    message: str = Field(description="Fully formatted message")

    model_config = {"frozen": True}


class ValidationOutcome(BaseModel):
    """Complete result of one validation call."""

    violations: tuple[Violation, ...] = Field(
        default=(),
        description="Field-declaration order, then constraint-declaration order",
    )

    model_config = {"frozen": True}

    @computed_field
    @property
    def is_valid(self) -> bool:
        return len(self.violations) == 0

    @computed_field
    @property
    def summary(self) -> dict[str, int]:
        """Count of violations by constraint kind."""
        counts = {kind.value: 0 for kind in ConstraintKind}
        for violation in self.violations:
            counts[violation.constraint_kind.value] += 1
        return counts

    @property
    def field_names(self) -> list[str]:
        """Names of the failing fields, deduplicated, in report order."""
        return list(dict.fromkeys(v.field_name for v in self.violations))

    def for_field(self, field_name: str) -> list[Violation]:
        return [v for v in self.violations if v.field_name == field_name]

    @classmethod
    def build(cls, violations: list[Violation]) -> "ValidationOutcome":
        """Freeze a list of violations into an outcome."""
        return cls(violations=tuple(violations))
