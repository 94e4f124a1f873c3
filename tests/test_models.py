"""Tests for the outcome and violation value types."""

import pydantic
import pytest

from fieldcheck.validators import ConstraintKind, ValidationOutcome, Violation


def _violation(field_name="name", kind=ConstraintKind.REQUIRED):
    return Violation(field_name=field_name, constraint_kind=kind, message=f"The {field_name} field is required.")


def test_empty_outcome_is_valid():
    outcome = ValidationOutcome.build([])

    assert outcome.is_valid is True
    assert outcome.violations == ()
    assert outcome.field_names == []


def test_outcome_with_violations_is_invalid():
    outcome = ValidationOutcome.build([_violation()])

    assert outcome.is_valid is False


def test_summary_counts_by_kind():
    outcome = ValidationOutcome.build([
        _violation("id", ConstraintKind.PATTERN),
        _violation("name", ConstraintKind.REQUIRED),
        _violation("name", ConstraintKind.LENGTH_BOUND),
        _violation("code", ConstraintKind.PATTERN),
    ])

    assert outcome.summary == {"required": 1, "pattern": 2, "length_bound": 1}
    assert outcome.field_names == ["id", "name", "code"]
    assert len(outcome.for_field("name")) == 2
    assert outcome.for_field("missing") == []


def test_outcome_is_immutable():
    outcome = ValidationOutcome.build([_violation()])

    with pytest.raises(pydantic.ValidationError):
        outcome.violations = ()
    with pytest.raises(pydantic.ValidationError):
        outcome.violations[0].message = "changed"


def test_outcomes_compare_structurally():
    assert ValidationOutcome.build([_violation()]) == ValidationOutcome.build([_violation()])
    assert ValidationOutcome.build([_violation("a")]) != ValidationOutcome.build([_violation("b")])


def test_dump_includes_computed_fields():
    data = ValidationOutcome.build([_violation()]).model_dump(mode="json")

    assert data["is_valid"] is False
    assert data["violations"] == [
        {"field_name": "name", "constraint_kind": "required", "message": "The name field is required."}
    ]
    assert data["summary"]["required"] == 1
