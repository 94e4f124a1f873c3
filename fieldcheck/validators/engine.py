"""Validation Engine: evaluates every declared constraint of an instance and produces an outcome.

This is the main entry point for model validation. It looks up the
instance's descriptors in the registry and runs every constraint of every
field, collecting failures into a ValidationOutcome.

Usage:
    engine = ValidationEngine()
    outcome = engine.validate(account)
    if not outcome.is_valid:
        # Report outcome.violations back to the caller
"""

import time
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import structlog

from fieldcheck.config import get_settings
from fieldcheck.validators.errors import ConfigurationError, ModelValidationError
from fieldcheck.validators.models import ValidationOutcome, Violation
from fieldcheck.validators.registry import FieldDescriptor, ModelRegistry, model_registry

logger = structlog.get_logger()


@dataclass(frozen=True)
class ValidationContext:
    """The instance under validation plus message display-name overrides."""

    instance: Any
    display_names: Mapping[str, str] = field(default_factory=dict)

    @property
    def model_type(self) -> type:
        return type(self.instance)

    def display_name_for(self, descriptor: FieldDescriptor) -> str:
        return self.display_names.get(descriptor.name) or descriptor.label


class ViolationCollector:
    """Append-only violation list for a single validation pass."""

    def __init__(self):
        self._violations: list[Violation] = []

    def append(self, violation: Violation) -> None:
        self._violations.append(violation)

    def violations(self) -> tuple[Violation, ...]:
        return tuple(self._violations)

    def is_valid(self) -> bool:
        return not self._violations

    def to_outcome(self) -> ValidationOutcome:
        return ValidationOutcome.build(self._violations)


class ValidationEngine:
    """Orchestrates constraint evaluation for model instances.

    Design principles:
        - Deterministic: same instance state gives an equal outcome
        - Exhaustive: every constraint on every field runs, no short-circuit
        - Stateless: nothing carries over between validate() calls
        - Failures are data; only broken declarations raise
    """

    def __init__(
        self,
        registry: Optional[ModelRegistry] = None,
        log_runs: Optional[bool] = None,
    ):
        """Initialize with the shared registry or a custom one.

        Args:
            registry: Optional registry. If None, uses the module-level registry.
            log_runs: Emit a debug event per run. If None, read from settings.
        """
        self.registry = registry if registry is not None else model_registry
        self.log_runs = get_settings().LOG_VALIDATION_RUNS if log_runs is None else log_runs

    def validate(
        self,
        instance: Any,
        display_names: Optional[Mapping[str, str]] = None,
    ) -> ValidationOutcome:
        """Evaluate every declared constraint against the instance's current values.

        Args:
            instance: Object whose type declares field constraints
            display_names: Field name -> name used in messages, overriding DisplayName

        Returns:
            ValidationOutcome with violations in field then constraint declaration order

        Raises:
            ConfigurationError: If the model's declarations are malformed
        """
        start_time = time.perf_counter()
        context = ValidationContext(instance, display_names or {})
        descriptors = self.registry.get_descriptors(context.model_type)

        collector = ViolationCollector()
        for descriptor in descriptors:
            self._validate_descriptor(context, descriptor, collector)

        outcome = collector.to_outcome()
        self._log_run(context, outcome, start_time)
        return outcome

    def validate_field(
        self,
        instance: Any,
        field_name: str,
        display_names: Optional[Mapping[str, str]] = None,
    ) -> ValidationOutcome:
        """Evaluate the constraints of a single declared field.

        Raises:
            ConfigurationError: If the field declares no constraints on this model
        """
        start_time = time.perf_counter()
        context = ValidationContext(instance, display_names or {})
        descriptors = self.registry.get_descriptors(context.model_type)

        descriptor = next((d for d in descriptors if d.name == field_name), None)
        if descriptor is None:
            raise ConfigurationError(
                "field declares no constraints",
                model=context.model_type,
                field_name=field_name,
            )

        collector = ViolationCollector()
        self._validate_descriptor(context, descriptor, collector)

        outcome = collector.to_outcome()
        self._log_run(context, outcome, start_time, field=field_name)
        return outcome

    def validate_or_raise(
        self,
        instance: Any,
        display_names: Optional[Mapping[str, str]] = None,
    ) -> ValidationOutcome:
        """Validate and raise ModelValidationError unless the instance is valid."""
        outcome = self.validate(instance, display_names)
        if not outcome.is_valid:
            raise ModelValidationError(outcome, model=type(instance))
        return outcome

    # ── Helper Methods ──

    @staticmethod
    def _validate_descriptor(
        context: ValidationContext,
        descriptor: FieldDescriptor,
        collector: ViolationCollector,
    ) -> None:
        # One snapshot per field so every constraint sees the same value
        value = descriptor.get_value(context.instance)
        display_name = context.display_name_for(descriptor)

        for constraint in descriptor.constraints:
            if not constraint.is_satisfied(value):
                collector.append(constraint.violation(descriptor.name, display_name))

    def _log_run(
        self,
        context: ValidationContext,
        outcome: ValidationOutcome,
        start_time: float,
        **extra: Any,
    ) -> None:
        if not self.log_runs:
            return
        logger.debug(
            "validation_complete",
            model=context.model_type.__qualname__,
            valid=outcome.is_valid,
            violations=len(outcome.violations),
            summary=outcome.summary,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            **extra,
        )


# Module-level singleton
validation_engine = ValidationEngine()


def validate(instance: Any, display_names: Optional[Mapping[str, str]] = None) -> ValidationOutcome:
    """Validate with the module-level engine."""
    return validation_engine.validate(instance, display_names)
