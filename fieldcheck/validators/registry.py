"""Model registry: discovers field declarations and caches compiled descriptors per model type.

Declarations are discovered once per type from ``typing.Annotated`` extras
and dataclass field metadata, or supplied through ``declare()`` for types
that cannot be annotated. Every malformed declaration surfaces here as a
ConfigurationError, never later during validation.
"""

import dataclasses
import inspect
import threading
import time
from dataclasses import dataclass
from typing import (
    Annotated,
    Any,
    Callable,
    ClassVar,
    Mapping,
    NoReturn,
    Optional,
    Sequence,
    get_args,
    get_origin,
    get_type_hints,
)

import structlog

from fieldcheck.config import get_settings
from fieldcheck.validators.base import BaseConstraint
from fieldcheck.validators.declarations import (
    CONSTRAINTS_METADATA_KEY,
    Declaration,
    DisplayName,
    LengthBound,
    Pattern,
    Required,
)
from fieldcheck.validators.errors import ConfigurationError
from fieldcheck.validators.length_constraint import LengthBoundConstraint
from fieldcheck.validators.pattern_constraint import PatternConstraint
from fieldcheck.validators.required_constraint import RequiredConstraint

logger = structlog.get_logger()

# Declaration marker -> constraint implementation
CONSTRAINT_TYPES: dict[type[Declaration], type[BaseConstraint]] = {
    Required: RequiredConstraint,
    Pattern: PatternConstraint,
    LengthBound: LengthBoundConstraint,
}


@dataclass(frozen=True)
class FieldDescriptor:
    """A validated field: its name, how to read it and its ordered constraints."""

    name: str
    get_value: Callable[[Any], Any]
    constraints: tuple[BaseConstraint, ...]
    display_name: Optional[str] = None

    @property
    def label(self) -> str:
        return self.display_name or self.name


class ModelRegistry:
    """Build-once cache from model type to its FieldDescriptor tuple.

    Reads of an existing entry are lock-free. First builds are serialised
    by a lock so concurrent callers observe a single, fully built tuple.
    """

    def __init__(self, log_builds: Optional[bool] = None):
        """Create an empty registry.

        Args:
            log_builds: Emit an info event per model type built. If None, read from settings.
        """
        self._descriptors: dict[type, tuple[FieldDescriptor, ...]] = {}
        self._lock = threading.Lock()
        self.log_builds = get_settings().LOG_REGISTRY_BUILDS if log_builds is None else log_builds

    def get_descriptors(self, model_type: type) -> tuple[FieldDescriptor, ...]:
        """Return the descriptors for a model type, building them on first use.

        Raises:
            ConfigurationError: If any declaration on the model is malformed
        """
        descriptors = self._descriptors.get(model_type)
        if descriptors is not None:
            return descriptors

        with self._lock:
            descriptors = self._descriptors.get(model_type)
            if descriptors is None:
                descriptors = self._build(model_type, self._discover(model_type))
                self._descriptors[model_type] = descriptors
        return descriptors

    def declare(
        self,
        model_type: type,
        fields: Mapping[str, Sequence[Any]],
    ) -> tuple[FieldDescriptor, ...]:
        """Register a model explicitly instead of discovering its annotations.

        Args:
            model_type: Type whose instances will be validated
            fields: Field name -> declarations, in the order to validate them

        Returns:
            The compiled descriptors

        Raises:
            ConfigurationError: If the type is already registered, a field name is unknown
                or a declaration is malformed
        """
        with self._lock:
            if model_type in self._descriptors:
                raise ConfigurationError(
                    "model is already registered; declarations are fixed after the first build",
                    model=model_type,
                )
            hints = _type_hints(model_type)
            known = _known_attributes(model_type, hints)
            for name in fields:
                if name not in known:
                    self._fail(model_type, name, None, "model has no such attribute")
            table = [(name, _as_list(decls), hints.get(name, Any)) for name, decls in fields.items()]
            descriptors = self._build(model_type, table)
            self._descriptors[model_type] = descriptors
        return descriptors

    def is_registered(self, model_type: type) -> bool:
        return model_type in self._descriptors

    def clear(self) -> None:
        """Drop every cached entry. Intended for tests."""
        with self._lock:
            self._descriptors.clear()

    # ── Discovery ──

    def _discover(self, model_type: type) -> list[tuple[str, list[Any], Any]]:
        """Collect (field name, declarations, annotation) in declaration order."""
        hints = _type_hints(model_type)
        dataclass_fields = (
            {f.name: f for f in dataclasses.fields(model_type)}
            if dataclasses.is_dataclass(model_type)
            else {}
        )

        table = []
        for name, annotation in hints.items():
            if get_origin(annotation) is ClassVar:
                continue

            declarations: list[Any] = []
            if get_origin(annotation) is Annotated:
                declarations.extend(get_args(annotation)[1:])
            field = dataclass_fields.get(name)
            if field is not None:
                declarations.extend(_as_list(field.metadata.get(CONSTRAINTS_METADATA_KEY, ())))

            declarations = [d for d in declarations if _is_fieldcheck_marker(d)]
            if declarations:
                table.append((name, declarations, annotation))
        return table

    def _build(
        self,
        model_type: type,
        table: list[tuple[str, list[Any], Any]],
    ) -> tuple[FieldDescriptor, ...]:
        start_time = time.perf_counter()
        descriptors = []

        for name, declarations, annotation in table:
            constraints: list[BaseConstraint] = []
            display_name = None

            for declaration in declarations:
                if isinstance(declaration, DisplayName):
                    display_name = declaration.name
                    continue

                constraint_type = _constraint_type_for(declaration)
                if constraint_type is None:
                    self._fail(model_type, name, None, f"unsupported declaration {declaration!r}")
                try:
                    constraints.append(constraint_type.from_declaration(declaration, annotation))
                except (TypeError, ValueError) as e:
                    self._fail(model_type, name, declaration, str(e), cause=e)

            descriptors.append(FieldDescriptor(
                name=name,
                get_value=_accessor(name),
                constraints=tuple(constraints),
                display_name=display_name,
            ))

        if self.log_builds:
            logger.info(
                "model_registry_built",
                model=model_type.__qualname__,
                fields=len(descriptors),
                constraints=sum(len(d.constraints) for d in descriptors),
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
        return tuple(descriptors)

    @staticmethod
    def _fail(
        model_type: type,
        field_name: str,
        declaration: Optional[Declaration],
        reason: str,
        cause: Optional[Exception] = None,
    ) -> NoReturn:
        kind = declaration.kind if declaration is not None else None
        logger.error(
            "model_registry_build_failed",
            model=model_type.__qualname__,
            field=field_name,
            kind=kind.value if kind is not None else None,
            reason=reason,
        )
        raise ConfigurationError(
            reason,
            model=model_type,
            field_name=field_name,
            constraint_kind=kind,
        ) from cause


def _type_hints(model_type: type) -> dict[str, Any]:
    try:
        return get_type_hints(model_type, include_extras=True)
    except (NameError, TypeError) as e:
        raise ConfigurationError(f"cannot resolve type annotations: {e}", model=model_type) from e


def _known_attributes(model_type: type, hints: Mapping[str, Any]) -> set[str]:
    """Names an instance can carry: annotations, class attributes and __init__ parameters."""
    known = set(hints) | set(dir(model_type))
    try:
        parameters = inspect.signature(model_type.__init__).parameters
    except (TypeError, ValueError):
        return known
    known.update(
        name for name, p in parameters.items()
        if p.kind not in (p.VAR_POSITIONAL, p.VAR_KEYWORD)
    )
    return known


def _accessor(name: str) -> Callable[[Any], Any]:
    """Read accessor; an attribute that was never assigned reads as None."""

    def get_value(instance: Any) -> Any:
        return getattr(instance, name, None)

    return get_value


def _as_list(declared: Any) -> list[Any]:
    if _is_fieldcheck_marker(declared):
        return [declared]
    return list(declared)


def _constraint_type_for(declaration: Any) -> Optional[type[BaseConstraint]]:
    for klass in type(declaration).__mro__:
        if klass in CONSTRAINT_TYPES:
            return CONSTRAINT_TYPES[klass]
    return None


def _is_fieldcheck_marker(obj: Any) -> bool:
    """Annotated extras may carry other libraries' metadata; only ours count.

    Anything deriving from Declaration is kept so unknown subclasses fail loudly at build time.
    """
    return isinstance(obj, (Declaration, DisplayName))


# Module-level singleton
model_registry = ModelRegistry()
