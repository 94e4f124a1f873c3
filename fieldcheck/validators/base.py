"""Base constraint: abstract class implementing the Strategy Pattern.

Each constraint is a standalone, independently testable unit.
New constraint kinds are added without modifying the engine.
"""

import types
from abc import ABC, abstractmethod
from typing import Annotated, Any, Optional, Union, get_args, get_origin

from fieldcheck.validators.declarations import Declaration
from fieldcheck.validators.models import ConstraintKind, Violation


class BaseConstraint(ABC):
    """Abstract base for all field constraints.

    Contract:
        - is_satisfied() is a pure predicate over one value snapshot
        - format_message() only substitutes placeholders, never fails
        - instances are immutable once built; the registry shares them
          across threads
    """

    kind: ConstraintKind
    default_message: str

    def __init__(self, message: Optional[str] = None):
        self._message_template = message if message is not None else self.default_message
        self._check_template()

    @classmethod
    @abstractmethod
    def from_declaration(cls, declaration: Declaration, annotation: Any = Any) -> "BaseConstraint":
        """Compile a declaration into a constraint.

        Args:
            declaration: Marker attached to the field
            annotation: Declared type of the field (``Any`` when unknown)

        Raises:
            ValueError: If the declaration parameters are malformed
        """
        ...

    @abstractmethod
    def is_satisfied(self, value: Any) -> bool:
        ...

    @property
    def message_template(self) -> str:
        return self._message_template

    @property
    def parameters(self) -> dict[str, Any]:
        """Placeholders available to the message template besides ``{field}``."""
        return {}

    def format_message(self, field_name: str) -> str:
        return self._message_template.format(field=field_name, **self.parameters)

    def violation(self, field_name: str, display_name: str) -> Violation:
        """Build the violation reported when this constraint fails."""
        return Violation(
            field_name=field_name,
            constraint_kind=self.kind,
            message=self.format_message(display_name),
        )

    def _check_template(self) -> None:
        try:
            self.format_message("field")
        except (AttributeError, KeyError, IndexError, ValueError) as e:
            placeholders = ", ".join(f"{{{p}}}" for p in ["field", *self.parameters])
            raise ValueError(
                f"message template {self._message_template!r} is malformed ({e!s}); "
                f"available placeholders: {placeholders}"
            ) from e

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self.parameters.items())
        return f"{type(self).__name__}({params})"


# ── Annotation helpers ──

def unwrap_annotation(annotation: Any) -> Any:
    """Strip ``Annotated`` and ``Optional`` wrappers down to the value types."""
    if get_origin(annotation) is Annotated:
        return unwrap_annotation(get_args(annotation)[0])
    return annotation


def annotation_types(annotation: Any) -> list[Any]:
    """Flatten a (possibly Optional/Union) annotation into its member types, without NoneType."""
    annotation = unwrap_annotation(annotation)
    if get_origin(annotation) in (Union, types.UnionType):
        members = []
        for arg in get_args(annotation):
            members.extend(annotation_types(arg))
        return members
    if annotation is type(None):
        return []
    return [annotation]
