"""LengthBound constraint: string length within ``[minimum, maximum]``."""

from typing import Any, Optional

from fieldcheck.validators.base import BaseConstraint, annotation_types
from fieldcheck.validators.declarations import LengthBound
from fieldcheck.validators.models import ConstraintKind


class LengthBoundConstraint(BaseConstraint):
    """Applies to string fields only; the registry rejects any other declared type."""

    kind = ConstraintKind.LENGTH_BOUND

    def __init__(self, maximum: int, minimum: int = 0, message: Optional[str] = None):
        for label, bound in (("maximum", maximum), ("minimum", minimum)):
            if isinstance(bound, bool) or not isinstance(bound, int):
                raise ValueError(f"{label} length must be an int, got {type(bound).__name__}")
            if bound < 0:
                raise ValueError(f"{label} length must be >= 0, got {bound}")
        if minimum > maximum:
            raise ValueError(f"minimum length {minimum} exceeds maximum length {maximum}")

        self.maximum = maximum
        self.minimum = minimum
        super().__init__(message)

    @property
    def default_message(self) -> str:
        if self.minimum > 0:
            return "The {field} field must be a string with a minimum length of {min} and a maximum length of {max}."
        return "The {field} field exceeds the maximum length of {max}."

    @classmethod
    def from_declaration(cls, declaration: LengthBound, annotation: Any = Any) -> "LengthBoundConstraint":
        for member in annotation_types(annotation):
            if member is Any:
                continue
            if not (isinstance(member, type) and issubclass(member, str)):
                name = getattr(member, "__name__", repr(member))
                raise ValueError(f"length bounds apply only to string fields, got {name}")
        return cls(declaration.maximum, minimum=declaration.minimum, message=declaration.message)

    @property
    def parameters(self) -> dict[str, Any]:
        return {"min": self.minimum, "max": self.maximum}

    def is_satisfied(self, value: Any) -> bool:
        if value is None:
            return True
        length = len(value) if isinstance(value, str) else len(str(value))
        return self.minimum <= length <= self.maximum
