"""Required constraint: the value must not be its type's empty sentinel."""

from decimal import Decimal
from typing import Any, Optional
from uuid import UUID

from fieldcheck.validators.base import BaseConstraint
from fieldcheck.validators.declarations import Required
from fieldcheck.validators.models import ConstraintKind

# Value types whose zero-argument constructor yields the "absent" default.
# bool is covered by int: False == int().
DEFAULT_VALUE_TYPES = (int, float, complex, Decimal, bytes, bytearray, list, tuple, dict, set, frozenset)

NIL_UUID = UUID(int=0)


class RequiredConstraint(BaseConstraint):
    """Fails on None, blank strings and values equal to their type's default."""

    kind = ConstraintKind.REQUIRED
    default_message = "The {field} field is required."

    def __init__(self, allow_empty_strings: bool = False, message: Optional[str] = None):
        self.allow_empty_strings = allow_empty_strings
        super().__init__(message)

    @classmethod
    def from_declaration(cls, declaration: Required, annotation: Any = Any) -> "RequiredConstraint":
        return cls(allow_empty_strings=declaration.allow_empty_strings, message=declaration.message)

    def is_satisfied(self, value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, str):
            return self.allow_empty_strings or bool(value.strip())
        if isinstance(value, UUID):
            return value != NIL_UUID
        for value_type in DEFAULT_VALUE_TYPES:
            if isinstance(value, value_type):
                return value != value_type()
        return True

    @property
    def parameters(self) -> dict[str, Any]:
        return {"allow_empty_strings": self.allow_empty_strings}
