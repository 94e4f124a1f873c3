"""Pattern constraint: the value's string form must be matched in full by a regular expression.

No implicit anchors are added. The leftmost match has to start at the
first character and end at the last one, so authors write ``^...$``
themselves. A lookaround-only expression such as ``^(?<!X)$`` can
therefore only ever match the empty string.
"""

import re
from typing import Any, Optional

from fieldcheck.validators.base import BaseConstraint
from fieldcheck.validators.declarations import Pattern
from fieldcheck.validators.models import ConstraintKind


class PatternConstraint(BaseConstraint):
    """Matches ``str(value)`` against a compiled expression."""

    kind = ConstraintKind.PATTERN
    default_message = "The {field} field does not match the required pattern."

    def __init__(self, pattern: str, flags: int = 0, message: Optional[str] = None):
        if not isinstance(pattern, str) or not pattern:
            raise ValueError("pattern must be a non-empty string")
        if isinstance(flags, bool) or not isinstance(flags, int):
            raise ValueError(f"flags must be an int (re.IGNORECASE, ...), got {type(flags).__name__}")
        try:
            self.regex = re.compile(pattern, flags)
        except re.error as e:
            raise ValueError(f"cannot compile pattern {pattern!r}: {e}") from e
        super().__init__(message)

    @classmethod
    def from_declaration(cls, declaration: Pattern, annotation: Any = Any) -> "PatternConstraint":
        return cls(declaration.pattern, flags=declaration.flags, message=declaration.message)

    @property
    def pattern(self) -> str:
        return self.regex.pattern

    @property
    def parameters(self) -> dict[str, Any]:
        return {"pattern": self.pattern}

    def is_satisfied(self, value: Any) -> bool:
        # Absence is reported by Required, not here
        if value is None:
            return True
        text = str(value)
        if not text:
            return True

        match = self.regex.search(text)
        return match is not None and match.start() == 0 and match.end() == len(text)
