"""Declaration markers model authors attach to fields.

Markers are inert: they only record parameters. The registry compiles
them into constraints and reports malformed parameters as
ConfigurationError, naming the field they were attached to.

Usage:
    @dataclass
    class Account:
        id: Annotated[UUID, Pattern(r"^(?!00000000-0000-0000-0000-000000000000$).*$")]
        name: Annotated[str, Required(), LengthBound(50), DisplayName("Account name")]
"""

from dataclasses import dataclass
from typing import ClassVar, Optional

from fieldcheck.validators.models import ConstraintKind

# Key used in dataclass field metadata, e.g. field(metadata={"constraints": [Required()]})
CONSTRAINTS_METADATA_KEY = "constraints"


@dataclass(frozen=True)
class Declaration:
    """Base for constraint declarations."""

    kind: ClassVar[ConstraintKind]


@dataclass(frozen=True)
class Required(Declaration):
    kind: ClassVar[ConstraintKind] = ConstraintKind.REQUIRED

    allow_empty_strings: bool = False
    message: Optional[str] = None


@dataclass(frozen=True)
class Pattern(Declaration):
    """Regular expression the whole canonical string form must match.

    No anchors are added: embed ``^...$`` in the expression.
    """

    kind: ClassVar[ConstraintKind] = ConstraintKind.PATTERN

    pattern: str
    flags: int = 0
    message: Optional[str] = None


@dataclass(frozen=True)
class LengthBound(Declaration):
    kind: ClassVar[ConstraintKind] = ConstraintKind.LENGTH_BOUND

    maximum: int
    minimum: int = 0
    message: Optional[str] = None


@dataclass(frozen=True)
class DisplayName:
    """Name used for the field in violation messages."""

    name: str
