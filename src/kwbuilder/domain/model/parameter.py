"""Constructor parameter descriptor value object."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from kwbuilder.domain.exceptions import InvalidParameterError


class ParameterKind(Enum):
    """Constructor parameter kind.

    Independent of inspect.Parameter.kind: the signature reader maps
    host reflection kinds onto these.
    """

    REQUIRED_POSITIONAL = "REQUIRED_POSITIONAL"
    OPTIONAL_POSITIONAL = "OPTIONAL_POSITIONAL"
    VARIADIC_POSITIONAL = "VARIADIC_POSITIONAL"
    REQUIRED_KEYWORD = "REQUIRED_KEYWORD"
    OPTIONAL_KEYWORD = "OPTIONAL_KEYWORD"
    VARIADIC_KEYWORD = "VARIADIC_KEYWORD"

    @property
    def is_positional(self) -> bool:
        """True for kinds bound by position only."""
        return self in _POSITIONAL_KINDS

    @property
    def is_named(self) -> bool:
        """True for kinds that contribute a key to the schema."""
        return self in (ParameterKind.REQUIRED_KEYWORD, ParameterKind.OPTIONAL_KEYWORD)


_POSITIONAL_KINDS = frozenset(
    {
        ParameterKind.REQUIRED_POSITIONAL,
        ParameterKind.OPTIONAL_POSITIONAL,
        ParameterKind.VARIADIC_POSITIONAL,
    }
)


@dataclass(frozen=True, slots=True)
class ParameterDescriptor:
    """One entry of a constructor's declared signature.

    Name stored without asterisks (e.g., "kwargs" not "**kwargs").

    Examples:
        def __init__(self, *, a)      → ParameterDescriptor(REQUIRED_KEYWORD, "a")
        def __init__(self, a=1)       → ParameterDescriptor(OPTIONAL_KEYWORD, "a")
        def __init__(self, a, /)      → ParameterDescriptor(REQUIRED_POSITIONAL, "a")
        def __init__(self, **rest)    → ParameterDescriptor(VARIADIC_KEYWORD, "rest")

    Invariants (FAIL-FIRST):
        - keyword kinds require a non-empty name
    """

    kind: ParameterKind
    name: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.kind, ParameterKind):
            raise InvalidParameterError(f"kind must be ParameterKind, got {type(self.kind).__name__}")
        if self.kind.is_named and not self.name:
            raise InvalidParameterError(f"{self.kind.value} parameter requires a name")

    @property
    def is_required(self) -> bool:
        """True if constructor call fails without this parameter."""
        return self.kind in (ParameterKind.REQUIRED_POSITIONAL, ParameterKind.REQUIRED_KEYWORD)
