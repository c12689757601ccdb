"""Builder schema value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Schema:
    """Legal assignment keys of one target constructor.

    Derived once per target by the schema extractor, never mutated.

    Attributes:
        keys: Names of every keyword-style parameter
        wildcard: True iff constructor accepts **kwargs
    """

    keys: frozenset[str]
    wildcard: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.keys, frozenset):
            raise TypeError(f"keys must be frozenset, got {type(self.keys).__name__}")

    def is_valid_key(self, name: str) -> bool:
        """Check if name may be assigned.

        Args:
            name: Key to check

        Returns:
            True if wildcard or name is a declared key
        """
        return self.wildcard or name in self.keys
