"""Domain enumerations."""

from enum import Enum, auto


class AssignMode(Enum):
    """Argument-shape rules for builder assignments.

    STRICT: exactly one positional value or one block.
    RICH: positional values, keyword mapping, or values plus trailing block.
    """

    STRICT = auto()
    RICH = auto()
