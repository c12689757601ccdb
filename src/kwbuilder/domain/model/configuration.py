"""Builder configuration.

User-provided options for create_builder().
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from kwbuilder.domain.exceptions import InvalidConfigError
from kwbuilder.domain.model.enums import AssignMode

# None = call the target itself, str = attribute of target, callable = used as is
ConstructorSelector = str | Callable[..., object] | None


@dataclass(frozen=True, slots=True)
class BuilderConfig:
    """Builder definition options.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        mode: Assignment shape rules. RICH by default.
        constructor: How the target is invoked at finalize.
            None = the target itself (class call),
            str = name of a factory attribute on the target,
            callable = invoked directly.
    """

    mode: AssignMode = AssignMode.RICH
    constructor: ConstructorSelector = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.mode, AssignMode):
            raise InvalidConfigError("mode", f"expected AssignMode, got {type(self.mode).__name__}")

        selector = self.constructor
        if selector is None or callable(selector):
            return
        if not isinstance(selector, str):
            raise InvalidConfigError(
                "constructor",
                f"expected None, str or callable, got {type(selector).__name__}",
            )
        if not selector.isidentifier():
            raise InvalidConfigError("constructor", f"{selector!r} is not an identifier")
