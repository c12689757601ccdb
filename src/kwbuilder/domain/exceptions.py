"""Domain exceptions: all public errors of kwbuilder.

Hexagonal architecture: all exceptions visible to users defined in domain.
Application/Infrastructure raise these, never define their own public exceptions.
"""

from __future__ import annotations


class KwBuilderError(Exception):
    """Base for all kwbuilder error exceptions.

    Allows: except KwBuilderError to catch all library errors.
    """


class InvalidParameterError(KwBuilderError, ValueError):
    """Parameter descriptor violates its invariants.

    Attributes:
        reason: Why descriptor is invalid.
    """

    def __init__(self, reason: str) -> None:
        """Initialize with reason."""
        self.reason = reason
        super().__init__(f"invalid parameter descriptor: {reason}")


class InvalidConfigError(KwBuilderError, ValueError):
    """Builder configuration is invalid.

    Attributes:
        field: Offending configuration field.
        reason: Why value is invalid.
    """

    def __init__(self, field: str, reason: str) -> None:
        """Initialize with field name and reason."""
        self.field = field
        self.reason = reason
        super().__init__(f"invalid builder config {field!r}: {reason}")


class SchemaError(KwBuilderError, TypeError):
    """Target constructor cannot be turned into a builder.

    Raised at definition time: positional parameter, reserved key,
    or signature that cannot be read.
    Inherits TypeError for semantic correctness (wrong constructor shape).

    Attributes:
        target: Target the builder was requested for.
        reason: Why extraction failed.
    """

    def __init__(self, target: object, reason: str) -> None:
        """Initialize with target and reason."""
        self.target = target
        self.reason = reason
        super().__init__(f"Invalid builder target {_describe(target)}: {reason}")


class ConstructorResolutionError(SchemaError):
    """Constructor selector does not resolve to a callable on target.

    Attributes:
        selector: Selector that failed to resolve.
    """

    def __init__(self, target: object, selector: str) -> None:
        """Initialize with target and selector."""
        self.selector = selector
        super().__init__(target, f"constructor {selector!r} is not a callable attribute")


class BuilderError(KwBuilderError):
    """Base for errors raised while assigning builder attributes.

    Every BuilderError aborts the current build; accumulated attrs are discarded.
    """


class UnknownKeyError(BuilderError, AttributeError):
    """Key is not declared and builder is not wildcard.

    Inherits AttributeError so hasattr() reports undeclared keys as missing.

    Attributes:
        key: Requested key.
    """

    def __init__(self, key: str) -> None:
        """Initialize with key."""
        self.key = key
        super().__init__(f"Unknown builder key {key!r}")


class ArityError(BuilderError, TypeError):
    """Wrong number or shape of arguments to an assignment.

    Inherits TypeError, the stdlib error for bad call arity.

    Attributes:
        key: Key being assigned.
        reason: Which shape rule was broken.
    """

    def __init__(self, key: str, reason: str) -> None:
        """Initialize with key and reason."""
        self.key = key
        self.reason = reason
        super().__init__(f"Wrong number of arguments for {key!r}: {reason}")


class DuplicateAssignmentError(BuilderError, ValueError):
    """Key already present in builder attrs.

    Covers both initial attrs and earlier assignments in the same block.

    Attributes:
        key: Key assigned twice.
    """

    def __init__(self, key: str) -> None:
        """Initialize with key."""
        self.key = key
        super().__init__(f"Invalid builder state: {key} already provided")


class FinalizedBuilderError(BuilderError, RuntimeError):
    """Builder instance used after finalize()."""

    def __init__(self) -> None:
        """Initialize with fixed message."""
        super().__init__("Builder instance already finalized")


def _describe(target: object) -> str:
    qualname = getattr(target, "__qualname__", None)
    if qualname is None:
        return repr(target)
    return str(qualname)
