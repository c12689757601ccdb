"""Builder instance: single-use attribute assembly for one construction.

Per-key operations are generated by definition.make_instance_class();
this module holds the shared assignment engine.

Usage:
    def fill(b):
        b.a(1)
        b.c(3)

        @b.callback.block()
        def on_done(result): ...

    record = definition.build(fill, b=2)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from kwbuilder.application.builder.resolution import resolve_value
from kwbuilder.domain.exceptions import (
    DuplicateAssignmentError,
    FinalizedBuilderError,
    UnknownKeyError,
)

if TYPE_CHECKING:
    from kwbuilder.application.builder.definition import BuilderDefinition

F = TypeVar("F", bound=Callable[..., Any])

# Prefix of engine attributes; constructor keys may not start with it
RESERVED_PREFIX = "_kw_"


class Assignment:
    """Assignment operation for one key, bound to one builder instance.

    Call it with values, or use block() as a decorator to pass
    a function as the trailing block.
    """

    __slots__ = ("_builder", "key")

    def __init__(self, builder: BuilderInstance, key: str) -> None:
        self._builder = builder
        self.key = key

    def __call__(self, /, *args: Any, **kwargs: Any) -> None:
        """Assign without a block."""
        self._builder._kw_assign(self.key, args, kwargs, None)  # noqa: SLF001

    def block(self, /, *args: Any, **kwargs: Any) -> Callable[[F], F]:
        """Assign with the decorated function as trailing block.

        Example:
            @b.handler.block()
            def handler(event): ...

        Returns:
            Decorator that performs the assignment and returns the function unchanged
        """

        def decorate(fn: F) -> F:
            if not callable(fn):
                raise TypeError(f"block must be callable, got {type(fn).__name__}")
            self._builder._kw_assign(self.key, args, kwargs, fn)  # noqa: SLF001
            return fn

        return decorate

    def __repr__(self) -> str:
        return f"<Assignment {self.key!r}>"


class KeyOperation:
    """Class-level descriptor producing the Assignment for one declared key."""

    __slots__ = ("key",)

    def __init__(self, key: str) -> None:
        self.key = key

    def __get__(self, instance: BuilderInstance | None, owner: type) -> Any:
        if instance is None:
            return self
        return Assignment(instance, self.key)


class BuilderInstance:
    """In-progress attribute mapping for one construction attempt.

    Lifecycle: open → finalized. Every key may be assigned once,
    whether through initial attrs or an assignment call.
    Not thread-safe: one instance belongs to one build.

    The public attribute namespace holds keys only: engine state lives
    under _kw_ and introspection is in kwbuilder.application.builder.introspect.
    """

    __slots__ = ("_kw_attrs", "_kw_finalized")

    _kw_definition: ClassVar[BuilderDefinition]

    def __init__(self, initial_attrs: Mapping[str, Any] | None = None) -> None:
        """Seed attrs with a shallow copy of initial values.

        Args:
            initial_attrs: Pre-supplied values (copied, never aliased)

        Raises:
            UnknownKeyError: If an initial key is not assignable
        """
        attrs = dict(initial_attrs) if initial_attrs is not None else {}
        for key in attrs:
            if not self._kw_definition.valid_key(key):
                raise UnknownKeyError(key)

        self._kw_attrs: dict[str, Any] = attrs
        self._kw_finalized = False

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails: name is not a declared key
        if name.startswith("_"):
            raise AttributeError(name)
        raise UnknownKeyError(name)

    def __getitem__(self, key: str) -> Assignment:
        """Name-keyed dispatch: b["key"](value)."""
        if not self._kw_definition.valid_key(key):
            raise UnknownKeyError(key)
        return Assignment(self, key)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | self._kw_definition.keys)

    def __repr__(self) -> str:
        state = "finalized" if self._kw_finalized else "open"
        return f"<{type(self).__name__} {state} assigned={sorted(self._kw_attrs)}>"

    # -- engine -------------------------------------------------------------

    def _kw_assign(
        self,
        key: str,
        args: tuple[Any, ...],
        kwargs: Mapping[str, Any],
        block: Callable[..., Any] | None,
    ) -> None:
        """Single entry point of every assignment.

        Raises:
            FinalizedBuilderError: If instance already finalized
            UnknownKeyError: If key is not assignable
            DuplicateAssignmentError: If key already in attrs
            ArityError: If argument shape is invalid for the mode
        """
        if self._kw_finalized:
            raise FinalizedBuilderError
        if not self._kw_definition.valid_key(key):
            raise UnknownKeyError(key)
        if key in self._kw_attrs:
            raise DuplicateAssignmentError(key)

        self._kw_attrs[key] = resolve_value(self._kw_definition.mode, key, args, kwargs, block)

    def _kw_finalize(self) -> object:
        if self._kw_finalized:
            raise FinalizedBuilderError
        self._kw_finalized = True
        return self._kw_definition.construct(self._kw_attrs)


class WildcardBuilderInstance(BuilderInstance):
    """Builder instance for targets accepting **kwargs.

    Any public name is an assignment operation.
    """

    __slots__ = ()

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return Assignment(self, name)
