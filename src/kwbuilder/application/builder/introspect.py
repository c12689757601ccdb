"""Introspection of builder instances.

Module-level functions instead of methods: every public attribute name
of a BuilderInstance is reserved for keys, including wildcard keys
such as "attrs" or "finalize".

Example:
    b = definition.new({"b": 2})
    b.a(1)
    can_assign(b, "c")   → True
    pending_keys(b)      → ("c",)
    record = finalize(b)
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from kwbuilder.application.builder.instance import BuilderInstance

# SLF001 throughout: this module is the accessor layer for _kw_ engine state


def attrs_of(builder: BuilderInstance) -> Mapping[str, Any]:
    """Read-only view of assigned values."""
    return MappingProxyType(builder._kw_attrs)  # noqa: SLF001


def is_finalized(builder: BuilderInstance) -> bool:
    """True once finalize() was called."""
    return builder._kw_finalized  # noqa: SLF001


def can_assign(builder: BuilderInstance, name: str) -> bool:
    """Check if name is a legal key, regardless of assignment state."""
    return builder._kw_definition.valid_key(name)  # noqa: SLF001


def is_assigned(builder: BuilderInstance, name: str) -> bool:
    """Check if name already has a value."""
    return name in builder._kw_attrs  # noqa: SLF001


def pending_keys(builder: BuilderInstance) -> tuple[str, ...]:
    """Required keys that still have no value, sorted."""
    required = builder._kw_definition.required_keys  # noqa: SLF001
    return tuple(sorted(required.difference(builder._kw_attrs)))  # noqa: SLF001


def finalize(builder: BuilderInstance) -> object:
    """Invoke the target constructor with all attrs as keyword arguments.

    Args:
        builder: Open builder instance

    Returns:
        Constructed target instance

    Raises:
        FinalizedBuilderError: If builder was already finalized
    """
    return builder._kw_finalize()  # noqa: SLF001
