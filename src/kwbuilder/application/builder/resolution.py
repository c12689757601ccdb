"""Assignment shape resolution.

Pure functions: (key, args, kwargs, block) → assigned value, or ArityError.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from kwbuilder.domain.exceptions import ArityError
from kwbuilder.domain.model.enums import AssignMode

Block = Callable[..., Any]


def resolve_strict(
    key: str,
    args: tuple[Any, ...],
    kwargs: Mapping[str, Any],
    block: Block | None,
) -> Any:
    """Single-value rules: exactly one positional value or one block.

    The block is stored as is, never called.

    Raises:
        ArityError: On keyword arguments, both value and block, or wrong count
    """
    if kwargs:
        raise ArityError(key, "keyword arguments are not accepted in strict mode")
    if args and block is not None:
        raise ArityError(key, "cannot provide both immediate and block value")
    if block is not None:
        return block
    if len(args) != 1:
        raise ArityError(key, f"expected 1 or block, got {len(args)}")
    return args[0]


def resolve_rich(
    key: str,
    args: tuple[Any, ...],
    kwargs: Mapping[str, Any],
    block: Block | None,
) -> Any:
    """Positional/keyword/block rules.

    kwargs only        → dict copy of kwargs
    one value or block → that value
    several            → list of values, block appended last

    Raises:
        ArityError: On keyword arguments mixed with values, or nothing at all
    """
    if kwargs:
        if args or block is not None:
            raise ArityError(key, "cannot provide both keyword and positional arguments")
        return dict(kwargs)

    values = list(args)
    if block is not None:
        values.append(block)

    if not values:
        raise ArityError(key, "expected at least one argument or block")
    if len(values) == 1:
        return values[0]
    return values


_RESOLVERS = {
    AssignMode.STRICT: resolve_strict,
    AssignMode.RICH: resolve_rich,
}


def resolve_value(
    mode: AssignMode,
    key: str,
    args: tuple[Any, ...],
    kwargs: Mapping[str, Any],
    block: Block | None,
) -> Any:
    """Dispatch to the resolver of the given mode."""
    return _RESOLVERS[mode](key, args, kwargs, block)
