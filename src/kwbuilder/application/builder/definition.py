"""Builder definition: reusable, immutable builder for one target."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from kwbuilder.application.builder.instance import (
    RESERVED_PREFIX,
    BuilderInstance,
    KeyOperation,
    WildcardBuilderInstance,
)
from kwbuilder.domain.exceptions import SchemaError
from kwbuilder.domain.model.configuration import ConstructorSelector
from kwbuilder.domain.model.enums import AssignMode
from kwbuilder.domain.model.parameter import ParameterDescriptor
from kwbuilder.domain.model.schema import Schema

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class BuilderDefinition:
    """Builder for one (target, constructor) pair.

    Immutable after creation. Safe to share between concurrent builds:
    every build() allocates its own BuilderInstance.

    Attributes:
        target: Type (or callable) being built
        constructor: Selector the constructor was resolved from
        schema: Legal keys and wildcard flag
        mode: Assignment shape rules
        parameters: Descriptors the schema was extracted from
        instance_class: Generated BuilderInstance subclass with one operation per key
    """

    target: object
    constructor: ConstructorSelector
    schema: Schema
    mode: AssignMode
    parameters: tuple[ParameterDescriptor, ...]
    _call: Callable[..., object] = field(repr=False)
    instance_class: type[BuilderInstance] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate keys and generate the instance class. FAIL-FIRST."""
        reserved = sorted(k for k in self.schema.keys if k.startswith(RESERVED_PREFIX))
        if reserved:
            raise SchemaError(self.target, f"reserved key(s): {', '.join(reserved)}")

        object.__setattr__(self, "instance_class", make_instance_class(self))

    @property
    def name(self) -> str:
        """Name of the generated builder class (e.g. "RecordBuilder")."""
        return self.instance_class.__name__

    @property
    def keys(self) -> frozenset[str]:
        """Declared keys (wildcard keys excluded)."""
        return self.schema.keys

    @property
    def required_keys(self) -> frozenset[str]:
        """Declared keys without a default value."""
        return frozenset(p.name for p in self.parameters if p.kind.is_named and p.is_required)  # type: ignore[misc]

    def is_wildcard(self) -> bool:
        """Check if undeclared keys are accepted."""
        return self.schema.wildcard

    def valid_key(self, name: str) -> bool:
        """Check if name may be assigned."""
        return self.schema.is_valid_key(name)

    def new(self, initial_attrs: Mapping[str, Any] | None = None) -> BuilderInstance:
        """Create a fresh builder instance.

        Args:
            initial_attrs: Pre-supplied values (copied)

        Returns:
            Open BuilderInstance; pass it to introspect.finalize() when done
        """
        return self.instance_class(initial_attrs)

    def build(self, block: Callable[[BuilderInstance], object] | None = None, /, **initial_attrs: Any) -> Any:
        """Assemble attrs and construct the target.

        Args:
            block: Called once with the builder instance; performs assignments.
                None = only initial attrs are used.
            **initial_attrs: Pre-supplied values

        Returns:
            Constructed target instance

        Raises:
            BuilderError: On unknown key, bad arity or duplicate assignment
            Exception: Anything raised by block or constructor, unmodified
        """
        if block is not None and not callable(block):
            raise TypeError(f"block must be callable, got {type(block).__name__}")

        builder = self.new(initial_attrs)
        if block is not None:
            block(builder)
        return builder._kw_finalize()  # noqa: SLF001

    def construct(self, attrs: Mapping[str, Any]) -> object:
        """Invoke the target constructor with attrs as keyword arguments."""
        logger.debug("constructing %s with keys %s", self.name, sorted(attrs))
        return self._call(**attrs)


def make_instance_class(definition: BuilderDefinition) -> type[BuilderInstance]:
    """Generate the BuilderInstance subclass for a definition.

    Wildcard is decided here, once: wildcard definitions derive
    from WildcardBuilderInstance.

    Args:
        definition: Definition the class belongs to

    Returns:
        Subclass with one KeyOperation per declared key
    """
    base = WildcardBuilderInstance if definition.schema.wildcard else BuilderInstance
    namespace: dict[str, Any] = {
        "__slots__": (),
        "__module__": base.__module__,
        "_kw_definition": definition,
    }
    for key in sorted(definition.schema.keys):
        namespace[key] = KeyOperation(key)

    return type(f"{_target_name(definition.target)}Builder", (base,), namespace)


def _target_name(target: object) -> str:
    return getattr(target, "__name__", type(target).__name__)
