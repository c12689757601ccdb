"""Builder definition and instance."""

from kwbuilder.application.builder.definition import BuilderDefinition, make_instance_class
from kwbuilder.application.builder.instance import (
    Assignment,
    BuilderInstance,
    KeyOperation,
    WildcardBuilderInstance,
)
from kwbuilder.application.builder.introspect import (
    attrs_of,
    can_assign,
    finalize,
    is_assigned,
    is_finalized,
    pending_keys,
)
from kwbuilder.application.builder.resolution import resolve_rich, resolve_strict, resolve_value

__all__ = [
    "Assignment",
    "BuilderDefinition",
    "BuilderInstance",
    "KeyOperation",
    "WildcardBuilderInstance",
    "attrs_of",
    "can_assign",
    "finalize",
    "is_assigned",
    "is_finalized",
    "make_instance_class",
    "pending_keys",
    "resolve_rich",
    "resolve_strict",
    "resolve_value",
]
