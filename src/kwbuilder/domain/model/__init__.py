"""Domain model entities."""

from kwbuilder.domain.model.configuration import BuilderConfig, ConstructorSelector
from kwbuilder.domain.model.enums import AssignMode
from kwbuilder.domain.model.parameter import ParameterDescriptor, ParameterKind
from kwbuilder.domain.model.schema import Schema

__all__ = [
    # Enums
    "AssignMode",
    "ParameterKind",
    # Value objects
    "ParameterDescriptor",
    "Schema",
    # Configuration
    "BuilderConfig",
    "ConstructorSelector",
]
