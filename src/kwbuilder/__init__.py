"""kwbuilder - single-assignment builders for keyword-argument constructors."""

__version__ = "0.1.0"

from kwbuilder.application.builder.definition import BuilderDefinition
from kwbuilder.application.builder.instance import Assignment, BuilderInstance
from kwbuilder.application.builder.introspect import (
    attrs_of,
    can_assign,
    finalize,
    is_assigned,
    is_finalized,
    pending_keys,
)
from kwbuilder.application.services.extractor import extract_schema
from kwbuilder.application.services.factory import create_builder, create_builder_from_config
from kwbuilder.domain.exceptions import (
    ArityError,
    BuilderError,
    ConstructorResolutionError,
    DuplicateAssignmentError,
    FinalizedBuilderError,
    InvalidConfigError,
    InvalidParameterError,
    KwBuilderError,
    SchemaError,
    UnknownKeyError,
)
from kwbuilder.domain.model import (
    AssignMode,
    BuilderConfig,
    ParameterDescriptor,
    ParameterKind,
    Schema,
)
from kwbuilder.presentation.reporters import ConsoleConfig, ConsoleReporter, PlainTextReporter

__all__ = [
    "__version__",
    # Entry points
    "create_builder",
    "create_builder_from_config",
    "extract_schema",
    # Builders
    "Assignment",
    "BuilderDefinition",
    "BuilderInstance",
    # Introspection
    "attrs_of",
    "can_assign",
    "finalize",
    "is_assigned",
    "is_finalized",
    "pending_keys",
    # Model
    "AssignMode",
    "BuilderConfig",
    "ParameterDescriptor",
    "ParameterKind",
    "Schema",
    # Errors
    "KwBuilderError",
    "SchemaError",
    "ConstructorResolutionError",
    "InvalidConfigError",
    "InvalidParameterError",
    "BuilderError",
    "UnknownKeyError",
    "ArityError",
    "DuplicateAssignmentError",
    "FinalizedBuilderError",
    # Reporting
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextReporter",
]
