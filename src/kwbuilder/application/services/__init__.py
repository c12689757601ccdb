"""Application services."""

from kwbuilder.application.services.extractor import extract_schema
from kwbuilder.application.services.factory import (
    create_builder,
    create_builder_from_config,
    default_reader,
)

__all__ = [
    "create_builder",
    "create_builder_from_config",
    "default_reader",
    "extract_schema",
]
