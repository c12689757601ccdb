"""Schema extraction: parameter descriptors → Schema."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from kwbuilder.domain.exceptions import SchemaError
from kwbuilder.domain.model.parameter import ParameterDescriptor
from kwbuilder.domain.model.schema import Schema

logger = logging.getLogger(__name__)


def extract_schema(parameters: Iterable[ParameterDescriptor], target: object = None) -> Schema:
    """Compute legal builder keys from a constructor's parameters.

    Single pass. Positional parameters of any kind fail immediately:
    a builder can only fill parameters bound by name.

    Args:
        parameters: Descriptors of the constructor signature
        target: Target the descriptors belong to (for error messages)

    Returns:
        Schema with keyword names and wildcard flag

    Raises:
        SchemaError: If any positional parameter is present
    """
    keys: set[str] = set()
    wildcard = False

    for param in parameters:
        if param.kind.is_positional:
            raise SchemaError(
                target,
                f"contains {param.kind.value.lower().replace('_', ' ')} parameter {param.name!r}",
            )
        if param.kind.is_named:
            keys.add(param.name)  # type: ignore[arg-type]
        else:
            wildcard = True

    schema = Schema(keys=frozenset(keys), wildcard=wildcard)
    logger.debug("extracted %d key(s), wildcard=%s", len(schema.keys), schema.wildcard)
    return schema
