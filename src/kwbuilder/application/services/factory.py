"""Builder factory: target → BuilderDefinition."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kwbuilder.application.builder.definition import BuilderDefinition
from kwbuilder.application.services.extractor import extract_schema
from kwbuilder.domain.model.configuration import BuilderConfig, ConstructorSelector
from kwbuilder.domain.model.enums import AssignMode
from kwbuilder.infrastructure.adapters.cached_reader import CachedSignatureReader
from kwbuilder.infrastructure.adapters.inspect_reader import InspectSignatureReader

if TYPE_CHECKING:
    from kwbuilder.domain.ports.signature_reader import SignatureReaderPort

logger = logging.getLogger(__name__)

# Process-wide reader; signatures of a target do not change at runtime.
# Holds strong references to every cached target: call default_reader().clear()
# to release targets created dynamically.
_default_reader = CachedSignatureReader(InspectSignatureReader())


def default_reader() -> CachedSignatureReader:
    """Shared cached reader used when create_builder() gets none."""
    return _default_reader


def create_builder(
    target: object,
    constructor: ConstructorSelector = None,
    mode: AssignMode = AssignMode.RICH,
    *,
    reader: SignatureReaderPort | None = None,
) -> BuilderDefinition:
    """Create a reusable builder for target.

    Args:
        target: Class (or callable) to build
        constructor: None = call target, str = factory attribute on target,
            callable = called directly
        mode: Assignment shape rules (RICH or STRICT)
        reader: Signature reader. None = shared cached inspect reader.

    Returns:
        Immutable BuilderDefinition

    Raises:
        InvalidConfigError: If mode or constructor is malformed
        SchemaError: If constructor has positional parameters or no signature
    """
    return create_builder_from_config(target, BuilderConfig(mode=mode, constructor=constructor), reader=reader)


def create_builder_from_config(
    target: object,
    config: BuilderConfig,
    *,
    reader: SignatureReaderPort | None = None,
) -> BuilderDefinition:
    """Create a builder from a prepared BuilderConfig.

    Same contract as create_builder().
    """
    if target is None:
        raise TypeError("target must not be None")

    reader = reader if reader is not None else _default_reader

    call = reader.resolve(target, config.constructor)
    parameters = reader.read(target, config.constructor)
    schema = extract_schema(parameters, target)

    definition = BuilderDefinition(
        target=target,
        constructor=config.constructor,
        schema=schema,
        mode=config.mode,
        parameters=parameters,
        _call=call,
    )
    logger.debug(
        "created %s: keys=%s wildcard=%s mode=%s",
        definition.name,
        sorted(schema.keys),
        schema.wildcard,
        config.mode.name,
    )
    return definition
