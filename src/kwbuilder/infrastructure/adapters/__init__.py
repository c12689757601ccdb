"""Infrastructure adapters implementing domain ports."""

from kwbuilder.infrastructure.adapters.cached_reader import CachedSignatureReader
from kwbuilder.infrastructure.adapters.inspect_reader import InspectSignatureReader, to_descriptor

__all__ = [
    "CachedSignatureReader",
    "InspectSignatureReader",
    "to_descriptor",
]
