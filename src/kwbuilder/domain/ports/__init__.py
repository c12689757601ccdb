"""Domain ports: interfaces implemented by infrastructure."""

from kwbuilder.domain.ports.signature_reader import SignatureReaderPort

__all__ = ["SignatureReaderPort"]
