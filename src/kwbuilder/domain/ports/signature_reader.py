"""Signature reader port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kwbuilder.domain.model.configuration import ConstructorSelector
    from kwbuilder.domain.model.parameter import ParameterDescriptor


class SignatureReaderPort(ABC):
    """Port for reading constructor signatures.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def resolve(self, target: object, selector: ConstructorSelector) -> Callable[..., object]:
        """Resolve the callable invoked at finalize.

        Args:
            target: Target type (or callable)
            selector: Constructor selector from BuilderConfig

        Returns:
            Callable accepting the assembled keyword arguments

        Raises:
            ConstructorResolutionError: If selector names no callable on target
        """
        ...

    @abstractmethod
    def read(self, target: object, selector: ConstructorSelector) -> tuple[ParameterDescriptor, ...]:
        """Read ordered parameter descriptors of the resolved constructor.

        Bound receivers (self, cls) are not included.

        Args:
            target: Target type (or callable)
            selector: Constructor selector from BuilderConfig

        Returns:
            Parameter descriptors in declaration order

        Raises:
            SchemaError: If signature cannot be read
        """
        ...
