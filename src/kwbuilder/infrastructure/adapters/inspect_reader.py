"""Signature reader backed by the inspect module."""

from __future__ import annotations

import inspect
import logging
import types
from collections.abc import Callable

from kwbuilder.domain.exceptions import ConstructorResolutionError, SchemaError
from kwbuilder.domain.model.configuration import ConstructorSelector
from kwbuilder.domain.model.parameter import ParameterDescriptor, ParameterKind
from kwbuilder.domain.ports.signature_reader import SignatureReaderPort

logger = logging.getLogger(__name__)

_EMPTY = inspect.Parameter.empty


def to_descriptor(param: inspect.Parameter) -> ParameterDescriptor:
    """Map inspect.Parameter onto a ParameterDescriptor.

    POSITIONAL_OR_KEYWORD parameters are bindable by name and count as keyword-style.

    Args:
        param: Parameter from inspect.signature()

    Returns:
        ParameterDescriptor with mapped kind
    """
    has_default = param.default is not _EMPTY

    match param.kind:
        case inspect.Parameter.POSITIONAL_ONLY:
            kind = ParameterKind.OPTIONAL_POSITIONAL if has_default else ParameterKind.REQUIRED_POSITIONAL
        case inspect.Parameter.VAR_POSITIONAL:
            kind = ParameterKind.VARIADIC_POSITIONAL
        case inspect.Parameter.POSITIONAL_OR_KEYWORD | inspect.Parameter.KEYWORD_ONLY:
            kind = ParameterKind.OPTIONAL_KEYWORD if has_default else ParameterKind.REQUIRED_KEYWORD
        case inspect.Parameter.VAR_KEYWORD:
            kind = ParameterKind.VARIADIC_KEYWORD
        case _:
            raise TypeError(f"unexpected parameter kind: {param.kind!r}")

    return ParameterDescriptor(kind=kind, name=param.name)


class InspectSignatureReader(SignatureReaderPort):
    """Reads constructor signatures via inspect.signature().

    Stateless - no state between calls.
    """

    def resolve(self, target: object, selector: ConstructorSelector) -> Callable[..., object]:
        """Resolve the callable invoked at finalize.

        Args:
            target: Target type (or callable)
            selector: None, factory attribute name, or callable

        Returns:
            Callable accepting keyword arguments

        Raises:
            ConstructorResolutionError: If selector names no usable callable
            SchemaError: If target itself is not callable
        """
        if selector is None:
            if not callable(target):
                raise SchemaError(target, "target is not callable")
            return target

        if callable(selector):
            return selector

        # Instance methods looked up on a class would need an instance as receiver
        if inspect.isclass(target):
            static = inspect.getattr_static(target, selector, None)
            if isinstance(static, types.FunctionType):
                raise ConstructorResolutionError(target, selector)

        constructor = getattr(target, selector, None)
        if constructor is None or not callable(constructor):
            raise ConstructorResolutionError(target, selector)
        return constructor

    def read(self, target: object, selector: ConstructorSelector) -> tuple[ParameterDescriptor, ...]:
        """Read parameter descriptors of the resolved constructor.

        Args:
            target: Target type (or callable)
            selector: None, factory attribute name, or callable

        Returns:
            Descriptors in declaration order (self/cls excluded)

        Raises:
            ConstructorResolutionError: If selector names no usable callable
            SchemaError: If signature is unavailable
        """
        constructor = self.resolve(target, selector)

        try:
            signature = inspect.signature(constructor)
        except (TypeError, ValueError) as exc:
            raise SchemaError(target, f"signature unavailable: {exc}") from exc

        descriptors = tuple(to_descriptor(p) for p in signature.parameters.values())
        logger.debug("read %d parameter(s) from %r", len(descriptors), constructor)
        return descriptors
