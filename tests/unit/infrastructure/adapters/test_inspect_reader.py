"""Tests for infrastructure/adapters/inspect_reader.py."""

import inspect

import pytest

from kwbuilder.domain.exceptions import ConstructorResolutionError, SchemaError
from kwbuilder.domain.model.parameter import ParameterDescriptor, ParameterKind
from kwbuilder.infrastructure.adapters.inspect_reader import InspectSignatureReader, to_descriptor
from tests.factories import (
    Options,
    PlainPoint,
    Point,
    PositionalOnly,
    Record,
    VarArgs,
    WildcardRecord,
)


def _params(fn: object) -> list[inspect.Parameter]:
    return list(inspect.signature(fn).parameters.values())  # type: ignore[arg-type]


class TestToDescriptor:
    """Mapping inspect.Parameter.kind → ParameterKind."""

    def test_positional_only_required(self) -> None:
        def f(a, /): ...

        assert to_descriptor(_params(f)[0]).kind is ParameterKind.REQUIRED_POSITIONAL

    def test_positional_only_optional(self) -> None:
        def f(a=1, /): ...

        assert to_descriptor(_params(f)[0]).kind is ParameterKind.OPTIONAL_POSITIONAL

    def test_var_positional(self) -> None:
        def f(*args): ...

        assert to_descriptor(_params(f)[0]) == ParameterDescriptor(ParameterKind.VARIADIC_POSITIONAL, "args")

    def test_positional_or_keyword_is_keyword_style(self) -> None:
        def f(a, b=2): ...

        a, b = (to_descriptor(p) for p in _params(f))
        assert a == ParameterDescriptor(ParameterKind.REQUIRED_KEYWORD, "a")
        assert b == ParameterDescriptor(ParameterKind.OPTIONAL_KEYWORD, "b")

    def test_keyword_only(self) -> None:
        def f(*, a, b=None): ...

        a, b = (to_descriptor(p) for p in _params(f))
        assert a.kind is ParameterKind.REQUIRED_KEYWORD
        assert b.kind is ParameterKind.OPTIONAL_KEYWORD

    def test_var_keyword(self) -> None:
        def f(**rest): ...

        assert to_descriptor(_params(f)[0]) == ParameterDescriptor(ParameterKind.VARIADIC_KEYWORD, "rest")


class TestResolve:
    def setup_method(self) -> None:
        self.reader = InspectSignatureReader()

    def test_default_is_target(self) -> None:
        assert self.reader.resolve(Record, None) is Record

    def test_callable_selector_used_as_is(self) -> None:
        def make(**kw): ...

        assert self.reader.resolve(Record, make) is make

    def test_classmethod_selector(self) -> None:
        resolved = self.reader.resolve(Point, "from_parts")
        assert resolved == Point.from_parts

    def test_missing_selector(self) -> None:
        with pytest.raises(ConstructorResolutionError) as exc_info:
            self.reader.resolve(Point, "nope")
        assert exc_info.value.selector == "nope"

    def test_instance_method_selector_rejected(self) -> None:
        with pytest.raises(ConstructorResolutionError):
            self.reader.resolve(Point, "move")

    def test_non_callable_attribute_rejected(self) -> None:
        class WithConstant:
            LIMIT = 3

        with pytest.raises(ConstructorResolutionError):
            self.reader.resolve(WithConstant, "LIMIT")

    def test_non_callable_target(self) -> None:
        with pytest.raises(SchemaError, match="target is not callable"):
            self.reader.resolve(42, None)


class TestRead:
    def setup_method(self) -> None:
        self.reader = InspectSignatureReader()

    def test_keyword_only_dataclass(self) -> None:
        params = self.reader.read(Record, None)
        assert [p.name for p in params] == ["a", "b", "c"]
        assert all(p.kind is ParameterKind.REQUIRED_KEYWORD for p in params)

    def test_self_excluded(self) -> None:
        params = self.reader.read(Options, None)
        assert [p.name for p in params] == ["name", "retries", "extra"]

    def test_plain_dataclass(self) -> None:
        x, y = self.reader.read(PlainPoint, None)
        assert x.kind is ParameterKind.REQUIRED_KEYWORD
        assert y.kind is ParameterKind.OPTIONAL_KEYWORD

    def test_wildcard(self) -> None:
        (rest,) = self.reader.read(WildcardRecord, None)
        assert rest.kind is ParameterKind.VARIADIC_KEYWORD

    def test_factory_excludes_cls(self) -> None:
        params = self.reader.read(Point, "from_parts")
        assert [p.name for p in params] == ["x", "y"]

    def test_positional_kinds_reported(self) -> None:
        (a,) = self.reader.read(PositionalOnly, None)
        (args,) = self.reader.read(VarArgs, None)
        assert a.kind is ParameterKind.REQUIRED_POSITIONAL
        assert args.kind is ParameterKind.VARIADIC_POSITIONAL

    def test_unreadable_signature(self) -> None:
        class Broken:
            __signature__ = 42

        with pytest.raises(SchemaError, match="signature unavailable"):
            self.reader.read(Broken, None)
