"""End-to-end builder scenarios through the public package API."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any

import pytest

import kwbuilder
from kwbuilder import (
    ArityError,
    AssignMode,
    BuilderInstance,
    DuplicateAssignmentError,
    SchemaError,
    UnknownKeyError,
    attrs_of,
    create_builder,
)


@dataclass(frozen=True, kw_only=True)
class Record:
    a: Any
    b: Any
    c: Any


class Catchall:
    def __init__(self, *, a: Any = None, **rest: Any) -> None:
        self.a = a
        self.rest = rest


class TestRecordScenarios:
    def test_initial_plus_block(self) -> None:
        def fill(b: BuilderInstance) -> None:
            b.a(1)
            b.c(3)

        assert create_builder(Record).build(fill, b=2) == Record(a=1, b=2, c=3)

    def test_repeated_key_aborts(self) -> None:
        def fill(b: BuilderInstance) -> None:
            b.a(1)
            b.b(2)
            b.a(3)

        with pytest.raises(DuplicateAssignmentError):
            create_builder(Record).build(fill)


class TestRichMode:
    def _assign(self, call: Any) -> Any:
        definition = create_builder(Record)
        builder = definition.new({"a": 0, "b": 0})
        call(builder)
        return attrs_of(builder)["c"]

    def test_many_values_list(self) -> None:
        assert self._assign(lambda b: b.c(1, 2, 3)) == [1, 2, 3]

    def test_single_value_scalar(self) -> None:
        assert self._assign(lambda b: b.c(1)) == 1

    def test_keywords_mapping(self) -> None:
        assert self._assign(lambda b: b.c(x=1, y=2)) == {"x": 1, "y": 2}

    def test_nothing_fails(self) -> None:
        with pytest.raises(ArityError):
            self._assign(lambda b: b.c())

    def test_mixed_fails(self) -> None:
        with pytest.raises(ArityError, match="cannot provide both keyword and positional"):
            self._assign(lambda b: b.c(1, x=2))


class TestStrictMode:
    def _assign(self, call: Any) -> Any:
        builder = create_builder(Record, mode=AssignMode.STRICT).new({"a": 0, "b": 0})
        call(builder)
        return attrs_of(builder)["c"]

    def test_single_value(self) -> None:
        assert self._assign(lambda b: b.c(1)) == 1

    def test_block_value(self) -> None:
        def five() -> int:
            return 5

        assert self._assign(lambda b: b.c.block()(five)) is five

    def test_nothing_fails(self) -> None:
        with pytest.raises(ArityError):
            self._assign(lambda b: b.c())

    def test_two_values_fail(self) -> None:
        with pytest.raises(ArityError):
            self._assign(lambda b: b.c(1, 2))


class TestWildcard:
    def test_undeclared_key_passed_through(self) -> None:
        result = create_builder(Catchall).build(lambda b: b.q(5), a=1)
        assert result.a == 1
        assert result.rest == {"q": 5}

    def test_undeclared_key_rejected_without_wildcard(self) -> None:
        with pytest.raises(UnknownKeyError):
            create_builder(Record).build(lambda b: b.q(5))


class TestSchemaProperties:
    @pytest.mark.parametrize(
        ("signature_source", "keys", "wildcard"),
        [
            ("def f(*, a, b=1): ...", {"a", "b"}, False),
            ("def f(a, b=1): ...", {"a", "b"}, False),
            ("def f(*, a, **kw): ...", {"a"}, True),
            ("def f(): ...", set(), False),
        ],
    )
    def test_valid_key_matches_declared(self, signature_source: str, keys: set[str], wildcard: bool) -> None:
        namespace: dict[str, Any] = {}
        exec(signature_source, namespace)  # noqa: S102
        definition = create_builder(namespace["f"])

        assert definition.keys == frozenset(keys)
        assert definition.is_wildcard() is wildcard
        for key in keys:
            assert definition.valid_key(key) is True
        assert definition.valid_key("undeclared") is wildcard

    @pytest.mark.parametrize(
        "signature_source",
        ["def f(a, /): ...", "def f(a=1, /): ...", "def f(*args): ...", "def f(*args, b): ..."],
    )
    def test_positional_parameters_fail(self, signature_source: str) -> None:
        namespace: dict[str, Any] = {}
        exec(signature_source, namespace)  # noqa: S102

        with pytest.raises(SchemaError):
            create_builder(namespace["f"])


class TestConcurrentBuilds:
    def test_shared_definition_isolated_instances(self) -> None:
        definition = create_builder(Record)
        results: dict[int, Record] = {}
        barrier = threading.Barrier(8)

        def worker(n: int) -> None:
            def fill(b: BuilderInstance) -> None:
                barrier.wait()
                b.a(n)
                b.b(n * 2)

            results[n] = definition.build(fill, c=n * 3)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {n: Record(a=n, b=n * 2, c=n * 3) for n in range(8)}


class TestPackage:
    def test_version(self) -> None:
        assert kwbuilder.__version__ == "0.1.0"

    def test_all_exports_resolve(self) -> None:
        for name in kwbuilder.__all__:
            assert hasattr(kwbuilder, name), name
