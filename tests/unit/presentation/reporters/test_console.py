"""Tests for ConsoleReporter.

Tests:
- ConsoleConfig default values and validation
- report() header, key table and wildcard note
"""

import pytest

from kwbuilder.domain.model.enums import AssignMode
from kwbuilder.presentation.reporters.console import ConsoleConfig, ConsoleReporter
from tests.factories import Options, Record, make_builder


class TestConsoleConfig:
    def test_default_values(self) -> None:
        config = ConsoleConfig()
        assert config.width == 120
        assert config.title is None

    def test_custom_values(self) -> None:
        config = ConsoleConfig(width=80, title="Keys")
        assert config.width == 80
        assert config.title == "Keys"

    def test_width_too_small(self) -> None:
        with pytest.raises(ValueError, match="width must be >= 20"):
            ConsoleConfig(width=10)


class TestConsoleReporter:
    def test_report_contains_builder_name(self) -> None:
        output = ConsoleReporter().report(make_builder(Record))
        assert "RecordBuilder" in output

    def test_report_contains_mode(self) -> None:
        output = ConsoleReporter().report(make_builder(Record, mode=AssignMode.STRICT))
        assert "Mode:" in output
        assert "STRICT" in output

    def test_report_lists_keys(self) -> None:
        output = ConsoleReporter().report(make_builder(Options))
        assert "name" in output
        assert "retries" in output
        assert "required keyword" in output
        assert "optional keyword" in output

    def test_report_wildcard_note(self) -> None:
        output = ConsoleReporter().report(make_builder(Options))
        assert "Wildcard:" in output
        assert "**extra" in output

    def test_no_wildcard_note_for_plain_builder(self) -> None:
        output = ConsoleReporter().report(make_builder(Record))
        assert "Wildcard:" not in output

    def test_custom_title(self) -> None:
        output = ConsoleReporter(ConsoleConfig(title="Record keys")).report(make_builder(Record))
        assert "Record keys" in output

    def test_returns_string(self) -> None:
        assert isinstance(ConsoleReporter().report(make_builder(Record)), str)
