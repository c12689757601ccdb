"""Tests for domain/model/configuration.py."""

import pytest

from kwbuilder.domain.exceptions import InvalidConfigError
from kwbuilder.domain.model.configuration import BuilderConfig
from kwbuilder.domain.model.enums import AssignMode


class TestBuilderConfigDefaults:
    def test_default_values(self) -> None:
        config = BuilderConfig()
        assert config.mode is AssignMode.RICH
        assert config.constructor is None

    def test_string_selector(self) -> None:
        config = BuilderConfig(constructor="from_parts")
        assert config.constructor == "from_parts"

    def test_callable_selector(self) -> None:
        config = BuilderConfig(constructor=dict)
        assert config.constructor is dict

    def test_strict_mode(self) -> None:
        assert BuilderConfig(mode=AssignMode.STRICT).mode is AssignMode.STRICT


class TestBuilderConfigFailFirst:
    def test_mode_must_be_enum(self) -> None:
        with pytest.raises(InvalidConfigError, match="mode"):
            BuilderConfig(mode="rich")  # type: ignore[arg-type]

    def test_selector_wrong_type(self) -> None:
        with pytest.raises(InvalidConfigError, match="expected None, str or callable, got int"):
            BuilderConfig(constructor=5)  # type: ignore[arg-type]

    def test_selector_not_identifier(self) -> None:
        with pytest.raises(InvalidConfigError, match="is not an identifier"):
            BuilderConfig(constructor="from parts")
