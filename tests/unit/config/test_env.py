"""Tests for EnvReader class."""

from __future__ import annotations

import logging
from pathlib import Path

from rqd.config.env import EnvReader


class TestEnvReaderGetStr:
    """Tests for EnvReader.get_str method."""

    def test_returns_value_when_set(self) -> None:
        """Should return the value when environment variable is set."""
        reader = EnvReader(env={"MY_VAR": "hello"})
        assert reader.get_str("MY_VAR") == "hello"

    def test_returns_default_when_not_set(self) -> None:
        """Should return default when environment variable is not set."""
        reader = EnvReader(env={})
        assert reader.get_str("MY_VAR", "default") == "default"

    def test_empty_value_is_unset(self) -> None:
        """Should treat an empty value as unset."""
        reader = EnvReader(env={"MY_VAR": ""})
        assert reader.get_str("MY_VAR", "default") == "default"


class TestEnvReaderGetInt:
    """Tests for EnvReader.get_int method."""

    def test_returns_value_when_set(self) -> None:
        """Should parse the value as an integer."""
        reader = EnvReader(env={"MY_VAR": "42"})
        assert reader.get_int("MY_VAR") == 42

    def test_invalid_value_returns_default_and_warns(self, caplog) -> None:
        """Should log a warning and return default for non-integers."""
        reader = EnvReader(env={"MY_VAR": "abc"})
        with caplog.at_level(logging.WARNING):
            assert reader.get_int("MY_VAR", 7) == 7
        assert "Invalid integer value for MY_VAR" in caplog.text


class TestEnvReaderGetBool:
    """Tests for EnvReader.get_bool method."""

    def test_truthy_values(self) -> None:
        """Should accept common truthy spellings in any case."""
        for value in ("true", "1", "YES", "On"):
            assert EnvReader(env={"V": value}).get_bool("V") is True

    def test_other_values_are_false(self) -> None:
        """Should treat any other value as false."""
        assert EnvReader(env={"V": "nope"}).get_bool("V") is False

    def test_unset_returns_default(self) -> None:
        """Should return default when the variable is unset."""
        assert EnvReader(env={}).get_bool("V", True) is True


class TestEnvReaderGetPath:
    """Tests for EnvReader.get_path method."""

    def test_existing_path(self, tmp_path: Path) -> None:
        """Should return an existing path."""
        reader = EnvReader(env={"P": str(tmp_path)})
        assert reader.get_path("P") == tmp_path

    def test_missing_path_ignored_when_must_exist(self, tmp_path: Path) -> None:
        """Should return None for a missing path by default."""
        reader = EnvReader(env={"P": str(tmp_path / "missing")})
        assert reader.get_path("P") is None

    def test_missing_path_allowed(self, tmp_path: Path) -> None:
        """Should return a missing path when must_exist is False."""
        reader = EnvReader(env={"P": str(tmp_path / "missing")})
        assert reader.get_path("P", must_exist=False) == tmp_path / "missing"


class TestEnvReaderGetIntList:
    """Tests for EnvReader.get_int_list method."""

    def test_parses_list(self) -> None:
        """Should parse comma-separated integers."""
        reader = EnvReader(env={"L": "100, 90,80"})
        assert reader.get_int_list("L") == [100, 90, 80]

    def test_ignores_empty_parts(self) -> None:
        """Should skip empty entries."""
        reader = EnvReader(env={"L": "100,,90,"})
        assert reader.get_int_list("L") == [100, 90]

    def test_invalid_element_returns_default(self) -> None:
        """Should return default if any entry is not an integer."""
        reader = EnvReader(env={"L": "100,high"})
        assert reader.get_int_list("L", default=[1]) == [1]
