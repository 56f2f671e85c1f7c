"""Unit tests for the default-value whitelist."""

import logging
import re
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from fractions import Fraction
from pathlib import Path

import httpx
import pytest

from resultkit.domain.exceptions import UnsupportedDefaultTypeError
from resultkit.shared.defaults import default_for, supported_default_types
from resultkit.shared.result import Err


class TestDefaultFor:
    """Tests for default_for."""

    @pytest.mark.parametrize(
        ("target", "expected"),
        [
            (int, 0),
            (float, 0.0),
            (complex, 0j),
            (Decimal, Decimal(0)),
            (Fraction, Fraction(0)),
            (str, ""),
            (bytes, b""),
            (list, []),
            (tuple, ()),
            (dict, {}),
            (set, set()),
            (frozenset, frozenset()),
            (timedelta, timedelta(0)),
        ],
    )
    def test_whitelisted_defaults(self, target: type, expected: object) -> None:
        """Test each whitelisted type yields its canonical zero value."""
        value = default_for(target)
        assert value == expected
        assert type(value) is target

    def test_bool_default_is_false(self) -> None:
        """Test bool is resolved on its own, not through int."""
        assert default_for(bool) is False

    def test_datetime_default_is_epoch(self) -> None:
        """Test datetime defaults to the UTC epoch."""
        assert default_for(datetime) == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_date_default_is_epoch(self) -> None:
        """Test date defaults to the epoch day."""
        value = default_for(date)
        assert value == date(1970, 1, 1)
        assert type(value) is date

    def test_pattern_default_matches_everything(self) -> None:
        """Test re.Pattern defaults to the empty pattern."""
        pattern = default_for(re.Pattern)
        assert pattern.pattern == ""
        assert pattern.match("anything") is not None

    def test_bytes_pattern_default(self) -> None:
        """Test re.Pattern[bytes] defaults to an empty bytes pattern."""
        assert default_for(re.Pattern[bytes]).pattern == b""

    def test_url_default_is_empty(self) -> None:
        """Test httpx.URL defaults to the empty URL."""
        assert default_for(httpx.URL) == httpx.URL("")

    def test_none_type_default(self) -> None:
        """Test NoneType defaults to None."""
        assert default_for(type(None)) is None

    def test_parameterised_generics(self) -> None:
        """Test generic aliases resolve through their origin."""
        assert default_for(list[int]) == []
        assert default_for(dict[str, int]) == {}

    def test_mutable_defaults_are_fresh(self) -> None:
        """Test every call builds a new mutable default."""
        first = default_for(list)
        first.append(1)
        assert default_for(list) == []

    @pytest.mark.parametrize("target", [Path, object, int | None, type])
    def test_unsupported_types(self, target: object) -> None:
        """Test types outside the whitelist are rejected, not guessed."""
        with pytest.raises(UnsupportedDefaultTypeError) as exc_info:
            default_for(target)  # type: ignore[arg-type]
        assert exc_info.value.target is target

    def test_subclass_not_accepted(self) -> None:
        """Test subclasses of whitelisted types are not defaulted."""

        class MyInt(int):
            pass

        with pytest.raises(UnsupportedDefaultTypeError, match="MyInt"):
            default_for(MyInt)

    def test_unsupported_error_is_type_error(self) -> None:
        """Test the rejection can be caught as a TypeError."""
        with pytest.raises(TypeError):
            default_for(Path)

    def test_logs_resolution(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test successful resolutions are logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="resultkit.shared.defaults"):
            default_for(int)
        assert "Resolved default for int" in caplog.text


class TestSupportedDefaultTypes:
    """Tests for supported_default_types."""

    def test_contains_core_types(self) -> None:
        """Test the whitelist exposes the expected types."""
        supported = supported_default_types()
        for target in (int, float, str, bool, list, dict, set, timedelta, datetime, re.Pattern):
            assert target in supported

    def test_is_immutable_snapshot(self) -> None:
        """Test the returned whitelist cannot be used to extend the registry."""
        assert isinstance(supported_default_types(), frozenset)


class TestUnwrapOrDefault:
    """Tests for Err.unwrap_or_default through the whitelist."""

    def test_err_int(self) -> None:
        """Test an integer failure defaults to 0."""
        assert Err("bad").unwrap_or_default(int) == 0

    def test_err_user_type(self) -> None:
        """Test a user-defined type is rejected."""

        class Header:
            pass

        with pytest.raises(UnsupportedDefaultTypeError, match="Header"):
            Err("bad").unwrap_or_default(Header)
