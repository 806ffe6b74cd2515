"""Tests for BrokenDownDateTime construction and rendering."""

import dataclasses
import time
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from gmepoch import BrokenDownDateTime, docs


def test_time_fields_default_to_midnight():
    """Test that hour, minute and second default to 0."""
    fields = BrokenDownDateTime(year=2025, month=0, day_of_month=15)
    assert (fields.hour, fields.minute, fields.second) == (0, 0, 0)


def test_fields_are_keyword_only():
    """Test that positional construction is refused."""
    with pytest.raises(TypeError):
        BrokenDownDateTime(2025, 0, 15)  # pyright: ignore[reportCallIssue]


def test_fields_are_frozen():
    """Test that fields cannot be reassigned."""
    fields = BrokenDownDateTime(year=2025, month=0, day_of_month=15)
    with pytest.raises(dataclasses.FrozenInstanceError):
        fields.year = 2026  # pyright: ignore[reportAttributeAccessIssue]


def test_out_of_range_fields_are_stored_as_given():
    """Test that construction never validates or normalizes."""
    fields = BrokenDownDateTime(year=2025, month=42, day_of_month=-3, hour=99)
    assert (fields.month, fields.day_of_month, fields.hour) == (42, -3, 99)


def test_str_uses_one_based_month():
    """Test the ISO-8601 style rendering."""
    fields = BrokenDownDateTime(
        year=1969, month=6, day_of_month=20, hour=20, minute=17, second=40
    )
    assert str(fields) == "1969-07-20T20:17:40Z"


def test_from_struct_time_shifts_month():
    """Test that gmtime's 1-based month becomes 0-based."""
    fields = BrokenDownDateTime.from_struct_time(time.gmtime(951782400))
    assert fields == BrokenDownDateTime(year=2000, month=1, day_of_month=29)


def test_from_datetime_utc():
    """Test that UTC datetimes keep their fields."""
    dt = datetime(2025, 12, 31, 23, 59, 58, tzinfo=timezone.utc)
    assert BrokenDownDateTime.from_datetime(dt) == BrokenDownDateTime(
        year=2025, month=11, day_of_month=31, hour=23, minute=59, second=58
    )


def test_from_datetime_converts_to_utc():
    """Test that other zones are normalized, crossing the date line if needed."""
    # Dec 31, 2024 20:00 Pacific is Jan 1, 2025 04:00 UTC
    dt = datetime(2024, 12, 31, 20, 0, tzinfo=ZoneInfo("US/Pacific"))
    assert BrokenDownDateTime.from_datetime(dt) == BrokenDownDateTime(
        year=2025, month=0, day_of_month=1, hour=4
    )


def test_from_datetime_drops_microseconds():
    """Test that sub-second precision is discarded."""
    dt = datetime(2025, 1, 1, 0, 0, 0, 999999, tzinfo=timezone.utc)
    assert BrokenDownDateTime.from_datetime(dt).second == 0


def test_from_datetime_rejects_naive():
    """Test that naive datetimes are refused."""
    with pytest.raises(TypeError, match="timezone-aware"):
        BrokenDownDateTime.from_datetime(datetime(2025, 1, 1))


def test_from_datetime_rejects_non_datetime():
    """Test that non-datetime values are refused."""
    with pytest.raises(TypeError, match="Expected a datetime"):
        BrokenDownDateTime.from_datetime("2025-01-01")  # pyright: ignore[reportArgumentType]


def test_docs_are_bundled():
    """Test that the Markdown docs ship with the package."""
    assert set(docs) == {"readme", "api"}
    assert "epoch_seconds" in docs["api"]


def test_from_wall_clock_ignores_timezone():
    """Test that wall-clock fields are taken as written, without conversion."""
    dt = datetime(2024, 12, 31, 20, 0, tzinfo=ZoneInfo("US/Pacific"))
    assert BrokenDownDateTime.from_wall_clock(dt) == BrokenDownDateTime(
        year=2024, month=11, day_of_month=31, hour=20
    )


def test_from_datetime_outside_utc_range_overflows():
    """Test that a UTC date before year 1 cannot be normalized."""
    dt = datetime(1, 1, 1, 2, tzinfo=timezone(timedelta(hours=5)))
    with pytest.raises(OverflowError):
        BrokenDownDateTime.from_datetime(dt)
