"""Tests for wall-clock sources."""

from datetime import datetime, timedelta, timezone

import pytest

from durata import FOREVER, Duration, FixedClock, SystemClock, TimeUnit


def test_system_clock_is_timezone_aware():
    assert SystemClock().now().tzinfo is not None


def test_fixed_clock_stays_put():
    instant = datetime(2025, 1, 1, tzinfo=timezone.utc)
    clock = FixedClock(instant)

    assert clock.now() == instant
    assert clock.now() == instant


def test_fixed_clock_advances_by_seconds_timedelta_and_duration():
    """Test that advance() accepts every supported amount type."""
    clock = FixedClock(datetime(2025, 1, 1, tzinfo=timezone.utc))

    clock.advance(30)
    clock.advance(timedelta(minutes=1))
    clock.advance(Duration.of(1, TimeUnit.HOURS))

    assert clock.now() == datetime(2025, 1, 1, 1, 1, 30, tzinfo=timezone.utc)


def test_fixed_clock_requires_aware_datetime():
    with pytest.raises(TypeError, match="timezone-aware"):
        FixedClock(datetime(2025, 1, 1))


def test_fixed_clock_rejects_forever():
    clock = FixedClock(datetime(2025, 1, 1, tzinfo=timezone.utc))

    with pytest.raises(ValueError, match="FOREVER"):
        clock.advance(FOREVER)
