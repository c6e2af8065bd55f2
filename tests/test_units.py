"""Tests for the time unit catalog."""

import pytest

from durata import MONTH, YEAR, TimeUnit


def test_sorted_is_largest_first():
    """Test that sorted() orders units by descending size."""
    units = TimeUnit.sorted()

    assert units[0] is TimeUnit.YEARS
    assert units[-1] is TimeUnit.NANOSECONDS
    factors = [unit.seconds_factor for unit in units]
    assert factors == sorted(factors, reverse=True)


def test_declaration_order_is_smallest_first():
    assert list(TimeUnit)[0] is TimeUnit.NANOSECONDS
    assert list(TimeUnit)[-1] is TimeUnit.YEARS


def test_fixed_calendar_conventions():
    """Test that months are 30 days and years are 365 days."""
    assert TimeUnit.MONTHS.seconds_factor == MONTH == 30 * 86400
    assert TimeUnit.YEARS.seconds_factor == YEAR == 365 * 86400
    assert TimeUnit.WEEKS.seconds_factor == 7 * 86400


def test_sub_second_factors():
    assert TimeUnit.MILLISECONDS.seconds_factor == 0.001
    assert TimeUnit.MICROSECONDS.nanos == 1000
    assert TimeUnit.NANOSECONDS.nanos == 1


def test_spellings():
    assert TimeUnit.DAYS.to_singular() == "day"
    assert TimeUnit.DAYS.to_plural() == "days"
    assert TimeUnit.DAYS.suffix == "d"
    assert TimeUnit.MONTHS.spellings() == ("months", "month", "mo")


def test_spellings_are_unique():
    """Test that no spelling is shared between two units."""
    spellings = [s for unit in TimeUnit for s in unit.spellings()]

    assert len(spellings) == len(set(spellings)) == 30


def test_pattern_finds_next_unit_token():
    match = TimeUnit.pattern().search("12 Hours")

    assert match is not None
    assert match.group(0) == "Hours"


@pytest.mark.parametrize(
    ("text", "index", "unit", "length"),
    [
        ("1m", 1, TimeUnit.MINUTES, 1),
        ("1mo", 1, TimeUnit.MONTHS, 2),
        ("1ms", 1, TimeUnit.MILLISECONDS, 2),
        ("5minutes", 1, TimeUnit.MINUTES, 7),
        ("5minute", 1, TimeUnit.MINUTES, 6),
        ("6months", 1, TimeUnit.MONTHS, 6),
        ("8milliseconds", 1, TimeUnit.MILLISECONDS, 12),
        ("2microseconds", 1, TimeUnit.MICROSECONDS, 12),
        ("1m30s", 1, TimeUnit.MINUTES, 1),
        ("3US", 1, TimeUnit.MICROSECONDS, 2),
    ],
)
def test_spelled_at_prefers_most_specific_spelling(text, index, unit, length):
    """Test that overlapping spellings resolve to the longest match."""
    assert TimeUnit.spelled_at(text, index) == (unit, length)


def test_spelled_at_returns_none_without_token():
    assert TimeUnit.spelled_at("abc", 0) is None
    assert TimeUnit.spelled_at("12h", 0) is None


def test_lookup_accepts_any_spelling():
    assert TimeUnit.lookup("Days") is TimeUnit.DAYS
    assert TimeUnit.lookup("hour") is TimeUnit.HOURS
    assert TimeUnit.lookup(" ms ") is TimeUnit.MILLISECONDS


def test_lookup_rejects_unknown_spelling():
    with pytest.raises(ValueError, match="Unknown time unit"):
        TimeUnit.lookup("fortnight")
