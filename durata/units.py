"""Catalog of calendar-like time units.

Each unit knows how many seconds it spans and how it is spelled in text:
a singular name, a plural name and a short suffix. The catalog also builds
the pattern used to find unit tokens inside free-form duration strings.
"""

import re
from enum import Enum
from functools import cache

from durata.util import (
    DAY,
    HOUR,
    MINUTE,
    MONTH,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
    SECOND,
    WEEK,
    YEAR,
)


class TimeUnit(Enum):
    """Time units ordered from smallest to largest."""

    NANOSECONDS = (1, "nanosecond", "nanoseconds", "ns")
    MICROSECONDS = (NANOS_PER_MICROSECOND, "microsecond", "microseconds", "us")
    MILLISECONDS = (NANOS_PER_MILLISECOND, "millisecond", "milliseconds", "ms")
    SECONDS = (SECOND * NANOS_PER_SECOND, "second", "seconds", "s")
    MINUTES = (MINUTE * NANOS_PER_SECOND, "minute", "minutes", "m")
    HOURS = (HOUR * NANOS_PER_SECOND, "hour", "hours", "h")
    DAYS = (DAY * NANOS_PER_SECOND, "day", "days", "d")
    WEEKS = (WEEK * NANOS_PER_SECOND, "week", "weeks", "w")
    MONTHS = (MONTH * NANOS_PER_SECOND, "month", "months", "mo")
    YEARS = (YEAR * NANOS_PER_SECOND, "year", "years", "y")

    def __init__(self, nanos: int, singular: str, plural: str, suffix: str):
        self.nanos: int = nanos
        self.singular: str = singular
        self.plural: str = plural
        self.suffix: str = suffix

    @property
    def seconds_factor(self) -> float:
        """Number of seconds in one of this unit."""
        return self.nanos / NANOS_PER_SECOND

    def to_singular(self) -> str:
        return self.singular

    def to_plural(self) -> str:
        return self.plural

    def spellings(self) -> tuple[str, str, str]:
        """Plural, singular and suffix, in matching order."""
        return (self.plural, self.singular, self.suffix)

    @classmethod
    def sorted(cls) -> list["TimeUnit"]:
        """Return units ordered by descending size (largest first)."""
        return sorted(cls, key=lambda unit: unit.nanos, reverse=True)

    @classmethod
    def pattern(cls) -> re.Pattern[str]:
        """Pattern matching any unit spelling, case-insensitively."""
        return _unit_pattern()

    @classmethod
    def spelled_at(cls, text: str, index: int) -> tuple["TimeUnit", int] | None:
        """Identify the unit token starting at ``index`` in lower-case text.

        Returns the unit and the length of the consumed spelling, or None when
        no spelling starts there. The longest spelling wins, so "ms" is read as
        milliseconds and "mo" as months rather than "m" for minutes.
        """
        match = _unit_pattern().match(text, index)
        if match is None:
            return None
        token = match.group(0)
        return _spelling_table()[token.lower()], len(token)

    @classmethod
    def lookup(cls, name: str) -> "TimeUnit":
        """Resolve a singular, plural or suffix spelling to its unit.

        Raises:
            ValueError: If ``name`` is not a known spelling
        """
        unit = _spelling_table().get(name.strip().lower())
        if unit is None:
            valid = ", ".join(
                f"{u.plural}/{u.singular}/{u.suffix}" for u in cls.sorted()
            )
            raise ValueError(
                f"Unknown time unit: {name!r}\n"
                f"Valid spellings (plural/singular/suffix): {valid}"
            )
        return unit


@cache
def _spelling_table() -> dict[str, TimeUnit]:
    table: dict[str, TimeUnit] = {}
    for unit in TimeUnit.sorted():
        for spelling in unit.spellings():
            if spelling in table:
                raise RuntimeError(
                    f"Spelling {spelling!r} is shared by "
                    f"{table[spelling].name} and {unit.name}"
                )
            table[spelling] = unit
    return table


@cache
def _unit_pattern() -> re.Pattern[str]:
    # Longest alternatives first so regex alternation prefers them
    spellings = sorted(_spelling_table(), key=lambda s: (-len(s), s))
    return re.compile("|".join(re.escape(s) for s in spellings), re.IGNORECASE)
