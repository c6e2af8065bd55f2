"""Immutable elapsed-time values.

A Duration is either a finite number of seconds or the ``FOREVER`` sentinel.
Forever absorbs every addition and subtraction and compares greater than any
finite duration, so callers can use it as an "unbounded" timeout or TTL
without special-casing it.
"""

import math
import sys
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING, Any, TypeAlias, overload

from dateutil.relativedelta import relativedelta

from durata.clock import SYSTEM_CLOCK, Clock
from durata.units import TimeUnit
from durata.util import NANOS_PER_SECOND

if TYPE_CHECKING:
    from durata.formatter import FormatOptions

# Timezone-aware datetime, or Unix timestamp in seconds
Instant: TypeAlias = datetime | int | float

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)

# relativedelta fields that pin a calendar position instead of an offset
_ABSOLUTE_FIELDS = (
    "year",
    "month",
    "day",
    "weekday",
    "hour",
    "minute",
    "second",
    "microsecond",
)


@dataclass(frozen=True)
class Duration:
    seconds: float
    forever: bool = False

    def __post_init__(self) -> None:
        seconds = float(self.seconds)
        if math.isnan(seconds) or seconds == -math.inf:
            raise ValueError(
                f"Duration seconds must be a real number or +inf, got {self.seconds!r}"
            )
        if self.forever or seconds == math.inf:
            object.__setattr__(self, "seconds", math.inf)
            object.__setattr__(self, "forever", True)
        else:
            object.__setattr__(self, "seconds", seconds)

    # -- construction ------------------------------------------------------

    @overload
    @classmethod
    def of(cls, length: float, unit: TimeUnit) -> "Duration": ...

    @overload
    @classmethod
    def of(cls, length: Instant, unit: Instant) -> "Duration": ...

    @classmethod
    def of(cls, length: Any, unit: Any) -> "Duration":
        """Build a duration from a length and unit, or from two instants.

        ``Duration.of(90, TimeUnit.MINUTES)`` is ninety minutes.
        ``Duration.of(start, end)`` is the time elapsed from ``start`` to
        ``end`` at millisecond resolution; it is negative when ``end`` comes
        first. Instants are timezone-aware datetimes or Unix timestamps.

        An infinite ``length`` gives FOREVER. A finite length whose product
        overflows the float range saturates at +/- ``sys.float_info.max``
        seconds instead of becoming FOREVER.
        """
        if isinstance(unit, TimeUnit):
            length = float(length)
            if length == math.inf:
                return FOREVER
            if not math.isfinite(length):
                raise ValueError(
                    f"Duration length must be a real number or +inf, got {length!r}"
                )
            return _finite(length * unit.seconds_factor)
        millis = _epoch_millis(unit, "end") - _epoch_millis(length, "start")
        return cls.of(millis, TimeUnit.MILLISECONDS)

    @classmethod
    def since(cls, instant: Instant, clock: Clock | None = None) -> "Duration":
        """Time elapsed from ``instant`` until the clock's current time."""
        clock = clock or SYSTEM_CLOCK
        return cls.of(instant, clock.now())

    @classmethod
    def from_native(cls, value: timedelta | relativedelta) -> "Duration":
        """Convert a ``timedelta`` or a relative ``relativedelta``.

        relativedelta months and years use the same fixed 30 and 365 day
        lengths as the unit catalog.

        Raises:
            TypeError: If value is neither a timedelta nor a relativedelta
            ValueError: If a relativedelta carries absolute fields
        """
        if isinstance(value, timedelta):
            whole_seconds = value.days * 86400 + value.seconds
            return cls.of(whole_seconds, TimeUnit.SECONDS).plus(
                value.microseconds * 1000, TimeUnit.NANOSECONDS
            )
        if isinstance(value, relativedelta):
            absolute = [
                name for name in _ABSOLUTE_FIELDS if getattr(value, name) is not None
            ]
            if absolute or value.leapdays:
                raise ValueError(
                    f"Cannot convert a relativedelta with absolute fields to a Duration.\n"
                    f"Got: {value!r}\n"
                    f"Hint: Use plural (relative) arguments, e.g. "
                    f"relativedelta(months=1) instead of relativedelta(month=1)"
                )
            parts = (
                (value.years, TimeUnit.YEARS),
                (value.months, TimeUnit.MONTHS),
                (value.days, TimeUnit.DAYS),
                (value.hours, TimeUnit.HOURS),
                (value.minutes, TimeUnit.MINUTES),
                (value.seconds, TimeUnit.SECONDS),
                (value.microseconds, TimeUnit.MICROSECONDS),
            )
            total = ZERO
            for length, unit in parts:
                total = total.plus(length, unit)
            return total
        raise TypeError(
            f"Cannot convert {type(value).__name__!r} to a Duration.\n"
            f"Supported: datetime.timedelta, dateutil.relativedelta.relativedelta"
        )

    @staticmethod
    def parse(text: str) -> "Duration | None":
        """Parse free-form text such as "1h 30m"; None if it is not a duration."""
        from durata.parser import parse_duration

        return parse_duration(text)

    # -- arithmetic --------------------------------------------------------

    def plus(self, other: "Duration | float", unit: TimeUnit | None = None) -> "Duration":
        other = _operand(other, unit, "plus")
        if self.forever or other.forever:
            return FOREVER
        return _finite(self.seconds + other.seconds)

    def minus(self, other: "Duration | float", unit: TimeUnit | None = None) -> "Duration":
        other = _operand(other, unit, "minus")
        if self.forever or other.forever:
            return FOREVER
        return _finite(self.seconds - other.seconds)

    add = plus
    subtract = minus

    def abs(self) -> "Duration":
        if self.forever:
            return FOREVER
        return Duration(math.fabs(self.seconds))

    def __add__(self, other: Any) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: Any) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return self.minus(other)

    def __abs__(self) -> "Duration":
        return self.abs()

    def __radd__(self, other: Any) -> date:
        return other + self._shift(other, "+")

    def __rsub__(self, other: Any) -> date:
        return other - self._shift(other, "-")

    def _shift(self, instant: Any, sign: str) -> timedelta:
        """The timedelta applied when shifting ``instant`` by this duration."""
        if not isinstance(instant, date):
            raise TypeError(
                f"Cannot apply a Duration to {type(instant).__name__!r}.\n"
                f"Got: {instant!r} {sign} Duration\n"
                f"Examples:\n"
                f"  datetime(2025, 1, 1, tzinfo=timezone.utc) {sign} d\n"
                f"  d.to_seconds()  # for plain numbers"
            )
        if self.forever:
            raise ValueError(
                f"Cannot shift {instant!r} by FOREVER.\n"
                f"Hint: Check d.is_forever() before applying it to a datetime"
            )
        return self.to_native()

    # -- conversion --------------------------------------------------------

    def to(self, unit: TimeUnit) -> float:
        """Exact length of this duration measured in ``unit``."""
        if self.forever:
            return math.inf
        return self.seconds / unit.seconds_factor

    def get_part(self, unit: TimeUnit) -> int:
        """Whole ``unit``s left after all larger units are taken out.

        ``Duration.of(90, TimeUnit.SECONDS).get_part(TimeUnit.MINUTES)`` is 1
        and ``get_part(TimeUnit.SECONDS)`` is 30. Negative durations carry the
        sign on every part. Forever has no finite breakdown and yields 0.
        """
        if self.forever:
            return 0
        sign = -1 if self.seconds < 0 else 1
        remaining = round(Fraction(math.fabs(self.seconds)) * NANOS_PER_SECOND)
        for current in TimeUnit.sorted():
            count, remaining = divmod(remaining, current.nanos)
            if current is unit:
                return sign * count
        raise AssertionError(f"{unit!r} is not in the unit catalog")

    def to_native(self) -> timedelta:
        """Convert to a ``timedelta``, clamped to its representable range."""
        if self.forever or self.seconds >= timedelta.max.total_seconds():
            return timedelta.max
        if self.seconds <= timedelta.min.total_seconds():
            return timedelta.min
        return timedelta(seconds=self.seconds)

    def to_nanos(self) -> float:
        return self.to(TimeUnit.NANOSECONDS)

    def to_micros(self) -> float:
        return self.to(TimeUnit.MICROSECONDS)

    def to_millis(self) -> float:
        return self.to(TimeUnit.MILLISECONDS)

    def to_seconds(self) -> float:
        return self.to(TimeUnit.SECONDS)

    def to_minutes(self) -> float:
        return self.to(TimeUnit.MINUTES)

    def to_hours(self) -> float:
        return self.to(TimeUnit.HOURS)

    def to_days(self) -> float:
        return self.to(TimeUnit.DAYS)

    def to_weeks(self) -> float:
        return self.to(TimeUnit.WEEKS)

    def to_months(self) -> float:
        return self.to(TimeUnit.MONTHS)

    def to_years(self) -> float:
        return self.to(TimeUnit.YEARS)

    # -- comparison --------------------------------------------------------

    def is_forever(self) -> bool:
        return self.forever

    def _key(self) -> tuple[int, float]:
        return (1, 0.0) if self.forever else (0, self.seconds)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._key() >= other._key()

    def greater_than(self, other: "Duration | float", unit: TimeUnit | None = None) -> bool:
        return self > _operand(other, unit, "greater_than")

    def greater_than_or_equal(
        self, other: "Duration | float", unit: TimeUnit | None = None
    ) -> bool:
        return self >= _operand(other, unit, "greater_than_or_equal")

    def less_than(self, other: "Duration | float", unit: TimeUnit | None = None) -> bool:
        return self < _operand(other, unit, "less_than")

    def less_than_or_equal(
        self, other: "Duration | float", unit: TimeUnit | None = None
    ) -> bool:
        return self <= _operand(other, unit, "less_than_or_equal")

    def equals(self, other: "Duration | float", unit: TimeUnit | None = None) -> bool:
        return self == _operand(other, unit, "equals")

    @staticmethod
    def compare(first: "Duration", second: "Duration") -> int:
        """Return -1, 0 or 1 as ``first`` is shorter, equal or longer."""
        return (first > second) - (first < second)

    # -- rendering ---------------------------------------------------------

    def format(self, options: "FormatOptions | None" = None, **overrides: Any) -> str:
        """Render as readable text, e.g. "1 hour 30 minutes".

        Keyword overrides are applied on top of ``options``:
        ``d.format(smallest_unit=TimeUnit.SECONDS)``.
        """
        from durata.formatter import FormatOptions, format_duration

        if overrides:
            options = replace(options or FormatOptions(), **overrides)
        return format_duration(self, options)

    def __str__(self) -> str:
        return self.format()


def _finite(seconds: float) -> Duration:
    # Overflow of finite operands saturates at the ends of the float range
    if seconds == math.inf:
        return Duration(sys.float_info.max)
    if seconds == -math.inf:
        return Duration(-sys.float_info.max)
    return Duration(seconds)


def _operand(other: Duration | float, unit: TimeUnit | None, method: str) -> Duration:
    if unit is not None:
        return Duration.of(other, unit)
    if isinstance(other, Duration):
        return other
    raise TypeError(
        f"Duration.{method}() takes a Duration or a length with a unit.\n"
        f"Got {type(other).__name__!r}: {other!r}\n"
        f"Examples:\n"
        f"  d.{method}(Duration.of(5, TimeUnit.MINUTES))\n"
        f"  d.{method}(5, TimeUnit.MINUTES)"
    )


def _epoch_millis(instant: Instant, edge: str) -> int:
    """Convert an instant to whole milliseconds since the Unix epoch."""
    if isinstance(instant, datetime):
        if instant.tzinfo is None:
            raise TypeError(
                f"Duration {edge} instant must be a timezone-aware datetime.\n"
                f"Got naive datetime: {instant!r}\n"
                f"Hint: Add timezone info:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        return (instant - _EPOCH) // _MILLISECOND
    if isinstance(instant, (int, float)) and not isinstance(instant, bool):
        return math.floor(Decimal(repr(instant)) * 1000)
    raise TypeError(
        f"Duration {edge} instant must be a datetime or Unix timestamp.\n"
        f"Got {type(instant).__name__!r}: {instant!r}"
    )


ZERO = Duration(0.0)
FOREVER = Duration(math.inf, forever=True)
