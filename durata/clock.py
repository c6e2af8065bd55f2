"""Wall-clock sources used when measuring elapsed time."""

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from typing_extensions import override

if TYPE_CHECKING:
    from durata.duration import Duration


class Clock:
    def now(self) -> datetime:
        """Return the current instant as a timezone-aware datetime."""
        raise NotImplementedError


class SystemClock(Clock):
    @override
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """Clock frozen at a given instant until explicitly advanced.

    Example:
        >>> clock = FixedClock(datetime(2025, 1, 1, tzinfo=timezone.utc))
        >>> clock.advance(90)
        >>> clock.now()
        datetime.datetime(2025, 1, 1, 0, 1, 30, tzinfo=datetime.timezone.utc)
    """

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            raise TypeError(
                f"FixedClock requires a timezone-aware datetime.\n"
                f"Got naive datetime: {instant!r}\n"
                f"Hint: FixedClock(datetime(..., tzinfo=timezone.utc))"
            )
        self._now: datetime = instant

    @override
    def now(self) -> datetime:
        return self._now

    def advance(self, amount: "float | timedelta | Duration") -> None:
        """Move the clock forward by seconds, a timedelta or a Duration."""
        from durata.duration import Duration

        if isinstance(amount, Duration):
            if amount.is_forever():
                raise ValueError(
                    "Cannot advance a FixedClock by FOREVER.\n"
                    "Hint: Advance by a finite Duration, e.g. Duration.of(1, TimeUnit.DAYS)"
                )
            amount = amount.to_native()
        elif not isinstance(amount, timedelta):
            amount = timedelta(seconds=amount)
        self._now += amount


SYSTEM_CLOCK: Clock = SystemClock()
