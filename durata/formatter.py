"""Render durations as readable text.

The default rendering spells out every non-zero unit from years down to
milliseconds::

    >>> format_duration(Duration.of(5430.25, TimeUnit.SECONDS))
    '1 hour 30 minutes 30 seconds 250 milliseconds'

``FormatOptions`` controls the smallest unit shown and how each part is
suffixed. ``short_suffix`` produces compact output such as "1h 30m 30s"
that ``parse_duration`` reads back.
"""

from collections.abc import Callable
from dataclasses import dataclass

from durata.duration import Duration
from durata.units import TimeUnit

SuffixFn = Callable[[float, TimeUnit], str]

FOREVER_TEXT = "Forever"


def long_suffix(value: float, unit: TimeUnit) -> str:
    """Full unit name with a leading and trailing space, plural above one."""
    name = unit.plural if abs(value) > 1 else unit.singular
    return f" {name} "


def short_suffix(value: float, unit: TimeUnit) -> str:
    """Unit abbreviation followed by a space, e.g. "d " for days."""
    return f"{unit.suffix} "


@dataclass(frozen=True, kw_only=True)
class FormatOptions:
    """Rendering configuration.

    Attributes:
        smallest_unit: Finest unit rendered; anything shorter than one of
            these renders as "less than 1 <unit>"
        suffix_for: Maps a part's value and unit to the text placed after it
    """

    smallest_unit: TimeUnit = TimeUnit.MILLISECONDS
    suffix_for: SuffixFn = long_suffix


DEFAULT_OPTIONS = FormatOptions()


def format_duration(duration: Duration, options: FormatOptions | None = None) -> str:
    """Render ``duration`` using ``options`` (defaults when omitted)."""
    options = options or DEFAULT_OPTIONS
    smallest = options.smallest_unit

    if duration.is_forever():
        return FOREVER_TEXT
    if duration.abs().less_than(1, smallest):
        return f"less than 1{options.suffix_for(1, smallest)}".strip()

    parts: list[str] = []
    for unit in TimeUnit.sorted():
        value = duration.get_part(unit)
        if value != 0:
            parts.append(f"{value}{options.suffix_for(value, unit)}")
        if unit is smallest:
            break

    return "".join(parts).strip()
