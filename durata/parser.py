"""Parse human-friendly duration strings such as "1h 30m" or "2 days".

Whitespace is ignored and matching is case-insensitive. The input is read
as a sequence of ``<number><unit>`` tokens; each number is added to a
running total in its unit. Units may repeat and appear in any order, so
"1h 2h" is three hours and "30m 1h" is ninety minutes. Text after the last
unit token is ignored.

Parsing never raises for bad text. Malformed numbers, input without any
unit, and totals that are not strictly positive all produce ``None``.
"""

import logging
import math
import re

from durata.duration import ZERO, Duration
from durata.units import TimeUnit

logger = logging.getLogger(__name__)

# Optionally signed integer or decimal; no exponents, no inf/nan
_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
_WHITESPACE = re.compile(r"\s+")


def parse_duration(text: str) -> Duration | None:
    """Parse ``text`` into a positive Duration, or return None.

    Examples:
        >>> parse_duration("1h30m") == Duration.of(90, TimeUnit.MINUTES)
        True
        >>> parse_duration("2 days 3 hours").to_hours()
        51.0
        >>> parse_duration("0s") is None
        True

    Raises:
        TypeError: If ``text`` is not a string
    """
    if not isinstance(text, str):
        raise TypeError(
            f"parse_duration() expects a string.\n"
            f"Got {type(text).__name__!r}: {text!r}\n"
            f"Hint: Use Duration.from_native() for timedelta values"
        )

    normalized = _WHITESPACE.sub("", text).lower()
    total = ZERO
    cursor = 0
    index = cursor

    while index < len(normalized):
        token = TimeUnit.spelled_at(normalized, index)
        if token is None:
            index += 1
            continue

        unit, length = token
        quantity = normalized[cursor:index]
        if not _NUMBER.fullmatch(quantity):
            logger.debug(
                "Rejected duration %r: %r is not a number before %r",
                text,
                quantity,
                normalized[index : index + length],
            )
            return None

        value = float(quantity)
        if math.isinf(value):
            logger.debug("Rejected duration %r: %r overflows", text, quantity[:20] + "...")
            return None

        total = total.plus(value, unit)
        cursor = index = index + length

    if total <= ZERO:
        logger.debug("Rejected duration %r: total %ss is not positive", text, total.seconds)
        return None
    return total
