from .clock import Clock, FixedClock, SystemClock
from .duration import FOREVER, ZERO, Duration, Instant
from .formatter import FormatOptions, format_duration, long_suffix, short_suffix
from .parser import parse_duration
from .units import TimeUnit
from .util import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR

__version__ = "0.1.0"

__all__ = [
    "Duration",
    "FOREVER",
    "ZERO",
    "Instant",
    "TimeUnit",
    "parse_duration",
    "format_duration",
    "FormatOptions",
    "long_suffix",
    "short_suffix",
    "Clock",
    "SystemClock",
    "FixedClock",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
]
