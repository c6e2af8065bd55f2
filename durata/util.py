"""Unit constants for durata.

Seconds-based constants mirror the fixed conventions used by the unit
catalog: a month is 30 days and a year is 365 days, with no calendar
awareness. Nanosecond constants are exact integers and back the mixed-radix
breakdown of durations.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
MONTH = 2592000
YEAR = 31536000

# Exact nanoseconds per unit
NANOS_PER_MICROSECOND = 1_000
NANOS_PER_MILLISECOND = 1_000_000
NANOS_PER_SECOND = 1_000_000_000
