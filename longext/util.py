"""Utility constants for longext.

Time unit constants represent durations in seconds. Integer bounds describe
the fixed-width ranges the conversions check against.
"""

from datetime import datetime, timezone

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

# Signed integer bounds
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Unix seconds of datetime.min and datetime.max (whole seconds), in UTC
MIN_UNIX_TIME = -62135596800
MAX_UNIX_TIME = 253402300799
