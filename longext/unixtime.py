"""Conversions between Unix timestamps and UTC datetimes.

Timestamps are whole seconds since 1970-01-01T00:00:00Z. The supported
range is the range of ``datetime.datetime``: from ``MIN_UNIX_TIME``
(0001-01-01T00:00:00Z) to ``MAX_UNIX_TIME`` (9999-12-31T23:59:59Z).
"""

from datetime import datetime, timedelta

from longext.util import MAX_UNIX_TIME, MIN_UNIX_TIME, SECOND, UNIX_EPOCH


def to_datetime_from_unix_time(unix_time: int) -> datetime:
    """Convert a Unix timestamp to a timezone-aware UTC datetime.

    The result always has ``tzinfo=timezone.utc`` and a zero microsecond
    field. Conversion is plain integer arithmetic on the epoch, so it does not
    depend on the local timezone, the platform C library, or the system clock.

    Args:
        unix_time: Seconds since the Unix epoch (may be negative)

    Returns:
        UTC datetime for the same instant

    Raises:
        TypeError: If unix_time is not an int
        ValueError: If unix_time is outside [MIN_UNIX_TIME, MAX_UNIX_TIME]

    Example:
        >>> to_datetime_from_unix_time(1588305600)
        datetime.datetime(2020, 5, 1, 4, 0, tzinfo=datetime.timezone.utc)
    """
    if isinstance(unix_time, bool) or not isinstance(unix_time, int):
        raise TypeError(
            f"Unix time must be an int (seconds since epoch).\n"
            f"Got {type(unix_time).__name__!r}: {unix_time!r}\n"
            f"Hint: Convert explicitly, e.g. to_datetime_from_unix_time(int(ts))"
        )
    if not MIN_UNIX_TIME <= unix_time <= MAX_UNIX_TIME:
        raise ValueError(
            f"Unix time {unix_time} is outside the supported range "
            f"[{MIN_UNIX_TIME}, {MAX_UNIX_TIME}] "
            f"(0001-01-01T00:00:00Z to 9999-12-31T23:59:59Z)"
        )
    return UNIX_EPOCH + timedelta(seconds=unix_time)


def to_unix_time(moment: datetime) -> int:
    """Convert a timezone-aware datetime to whole Unix seconds.

    Sub-second parts are floored, so instants before the epoch round toward
    the past.

    Raises:
        TypeError: If moment is not a datetime or is naive
    """
    if not isinstance(moment, datetime):
        raise TypeError(
            f"Expected a timezone-aware datetime.\n"
            f"Got {type(moment).__name__!r}: {moment!r}"
        )
    if moment.tzinfo is None or moment.utcoffset() is None:
        raise TypeError(
            f"Cannot convert a naive datetime to Unix time.\n"
            f"Got naive datetime: {moment!r}\n"
            f"Hint: Add timezone info:\n"
            f"  dt = datetime(..., tzinfo=timezone.utc)"
        )
    return (moment - UNIX_EPOCH) // timedelta(seconds=SECOND)
