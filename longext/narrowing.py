"""Checked narrowing of 64-bit integers."""

from longext.util import INT32_MAX, INT32_MIN


def to_int(value: int) -> int:
    """Narrow ``value`` to a 32-bit signed integer.

    Values inside [INT32_MIN, INT32_MAX] are returned unchanged. Anything
    else raises instead of wrapping, since every 32-bit value is a legal
    result and no sentinel is available.

    Raises:
        TypeError: If value is not an int
        OverflowError: If value does not fit in 32 bits
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"to_int expects an int.\n"
            f"Got {type(value).__name__!r}: {value!r}"
        )
    if value < INT32_MIN or value > INT32_MAX:
        raise OverflowError(
            f"Value {value} does not fit in a 32-bit signed integer "
            f"[{INT32_MIN}, {INT32_MAX}]"
        )
    return value
