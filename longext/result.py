"""Non-raising variants of the conversions.

These wrap the range errors of the underlying functions in a
``ConversionResult`` instead of raising them. Type errors still propagate,
since they indicate a caller bug rather than an unrepresentable value.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from longext.narrowing import to_int
from longext.unixtime import to_datetime_from_unix_time


@dataclass(frozen=True)
class ConversionResult:
    """Result of a checked conversion.

    Attributes:
        success: True if the value was representable, False otherwise
        value: The converted value if successful, None if failed
        error: The range error that occurred if failed, None if successful
    """

    success: bool
    value: Any | None
    error: Exception | None

    def unwrap(self) -> Any:
        """Return the converted value, or raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.value


def _success_result(value: Any) -> ConversionResult:
    return ConversionResult(success=True, value=value, error=None)


def _error_result(error: Exception) -> ConversionResult:
    return ConversionResult(success=False, value=None, error=error)


def try_to_datetime_from_unix_time(unix_time: int) -> ConversionResult:
    """Like ``to_datetime_from_unix_time`` but returns a ConversionResult."""
    try:
        moment: datetime = to_datetime_from_unix_time(unix_time)
    except ValueError as e:
        return _error_result(e)
    return _success_result(moment)


def try_to_int(value: int) -> ConversionResult:
    """Like ``to_int`` but returns a ConversionResult."""
    try:
        narrowed = to_int(value)
    except OverflowError as e:
        return _error_result(e)
    return _success_result(narrowed)
