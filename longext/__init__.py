from importlib.resources import files

from .narrowing import to_int
from .result import ConversionResult, try_to_datetime_from_unix_time, try_to_int
from .unixtime import to_datetime_from_unix_time, to_unix_time
from .util import INT32_MAX, INT32_MIN, MAX_UNIX_TIME, MIN_UNIX_TIME, UNIX_EPOCH

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "to_datetime_from_unix_time",
    "to_unix_time",
    "to_int",
    "ConversionResult",
    "try_to_datetime_from_unix_time",
    "try_to_int",
    "INT32_MIN",
    "INT32_MAX",
    "MIN_UNIX_TIME",
    "MAX_UNIX_TIME",
    "UNIX_EPOCH",
    "docs",
]
