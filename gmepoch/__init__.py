from importlib.resources import files

from .core import epoch_seconds, timegm, to_timestamp
from .days import (
    MONTH_OFFSET_WORD,
    MONTH_OFFSETS,
    days_since_origin,
    is_leap_year,
    month_offset,
)
from .fields import BrokenDownDateTime
from .util import DAY, HOUR, MINUTE, SECOND

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "BrokenDownDateTime",
    "epoch_seconds",
    "timegm",
    "to_timestamp",
    "days_since_origin",
    "is_leap_year",
    "month_offset",
    "MONTH_OFFSETS",
    "MONTH_OFFSET_WORD",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "docs",
]
