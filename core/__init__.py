"""Core search, filtering and rendering modules."""

from core.exceptions import (
    ConfigError,
    DecodeError,
    NetworkError,
    ProtocolError,
    StreamSearchError,
)
from core.filters import SearchCriteria, build_exclusions, matches, title_words
from core.operation_results import SearchSummary
from core.table import Table, pad_cell

__all__ = [
    "build_exclusions",
    "ConfigError",
    "DecodeError",
    "matches",
    "NetworkError",
    "pad_cell",
    "ProtocolError",
    "SearchCriteria",
    "SearchSummary",
    "StreamSearchError",
    "Table",
    "title_words",
]
