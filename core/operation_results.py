"""Result object for a search run.

The handler returns it and the entry point prints it, so nothing is shown
until every page has been fetched.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from core.table import Table


@dataclass
class SearchSummary:
    """Outcome of one search over all live streams."""

    terms: list[str]
    table: Table = field(default_factory=Table)
    total: int = 0
    pages: int = 0

    @property
    def matched(self) -> int:
        """Number of streams that passed the filter."""
        return self.table.row_count()
