"""Printer for search results.

All final console output flows through here: the search banner, the
result table and the summary line.
"""

from __future__ import annotations

import json

from rich.console import Console

from core.operation_results import SearchSummary


class ResultPrinter:
    """
    Prints search results.

    DisplayManager handles LIVE display while pages are fetched.
    ResultPrinter handles FINAL results after the fetch completes.
    """

    def __init__(self, console: Console | None = None):
        """
        Initialize the result printer.

        Args:
            console: Optional Console instance. If not provided, creates one.
        """
        self.console = console or Console()

    def _plain(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def print_search_banner(self, terms: list[str]) -> None:
        """Print the terms being searched for."""
        quoted = ", ".join(json.dumps(t, ensure_ascii=False) for t in terms)
        self._plain(f"Searching for [{quoted}]")

    def print_summary(self, summary: SearchSummary) -> None:
        """Print the result table followed by the matched/total line."""
        summary.table.print(self.console)
        self._plain(f"Done ({summary.matched}/{summary.total})")
