"""Search handler: fetch every live stream and collect the matching ones."""

from __future__ import annotations

from datetime import datetime, timezone

from api.client import AccessTokenProvider, TwitchClient
from configuration.manager import ConfigManager
from core.display_manager import DisplayManager
from core.filters import SearchCriteria, build_exclusions
from core.operation_results import SearchSummary
from core.result_printer import ResultPrinter
from models.types import Align
from terminal.cli import ParsedArgs
from utilities.logging_utils import safe_log

VIEWERS_COLUMN = 2
DURATION_COLUMN = 3


def build_criteria(parsed: ParsedArgs, ignore_list: tuple[str, ...]) -> SearchCriteria:
    """Combine CLI flags and configured ignore list into search criteria."""
    return SearchCriteria(
        terms=tuple(parsed.terms),
        excluded_names=build_exclusions(parsed.exclude, ignore_list),
        lang=parsed.lang,
        match_all=parsed.match_all,
        whole_word=parsed.whole_word,
    )


def handle_search(
    parsed: ParsedArgs,
    config_manager: ConfigManager,
    display_manager: DisplayManager | None = None,
    now: datetime | None = None,
) -> SearchSummary:
    """Run one search over all live streams.

    Configuration is validated before anything is sent over the network.
    The table is only filled here; printing it is left to the caller, so an
    error on any page means no results are shown.

    Args:
        parsed: Parsed command-line arguments.
        config_manager: Source of the application configuration.
        display_manager: Progress display, created if not provided.
        now: Reference time for live durations, defaults to the current time.

    Returns:
        SearchSummary with the filled table and counts.

    Raises:
        StreamSearchError: On any configuration, network or decoding failure.
    """
    config = config_manager.load_config()
    criteria = build_criteria(parsed, config.ignore_list)

    display_manager = display_manager or DisplayManager()
    ResultPrinter(display_manager.console).print_search_banner(parsed.terms)
    safe_log(
        f"Search: terms={list(criteria.terms)} lang={criteria.lang} "
        f"all={criteria.match_all} word={criteria.whole_word} "
        f"excluded={sorted(criteria.excluded_names)}\n",
        level="INFO",
    )

    access_token = AccessTokenProvider(config).acquire()
    client = TwitchClient(access_token, config)

    summary = SearchSummary(terms=list(parsed.terms))
    summary.table.set_align(VIEWERS_COLUMN, Align.RIGHT)
    summary.table.set_align(DURATION_COLUMN, Align.RIGHT)

    now = now or datetime.now(timezone.utc)

    display_manager.start_api_fetch()
    try:
        for page in client.iter_pages(now):
            summary.pages = page.number
            summary.total += len(page.entries)

            for entry in page.entries:
                if criteria.accepts(entry):
                    summary.table.push(entry.to_row())

            display_manager.update_api_progress(summary.pages, summary.total)
    finally:
        display_manager.complete_api_fetch()

    safe_log(
        f"Search complete: Pages {summary.pages} | Matched {summary.matched}/{summary.total}\n",
        level="INFO",
    )
    return summary
