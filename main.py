#!/usr/bin/env python3
"""Stream Search - Main CLI Entry Point.

Lists live Twitch streams in a fixed category whose titles match the given
terms, as an aligned text table.
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

from rich.console import Console

from configuration.manager import ConfigManager
from core.display_manager import DisplayManager
from core.exceptions import StreamSearchError
from core.result_printer import ResultPrinter
from handlers.search_handler import handle_search
from terminal import parse_arguments
from utilities.debug_logger import buffer as debug_buffer, finalize, init_debug
from utilities.logging_utils import log_exception, safe_log


def run(argv: list[str] | None = None, console: Console | None = None) -> int:
    """Run one search and print the results.

    This is the only place where errors turn into an exit status.

    Args:
        argv: Command-line arguments, sys.argv if None.
        console: Console for standard output, created if None.

    Returns:
        Process exit status.
    """
    parsed = parse_arguments(argv)

    if parsed.debug:
        init_debug(Path("logs"))
        debug_buffer(
            f"Debug mode enabled at "
            f"{datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')}\n",
            level="INFO",
        )

    display_manager = DisplayManager(console)
    try:
        summary = handle_search(parsed, ConfigManager(), display_manager)
        ResultPrinter(display_manager.console).print_summary(summary)
        return 0
    except StreamSearchError as e:
        log_exception(e, "Search failed", level="ERROR")
        message = " ".join(str(e).split())
        print(f"Error: {message}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        safe_log("User interrupted execution (KeyboardInterrupt)\n", level="WARNING")
        return 130
    finally:
        finalize()


def main() -> None:
    """Main entry point for the CLI application."""
    sys.exit(run())


if __name__ == "__main__":
    main()
