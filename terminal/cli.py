"""Command-line interface configuration and argument parsing."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field

from rich.console import Console

from terminal.formatter import HelpRenderer, UsageFormatter

__version__ = "0.1.0"


@dataclass
class ParsedArgs:
    """Structured representation of parsed CLI arguments.

    Terms are lowercased. Exclusions are kept as given, comma lists included,
    and are split when the search criteria are built.
    """

    terms: list[str] = field(default_factory=lambda: [""])
    exclude: list[str] = field(default_factory=lambda: [])
    lang: str | None = None
    match_all: bool = False
    whole_word: bool = False
    debug: bool = False


class CLIParser:
    """CLI argument parser for the stream search."""

    def __init__(self) -> None:
        """Initialize the CLI parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser with all arguments defined."""
        parser = argparse.ArgumentParser(
            prog="stream-search",
            description="Search live Twitch streams by title",
            formatter_class=UsageFormatter,
            add_help=False,
        )

        parser.add_argument(
            "term",
            nargs="*",
            help="Term to search for",
        )

        self._add_search_options(parser)
        self._add_options(parser)

        return parser

    def _add_search_options(self, parser: argparse.ArgumentParser) -> None:
        """Add the filtering options."""
        search = parser.add_argument_group("search options")

        search.add_argument(
            "--exclude",
            "-x",
            metavar="NAME",
            nargs="+",
            action="extend",
            default=[],
            help="Streamers to exclude",
        )

        search.add_argument(
            "--lang",
            "-l",
            metavar="CODE",
            help="Only show language (en, fr, ...)",
        )

        search.add_argument(
            "--all",
            "-a",
            action="store_true",
            help="Require matching all words, instead of just any",
        )

        search.add_argument(
            "--word",
            "-w",
            action="store_true",
            help="Search on word boundary",
        )

    def _add_options(self, parser: argparse.ArgumentParser) -> None:
        """Add general option flags."""
        options = parser.add_argument_group("options")

        options.add_argument(
            "--debug",
            action="store_true",
            help="Enable debug logging",
        )

        options.add_argument(
            "--version",
            action="store_true",
            help="Show version",
        )

        options.add_argument(
            "-h",
            "--help",
            action="store_true",
            help="Show help message",
        )

    def parse(self, args: list[str] | None = None) -> ParsedArgs:
        """Parse command-line arguments.

        Args:
            args: Optional list of arguments. Uses sys.argv if None.

        Returns:
            ParsedArgs with normalized arguments.

        Raises:
            SystemExit: If arguments are invalid or help is requested.
        """
        namespace = self.parser.parse_args(args)

        if namespace.help:
            HelpRenderer(Console()).render_all()
            sys.exit(0)

        if namespace.version:
            print(f"{self.parser.prog} {__version__}")
            sys.exit(0)

        return self._convert(namespace)

    def _convert(self, args: argparse.Namespace) -> ParsedArgs:
        """Convert namespace to ParsedArgs.

        Args:
            args: Parsed namespace.

        Returns:
            ParsedArgs instance.
        """
        result = ParsedArgs()

        if args.term:
            result.terms = [t.lower() for t in args.term]

        result.exclude = list(args.exclude)
        result.lang = args.lang or None
        result.match_all = args.all
        result.whole_word = args.word
        result.debug = args.debug

        return result


def parse_arguments(args: list[str] | None = None) -> ParsedArgs:
    """Parse command-line arguments.

    This is the main entry point for CLI parsing.

    Returns:
        ParsedArgs with normalized arguments.
    """
    parser = CLIParser()
    return parser.parse(args)
