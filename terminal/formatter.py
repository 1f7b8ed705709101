"""Custom help formatter for argparse using Rich library.

Provides colorful, well-organized help output for the CLI.
"""

from __future__ import annotations

import argparse
from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from .help_content import HelpContent, HelpSection, HelpStyles


class HelpRenderer:
    """Renders help content using Rich formatting."""

    def __init__(self, console: Console) -> None:
        """Initialize the help renderer.

        Args:
            console: Rich Console instance for output.
        """
        self.console = console
        self.content = HelpContent()
        self.styles = HelpStyles()

    def render_title_panel(self) -> None:
        """Render the main title panel with app name and description."""
        title = Text(self.content.APP_TITLE, style=self.styles.TITLE)
        subtitle = Text(self.content.APP_DESCRIPTION, style=self.styles.SUBTITLE)

        self.console.print()
        self.console.print(Panel(
            title + "\n" + subtitle,
            border_style=self.styles.BORDER,
            padding=(1, 2)
        ))

    def render_usage(self) -> None:
        """Render the usage line."""
        self.console.print()
        self.console.print(
            f"  [{self.styles.USAGE_HEADER}]Usage:[/{self.styles.USAGE_HEADER}] "
            f"[{self.styles.USAGE_PROGRAM}]{self.content.USAGE_PROGRAM}[/{self.styles.USAGE_PROGRAM}] "
            f"[{self.styles.USAGE_OPTIONS}]{escape(self.content.USAGE_OPTIONS_PLACEHOLDER)}[/{self.styles.USAGE_OPTIONS}] "
            f"[{self.styles.USAGE_COMMAND}]{escape(self.content.USAGE_COMMAND_PLACEHOLDER)}[/{self.styles.USAGE_COMMAND}]",
            highlight=False,
        )
        self.console.print()

    def render_section(
        self,
        section: HelpSection,
        command_style: str,
        command_width: int = 26,
    ) -> None:
        """Render a section with options and descriptions.

        Args:
            section: Section to render.
            command_style: Style for option text.
            command_width: Width for option column formatting.
        """
        subtitle = section.subtitle
        subtitle_text = f" [{self.styles.SECTION_DIM}]{subtitle}[/{self.styles.SECTION_DIM}]" if subtitle else ""
        self.console.print(
            f"  [{self.styles.SECTION_HEADER}]{section.title}[/{self.styles.SECTION_HEADER}]{subtitle_text}"
        )

        for item in section.items:
            self.console.print(
                f"    [{command_style}]{item.command:<{command_width}}[/{command_style}] "
                f"{item.description}",
                highlight=False,
            )
        self.console.print()

    def render_examples(self) -> None:
        """Render the examples section."""
        self.console.print(
            f"  [{self.styles.SECTION_HEADER}]Examples[/{self.styles.SECTION_HEADER}]"
        )

        for example in self.content.EXAMPLES:
            self.console.print(
                f"    [{self.styles.EXAMPLE_TITLE}]{example.title}[/{self.styles.EXAMPLE_TITLE}]"
            )
            self.console.print(
                f"      [{self.styles.EXAMPLE_COMMAND}]$ {example.command}[/{self.styles.EXAMPLE_COMMAND}]",
                highlight=False,
            )

    def render_notes(self) -> None:
        """Render the notes section."""
        self.console.print()
        self.console.print(
            f"  [{self.styles.SECTION_HEADER}]Notes[/{self.styles.SECTION_HEADER}]"
        )

        for icon, note in self.content.NOTES:
            self.console.print(
                f"    [{self.styles.NOTE_BULLET}]{icon}[/{self.styles.NOTE_BULLET}] {note}",
                highlight=False,
            )

        self.console.print()

    def render_all(self) -> None:
        """Render all help sections to the console."""
        self.render_title_panel()
        self.render_usage()
        self.render_section(self.content.ARGUMENTS, self.styles.ARGUMENT_COMMAND)
        self.render_section(self.content.SEARCH_OPTIONS, self.styles.OPTION_COMMAND)
        self.render_section(self.content.GENERAL_OPTIONS, self.styles.OPTION_COMMAND)
        self.render_examples()
        self.render_notes()


class UsageFormatter(argparse.RawDescriptionHelpFormatter):
    """Argparse formatter whose usage line matches the Rich help screen.

    The full help is drawn by HelpRenderer; argparse itself only prints the
    usage line in front of its error messages.
    """

    def _format_usage(
        self,
        usage: str | None,
        actions: Iterable[argparse.Action],
        groups: Iterable[object],
        prefix: str | None,
    ) -> str:
        """Override to print a short fixed usage line."""
        if prefix is None:
            prefix = "usage: "
        content = HelpContent()
        return (
            f"{prefix}{content.USAGE_PROGRAM} "
            f"{content.USAGE_OPTIONS_PLACEHOLDER} {content.USAGE_COMMAND_PLACEHOLDER}\n\n"
        )
