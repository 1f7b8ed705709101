"""Centralized theme configuration for Rich UI components.

This module defines the colors and styles used by the progress display and
the help screen. Result tables are printed unstyled.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeColors:
    """Core color palette for the application."""

    # Primary colors
    PRIMARY: str = "bright_blue"
    SECONDARY: str = "cyan"

    # Status colors
    SUCCESS: str = "green"
    WARNING: str = "orange3"
    ERROR: str = "red"

    # Text colors
    TEXT: str = "white"
    TEXT_DIM: str = "dim"


@dataclass(frozen=True)
class ThemeStyles:
    """Composite styles combining colors with formatting."""

    BOLD: str = "bold"

    # Counter styles
    COUNT_CURRENT: str = "bold cyan"
    COUNT_TOTAL: str = "medium_purple"


class Theme:
    """Main theme class providing access to all theme components.

    Usage:
        from terminal.theme import theme

        text.append("3", style=theme.styles.COUNT_CURRENT)
    """

    colors = ThemeColors()
    styles = ThemeStyles()


# Global theme instance for easy import
theme = Theme()
