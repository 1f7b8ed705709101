"""Terminal presentation layer for the stream search client.

Provides CLI parsing, theming and the Rich help screen.
"""

from .cli import CLIParser, ParsedArgs, __version__, parse_arguments
from .formatter import HelpRenderer, UsageFormatter
from .theme import Theme, theme

__all__ = [
    # CLI
    "CLIParser",
    "ParsedArgs",
    "parse_arguments",
    "__version__",
    # Help
    "HelpRenderer",
    "UsageFormatter",
    # Theme
    "Theme",
    "theme",
]
