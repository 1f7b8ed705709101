"""Help content data structures for the CLI help formatter.

Defines all help text, examples, and option descriptions in a structured way.
"""

from __future__ import annotations

from dataclasses import dataclass, field


class HelpStyles:
    """Color and style constants for help output."""

    # Main styles
    TITLE = "bold cadet_blue"
    SUBTITLE = "pale_turquoise4"
    BORDER = "cadet_blue"

    # Section headers
    SECTION_HEADER = "bold bright_white"
    SECTION_DIM = "dim"

    # Command styles
    ARGUMENT_COMMAND = "bold steel_blue"
    OPTION_COMMAND = "bold sky_blue3"

    EXAMPLE_TITLE = "bold light_sky_blue3"
    EXAMPLE_COMMAND = "dark_slate_gray3"

    NOTE_BULLET = "bold sky_blue3"

    # Usage line
    USAGE_HEADER = "bold bright_white"
    USAGE_PROGRAM = "white"
    USAGE_COMMAND = "bold cadet_blue"
    USAGE_OPTIONS = "pale_turquoise4"


@dataclass
class CommandItem:
    """Represents a single argument or option."""
    command: str
    description: str


@dataclass
class ExampleItem:
    """Represents a usage example."""
    title: str
    command: str


@dataclass
class HelpSection:
    """Represents a section in the help output."""
    title: str
    subtitle: str = ""
    items: list[CommandItem] = field(default_factory=lambda: [])


class HelpContent:
    """Central repository for all CLI help content."""

    APP_TITLE = "Stream Search"
    APP_DESCRIPTION = "Search live Twitch streams in the Software and Game Development category"

    USAGE_PROGRAM = "stream-search"
    USAGE_COMMAND_PLACEHOLDER = "[TERM ...]"
    USAGE_OPTIONS_PLACEHOLDER = "[options]"

    ARGUMENTS = HelpSection(
        title="Arguments",
        subtitle="Terms are matched case-insensitively against stream titles",
        items=[
            CommandItem(
                "TERM ...",
                "Words to look for; without any term every stream is listed"
            ),
        ]
    )

    SEARCH_OPTIONS = HelpSection(
        title="Search Options",
        items=[
            CommandItem("--exclude, -x NAME ...", "Channels to hide (repeatable, comma lists allowed)"),
            CommandItem("--lang, -l CODE", "Only show streams in this language (en, fr, ...)"),
            CommandItem("--all, -a", "Require matching all terms, instead of just any"),
            CommandItem("--word, -w", "Only match terms on word boundaries"),
        ]
    )

    GENERAL_OPTIONS = HelpSection(
        title="General Options",
        items=[
            CommandItem("--debug", "Enable debug logging to the logs folder"),
            CommandItem("--version", "Show the version and exit"),
            CommandItem("--help, -h", "Show this help message"),
        ]
    )

    EXAMPLES = [
        ExampleItem("List every live stream:", "stream-search"),
        ExampleItem("Streams about rust or python:", "stream-search rust python"),
        ExampleItem("English streams mentioning both words:", "stream-search -l en -a game engine"),
        ExampleItem("Whole word only, hiding a channel:", "stream-search -w c -x somechannel"),
    ]

    NOTES = [
        ("!", "CLIENT_ID and CLIENT_SECRET must be set in the environment"),
        ("i", "IGNORE_LIST adds comma-separated channels to --exclude"),
        ("i", "HTTPS_PROXY and REQUEST_TIMEOUT are honored when set"),
    ]
