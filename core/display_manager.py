"""Progress display while pages are being fetched."""

from __future__ import annotations

from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner
from rich.text import Text

from terminal.theme import theme


class DisplayManager:
    """Shows fetch progress on the console.

    On a terminal a spinner reports the page and stream counts. Otherwise
    a single dot is written per page so redirected output stays readable.
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the display manager.

        Args:
            console: Console to draw on. Creates one if not provided.
        """
        self.console = console or Console()
        self.live: Live | None = None
        self.api_spinner = Spinner("dots", text="Fetching Streams", style=theme.colors.WARNING)
        self.api_pages = 0
        self.api_items = 0
        self.api_active = False

    @property
    def interactive(self) -> bool:
        return self.console.is_terminal

    def _create_display(self) -> Spinner:
        text = Text("Fetching Streams ", style=theme.styles.BOLD)
        text.append("| Page ", style=theme.colors.TEXT_DIM)
        text.append(str(self.api_pages), style=theme.styles.COUNT_CURRENT)
        text.append(" | Streams ", style=theme.colors.TEXT_DIM)
        text.append(str(self.api_items), style=theme.styles.COUNT_TOTAL)
        self.api_spinner.update(text=text)
        return self.api_spinner

    def start_api_fetch(self) -> None:
        """Start the fetch section."""
        self.api_active = True
        self.api_pages = 0
        self.api_items = 0
        if self.interactive and self.live is None:
            self.live = Live(
                self._create_display(),
                console=self.console,
                refresh_per_second=10,
                transient=True,
            )
            self.live.start()

    def update_api_progress(self, pages: int, items: int) -> None:
        """Update fetch progress.

        Args:
            pages: Pages fetched so far
            items: Streams fetched so far
        """
        self.api_pages = pages
        self.api_items = items
        if self.live is not None:
            self.live.update(self._create_display())
        elif self.api_active:
            self.console.file.write(".")
            self.console.file.flush()

    def complete_api_fetch(self) -> None:
        """Close the fetch section and leave the cursor on a fresh line."""
        if self.live is not None:
            self.live.stop()
            self.live = None
        elif self.api_active:
            self.console.file.write("\n")
            self.console.file.flush()
        self.api_active = False
