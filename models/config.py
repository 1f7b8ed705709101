"""Configuration data models."""

from __future__ import annotations

from dataclasses import dataclass, field

from models.types import DEFAULT_GAME_ID, MAX_PAGE_SIZE


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration.

    Built once from the environment by ConfigManager and handed to the API
    client, so nothing below the entry point reads environment variables.
    """

    client_id: str
    client_secret: str
    ignore_list: tuple[str, ...] = field(default_factory=tuple)
    https_proxy: str | None = None
    request_timeout: float | None = None
    game_id: str = DEFAULT_GAME_ID
    page_size: int = MAX_PAGE_SIZE

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.client_id:
            raise ValueError("client_id cannot be empty")
        if not self.client_secret:
            raise ValueError("client_secret cannot be empty")
        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be between 1 and {MAX_PAGE_SIZE}")

    @property
    def proxies(self) -> dict[str, str] | None:
        """Proxy mapping in the form ``requests`` expects."""
        if not self.https_proxy:
            return None
        return {"https": self.https_proxy}
