"""Data models for the stream search client."""

from models.config import AppConfig
from models.entry import StreamEntry, format_duration, sanitize_title
from models.types import (
    DEFAULT_GAME_ID,
    MAX_PAGE_SIZE,
    TABLE_COLUMNS,
    TWITCH_CHANNEL_BASE,
    TWITCH_STREAMS_URL,
    TWITCH_TOKEN_URL,
    Align,
    TableRow,
)

__all__ = [
    "Align",
    "AppConfig",
    "DEFAULT_GAME_ID",
    "format_duration",
    "MAX_PAGE_SIZE",
    "sanitize_title",
    "StreamEntry",
    "TABLE_COLUMNS",
    "TableRow",
    "TWITCH_CHANNEL_BASE",
    "TWITCH_STREAMS_URL",
    "TWITCH_TOKEN_URL",
]
