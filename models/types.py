"""Core type definitions for the stream search client.

This module contains shared type definitions and constants used
throughout the application.
"""

from __future__ import annotations

from enum import Enum


class Align(str, Enum):
    """Horizontal alignment of a table column."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


# Constants for the Twitch API
TWITCH_TOKEN_URL = "https://id.twitch.tv/oauth2/token"
TWITCH_STREAMS_URL = "https://api.twitch.tv/helix/streams"
TWITCH_CHANNEL_BASE = "https://twitch.tv"

# "Software and Game Development" category
DEFAULT_GAME_ID = "1469308723"

# Largest page the listing endpoint will return
MAX_PAGE_SIZE = 100

TABLE_COLUMNS = 5

# language, channel url, viewers, live duration, title
TableRow = tuple[str, str, str, str, str]
