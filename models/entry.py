"""Stream entry data model and decoding of raw API records."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone

from core.exceptions import DecodeError
from models.types import TWITCH_CHANNEL_BASE, TableRow

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def format_duration(started_at: object, now: datetime | None = None) -> str:
    """Render the time elapsed since ``started_at`` as ``HH:MM``.

    Hours are not wrapped at 24 and may take more than two digits. Anything
    that is not a parseable ISO-8601 string yields an empty string.

    Args:
        started_at: Raw ``started_at`` value from the API.
        now: Reference time, defaults to the current UTC time.

    Returns:
        Formatted duration, or "" if the timestamp cannot be used.
    """
    if not isinstance(started_at, str) or not started_at:
        return ""

    value = started_at.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"

    try:
        start = datetime.fromisoformat(value)
    except ValueError:
        return ""

    if start.tzinfo is None:
        start = start.replace(tzinfo=timezone.utc)

    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    elapsed_minutes = max(0, int((now - start).total_seconds() // 60))
    hours, minutes = divmod(elapsed_minutes, 60)
    return f"{hours:02d}:{minutes:02d}"


def sanitize_title(title: str) -> str:
    """Replace every control character in a title with a space."""
    return _CONTROL_CHARS.sub(" ", title)


def _require_str(raw: dict[str, object], key: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str):
        raise DecodeError(key, "a string")
    return value


def _require_int(raw: dict[str, object], key: str) -> int:
    value = raw.get(key)
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(key, "an integer")
    return value


@dataclass(frozen=True)
class StreamEntry:
    """One live broadcast as returned by the listing endpoint."""

    language: str
    display_name: str
    title: str
    viewer_count: int
    live_duration: str = ""

    @classmethod
    def from_api(cls, raw: object, now: datetime | None = None) -> StreamEntry:
        """Decode one element of the listing response's ``data`` array.

        Args:
            raw: Parsed JSON record.
            now: Reference time for the live duration.

        Returns:
            StreamEntry instance.

        Raises:
            DecodeError: If a required field is missing or has the wrong type.
        """
        if not isinstance(raw, dict):
            raise DecodeError("data[]", "an object")

        return cls(
            language=_require_str(raw, "language"),
            display_name=_require_str(raw, "user_name"),
            title=_require_str(raw, "title"),
            viewer_count=_require_int(raw, "viewer_count"),
            live_duration=format_duration(raw.get("started_at"), now),
        )

    @property
    def channel_url(self) -> str:
        """Public URL of the channel."""
        return f"{TWITCH_CHANNEL_BASE}/{self.display_name}"

    def to_row(self) -> TableRow:
        """Convert to the five display cells of a table row."""
        return (
            self.language,
            self.channel_url,
            f"{self.viewer_count} viewers",
            self.live_duration,
            sanitize_title(self.title),
        )
