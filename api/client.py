"""Twitch Helix API client for fetching live streams."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime

from core.exceptions import ProtocolError
from models.config import AppConfig
from models.entry import StreamEntry
from models.types import TWITCH_STREAMS_URL, TWITCH_TOKEN_URL
from utilities.logging_utils import safe_log
from utilities.network import read_json_object, send_request


@dataclass(frozen=True)
class StreamPage:
    """One decoded page of the listing endpoint."""

    number: int
    entries: list[StreamEntry]
    cursor: str | None


class AccessTokenProvider:
    """Exchanges client credentials for an app access token."""

    TOKEN_URL = TWITCH_TOKEN_URL

    def __init__(self, config: AppConfig) -> None:
        """Initialize the token provider.

        Args:
            config: Application configuration holding the credentials.
        """
        self.config = config

    def acquire(self) -> str:
        """Perform the client-credentials exchange.

        Returns:
            Bearer token string.

        Raises:
            NetworkError: If the request cannot be completed.
            ProtocolError: If the response carries no access token.
        """
        safe_log("Token Request: client_credentials\n", level="DEBUG")

        resp = send_request(
            "POST",
            self.TOKEN_URL,
            data={
                "client_id": self.config.client_id,
                "client_secret": self.config.client_secret,
                "grant_type": "client_credentials",
            },
            proxies=self.config.proxies,
            timeout=self.config.request_timeout,
        )

        body = read_json_object(resp, "access token")
        token = body.get("access_token")
        if not isinstance(token, str):
            raise ProtocolError("Failed to parse access token", "no 'access_token' string in response")

        safe_log("Token Response: access token acquired\n", level="DEBUG")
        return token


class TwitchClient:
    """Client for the Helix streams listing.

    Follows the pagination cursor until the API stops returning one. Pages are
    yielded as they arrive so callers can report progress.
    """

    API_BASE = TWITCH_STREAMS_URL

    def __init__(self, access_token: str, config: AppConfig) -> None:
        """Initialize the Helix client.

        Args:
            access_token: Bearer token from AccessTokenProvider.
            config: Application configuration.
        """
        self.config = config
        self.headers = {
            "Authorization": f"Bearer {access_token}",
            "Client-Id": config.client_id,
        }

    def fetch_page(
        self,
        cursor: str | None = None,
        number: int = 1,
        now: datetime | None = None,
    ) -> StreamPage:
        """Fetch and decode a single page of live streams.

        Args:
            cursor: Cursor from the previous page, None for the first page.
            number: Page number, used for logging only.
            now: Reference time for live durations.

        Returns:
            The decoded page.

        Raises:
            NetworkError: If the request fails.
            ProtocolError: If the body has no ``data`` array.
            DecodeError: If any record is malformed.
        """
        params: dict[str, str | int] = {
            "game_id": self.config.game_id,
            "first": self.config.page_size,
        }
        if cursor:
            params["after"] = cursor

        safe_log(
            f"Api Request: Page {number} | Cursor {cursor or '0'}\n",
            level="DEBUG",
        )

        resp = send_request(
            "GET",
            self.API_BASE,
            headers=self.headers,
            params=params,
            proxies=self.config.proxies,
            timeout=self.config.request_timeout,
        )

        body = read_json_object(resp, "streams")
        items = body.get("data")
        if not isinstance(items, list):
            raise ProtocolError("Failed to parse streams", "response has no 'data' array")

        entries = [StreamEntry.from_api(item, now) for item in items]

        next_cursor: str | None = None
        pagination = body.get("pagination")
        if isinstance(pagination, dict):
            value = pagination.get("cursor")
            if isinstance(value, str) and value:
                next_cursor = value

        safe_log(
            f"Api Response: Page {number} | Items {len(entries)}\n",
            level="DEBUG",
        )
        return StreamPage(number=number, entries=entries, cursor=next_cursor)

    def iter_pages(self, now: datetime | None = None) -> Iterator[StreamPage]:
        """Yield every page of live streams in order.

        Any failure is raised from the generator and ends the iteration.
        """
        cursor: str | None = None
        number = 1

        while True:
            page = self.fetch_page(cursor, number, now)
            yield page

            if page.cursor is None:
                break

            cursor = page.cursor
            number += 1

    def fetch_all(self, now: datetime | None = None) -> list[StreamEntry]:
        """Fetch every live stream across all pages."""
        all_entries: list[StreamEntry] = []
        for page in self.iter_pages(now):
            all_entries.extend(page.entries)
        return all_entries
