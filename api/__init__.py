"""Twitch API access."""

from api.client import AccessTokenProvider, StreamPage, TwitchClient

__all__ = ["AccessTokenProvider", "StreamPage", "TwitchClient"]
