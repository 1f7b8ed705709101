"""Configuration loading from environment variables with validation."""

from __future__ import annotations

import math
import os
from collections.abc import Mapping

from core.exceptions import ConfigError
from models.config import AppConfig
from models.types import DEFAULT_GAME_ID


class ConfigManager:
    """Builds an AppConfig from the process environment.

    Each setting has a primary variable name and, where the older tooling
    used one, a ``TWITCH_``-prefixed fallback.
    """

    CLIENT_ID_VARS = ("CLIENT_ID", "TWITCH_CLIENT_ID")
    CLIENT_SECRET_VARS = ("CLIENT_SECRET", "TWITCH_CLIENT_SECRET")
    IGNORE_LIST_VARS = ("IGNORE_LIST", "TWITCH_IGNORE")
    PROXY_VARS = ("HTTPS_PROXY", "https_proxy")
    TIMEOUT_VAR = "REQUEST_TIMEOUT"
    GAME_ID_VAR = "GAME_ID"

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        """Initialize ConfigManager.

        Args:
            environ: Mapping to read variables from. Uses os.environ if None.
        """
        self.environ = os.environ if environ is None else environ

    def _lookup(self, names: tuple[str, ...]) -> str | None:
        for name in names:
            value = self.environ.get(name)
            if value:
                return value
        return None

    def _require(self, names: tuple[str, ...], description: str) -> str:
        value = self._lookup(names)
        if value is None:
            raise ConfigError.missing(names[0], description)
        return value

    def _parse_timeout(self) -> float | None:
        raw = self.environ.get(self.TIMEOUT_VAR)
        if not raw:
            return None
        try:
            timeout = float(raw)
        except ValueError:
            timeout = 0.0
        if not math.isfinite(timeout) or timeout <= 0:
            raise ConfigError(
                f"{self.TIMEOUT_VAR} must be a positive number of seconds, got {raw!r}",
                variable=self.TIMEOUT_VAR,
            )
        return timeout

    def ignore_list(self) -> tuple[str, ...]:
        """Channel names from the comma-separated ignore variable."""
        raw = self._lookup(self.IGNORE_LIST_VARS)
        if raw is None:
            return ()
        return tuple(name.strip() for name in raw.split(",") if name.strip())

    def load_config(self) -> AppConfig:
        """Load and validate configuration.

        Credentials are checked here so a missing one is reported before any
        network call is attempted.

        Returns:
            AppConfig instance.

        Raises:
            ConfigError: If a credential is missing or a value is invalid.
        """
        client_id = self._require(self.CLIENT_ID_VARS, "Client id")
        client_secret = self._require(self.CLIENT_SECRET_VARS, "Client secret")

        return AppConfig(
            client_id=client_id,
            client_secret=client_secret,
            ignore_list=self.ignore_list(),
            https_proxy=self._lookup(self.PROXY_VARS),
            request_timeout=self._parse_timeout(),
            game_id=self.environ.get(self.GAME_ID_VAR) or DEFAULT_GAME_ID,
        )
