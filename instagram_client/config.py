"""
Configuration management utilities for instagram_client.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence

from dotenv import dotenv_values

from instagram_client.clients.transport import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
)
from instagram_client.exceptions import ConfigurationError

ENV_VAR_MAP = {
    "access_token": "INSTAGRAM_ACCESS_TOKEN",
}

SETTINGS_ENV_VAR_MAP = {
    "base_url": "INSTAGRAM_BASE_URL",
    "timeout": "INSTAGRAM_TIMEOUT",
    "user_agent": "INSTAGRAM_USER_AGENT",
}


@dataclass(slots=True)
class InstagramCredentials:
    """Credential container; the Graph API only needs a bearer access token."""

    access_token: str | None = None

    def is_empty(self) -> bool:
        return self.access_token in (None, "")

    @classmethod
    def from_mapping(cls, data: Mapping[str, str | None]) -> "InstagramCredentials":
        return cls(access_token=data.get("access_token"))


@dataclass(slots=True)
class ClientSettings:
    """Transport settings fixed at construction time."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT


class ConfigManager:
    """Loads credentials and settings from the environment, a .env file or disk."""

    def __init__(
        self,
        credential_path: Path | None = None,
        *,
        env: Mapping[str, str] | None = None,
        dotenv_path: Path | None = None,
    ) -> None:
        self._credential_path = credential_path or Path("credentials/instagram_config.json")
        self._env = os.environ if env is None else env
        self._dotenv_path = dotenv_path or Path(".env")

    def load_credentials(
        self,
        priority: Sequence[str] = ("env", "dotenv", "file"),
    ) -> InstagramCredentials:
        """
        Load credentials according to the requested priority order.

        Raises:
            ConfigurationError: when no credentials are available.
        """

        for source in priority:
            if source == "env":
                credentials = self._load_from_env()
            elif source == "dotenv":
                credentials = self._load_from_dotenv()
            elif source == "file":
                credentials = self._load_from_file()
            else:
                raise ValueError(f"Unknown credential source '{source}'.")

            if credentials and not credentials.is_empty():
                return credentials

        raise ConfigurationError("Instagram access token is not configured.")

    def load_settings(self) -> ClientSettings:
        """Read transport settings; the environment wins over the .env file."""

        values = {**self._dotenv_mapping(), **dict(self._env)}
        settings = ClientSettings()

        base_url = values.get(SETTINGS_ENV_VAR_MAP["base_url"])
        if base_url:
            settings.base_url = base_url

        user_agent = values.get(SETTINGS_ENV_VAR_MAP["user_agent"])
        if user_agent:
            settings.user_agent = user_agent

        timeout = values.get(SETTINGS_ENV_VAR_MAP["timeout"])
        if timeout:
            try:
                settings.timeout = float(timeout)
            except ValueError as exc:
                raise ConfigurationError(
                    f"{SETTINGS_ENV_VAR_MAP['timeout']} must be a number, got '{timeout}'."
                ) from exc
            if settings.timeout <= 0:
                raise ConfigurationError(
                    f"{SETTINGS_ENV_VAR_MAP['timeout']} must be positive."
                )

        return settings

    def _load_from_env(self) -> InstagramCredentials | None:
        values: dict[str, str | None] = {
            field: self._env.get(env_name) for field, env_name in ENV_VAR_MAP.items()
        }
        credentials = InstagramCredentials.from_mapping(values)
        return credentials if not credentials.is_empty() else None

    def _load_from_dotenv(self) -> InstagramCredentials | None:
        dotenv = self._dotenv_mapping()
        values = {field: dotenv.get(env_name) for field, env_name in ENV_VAR_MAP.items()}
        credentials = InstagramCredentials.from_mapping(values)
        return credentials if not credentials.is_empty() else None

    def _dotenv_mapping(self) -> dict[str, str | None]:
        if not self._dotenv_path.exists():
            return {}
        return dict(dotenv_values(self._dotenv_path))

    def _load_from_file(self) -> InstagramCredentials | None:
        if not self._credential_path.exists():
            return None

        with self._credential_path.open("r", encoding="utf-8") as fp:
            data = json.load(fp)

        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Credential file {self._credential_path} did not contain a mapping."
            )

        credentials = InstagramCredentials.from_mapping(data)
        return credentials if not credentials.is_empty() else None
