"""
Factory for creating Instagram Graph client instances with proper initialization.
"""

from __future__ import annotations

from instagram_client.clients.graph_client import InstagramGraphClient
from instagram_client.clients.synchronized_client import SynchronizedClient
from instagram_client.clients.transport import HttpTransport, RequestsTransport
from instagram_client.config import ClientSettings, ConfigManager, InstagramCredentials
from instagram_client.exceptions import ConfigurationError


class InstagramClientFactory:
    """Factory for creating properly initialized Graph API clients."""

    @staticmethod
    def create_from_config(
        config_manager: ConfigManager,
        *,
        synchronized: bool = False,
    ) -> InstagramGraphClient | SynchronizedClient:
        """
        Create a client from credentials and settings held by ``config_manager``.

        Args:
            config_manager: ConfigManager instance with loaded credentials
            synchronized: Wrap the client in a lock for multi-threaded use

        Raises:
            ConfigurationError: If credentials are missing or invalid
        """
        credentials = config_manager.load_credentials()
        settings = config_manager.load_settings()
        return InstagramClientFactory.create_from_credentials(
            credentials, settings, synchronized=synchronized
        )

    @staticmethod
    def create_from_credentials(
        credentials: InstagramCredentials,
        settings: ClientSettings | None = None,
        *,
        transport: HttpTransport | None = None,
        synchronized: bool = False,
    ) -> InstagramGraphClient | SynchronizedClient:
        """
        Create a client directly from credentials.

        Args:
            credentials: InstagramCredentials with an access token
            settings: Transport settings (defaults apply when omitted)
            transport: Pre-built transport; ``settings`` is ignored when given
            synchronized: Wrap the client in a lock for multi-threaded use

        Raises:
            ConfigurationError: If the access token is missing
        """
        if not credentials.access_token:
            raise ConfigurationError("Access token is required")

        if transport is None:
            settings = settings or ClientSettings()
            transport = RequestsTransport(
                settings.base_url,
                timeout=settings.timeout,
                user_agent=settings.user_agent,
            )

        client = InstagramGraphClient(credentials.access_token, transport)
        if synchronized:
            return SynchronizedClient(client)
        return client
