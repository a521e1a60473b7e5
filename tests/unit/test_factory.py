from __future__ import annotations

from unittest.mock import Mock, patch

import pytest

from instagram_client.clients.graph_client import InstagramGraphClient
from instagram_client.clients.synchronized_client import SynchronizedClient
from instagram_client.config import ClientSettings, ConfigManager, InstagramCredentials
from instagram_client.exceptions import ConfigurationError
from instagram_client.factory import InstagramClientFactory


def test_create_from_config_builds_transport_from_settings() -> None:
    config = Mock(spec=ConfigManager)
    config.load_credentials.return_value = InstagramCredentials(access_token="test_token")
    config.load_settings.return_value = ClientSettings(
        base_url="http://localhost:9000", timeout=5.0, user_agent="test-agent"
    )

    with patch("instagram_client.factory.RequestsTransport") as mock_transport:
        client = InstagramClientFactory.create_from_config(config)

    mock_transport.assert_called_once_with(
        "http://localhost:9000",
        timeout=5.0,
        user_agent="test-agent",
    )
    assert isinstance(client, InstagramGraphClient)
    assert client.get_access_token() == "test_token"


def test_create_from_credentials_requires_access_token() -> None:
    with pytest.raises(ConfigurationError, match="Access token is required"):
        InstagramClientFactory.create_from_credentials(InstagramCredentials(access_token=None))


def test_create_from_credentials_uses_given_transport() -> None:
    transport = Mock()
    transport.request.return_value = Mock(status=200, body='{"id": "1"}')

    client = InstagramClientFactory.create_from_credentials(
        InstagramCredentials(access_token="tok"), transport=transport
    )

    assert client.get_user_profile() == {"id": "1"}
    transport.request.assert_called_once()


def test_create_from_credentials_can_wrap_in_lock() -> None:
    client = InstagramClientFactory.create_from_credentials(
        InstagramCredentials(access_token="tok"),
        transport=Mock(),
        synchronized=True,
    )

    assert isinstance(client, SynchronizedClient)
    assert client.get_access_token() == "tok"
