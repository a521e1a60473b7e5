"""
Read-only client for the Instagram Graph API with media analytics.
"""

from instagram_client.analytics import MediaAnalyzer, analyze
from instagram_client.clients.graph_client import InstagramGraphClient, classify_error
from instagram_client.clients.synchronized_client import SynchronizedClient
from instagram_client.exceptions import (
    ApiResponseError,
    AuthenticationError,
    ConfigurationError,
    InstagramClientError,
    InvalidAccessToken,
    NetworkError,
)
from instagram_client.factory import InstagramClientFactory

__all__ = [
    "ApiResponseError",
    "AuthenticationError",
    "ConfigurationError",
    "InstagramClientError",
    "InstagramClientFactory",
    "InstagramGraphClient",
    "InvalidAccessToken",
    "MediaAnalyzer",
    "NetworkError",
    "SynchronizedClient",
    "analyze",
    "classify_error",
]
