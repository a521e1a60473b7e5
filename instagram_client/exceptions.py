"""
Domain specific exception hierarchy for the instagram_client package.
"""

INVALID_ACCESS_TOKEN_MESSAGE = "Invalid or expired access token"


class InstagramClientError(Exception):
    """Base exception for all library errors."""


class ConfigurationError(InstagramClientError):
    """Raised when required configuration or credentials are missing."""


class AuthenticationError(InstagramClientError):
    """Raised when the access token is rejected by the Graph API."""


class InvalidAccessToken(AuthenticationError):
    """Raised for error code 190 or any error mentioning the access token."""

    def __init__(self) -> None:
        super().__init__(INVALID_ACCESS_TOKEN_MESSAGE)


class ApiResponseError(InstagramClientError):
    """Raised when the Graph API returns an error payload."""

    def __init__(self, message: str, *, code: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class NetworkError(InstagramClientError):
    """Raised when the transport fails without a usable error envelope."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
