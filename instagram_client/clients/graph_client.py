"""
Read-only client for the Instagram Graph API.

Every operation is a single GET round trip. Payloads are returned exactly as
decoded; failures are converted into the domain exceptions by
``classify_error`` regardless of whether the error envelope arrived with a
2xx status or attached to a transport failure.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping

from instagram_client.clients.transport import (
    HttpTransport,
    RequestsTransport,
    TransportError,
    TransportResponse,
)
from instagram_client.exceptions import (
    ApiResponseError,
    InstagramClientError,
    InvalidAccessToken,
    NetworkError,
)
from instagram_client.utils.logging import get_logger

logger = get_logger(__name__)

MAX_MEDIA_LIMIT = 200
INVALID_TOKEN_CODE = 190

MEDIA_FIELDS = "id,caption,media_type,media_url,permalink,thumbnail_url,timestamp,username"
CHILDREN_FIELDS = "children{id,media_type,media_url,thumbnail_url}"


@dataclass(frozen=True, slots=True)
class Endpoint:
    """Static description of one Graph API operation."""

    method: str
    path: str
    fields: str | None = None
    params: tuple[tuple[str, str], ...] = ()

    def build_path(self, **path_params: str) -> str:
        return self.path.format(**path_params)


USER_PROFILE = Endpoint("GET", "/me", "id,username,account_type,media_count")
USER_MEDIA = Endpoint("GET", "/me/media", MEDIA_FIELDS)
MEDIA_DETAILS = Endpoint("GET", "/{media_id}", f"{MEDIA_FIELDS},{CHILDREN_FIELDS}")
REFRESH_TOKEN = Endpoint(
    "GET", "/refresh_access_token", params=(("grant_type", "ig_refresh_token"),)
)
TOKEN_INFO = Endpoint("GET", "/access_token")


def classify_error(envelope: Mapping[str, Any], fallback_code: int = 0) -> InstagramClientError:
    """
    Map an ``{"message": ..., "code": ...}`` error object onto the taxonomy.

    Args:
        envelope: The value under the ``error`` key of a response body.
        fallback_code: Code to report when the envelope carries none.

    Returns:
        ``InvalidAccessToken`` for code 190 or a message mentioning the access
        token, ``ApiResponseError`` otherwise.
    """
    message = envelope.get("message")
    if not isinstance(message, str) or not message:
        message = "Unknown error"
    code = envelope.get("code")
    if code is None:
        code = fallback_code

    if code == INVALID_TOKEN_CODE or "access token" in message.lower():
        return InvalidAccessToken()
    return ApiResponseError(message, code=code)


def _error_envelope(payload: Any) -> Mapping[str, Any] | None:
    """Return the error object of a body, or ``None`` when the body is not an error.

    Any non-null ``error`` value marks the body as an error; one that is not an
    object carries no message or code.
    """
    if not isinstance(payload, Mapping):
        return None
    error = payload.get("error")
    if error is None:
        return None
    if isinstance(error, Mapping):
        return error
    return {}


class InstagramGraphClient:
    """Thin client that owns the access token and delegates I/O to a transport."""

    def __init__(self, access_token: str, transport: HttpTransport | None = None) -> None:
        self._access_token = access_token
        self._transport = transport or RequestsTransport()

    @property
    def access_token(self) -> str:
        return self._access_token

    @access_token.setter
    def access_token(self, value: str) -> None:
        self._access_token = value

    def set_access_token(self, access_token: str) -> None:
        """Replace the token; takes effect on the next call."""
        self._access_token = access_token

    def get_access_token(self) -> str:
        return self._access_token

    def close(self) -> None:
        """Release the transport's connections, if it holds any."""
        close = getattr(self._transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "InstagramGraphClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def get_user_profile(self) -> Any:
        return self._invoke(USER_PROFILE)

    def get_user_media(self, limit: int = 25) -> Any:
        # Values <= 0 are forwarded as-is; the API decides what they mean.
        return self._invoke(USER_MEDIA, {"limit": min(limit, MAX_MEDIA_LIMIT)})

    def get_media_details(self, media_id: str) -> Any:
        return self._invoke(MEDIA_DETAILS, path_params={"media_id": media_id})

    def refresh_access_token(self) -> Any:
        """Extend the token's lifetime remotely.

        The returned token is not installed; pass it to ``set_access_token``.
        """
        return self._invoke(REFRESH_TOKEN)

    def get_token_info(self) -> Any:
        return self._invoke(TOKEN_INFO)

    def _invoke(
        self,
        endpoint: Endpoint,
        params: Mapping[str, Any] | None = None,
        *,
        path_params: Mapping[str, str] | None = None,
    ) -> Any:
        path = endpoint.build_path(**(path_params or {}))
        payload: dict[str, Any] = {}
        if endpoint.fields:
            payload["fields"] = endpoint.fields
        payload.update(endpoint.params)
        if params:
            payload.update(params)
        payload["access_token"] = self._access_token

        logger.debug(
            "%s %s params=%s",
            endpoint.method,
            path,
            sorted(key for key in payload if key != "access_token"),
        )

        try:
            if endpoint.method == "GET":
                response = self._transport.request(endpoint.method, path, query=payload)
            else:
                response = self._transport.request(endpoint.method, path, form=payload)
        except TransportError as exc:
            raise self._convert_transport_error(exc) from exc

        return self._parse_response(response)

    @staticmethod
    def _parse_response(response: TransportResponse) -> Any:
        try:
            data = json.loads(response.body)
        except (TypeError, ValueError) as exc:
            logger.warning("Undecodable body (status %s)", response.status)
            raise ApiResponseError("Invalid JSON response") from exc

        envelope = _error_envelope(data)
        if envelope is not None:
            error = classify_error(envelope)
            logger.warning("Graph API error payload: %s", error)
            raise error

        return data

    @staticmethod
    def _convert_transport_error(exc: TransportError) -> InstagramClientError:
        response = exc.response
        if response is not None:
            try:
                data = json.loads(response.body)
            except (TypeError, ValueError):
                data = None
            envelope = _error_envelope(data)
            if envelope is not None:
                error = classify_error(envelope, fallback_code=response.status)
                logger.warning("Graph API error (HTTP %s): %s", response.status, error)
                return error

        logger.warning("Transport failure: %s", exc.message)
        return NetworkError(exc.message)
