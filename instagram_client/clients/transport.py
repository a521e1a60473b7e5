"""
HTTP transport used by the Graph client.

The client only needs ``request(method, path, query=..., form=...)``; the
default implementation wraps a ``requests.Session`` configured once with the
base URL, default headers and timeout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol

import requests

DEFAULT_BASE_URL = "https://graph.instagram.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "Instagram-Python-Client/1.0"


@dataclass(slots=True)
class TransportResponse:
    """Status, raw body and headers of a completed HTTP exchange."""

    status: int
    body: str
    headers: Mapping[str, str] = field(default_factory=dict)


class TransportError(Exception):
    """Raised by a transport when the exchange fails.

    ``response`` is set when the server answered (e.g. a 4xx/5xx status) and
    ``None`` for timeouts, DNS failures and refused connections.
    """

    def __init__(self, message: str, *, response: TransportResponse | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.response = response


class HttpTransport(Protocol):
    """Protocol subset consumed by the Graph client."""

    def request(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        form: Mapping[str, Any] | None = None,
    ) -> TransportResponse:
        ...


class RequestsTransport:
    """``requests`` backed transport; non-2xx statuses raise ``TransportError``."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/json",
                "User-Agent": user_agent,
            }
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    def request(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        form: Mapping[str, Any] | None = None,
    ) -> TransportResponse:
        url = f"{self._base_url}/{path.lstrip('/')}"
        try:
            response = self._session.request(
                method,
                url,
                params=dict(query) if query else None,
                data=dict(form) if form else None,
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise TransportError(
                str(exc), response=self._wrap(exc.response)
            ) from exc
        except requests.RequestException as exc:
            raise TransportError(str(exc) or exc.__class__.__name__) from exc

        return self._wrap(response)

    def close(self) -> None:
        self._session.close()

    @staticmethod
    def _wrap(response: requests.Response | None) -> TransportResponse | None:
        if response is None:
            return None
        return TransportResponse(
            status=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )
