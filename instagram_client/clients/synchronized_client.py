"""
Lock-guarded wrapper for sharing one Graph client between threads.
"""

from __future__ import annotations

import threading
from typing import Any, Protocol


class GraphClient(Protocol):
    """Operations shared by the plain and synchronized clients."""

    def set_access_token(self, access_token: str) -> None:
        ...

    def get_access_token(self) -> str:
        ...

    def get_user_profile(self) -> Any:
        ...

    def get_user_media(self, limit: int = 25) -> Any:
        ...

    def get_media_details(self, media_id: str) -> Any:
        ...

    def refresh_access_token(self) -> Any:
        ...

    def get_token_info(self) -> Any:
        ...

    def close(self) -> None:
        ...


class SynchronizedClient:
    """Serializes every call and token replacement behind one lock.

    A token swapped in by ``set_access_token`` never lands in the middle of
    an in-flight request; it applies to the next call that acquires the lock.
    """

    def __init__(self, client: GraphClient, *, lock: threading.Lock | None = None) -> None:
        self._client = client
        self._lock = lock or threading.Lock()

    def set_access_token(self, access_token: str) -> None:
        with self._lock:
            self._client.set_access_token(access_token)

    def get_access_token(self) -> str:
        with self._lock:
            return self._client.get_access_token()

    def get_user_profile(self) -> Any:
        return self._invoke("get_user_profile")

    def get_user_media(self, limit: int = 25) -> Any:
        return self._invoke("get_user_media", limit)

    def get_media_details(self, media_id: str) -> Any:
        return self._invoke("get_media_details", media_id)

    def refresh_access_token(self) -> Any:
        return self._invoke("refresh_access_token")

    def get_token_info(self) -> Any:
        return self._invoke("get_token_info")

    def close(self) -> None:
        self._invoke("close")

    def __enter__(self) -> "SynchronizedClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _invoke(self, method_name: str, *args: Any) -> Any:
        method = getattr(self._client, method_name)
        with self._lock:
            return method(*args)
