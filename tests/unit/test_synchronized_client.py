from __future__ import annotations

import threading

from instagram_client.clients.synchronized_client import SynchronizedClient


class RecordingLock:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.acquired = 0

    def __enter__(self):
        self._lock.acquire()
        self.acquired += 1
        return self

    def __exit__(self, *args):
        self._lock.release()


class FakeGraphClient:
    def __init__(self, lock: RecordingLock) -> None:
        self.token = "t0"
        self.lock = lock
        self.held_during_call: list[bool] = []

    def set_access_token(self, access_token):
        self.token = access_token

    def get_access_token(self):
        return self.token

    def _record(self):
        self.held_during_call.append(self.lock._lock.locked())

    def get_user_profile(self):
        self._record()
        return {"id": "1", "token": self.token}

    def get_user_media(self, limit=25):
        self._record()
        return {"limit": limit}

    def get_media_details(self, media_id):
        self._record()
        return {"id": media_id}

    def refresh_access_token(self):
        self._record()
        return {"access_token": "t1"}

    def get_token_info(self):
        self._record()
        return {"expires_in": 10}

    def close(self):
        self._record()
        self.closed = True


def test_operations_run_under_lock() -> None:
    lock = RecordingLock()
    inner = FakeGraphClient(lock)
    client = SynchronizedClient(inner, lock=lock)  # type: ignore[arg-type]

    assert client.get_user_media(5) == {"limit": 5}
    assert client.get_media_details("m1") == {"id": "m1"}
    client.get_user_profile()
    client.refresh_access_token()
    client.get_token_info()

    assert inner.held_during_call == [True] * 5
    assert lock.acquired == 5


def test_token_replacement_goes_through_lock() -> None:
    lock = RecordingLock()
    inner = FakeGraphClient(lock)
    client = SynchronizedClient(inner, lock=lock)  # type: ignore[arg-type]

    client.set_access_token("t2")

    assert client.get_access_token() == "t2"
    assert client.get_user_profile()["token"] == "t2"
    assert lock.acquired == 3


def test_context_manager_closes_inner_client_under_lock() -> None:
    lock = RecordingLock()
    inner = FakeGraphClient(lock)

    with SynchronizedClient(inner, lock=lock) as client:  # type: ignore[arg-type]
        client.get_user_profile()

    assert inner.closed is True
    assert inner.held_during_call == [True, True]
