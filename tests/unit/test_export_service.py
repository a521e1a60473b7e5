from __future__ import annotations

import json
from datetime import datetime, timezone

from instagram_client.services.account_service import AccountService
from instagram_client.services.export_service import ExportService
from instagram_client.services.media_service import MediaService

EXPORTED_AT = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)

MEDIA_ITEMS = [
    {"id": "1", "media_type": "IMAGE", "timestamp": "2024-06-14T18:00:00+0000"},
    {"id": "2", "media_type": "VIDEO", "timestamp": "2024-06-10T18:00:00+0000", "like_count": 4},
]


class FakeClient:
    def __init__(self) -> None:
        self.media_limits: list[int] = []

    def get_user_profile(self):
        return {"id": "1789", "username": "jane", "media_count": 2}

    def get_user_media(self, limit=25):
        self.media_limits.append(limit)
        return {"data": [dict(item) for item in MEDIA_ITEMS], "paging": {"cursors": {}}}


def _service(client: FakeClient) -> ExportService:
    return ExportService(
        accounts=AccountService(client),  # type: ignore[arg-type]
        media=MediaService(client),  # type: ignore[arg-type]
        clock=lambda: EXPORTED_AT,
    )


def test_build_snapshot_collects_profile_and_media() -> None:
    client = FakeClient()

    snapshot = _service(client).build_snapshot()

    assert client.media_limits == [50]
    assert snapshot.export_date == EXPORTED_AT
    assert snapshot.profile.username == "jane"
    assert snapshot.media_count == len(snapshot.media) == 2


def test_snapshot_serializes_to_json() -> None:
    snapshot = _service(FakeClient()).build_snapshot(limit=2)

    data = json.loads(snapshot.to_json())

    assert data["media_count"] == 2
    assert data["profile"]["id"] == "1789"
    assert data["media"][0]["media_type"] == "IMAGE"
    assert data["export_date"].startswith("2024-06-15T12:00:00")


def test_exported_media_matches_api_items_exactly() -> None:
    snapshot = _service(FakeClient()).build_snapshot()

    data = json.loads(snapshot.to_json())

    assert data["media"] == MEDIA_ITEMS
    assert data["media"][0]["timestamp"] == "2024-06-14T18:00:00+0000"
    assert "caption" not in data["media"][0]
    assert data["media"][1]["like_count"] == 4
