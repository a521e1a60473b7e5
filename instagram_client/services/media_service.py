"""
Media listing workflows built on top of client adapters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from instagram_client.analytics import MediaAnalyzer
from instagram_client.models import AnalyticsResult, MediaPage, MediaRecord

ANALYTICS_SAMPLE_SIZE = 50


class MediaClient(Protocol):
    """Protocol subset consumed by the service."""

    def get_user_media(self, limit: int = 25) -> Any:
        ...

    def get_media_details(self, media_id: str) -> Any:
        ...


@dataclass(slots=True)
class MediaService:
    """Typed access to the media endpoints plus the analytics shortcut."""

    client: MediaClient
    analyzer: MediaAnalyzer | None = None

    def list_media(self, limit: int = 25) -> list[MediaRecord]:
        response = self.client.get_user_media(limit)
        return MediaPage.from_api(response).data

    def list_raw_media(self, limit: int = 25) -> list[dict[str, Any]]:
        """Media items exactly as the API returned them, without validation."""
        response = self.client.get_user_media(limit)
        return [dict(item) for item in response.get("data") or []]

    def get_media(self, media_id: str) -> MediaRecord:
        return MediaRecord.from_api(self.client.get_media_details(media_id))

    def analyze_recent(self, limit: int = ANALYTICS_SAMPLE_SIZE) -> AnalyticsResult:
        """Fetch the latest ``limit`` posts and aggregate them."""
        analyzer = self.analyzer or MediaAnalyzer()
        return analyzer.analyze(self.list_media(limit))
