"""
In-memory export of the account profile together with its recent media.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable

from instagram_client.models import ExportSnapshot
from instagram_client.services.account_service import AccountService
from instagram_client.services.media_service import MediaService

EXPORT_MEDIA_LIMIT = 50


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class ExportService:
    """
    Builds an ``ExportSnapshot``; writing it anywhere is left to the caller.

    Media items are exported as the API returned them, so timestamps keep
    their original offset format and no absent fields are filled in.
    """

    accounts: AccountService
    media: MediaService
    clock: Callable[[], datetime] = field(default=_utcnow)

    def build_snapshot(self, *, limit: int = EXPORT_MEDIA_LIMIT) -> ExportSnapshot:
        profile = self.accounts.get_profile()
        media = self.media.list_raw_media(limit)
        return ExportSnapshot(
            export_date=self.clock(),
            profile=profile,
            media_count=len(media),
            media=media,
        )
