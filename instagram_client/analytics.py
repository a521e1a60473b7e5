"""
Descriptive statistics over a list of media records.

``MediaAnalyzer.analyze`` walks the posts once, accumulating the type
distribution, month buckets, caption lengths and recent-activity count, and
then derives the summary values. It performs no I/O.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Callable, Iterable, Mapping

from instagram_client.models import (
    AnalyticsResult,
    CaptionStats,
    MediaRecord,
    RecentActivity,
)
from instagram_client.utils.numbers import round_half_away
from instagram_client.utils.timestamps import month_label

MONTHS_KEPT = 6
RECENT_WINDOW = timedelta(days=7)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class MediaAnalyzer:
    """
    Aggregates media records into an ``AnalyticsResult``.

    Attributes:
        tz: Zone used to assign posts to months. ``None`` uses the local zone
            of the processing host.
        clock: Returns the current datetime; the recent-activity window ends
            at this moment. A naive value is read as UTC.
    """

    tz: tzinfo | None = None
    clock: Callable[[], datetime] = field(default=_utcnow)

    def analyze(self, posts: Iterable[MediaRecord | Mapping[str, Any]]) -> AnalyticsResult:
        records = [MediaRecord.from_api(post) for post in posts]
        if not records:
            return AnalyticsResult.empty()

        now = self.clock()
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        week_ago = now - RECENT_WINDOW
        media_types: Counter[str] = Counter()
        posts_by_month: dict[str, int] = {}
        caption_lengths: list[int] = []
        without_caption = 0
        recent = 0

        for record in records:
            media_types[record.type_name] += 1

            month = month_label(record.timestamp, self.tz)
            posts_by_month[month] = posts_by_month.get(month, 0) + 1

            if record.caption:
                caption_lengths.append(len(record.caption))
            else:
                without_caption += 1

            if record.timestamp > week_ago:
                recent += 1

        average_length = (
            round_half_away(sum(caption_lengths) / len(caption_lengths))
            if caption_lengths
            else 0
        )

        return AnalyticsResult(
            total_posts=len(records),
            media_types=dict(media_types),
            posts_by_month=dict(list(posts_by_month.items())[-MONTHS_KEPT:]),
            caption_stats=CaptionStats(
                average_length=average_length,
                with_caption=len(caption_lengths),
                without_caption=without_caption,
            ),
            recent_activity=RecentActivity(
                posts_last_week=recent,
                avg_per_week=round_half_away(recent),
            ),
        )


def analyze(
    posts: Iterable[MediaRecord | Mapping[str, Any]],
    *,
    tz: tzinfo | None = None,
    now: datetime | None = None,
) -> AnalyticsResult:
    """Convenience wrapper around ``MediaAnalyzer`` for one-off analysis."""

    if now is None:
        return MediaAnalyzer(tz=tz).analyze(posts)
    return MediaAnalyzer(tz=tz, clock=lambda: now).analyze(posts)
