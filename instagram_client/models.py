"""
Pydantic models for Instagram Graph API responses used by instagram_client.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from instagram_client.utils.numbers import round_half_away
from instagram_client.utils.timestamps import parse_timestamp

SECONDS_PER_DAY = 86400


def _to_mapping(payload: Any) -> Mapping[str, Any]:
    if isinstance(payload, Mapping):
        return payload
    if isinstance(payload, BaseModel):
        return payload.model_dump()
    if hasattr(payload, "__dict__"):
        return _to_mapping(vars(payload))
    raise TypeError(f"Cannot convert payload of type {type(payload)!r} to mapping.")


class MediaType(str, Enum):
    IMAGE = "IMAGE"
    VIDEO = "VIDEO"
    CAROUSEL_ALBUM = "CAROUSEL_ALBUM"


def _coerce_media_type(value: Any) -> Any:
    if isinstance(value, str) and value in MediaType.__members__:
        return MediaType(value)
    return value


class UserProfile(BaseModel):
    """The ``/me`` resource."""

    id: str
    username: str | None = None
    account_type: str | None = None
    media_count: int | None = None

    model_config = ConfigDict(extra="allow")

    @classmethod
    def from_api(cls, payload: Any) -> "UserProfile":
        return cls.model_validate(_to_mapping(payload))


class ChildMedia(BaseModel):
    """One item of a carousel album."""

    id: str
    media_type: MediaType | str
    media_url: str | None = None
    thumbnail_url: str | None = None

    model_config = ConfigDict(extra="allow")

    @field_validator("media_type", mode="before")
    @classmethod
    def known_media_type(cls, value: Any) -> Any:
        return _coerce_media_type(value)


class ChildMediaPage(BaseModel):
    data: list[ChildMedia] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class MediaRecord(BaseModel):
    """Normalized representation of a media post."""

    id: str
    caption: str | None = None
    media_type: MediaType | str
    media_url: str | None = None
    permalink: str | None = None
    thumbnail_url: str | None = None
    timestamp: datetime
    username: str | None = None
    children: ChildMediaPage | None = None

    model_config = ConfigDict(extra="allow", frozen=True)

    @classmethod
    def from_api(cls, payload: Any) -> "MediaRecord":
        if isinstance(payload, cls):
            return payload
        return cls.model_validate(_to_mapping(payload))

    @field_validator("timestamp", mode="before")
    @classmethod
    def parse_api_timestamp(cls, value: Any) -> datetime:
        if isinstance(value, (str, datetime)):
            return parse_timestamp(value)
        raise ValueError("timestamp must be an ISO-8601 string.")

    @field_validator("media_type", mode="before")
    @classmethod
    def known_media_type(cls, value: Any) -> Any:
        return _coerce_media_type(value)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> str:
        if isinstance(value, int):
            return str(value)
        return value

    @property
    def type_name(self) -> str:
        return self.media_type.value if isinstance(self.media_type, MediaType) else self.media_type

    @property
    def child_items(self) -> list[ChildMedia]:
        return self.children.data if self.children else []


class MediaPage(BaseModel):
    """Response of ``/me/media``; paging and other keys are kept as extras."""

    data: list[MediaRecord] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")

    @classmethod
    def from_api(cls, payload: Any) -> "MediaPage":
        return cls.model_validate(_to_mapping(payload))


class RefreshedToken(BaseModel):
    """Response of ``/refresh_access_token``."""

    access_token: str
    token_type: str | None = None
    expires_in: int | None = None

    model_config = ConfigDict(extra="allow")

    @classmethod
    def from_api(cls, payload: Any) -> "RefreshedToken":
        return cls.model_validate(_to_mapping(payload))


class TokenInfo(BaseModel):
    """Response of ``/access_token``; the remote decides which keys appear."""

    app_id: str | None = None
    application: str | None = None
    expires_at: int | None = None
    expires_in: int | None = None

    model_config = ConfigDict(extra="allow")

    @classmethod
    def from_api(cls, payload: Any) -> "TokenInfo":
        return cls.model_validate(_to_mapping(payload))

    @field_validator("app_id", mode="before")
    @classmethod
    def coerce_app_id(cls, value: Any) -> Any:
        if isinstance(value, int):
            return str(value)
        return value

    @property
    def expires_in_days(self) -> int | None:
        if self.expires_in is None:
            return None
        return round_half_away(self.expires_in / SECONDS_PER_DAY)


class CaptionStats(BaseModel):
    average_length: int = 0
    with_caption: int = 0
    without_caption: int = 0


class RecentActivity(BaseModel):
    posts_last_week: int = 0
    # Mirrors posts_last_week; no division over a multi-week window happens.
    avg_per_week: int = 0


class AnalyticsResult(BaseModel):
    """Aggregate statistics over one slice of media records."""

    total_posts: int = 0
    media_types: dict[str, int] = Field(default_factory=dict)
    posts_by_month: dict[str, int] = Field(default_factory=dict)
    caption_stats: CaptionStats = Field(default_factory=CaptionStats)
    recent_activity: RecentActivity = Field(default_factory=RecentActivity)

    @classmethod
    def empty(cls) -> "AnalyticsResult":
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.total_posts == 0

    def media_type_percentages(self) -> dict[str, int]:
        """Share of each media type in whole percent; empty when there are no posts."""

        if self.total_posts == 0:
            return {}
        return {
            media_type: round_half_away(count / self.total_posts * 100)
            for media_type, count in self.media_types.items()
        }


class ExportSnapshot(BaseModel):
    """Profile plus media list captured at one moment."""

    export_date: datetime
    profile: UserProfile
    media_count: int
    media: list[dict[str, Any]] = Field(default_factory=list)

    def to_json(self, *, indent: int | None = 2) -> str:
        return self.model_dump_json(indent=indent)
