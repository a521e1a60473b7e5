"""Timestamp parsing for Graph API payloads.

The Graph API emits ISO-8601 timestamps with a compact offset
(``2024-01-15T10:30:00+0000``). ``datetime.fromisoformat`` only accepts the
compact form on recent interpreters, so the offset is normalised first.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone, tzinfo

_COMPACT_OFFSET = re.compile(r"([+-]\d{2})(\d{2})$")

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def parse_timestamp(value: str | datetime) -> datetime:
    """Parse an API timestamp into an aware datetime (naive values are UTC)."""

    if isinstance(value, datetime):
        parsed = value
    else:
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        text = _COMPACT_OFFSET.sub(r"\1:\2", text)
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as exc:
            raise ValueError(f"Unrecognised timestamp '{value}'.") from exc

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def month_label(moment: datetime, tz: tzinfo | None = None) -> str:
    """Return the ``"Mon YYYY"`` bucket for ``moment`` in ``tz``.

    ``tz=None`` means the local zone of the processing host. Month names are
    fixed English abbreviations so labels do not depend on the process locale.
    """

    local = moment.astimezone(tz)
    return f"{MONTH_ABBREVIATIONS[local.month - 1]} {local.year}"
