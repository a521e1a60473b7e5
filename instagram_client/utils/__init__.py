"""Utility helpers for the instagram_client package."""

from __future__ import annotations

__all__ = [
    "round_half_away",
    "parse_timestamp",
    "month_label",
    "get_logger",
    "setup_logging",
]

from .logging import get_logger, setup_logging
from .numbers import round_half_away
from .timestamps import month_label, parse_timestamp
