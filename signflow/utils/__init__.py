"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_app_timezone,
    format_german_date,
    get_app_timezone,
    now_in_app_timezone,
    today_in_app_timezone,
)

__all__ = [
    "ensure_app_timezone",
    "format_german_date",
    "get_app_timezone",
    "now_in_app_timezone",
    "today_in_app_timezone",
]
