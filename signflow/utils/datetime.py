"""Dates and times in the service timezone."""

from __future__ import annotations

import logging
from datetime import date, datetime
from functools import lru_cache

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from signflow.config import get_settings

FALLBACK_TIMEZONE = "Europe/Berlin"

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_app_timezone() -> ZoneInfo:
    """Return the zone named by ``APP_TIMEZONE``, or Berlin when it is unknown."""

    name = get_settings().app_timezone.strip() or FALLBACK_TIMEZONE
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r; using %s", name, FALLBACK_TIMEZONE)
        return ZoneInfo(FALLBACK_TIMEZONE)


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def today_in_app_timezone() -> date:
    """Return the calendar date used for ``{DATUM}`` and export filenames."""

    return now_in_app_timezone().date()


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Attach the service zone to naive values and convert aware ones."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())


def format_german_date(value: date | datetime) -> str:
    """Return ``value`` as ``DD.MM.YYYY`` with zero padded day and month."""

    if isinstance(value, datetime):
        value = ensure_app_timezone(value)
    return f"{value.day:02d}.{value.month:02d}.{value.year:04d}"
