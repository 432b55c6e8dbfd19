"""Time zone helpers shared by the journal views.

Timestamps are stored as naive UTC.  Everything a person looks at (calendar
days, month buckets, streaks, date filters) is expressed in the configured
reporting zone, ``JOURNAL_TIMEZONE``.
"""

from __future__ import annotations

from datetime import date, datetime, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from flask import current_app


def get_timezone() -> tzinfo:
    """Return the reporting zone from the app config, falling back to UTC."""
    name = current_app.config.get("JOURNAL_TIMEZONE") or "UTC"
    try:
        return ZoneInfo(name)
    except ZoneInfoNotFoundError:
        current_app.logger.warning("Unknown JOURNAL_TIMEZONE %r; using UTC", name)
        return timezone.utc


def to_local(moment: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Convert *moment* into *tz*; naive values are taken to be UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(tz or timezone.utc)


def local_date(moment: datetime, tz: Optional[tzinfo] = None) -> date:
    return to_local(moment, tz).date()


def local_today(tz: Optional[tzinfo] = None) -> date:
    return datetime.now(tz or timezone.utc).date()
