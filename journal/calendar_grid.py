"""Month grid for the calendar view."""

from __future__ import annotations

import calendar
from collections import Counter
from datetime import date
from typing import Iterable

WEEKDAYS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def build_month_grid(year: int, month: int, entry_dates: Iterable[date]) -> dict:
    """Lay out *month* as a Sunday-first grid with per-day entry counts.

    The ``days`` list starts with one ``None`` per blank cell before the 1st,
    followed by every day of the month.
    """
    counts = Counter(d for d in entry_dates if d.year == year and d.month == month)

    # calendar.weekday() is Monday-based; shift so Sunday is column 0.
    padding = (calendar.weekday(year, month, 1) + 1) % 7
    days_in_month = calendar.monthrange(year, month)[1]

    days = [None] * padding
    for day in range(1, days_in_month + 1):
        current = date(year, month, day)
        days.append({"date": current.isoformat(), "count": counts.get(current, 0)})

    return {
        "year": year,
        "month": month,
        "weekdays": WEEKDAYS,
        "days": days,
        "total": sum(counts.values()),
    }
