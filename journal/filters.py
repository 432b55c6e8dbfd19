"""Search and filtering over an already loaded list of entries."""

from __future__ import annotations

from datetime import tzinfo
from typing import Iterable, List, Optional

from journal.schemas import EntryFilter
from journal.utils import local_date


def matches(entry, criteria: EntryFilter, tz: Optional[tzinfo] = None) -> bool:
    """Return True when *entry* satisfies every criterion that is set.

    *entry* only needs ``title``, ``content``, ``mood_id``, ``created_at`` and
    ``tags`` (objects with an ``id``), so ORM rows and plain records both work.
    """
    query = (criteria.q or "").strip().lower()
    if query:
        if query not in entry.title.lower() and query not in entry.content.lower():
            return False

    if criteria.tags:
        wanted = set(criteria.tags)
        if not any(tag.id in wanted for tag in entry.tags):
            return False

    if criteria.moods:
        if entry.mood_id is None or entry.mood_id not in criteria.moods:
            return False

    if criteria.start is not None or criteria.end is not None:
        day = local_date(entry.created_at, tz)
        if criteria.start is not None and day < criteria.start:
            return False
        if criteria.end is not None and day > criteria.end:
            return False

    return True


def filter_entries(entries: Iterable, criteria: EntryFilter, tz: Optional[tzinfo] = None) -> List:
    """Return the entries matching *criteria*, keeping their order."""
    return [entry for entry in entries if matches(entry, criteria, tz)]
