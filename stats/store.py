"""Read side of the journal used by the statistics view."""

from __future__ import annotations

from collections import defaultdict
from typing import List, Protocol

from flask import current_app

from app.extensions import db
from journal.models import JournalEntry, Mood, Tag, entry_tags
from .engine import EntryRecord, MoodInfo, TagInfo


class JournalStore(Protocol):
    def list_entries(self) -> List[EntryRecord]: ...

    def list_moods(self) -> List[MoodInfo]: ...

    def list_tags(self) -> List[TagInfo]: ...


class SqlJournalStore:
    """JournalStore over a SQLAlchemy session."""

    def __init__(self, session):
        self.session = session

    def list_entries(self) -> List[EntryRecord]:
        rows = self.session.execute(
            db.select(JournalEntry.id, JournalEntry.created_at, JournalEntry.mood_id)
        ).all()
        links = self.session.execute(db.select(entry_tags.c.entry_id, entry_tags.c.tag_id)).all()

        tag_ids = defaultdict(list)
        for entry_id, tag_id in links:
            tag_ids[entry_id].append(tag_id)

        return [
            EntryRecord(created_at=created_at, mood_id=mood_id, tag_ids=tuple(tag_ids[entry_id]))
            for entry_id, created_at, mood_id in rows
        ]

    def list_moods(self) -> List[MoodInfo]:
        moods = self.session.execute(db.select(Mood)).scalars()
        return [MoodInfo(id=m.id, name=m.name, emoji=m.emoji, color=m.color) for m in moods]

    def list_tags(self) -> List[TagInfo]:
        tags = self.session.execute(db.select(Tag)).scalars()
        return [TagInfo(id=t.id, name=t.name, color=t.color) for t in tags]


def get_store() -> JournalStore:
    """Return the store registered on the app, or one over the db session.

    Registering ``app.extensions['journal_store']`` swaps the backing store.
    """
    store = current_app.extensions.get('journal_store')
    if store is None:
        store = SqlJournalStore(db.session)
    return store
