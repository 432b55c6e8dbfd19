import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app import create_app
from app.config import TestingConfig
from app.extensions import db
from journal.models import JournalEntry, Mood, Tag, utcnow


@pytest.fixture()
def app():
    """A fresh app bound to its own in-memory database."""
    app = create_app(TestingConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def moods(app):
    """Two moods; returns their ids as {name: id}."""
    with app.app_context():
        happy = Mood(name="Happy", emoji="😊", color="#4CAF50")
        calm = Mood(name="Calm", emoji="😌", color="#9C27B0")
        db.session.add_all([happy, calm])
        db.session.commit()
        return {"Happy": happy.id, "Calm": calm.id}


@pytest.fixture()
def make_entry(app):
    """Insert an entry with an explicit creation time; returns its id."""

    def _make(title, created_at, content="Body", mood_id=None, tags=()):
        with app.app_context():
            entry = JournalEntry(title=title, content=content, created_at=created_at, mood_id=mood_id)
            for name in tags:
                tag = Tag.query.filter_by(name=name).first() or Tag(name=name, color="#000000")
                entry.tags.append(tag)
            db.session.add(entry)
            db.session.commit()
            return entry.id

    return _make


@pytest.fixture()
def now():
    return utcnow().replace(microsecond=0)
