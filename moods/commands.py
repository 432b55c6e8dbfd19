"""CLI command that installs the default mood palette."""

import click
from flask.cli import with_appcontext

from app.extensions import db
from journal.models import Mood

DEFAULT_MOODS = [
    {"name": "Happy", "emoji": "😊", "color": "#4CAF50"},
    {"name": "Sad", "emoji": "😢", "color": "#2196F3"},
    {"name": "Angry", "emoji": "😠", "color": "#F44336"},
    {"name": "Excited", "emoji": "🎉", "color": "#FF9800"},
    {"name": "Calm", "emoji": "😌", "color": "#9C27B0"},
    {"name": "Anxious", "emoji": "😰", "color": "#607D8B"},
    {"name": "Grateful", "emoji": "🙏", "color": "#8BC34A"},
]


def seed_default_moods() -> int:
    """Insert the default moods when the table is empty. Returns how many were added."""
    if db.session.query(Mood.id).first() is not None:
        return 0
    for mood in DEFAULT_MOODS:
        db.session.add(Mood(**mood))
    db.session.commit()
    return len(DEFAULT_MOODS)


@click.command("seed-moods")
@with_appcontext
def seed_moods_command():
    """Add the default moods if none exist yet."""
    added = seed_default_moods()
    if added:
        click.echo(f"Added {added} default moods.")
    else:
        click.echo("Moods already present; nothing to do.")


def register_commands(app):
    """Register CLI commands with the app."""
    app.cli.add_command(seed_moods_command)
