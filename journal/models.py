from datetime import datetime, timezone
from app.extensions import db


def utcnow():
    """Naive UTC timestamp, the form every column in this schema stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


entry_tags = db.Table(
    'journal_entry_tags',
    db.Column('entry_id', db.Integer, db.ForeignKey('journal_entries.id'), primary_key=True),
    db.Column('tag_id', db.Integer, db.ForeignKey('tags.id'), primary_key=True)
)

class JournalEntry(db.Model):
    """Journal entry model."""
    __tablename__ = 'journal_entries'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    content = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    mood_id = db.Column(db.Integer, db.ForeignKey('moods.id'), nullable=True)
    mood = db.relationship('Mood', backref=db.backref('entries', lazy=True))
    tags = db.relationship('Tag', secondary=entry_tags, lazy='selectin',
                           backref=db.backref('entries', lazy=True))

    def to_dict(self):
        """Return entry data as dictionary."""
        return {
            'id': self.id,
            'title': self.title,
            'content': self.content,
            'created_at': self.created_at.isoformat(),
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
            'mood_id': self.mood_id,
            'mood': self.mood.to_dict() if self.mood else None,
            'tags': [tag.to_dict() for tag in self.tags]
        }

    def __repr__(self):
        return f'<JournalEntry {self.title}>'

class Mood(db.Model):
    """A named mood with its emoji and display color."""
    __tablename__ = 'moods'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(50), nullable=False)
    emoji = db.Column(db.String(16), nullable=False)
    color = db.Column(db.String(20), nullable=False)

    def to_dict(self):
        """Return mood data as dictionary."""
        return {
            'id': self.id,
            'name': self.name,
            'emoji': self.emoji,
            'color': self.color
        }

    def __repr__(self):
        return f'<Mood {self.name}>'

class Tag(db.Model):
    """Free-form label shared by every entry that uses the same name."""
    __tablename__ = 'tags'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False)
    color = db.Column(db.String(20), nullable=False)

    def to_dict(self):
        """Return tag data as dictionary."""
        return {
            'id': self.id,
            'name': self.name,
            'color': self.color
        }

    def __repr__(self):
        return f'<Tag {self.name}>'
