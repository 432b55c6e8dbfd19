"""Request schemas for the journal endpoints."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_TAG_COLOR = "#6B7280"

# Largest value a SQL BIGINT (and sqlite INTEGER) key can hold.
MAX_ID = 2**63 - 1


class TagInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=100)
    color: str = Field(default=DEFAULT_TAG_COLOR, min_length=1, max_length=20)


class JournalEntryInput(BaseModel):
    """Body of POST /api/journal and PUT /api/journal/<id>."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    mood_id: Optional[int] = Field(default=None, ge=1, le=MAX_ID)
    tags: List[TagInput] = Field(default_factory=list)

    def unique_tags(self) -> List[TagInput]:
        # A tag typed twice is linked once; the first color wins.
        seen = {}
        for tag in self.tags:
            seen.setdefault(tag.name, tag)
        return list(seen.values())


class MarkdownPreview(BaseModel):
    content: str = ""


class EntryFilter(BaseModel):
    q: Optional[str] = None
    tags: List[int] = Field(default_factory=list)
    moods: List[int] = Field(default_factory=list)
    start: Optional[date] = None
    end: Optional[date] = None

    @model_validator(mode="after")
    def _check_range(self) -> "EntryFilter":
        if self.start and self.end and self.start > self.end:
            raise ValueError("start must not be after end")
        return self

    def is_empty(self) -> bool:
        return not (self.q and self.q.strip()) and not self.tags and not self.moods \
            and self.start is None and self.end is None

    @classmethod
    def from_args(cls, args) -> "EntryFilter":
        """Build a filter from a werkzeug MultiDict of query parameters."""
        start = args.get("start") or args.get("date")
        end = args.get("end") or args.get("date")
        return cls.model_validate({
            "q": args.get("q"),
            "tags": args.getlist("tag"),
            "moods": args.getlist("mood"),
            "start": start or None,
            "end": end or None,
        })
