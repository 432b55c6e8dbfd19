"""Journal statistics: totals, month buckets, mood/tag counts and streaks.

Everything here is a pure function of its arguments.  The caller loads the
entries and catalogs from a :class:`stats.store.JournalStore` and passes them
in; nothing is cached between calls, so a snapshot always reflects the store
contents at the moment it was read.

Day and month boundaries are taken in the reporting time zone ``tz``.  Stored
timestamps without tzinfo are treated as UTC.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import asdict, dataclass, field
from datetime import date, datetime, timedelta, tzinfo
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from journal.utils import local_date, local_today

TOP_TAGS_LIMIT = 10
STREAK_GRACE_DAYS = 1


@dataclass(frozen=True)
class EntryRecord:
    created_at: datetime
    mood_id: Optional[int] = None
    tag_ids: Tuple[int, ...] = ()


@dataclass(frozen=True)
class MoodInfo:
    id: int
    name: str
    emoji: str
    color: str


@dataclass(frozen=True)
class TagInfo:
    id: int
    name: str
    color: str


@dataclass(frozen=True)
class MonthCount:
    month: str
    count: int


@dataclass(frozen=True)
class MoodCount:
    mood: str
    emoji: str
    color: str
    count: int


@dataclass(frozen=True)
class TagCount:
    tag: str
    color: str
    count: int


@dataclass(frozen=True)
class StatsSnapshot:
    total_entries: int = 0
    entries_by_month: List[MonthCount] = field(default_factory=list)
    mood_distribution: List[MoodCount] = field(default_factory=list)
    top_tags: List[TagCount] = field(default_factory=list)
    current_streak: int = 0
    longest_streak: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


def bucket_by_month(days: Iterable[date]) -> List[MonthCount]:
    """Count *days* per calendar month, oldest first. Empty months are omitted."""
    counts = Counter((d.year, d.month) for d in days)
    return [
        MonthCount(month=f"{year:04d}-{month:02d}", count=counts[(year, month)])
        for year, month in sorted(counts)
    ]


def longest_streak(days: Sequence[date]) -> int:
    """Length of the longest run of consecutive days in sorted, unique *days*."""
    if not days:
        return 0
    best = run = 1
    for previous, current in zip(days, days[1:]):
        if (current - previous).days == 1:
            run += 1
        else:
            run = 1
        best = max(best, run)
    return best


def current_streak(days: Sequence[date], today: date, grace_days: int = STREAK_GRACE_DAYS) -> int:
    """Length of the run ending at the most recent day in sorted, unique *days*.

    The run only counts while it is still alive: the latest day must be within
    *grace_days* of *today* (today or yesterday with the default of 1).
    """
    if not days:
        return 0
    if abs((today - days[-1]).days) > grace_days:
        return 0
    streak = 1
    for index in range(len(days) - 1, 0, -1):
        if days[index] - days[index - 1] != timedelta(days=1):
            break
        streak += 1
    return streak


def _name_key(name: str) -> str:
    return name.casefold()


def mood_distribution(entries: Iterable[EntryRecord], moods: Iterable[MoodInfo]) -> List[MoodCount]:
    """Entries per mood, most used first, ties ordered by name.

    Only moods carried by at least one entry appear; entries without a mood
    are not counted.
    """
    counts = Counter(entry.mood_id for entry in entries if entry.mood_id is not None)
    catalog: Dict[int, MoodInfo] = {mood.id: mood for mood in moods}
    used = [catalog[mood_id] for mood_id in counts if mood_id in catalog]
    used.sort(key=lambda mood: (-counts[mood.id], _name_key(mood.name)))
    return [
        MoodCount(mood=mood.name, emoji=mood.emoji, color=mood.color, count=counts[mood.id])
        for mood in used
    ]


def top_tags(entries: Iterable[EntryRecord], tags: Iterable[TagInfo],
             limit: int = TOP_TAGS_LIMIT) -> List[TagCount]:
    """The *limit* most used tags, most used first, ties ordered by name."""
    counts: Counter = Counter()
    for entry in entries:
        counts.update(set(entry.tag_ids))

    catalog: Dict[int, TagInfo] = {tag.id: tag for tag in tags}
    used = [catalog[tag_id] for tag_id in counts if tag_id in catalog]
    used.sort(key=lambda tag: (-counts[tag.id], _name_key(tag.name)))
    return [TagCount(tag=tag.name, color=tag.color, count=counts[tag.id]) for tag in used[:limit]]


def compute_snapshot(
    entries: Iterable[EntryRecord],
    moods: Iterable[MoodInfo] = (),
    tags: Iterable[TagInfo] = (),
    *,
    today: Optional[date] = None,
    tz: Optional[tzinfo] = None,
    top_tags_limit: int = TOP_TAGS_LIMIT,
    grace_days: int = STREAK_GRACE_DAYS,
) -> StatsSnapshot:
    """Build the statistics snapshot for *entries*.

    *moods* and *tags* are the catalogs used to label the counts.  *today*
    defaults to the current date in *tz*; pass it explicitly for a
    reproducible result.
    """
    entries = list(entries)
    if not entries:
        return StatsSnapshot()

    if today is None:
        today = local_today(tz)

    days = [local_date(entry.created_at, tz) for entry in entries]
    unique_days = sorted(set(days))

    return StatsSnapshot(
        total_entries=len(entries),
        entries_by_month=bucket_by_month(days),
        mood_distribution=mood_distribution(entries, moods),
        top_tags=top_tags(entries, tags, top_tags_limit),
        current_streak=current_streak(unique_days, today, grace_days),
        longest_streak=longest_streak(unique_days),
    )
