"""
Data model definitions for BibleDuo.

For now we define:
- PassageDescriptor: a parsed reference range (book, chapters, verses)
- Verse            : a single verse as returned by the resolver
- ReadingPlan      : a daily reading plan document
- StreakStats      : streak statistics derived from completion dates
- ProgressSummary  : dashboard figures for a plan in progress
- WidgetSummary    : streak card with motivational message
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class PassageDescriptor:
    """
    A parsed passage reference.

    book         : book name exactly as written in the reference
    start_chapter: first chapter of the range
    start_verse  : first verse within start_chapter
    end_chapter  : last chapter of the range
    end_verse    : last verse within end_chapter
    """
    book: str
    start_chapter: int
    start_verse: int
    end_chapter: int
    end_verse: int

    @property
    def is_cross_chapter(self) -> bool:
        return self.start_chapter != self.end_chapter

    def chapters(self) -> range:
        """Chapters covered by the passage, in order."""
        return range(self.start_chapter, self.end_chapter + 1)


@dataclass(frozen=True)
class Verse:
    chapter: int
    number: int
    text: str


@dataclass
class ReadingPlan:
    """
    A reading plan as published in the plan JSON document.

    readings      : flat list of passage references (document field `data`)
    daily_readings: references grouped per day (document field `data2`);
                    index 0 is day 1.
    """
    id: str
    name: str
    info: str = ""
    readings: List[str] = field(default_factory=list)
    daily_readings: List[List[str]] = field(default_factory=list)

    @property
    def total_days(self) -> int:
        return len(self.daily_readings)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReadingPlan":
        """
        Construct from a decoded plan document.

        Raises ValueError if the document has no `id` or its `data2`
        field is not a list of reference lists.
        """
        if not isinstance(data, dict) or "id" not in data:
            raise ValueError("Reading plan document must be an object with an 'id' field.")

        daily = data.get("data2") or []
        if not isinstance(daily, list) or not all(isinstance(d, list) for d in daily):
            raise ValueError(f"Reading plan {data['id']!r}: 'data2' must be a list of lists.")

        return cls(
            id=str(data["id"]),
            name=str(data.get("name", data["id"])),
            info=str(data.get("info", "")),
            readings=[str(r) for r in data.get("data") or []],
            daily_readings=[[str(r) for r in day] for day in daily],
        )


@dataclass(frozen=True)
class StreakStats:
    current_streak: int = 0
    longest_streak: int = 0
    total_completed: int = 0


@dataclass(frozen=True)
class ProgressSummary:
    """
    Dashboard figures for a plan in progress.

    completion_rate and progress_percent are whole percentages.
    """
    current_day: int
    total_days: int
    completed: int
    completion_rate: int
    progress_percent: int
    days_remaining: int
    streaks: StreakStats


@dataclass(frozen=True)
class WidgetSummary:
    """
    Glanceable streak card.

    plan_percent is completed days over the plan length, not the
    current-day position used by ProgressSummary.
    """
    streaks: StreakStats
    total_days: int
    plan_percent: int
    marker: str
    message: str
