"""
Reading plan loading and per-day lookups.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from .config import DEFAULT_PLAN_FILE
from .model import ReadingPlan
from .paths import data_source
from .sources import load_json
from .util import warn


def load_plan(source: Optional[Union[str, Path]] = None) -> ReadingPlan:
    """
    Load a reading plan document from a path or URL.

    Defaults to the configured plan file in the data directory.
    """
    if source is None:
        source = data_source(DEFAULT_PLAN_FILE)
    return ReadingPlan.from_dict(load_json(source))


def readings_for_day(plan: ReadingPlan, day: int) -> List[str]:
    """
    Passage references scheduled for a 1-based plan day.

    Days outside 1..total_days have no readings.
    """
    if day < 1 or day > plan.total_days:
        warn(f"Day {day} is outside plan {plan.id!r} (1..{plan.total_days}).")
        return []
    return list(plan.daily_readings[day - 1])


def clamp_day(plan: ReadingPlan, day: int) -> int:
    """Clamp a day number into the plan's 1..total_days range."""
    if plan.total_days < 1:
        return 1
    return min(max(day, 1), plan.total_days)
