"""
Streak statistics for BibleDuo.

A streak is a run of consecutive calendar days with at least one plan
day completed. Completion dates are YYYY-MM-DD strings compared as plain
calendar days; no timezone conversion happens here.

Public API:

- compute_streaks(completed_days, completion_dates, today=None) -> StreakStats
- summarize_progress(completed_days, completion_dates, current_day, total_days,
                     today=None) -> ProgressSummary
- widget_summary(completed_days, completion_dates, total_days, today=None)
  -> WidgetSummary
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import AbstractSet, List, Mapping, Optional, Tuple

from .model import ProgressSummary, StreakStats, WidgetSummary
from .util import utc_today_iso, warn

ONE_DAY = timedelta(days=1)


def _completion_date_strings(
    completed_days: AbstractSet[int],
    completion_dates: Mapping[int, str],
    today: str,
) -> List[str]:
    """One date string per completed day, sorted. Undated days count as today."""
    return sorted(completion_dates.get(day) or today for day in completed_days)


def _parse_dates(date_strings: List[str]) -> List[date]:
    parsed: List[date] = []
    for s in date_strings:
        try:
            parsed.append(date.fromisoformat(s))
        except (TypeError, ValueError):
            warn(f"Ignoring invalid completion date {s!r} in streak calculation.")
    return parsed


def _current_streak(days: List[date]) -> int:
    """Consecutive days ending at the most recent completion."""
    if not days:
        return 0
    present = set(days)
    day = days[-1]
    streak = 0
    while day in present:
        streak += 1
        day -= ONE_DAY
    return streak


def _longest_streak(days: List[date]) -> int:
    # Same-day completions collapse into one streak day.
    longest = 0
    run = 0
    prev: Optional[date] = None
    for day in sorted(set(days)):
        if prev is not None and day - prev == ONE_DAY:
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        prev = day
    return longest


def compute_streaks(
    completed_days: AbstractSet[int],
    completion_dates: Mapping[int, str],
    today: Optional[str] = None,
) -> StreakStats:
    """
    Compute current streak, longest streak and total completed days.

    Parameters
    ----------
    completed_days:
        Plan day numbers marked done.
    completion_dates:
        Plan day number -> date it was marked done (YYYY-MM-DD).
    today:
        Date used for completed days with no recorded date. Defaults to
        the current UTC date.

    Returns
    -------
    StreakStats
        The current streak counts back from the most recent completion,
        not from today, so a streak that ended in the past keeps its length.
    """
    if not completed_days:
        return StreakStats(current_streak=0, longest_streak=0, total_completed=0)

    if today is None:
        today = utc_today_iso()

    days = _parse_dates(_completion_date_strings(completed_days, completion_dates, today))

    return StreakStats(
        current_streak=_current_streak(days),
        longest_streak=_longest_streak(days),
        total_completed=len(completed_days),
    )


def _percent(part: int, whole: int) -> int:
    """Whole percentage, rounded half up; 0 when whole < 1."""
    if whole < 1:
        return 0
    return int(part * 100 / whole + 0.5)


def summarize_progress(
    completed_days: AbstractSet[int],
    completion_dates: Mapping[int, str],
    current_day: int,
    total_days: int,
    today: Optional[str] = None,
) -> ProgressSummary:
    """
    Dashboard figures for a plan in progress.

    completion_rate is completed days over the current day number;
    progress_percent is the current day over the plan length.
    """
    streaks = compute_streaks(completed_days, completion_dates, today=today)
    return ProgressSummary(
        current_day=current_day,
        total_days=total_days,
        completed=streaks.total_completed,
        completion_rate=_percent(streaks.total_completed, current_day),
        progress_percent=_percent(current_day, total_days),
        days_remaining=max(total_days - current_day, 0),
        streaks=streaks,
    )


# (exclusive upper bound on current streak, message); the last entry has no bound.
MESSAGE_TIERS = [
    (1, "Start your journey today! 📖"),
    (2, "Great start! Keep going! 🌟"),
    (7, "Building momentum! 💪"),
    (30, "Amazing dedication! 🔥"),
    (100, "Unstoppable! 🚀"),
    (None, "Legendary! You're incredible! 👑"),
]

MARKER_TIERS = [
    (1, "📚"),
    (3, "🌟"),
    (7, "🔥"),
    (30, "⚡"),
    (100, "🚀"),
    (None, "👑"),
]


def _tier(streak: int, tiers: List[Tuple[Optional[int], str]]) -> str:
    for bound, value in tiers:
        if bound is None or streak < bound:
            return value
    return tiers[-1][1]


def motivational_message(current_streak: int) -> str:
    return _tier(current_streak, MESSAGE_TIERS)


def streak_marker(current_streak: int) -> str:
    return _tier(current_streak, MARKER_TIERS)


def widget_summary(
    completed_days: AbstractSet[int],
    completion_dates: Mapping[int, str],
    total_days: int,
    today: Optional[str] = None,
) -> WidgetSummary:
    """
    Streak card figures: streaks, plan completion and the tier message.
    """
    streaks = compute_streaks(completed_days, completion_dates, today=today)
    return WidgetSummary(
        streaks=streaks,
        total_days=total_days,
        plan_percent=_percent(streaks.total_completed, total_days),
        marker=streak_marker(streaks.current_streak),
        message=motivational_message(streaks.current_streak),
    )
