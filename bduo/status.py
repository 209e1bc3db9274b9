"""
Status and dashboard helpers for BibleDuo.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .config import APP_NAME, TRANSLATIONS, __version__
from .model import ProgressSummary, ReadingPlan, WidgetSummary
from .paths import DATA_DIR, PROGRESS_PATH
from .progress import Settings
from .streaks import summarize_progress, widget_summary
from .util import info, warn


def get_summary(settings: Settings, plan: ReadingPlan, today: Optional[str] = None) -> ProgressSummary:
    """
    Dashboard figures for the current settings and plan.
    """
    return summarize_progress(
        settings.completed_days,
        settings.completion_dates,
        current_day=settings.current_day,
        total_days=plan.total_days,
        today=today,
    )


def print_summary(summary: ProgressSummary) -> None:
    """
    Print the reading-progress block of the dashboard.
    """
    s = summary.streaks
    print(f"  Current streak : {s.current_streak} day(s)")
    print(f"  Longest streak : {s.longest_streak} day(s)")
    print(f"  Current day    : {summary.current_day} of {summary.total_days}")
    print(f"  Days completed : {summary.completed}")
    print(f"  Completion rate: {summary.completion_rate}%")
    print(f"  Progress       : {summary.progress_percent}%")
    print(f"  Days remaining : {summary.days_remaining}")


def get_widget(settings: Settings, plan: ReadingPlan, today: Optional[str] = None) -> WidgetSummary:
    return widget_summary(
        settings.completed_days,
        settings.completion_dates,
        total_days=plan.total_days,
        today=today,
    )


def print_widget(widget: WidgetSummary) -> None:
    """
    Print the streak card: streak, plan completion and a motivational line.
    """
    s = widget.streaks
    plural = "" if s.current_streak == 1 else "s"
    print(f"  {widget.marker} {s.current_streak} day{plural} streak")
    print(f"  {s.total_completed}/{widget.total_days} days ({widget.plan_percent}%)")
    print(f"  {widget.message}")
    print(f"  Longest: {s.longest_streak}   Completed: {s.total_completed}")


def print_status(
    settings: Settings,
    plan: Optional[ReadingPlan],
    progress_path: Optional[Path] = None,
) -> None:
    """
    Print a quick system status report.
    """
    progress_path = progress_path or PROGRESS_PATH
    info(f"=== {APP_NAME} v{__version__} STATUS ===")
    print(f"  Data source    : {DATA_DIR}")
    print(f"  Progress file  : {progress_path}"
          f"{'' if progress_path.exists() else ' (not created yet)'}")

    meta = TRANSLATIONS.get(settings.translation)
    name = meta["name"] if meta else "unknown translation"
    print(f"  Translation    : {settings.translation} ({name})")

    if plan is None:
        warn("Reading plan could not be loaded.")
        return

    print(f"  Plan           : {plan.name} [{plan.id}], {plan.total_days} day(s)")
    if settings.selected_plan and settings.selected_plan != plan.id:
        warn(f"Selected plan {settings.selected_plan!r} differs from loaded plan {plan.id!r}.")

    print_summary(get_summary(settings, plan))
