"""
Progress store for BibleDuo.

Settings and reading progress live in one JSON blob on disk. On disk,
completed days are an array of integers and completion dates an object
keyed by the day number as a string; in memory they are a set and a
dict keyed by int. This module is the only place that converts between
the two forms.
"""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional, Set

from .config import DEFAULT_SETTINGS, EXPORT_VERSION, normalize_translation
from .paths import PROGRESS_PATH
from .util import info, utc_now_iso, utc_today_iso, warn

# Keys an imported blob must carry to be accepted.
REQUIRED_IMPORT_KEYS = ("translation", "uiLanguage", "fontSize", "theme")


@dataclass
class Settings:
    translation: str = DEFAULT_SETTINGS["translation"]
    ui_language: str = DEFAULT_SETTINGS["uiLanguage"]
    font_size: int = DEFAULT_SETTINGS["fontSize"]
    theme: str = DEFAULT_SETTINGS["theme"]
    selected_plan: Optional[str] = None
    current_day: int = 1
    completed_days: Set[int] = field(default_factory=set)
    completion_dates: Dict[int, str] = field(default_factory=dict)
    notifications: Dict[str, Any] = field(
        default_factory=lambda: copy.deepcopy(DEFAULT_SETTINGS["notifications"])
    )


def _day_numbers(values: Any) -> Set[int]:
    days: Set[int] = set()
    if not isinstance(values, list):
        return days
    for v in values:
        try:
            days.add(int(v))
        except (TypeError, ValueError):
            warn(f"Ignoring non-integer completed day {v!r}.")
    return days


def _date_map(values: Any) -> Dict[int, str]:
    dates: Dict[int, str] = {}
    if not isinstance(values, dict):
        return dates
    for key, value in values.items():
        if not value:
            continue
        try:
            dates[int(key)] = str(value)
        except (TypeError, ValueError):
            warn(f"Ignoring completion date with non-integer day {key!r}.")
    return dates


def _int_setting(merged: Dict[str, Any], key: str, default: int) -> int:
    value = merged.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Setting {key!r} must be an integer, got {value!r}.") from None


def settings_from_dict(data: Dict[str, Any]) -> Settings:
    """
    Build Settings from a decoded JSON blob.

    Missing or null fields take their defaults. Raises ValueError when a
    numeric field holds something other than a number.
    """
    merged = {**DEFAULT_SETTINGS, **(data or {})}
    return Settings(
        translation=normalize_translation(merged["translation"]),
        ui_language=merged["uiLanguage"],
        font_size=_int_setting(merged, "fontSize", DEFAULT_SETTINGS["fontSize"]),
        theme=merged["theme"],
        selected_plan=merged.get("selectedPlan"),
        current_day=_int_setting(merged, "currentDay", 1),
        completed_days=_day_numbers(merged.get("completedDays")),
        completion_dates=_date_map(merged.get("completionDates")),
        notifications=dict(merged.get("notifications") or DEFAULT_SETTINGS["notifications"]),
    )


def settings_to_dict(settings: Settings) -> Dict[str, Any]:
    """Serializable form of Settings (arrays and string-keyed objects)."""
    return {
        "translation": settings.translation,
        "uiLanguage": settings.ui_language,
        "fontSize": settings.font_size,
        "theme": settings.theme,
        "selectedPlan": settings.selected_plan,
        "currentDay": settings.current_day,
        "completedDays": sorted(settings.completed_days),
        "completionDates": {
            str(day): settings.completion_dates[day]
            for day in sorted(settings.completion_dates)
        },
        "notifications": dict(settings.notifications),
    }


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Read settings from disk; a missing file gives default settings.
    """
    path = Path(path) if path is not None else PROGRESS_PATH
    if not path.exists():
        info(f"No progress file at {path}; starting with defaults.")
        return Settings()
    data = json.loads(path.read_text(encoding="utf-8"))
    return settings_from_dict(data)


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    path = Path(path) if path is not None else PROGRESS_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(settings_to_dict(settings), ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
    return path


def mark_day_complete(
    settings: Settings,
    day: int,
    completed_on: Optional[str] = None,
) -> Settings:
    """
    Return new settings with `day` marked done on `completed_on`.

    completed_on defaults to today's UTC date. Re-marking a day moves
    its completion date. The input settings are not modified.
    """
    if day < 1:
        raise ValueError(f"Day numbers start at 1, got {day}.")
    completed_on = completed_on or utc_today_iso()

    completed = set(settings.completed_days)
    completed.add(day)
    dates = dict(settings.completion_dates)
    dates[day] = completed_on

    return replace(settings, completed_days=completed, completion_dates=dates)


def unmark_day(settings: Settings, day: int) -> Settings:
    """Return new settings with `day` no longer completed."""
    completed = set(settings.completed_days)
    completed.discard(day)
    dates = dict(settings.completion_dates)
    dates.pop(day, None)
    return replace(settings, completed_days=completed, completion_dates=dates)


def export_settings(settings: Settings, output_path: Path) -> Path:
    """
    Write an export file: the settings blob plus exportDate and version.
    """
    data = settings_to_dict(settings)
    data["exportDate"] = utc_now_iso()
    data["version"] = EXPORT_VERSION

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(data, ensure_ascii=False, indent=2) + "\n", encoding="utf-8"
    )
    return output_path


def import_settings(input_path: Path) -> Settings:
    """
    Read an exported settings file.

    Raises
    ------
    FileNotFoundError
        The file does not exist.
    ValueError
        The file is not JSON or lacks one of REQUIRED_IMPORT_KEYS.
    """
    input_path = Path(input_path)
    if not input_path.exists():
        raise FileNotFoundError(f"Import file not found: {input_path}")

    try:
        data = json.loads(input_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Import file is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError("Invalid data format: expected a JSON object.")
    missing = [k for k in REQUIRED_IMPORT_KEYS if not data.get(k)]
    if missing:
        raise ValueError(f"Invalid data format: missing {', '.join(missing)}.")

    return settings_from_dict(data)
