"""
bduo - BibleDuo reading companion core package

This package contains the core functionality for BibleDuo:
- config: Project configuration, translations and versioning
- paths: Path management and directory setup
- util: Utility functions for console output
- reference: Passage reference parsing
- books: Book-name mapping between translations
- documents: Keyed and flat Bible text documents
- passage: Verse resolution for passages and plan days
- streaks: Reading streak statistics
- progress: Settings and progress persistence
- plans / sources: Reading plan and document loading
- pdfgen: PDF export of a day's reading
"""

from . import config
from .paths import PROJECT_ROOT, PROGRESS_PATH
from .util import info, warn, ok
from .model import PassageDescriptor, Verse, ReadingPlan, StreakStats, ProgressSummary, WidgetSummary
from .reference import parse_reference
from .books import map_book_name
from .documents import BibleDocument, KeyedBible, FlatBible, open_bible
from .passage import resolve_verses, get_passage, get_day_passages, print_passage
from .streaks import compute_streaks, summarize_progress, widget_summary
from .progress import Settings, load_settings, save_settings, mark_day_complete
from .plans import load_plan, readings_for_day
from .sources import load_bible

__version__ = config.__version__
__all__ = [
    "config",
    "PROJECT_ROOT",
    "PROGRESS_PATH",
    "info",
    "warn",
    "ok",
    "PassageDescriptor",
    "Verse",
    "ReadingPlan",
    "StreakStats",
    "ProgressSummary",
    "WidgetSummary",
    "parse_reference",
    "map_book_name",
    "BibleDocument",
    "KeyedBible",
    "FlatBible",
    "open_bible",
    "resolve_verses",
    "get_passage",
    "get_day_passages",
    "print_passage",
    "compute_streaks",
    "summarize_progress",
    "widget_summary",
    "Settings",
    "load_settings",
    "save_settings",
    "mark_day_complete",
    "load_plan",
    "readings_for_day",
    "load_bible",
]
