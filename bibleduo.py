#!/usr/bin/env python
"""
bibleduo.py – unified CLI for the BibleDuo reading companion

Commands:

  python bibleduo.py passage "Genesis 1:1-2:25" --code ESV
      Print the verses of a passage

  python bibleduo.py day --day 12
      Print every passage scheduled for a plan day (default: current day)

  python bibleduo.py complete --day 12 --advance
      Mark a plan day as done today and move on to the next day

  python bibleduo.py stats
      Current streak, longest streak and completion figures

  python bibleduo.py widget
      Streak card with a motivational message

  python bibleduo.py pdf-day reports/day12 --day 12
      Export a day's reading to PDF
"""

import argparse
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

import requests

from bduo import config
from bduo.books import testament_books
from bduo.config import normalize_translation
from bduo.passage import get_chapter, get_day_passages, get_passage, print_passage
from bduo.paths import PROGRESS_PATH, REPORTS_DIR
from bduo.pdfgen import export_day_pdf
from bduo.plans import clamp_day, load_plan
from bduo.progress import (
    Settings,
    export_settings,
    import_settings,
    load_settings,
    mark_day_complete,
    save_settings,
    unmark_day,
)
from bduo.sources import load_bible
from bduo.status import (
    get_summary,
    get_widget,
    print_status,
    print_summary,
    print_widget,
)
from bduo.streaks import compute_streaks
from bduo.util import error, info, ok, warn


# ---------- Helpers ----------


def _iso_date(value: str) -> str:
    """argparse type: a YYYY-MM-DD calendar date."""
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a YYYY-MM-DD date: {value!r}")


def _progress_path(args: argparse.Namespace) -> Path:
    return Path(args.progress) if args.progress else PROGRESS_PATH


def _settings(args: argparse.Namespace) -> Settings:
    return load_settings(_progress_path(args))


def _save(args: argparse.Namespace, settings: Settings) -> None:
    path = save_settings(settings, _progress_path(args))
    info(f"Progress saved to {path}")


def _translation(args: argparse.Namespace, settings: Settings) -> str:
    code = getattr(args, "code", None)
    return normalize_translation(code) if code else settings.translation


# ---------- Command handlers ----------


def cmd_passage(args: argparse.Namespace) -> None:
    """
    Print a passage by reference.
    """
    settings = _settings(args)
    code = _translation(args, settings)
    document = load_bible(code, args.bible)
    verses = get_passage(args.ref, code, document)
    print_passage(args.ref, verses)


def cmd_day(args: argparse.Namespace) -> None:
    """
    Print all passages scheduled for a plan day.
    """
    settings = _settings(args)
    code = _translation(args, settings)
    plan = load_plan(args.plan)
    day = args.day if args.day is not None else settings.current_day

    document = load_bible(code, args.bible)
    passages = get_day_passages(plan, day, code, document)

    done = " (completed)" if day in settings.completed_days else ""
    info(f"{plan.name}: Day {day} of {plan.total_days}{done}")
    if not passages:
        warn("No readings for this day.")
    for ref, verses in passages:
        print_passage(ref, verses)


def cmd_chapter(args: argparse.Namespace) -> None:
    """
    Print one chapter by the document's own book name.
    """
    settings = _settings(args)
    code = _translation(args, settings)
    document = load_bible(code, args.bible)
    verses = get_chapter(args.book, args.chapter, document)
    print_passage(f"{args.book} {args.chapter}", verses)

    count = document.chapter_count(args.book)
    if count:
        info(f"{args.book} has {count} chapter(s).")


def cmd_books(args: argparse.Namespace) -> None:
    """
    List the books available in a translation, by testament.
    """
    settings = _settings(args)
    code = _translation(args, settings)
    document = load_bible(code, args.bible)
    old, new = testament_books(document, code)

    print("Old Testament:")
    for book in old:
        print(f"  - {book} ({document.chapter_count(book)})")
    print("New Testament:")
    for book in new:
        print(f"  - {book} ({document.chapter_count(book)})")


def cmd_complete(args: argparse.Namespace) -> None:
    """
    Mark (or unmark) a plan day as completed.
    """
    settings = _settings(args)
    day = args.day if args.day is not None else settings.current_day

    if args.undo:
        settings = unmark_day(settings, day)
        ok(f"Day {day} marked as not completed.")
    else:
        settings = mark_day_complete(settings, day, completed_on=args.date)
        ok(f"Day {day} marked as complete on {settings.completion_dates[day]}.")
        if args.advance:
            plan = load_plan(args.plan)
            settings.current_day = clamp_day(plan, day + 1)
            info(f"Current day is now {settings.current_day}.")

    _save(args, settings)


def cmd_goto(args: argparse.Namespace) -> None:
    """
    Move the current day pointer.
    """
    settings = _settings(args)
    plan = load_plan(args.plan)
    day = clamp_day(plan, args.day)
    if day != args.day:
        warn(f"Day {args.day} is outside the plan; using day {day}.")
    settings.current_day = day
    settings.selected_plan = plan.id
    _save(args, settings)
    ok(f"Current day set to {day} of {plan.total_days}.")


def cmd_stats(args: argparse.Namespace) -> None:
    """
    Print streak statistics (and dashboard figures when a plan is given).
    """
    settings = _settings(args)
    if args.plan:
        print_summary(get_summary(settings, load_plan(args.plan), today=args.today))
        return

    stats = compute_streaks(settings.completed_days, settings.completion_dates, today=args.today)
    print(f"  Current streak : {stats.current_streak} day(s)")
    print(f"  Longest streak : {stats.longest_streak} day(s)")
    print(f"  Days completed : {stats.total_completed}")


def cmd_widget(args: argparse.Namespace) -> None:
    """
    Print the streak card with its motivational message.
    """
    settings = _settings(args)
    plan = load_plan(args.plan)
    print_widget(get_widget(settings, plan, today=args.today))


def cmd_status(args: argparse.Namespace) -> None:
    """
    Print a quick system status report.
    """
    settings = _settings(args)
    try:
        plan = load_plan(args.plan)
    except (OSError, ValueError, requests.RequestException) as e:
        warn(f"Could not load reading plan: {e}")
        plan = None
    print_status(settings, plan, _progress_path(args))


def cmd_set_translation(args: argparse.Namespace) -> None:
    """
    Change the default translation.
    """
    code = normalize_translation(args.code)
    if code not in config.TRANSLATIONS:
        raise ValueError(
            f"Unknown translation {code!r}. Known: {', '.join(config.TRANSLATIONS)}"
        )
    settings = _settings(args)
    settings.translation = code
    _save(args, settings)
    ok(f"Translation set to {code}.")


def cmd_export_progress(args: argparse.Namespace) -> None:
    """
    Export settings and progress to a JSON file.
    """
    path = export_settings(_settings(args), Path(args.output))
    ok(f"Progress exported to {path}")


def cmd_import_progress(args: argparse.Namespace) -> None:
    """
    Replace settings and progress with a previously exported file.
    """
    settings = import_settings(Path(args.input))
    _save(args, settings)
    ok(f"Imported {len(settings.completed_days)} completed day(s) from {args.input}")


def cmd_reset_progress(args: argparse.Namespace) -> None:
    """
    Delete all progress and restore default settings.
    """
    if not args.yes:
        warn("This deletes all reading progress. Re-run with --yes to confirm.")
        return
    _save(args, Settings())
    ok("Progress reset to defaults.")


def cmd_pdf_day(args: argparse.Namespace) -> None:
    """
    Export a plan day's reading to PDF.
    """
    settings = _settings(args)
    code = _translation(args, settings)
    plan = load_plan(args.plan)
    day = args.day if args.day is not None else settings.current_day

    document = load_bible(code, args.bible)
    passages = get_day_passages(plan, day, code, document)
    if not passages:
        warn("No readings for this day; no PDF generated.")
        return

    stats = compute_streaks(settings.completed_days, settings.completion_dates)
    output = Path(args.output) if args.output else REPORTS_DIR / f"day-{day:03d}"
    export_day_pdf(output, plan.name, day, plan.total_days, code, passages, stats)


# ---------- Parser setup ----------


def _add_source_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--code",
        type=str,
        default=None,
        help="Translation code (ESV or CUVS; default: from settings)",
    )
    p.add_argument(
        "--bible",
        type=str,
        default=None,
        help="Bible JSON path or URL (default: <data dir>/<translation>.json)",
    )


def _add_plan_arg(p: argparse.ArgumentParser, default: Optional[str] = None) -> None:
    p.add_argument(
        "--plan",
        type=str,
        default=default,
        help="Reading plan JSON path or URL (default: configured plan in data dir)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bibleduo",
        description=f"{config.APP_NAME} CLI (v{config.__version__})",
    )
    parser.add_argument(
        "--progress",
        type=str,
        default=None,
        help="Path to the progress JSON file (or set BDUO_PROGRESS)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # passage
    p_passage = sub.add_parser(
        "passage",
        help="Print a passage by reference (e.g. 'Genesis 1:1-2:25')",
    )
    p_passage.add_argument("ref", type=str, help="Reference string, e.g. 'John 3:16-18'")
    _add_source_args(p_passage)
    p_passage.set_defaults(func=cmd_passage)

    # day
    p_day = sub.add_parser("day", help="Print the readings for a plan day")
    p_day.add_argument("--day", type=int, default=None, help="Plan day (default: current day)")
    _add_source_args(p_day)
    _add_plan_arg(p_day)
    p_day.set_defaults(func=cmd_day)

    # chapter
    p_chapter = sub.add_parser("chapter", help="Print a whole chapter")
    p_chapter.add_argument("book", type=str, help="Book name as spelled in the translation")
    p_chapter.add_argument("chapter", type=int, help="Chapter number")
    _add_source_args(p_chapter)
    p_chapter.set_defaults(func=cmd_chapter)

    # books
    p_books = sub.add_parser("books", help="List books available in a translation")
    _add_source_args(p_books)
    p_books.set_defaults(func=cmd_books)

    # complete
    p_complete = sub.add_parser("complete", help="Mark a plan day as completed")
    p_complete.add_argument("--day", type=int, default=None, help="Plan day (default: current day)")
    p_complete.add_argument(
        "--date",
        type=_iso_date,
        default=None,
        help="Completion date YYYY-MM-DD (default: today, UTC)",
    )
    p_complete.add_argument(
        "--advance",
        action="store_true",
        help="Move the current day to the next plan day",
    )
    p_complete.add_argument(
        "--undo",
        action="store_true",
        help="Remove the completion instead of adding it",
    )
    _add_plan_arg(p_complete)
    p_complete.set_defaults(func=cmd_complete)

    # goto
    p_goto = sub.add_parser("goto", help="Set the current plan day")
    p_goto.add_argument("day", type=int, help="Plan day")
    _add_plan_arg(p_goto)
    p_goto.set_defaults(func=cmd_goto)

    # stats
    p_stats = sub.add_parser("stats", help="Show streak statistics")
    p_stats.add_argument(
        "--today",
        type=_iso_date,
        default=None,
        help="Date assumed for completions with no recorded date",
    )
    _add_plan_arg(p_stats)
    p_stats.set_defaults(func=cmd_stats)

    # widget
    p_widget = sub.add_parser("widget", help="Show the streak card with a motivational message")
    p_widget.add_argument(
        "--today",
        type=_iso_date,
        default=None,
        help="Date assumed for completions with no recorded date",
    )
    _add_plan_arg(p_widget)
    p_widget.set_defaults(func=cmd_widget)

    # status
    p_status = sub.add_parser("status", help="Show data, plan and progress summary")
    _add_plan_arg(p_status)
    p_status.set_defaults(func=cmd_status)

    # set-translation
    p_tr = sub.add_parser("set-translation", help="Change the default translation")
    p_tr.add_argument("code", type=str, help="ESV or CUVS")
    p_tr.set_defaults(func=cmd_set_translation)

    # export-progress / import-progress / reset-progress
    p_exp = sub.add_parser("export-progress", help="Export settings and progress to JSON")
    p_exp.add_argument("output", type=str, help="Output JSON file")
    p_exp.set_defaults(func=cmd_export_progress)

    p_imp = sub.add_parser("import-progress", help="Import a previously exported JSON file")
    p_imp.add_argument("input", type=str, help="Exported JSON file")
    p_imp.set_defaults(func=cmd_import_progress)

    p_reset = sub.add_parser("reset-progress", help="Delete all reading progress")
    p_reset.add_argument("--yes", action="store_true", help="Confirm the reset")
    p_reset.set_defaults(func=cmd_reset_progress)

    # pdf-day
    p_pdf = sub.add_parser("pdf-day", help="Export a plan day's reading to PDF")
    p_pdf.add_argument(
        "output",
        type=str,
        nargs="?",
        default=None,
        help="Output file (default: reports/day-NNN.pdf)",
    )
    p_pdf.add_argument("--day", type=int, default=None, help="Plan day (default: current day)")
    _add_source_args(p_pdf)
    _add_plan_arg(p_pdf)
    p_pdf.set_defaults(func=cmd_pdf_day)

    return parser


# ---------- Main ----------


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        args.func(args)
    except (OSError, ValueError, requests.RequestException) as e:
        error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
