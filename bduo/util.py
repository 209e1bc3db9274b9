"""
Utility functions for console output and calendar dates.
"""

import sys
from datetime import datetime, timezone


def info(msg: str) -> None:
    """Print an info message."""
    print(f"[info] {msg}")


def warn(msg: str) -> None:
    """Print a warning message."""
    print(f"[warn] {msg}")


def ok(msg: str) -> None:
    """Print a success message."""
    print(f"[ok] {msg}")


def error(msg: str) -> None:
    """Print an error message to stderr."""
    print(f"[error] {msg}", file=sys.stderr)


def utc_today_iso() -> str:
    """Today's UTC calendar date as YYYY-MM-DD."""
    return datetime.now(timezone.utc).date().isoformat()


def utc_now_iso() -> str:
    """RFC-3339-like UTC timestamp, second precision."""
    return datetime.now(timezone.utc).isoformat(timespec="seconds")
