"""
Passage reference parsing for BibleDuo.

Supported forms, tried in this order (first match wins):

- 'Genesis 1:1-2:25'  cross-chapter range
- 'Genesis 1:1-6'     range within one chapter
- 'Genesis 1:1'       single verse

The book is everything before the chapter:verse token, so names with
spaces ('1 Samuel', 'Song of Solomon') and Chinese names both work.
"""

from __future__ import annotations

import re
from typing import Optional

from .model import PassageDescriptor
from .util import warn


_CROSS_CHAPTER_RE = re.compile(r"^(.+?)\s+([0-9]+):([0-9]+)-([0-9]+):([0-9]+)$")
_CHAPTER_RANGE_RE = re.compile(r"^(.+?)\s+([0-9]+):([0-9]+)-([0-9]+)$")
_SINGLE_VERSE_RE = re.compile(r"^(.+?)\s+([0-9]+):([0-9]+)$")


def parse_reference(ref: str) -> Optional[PassageDescriptor]:
    """
    Parse a reference string into a PassageDescriptor.

    Returns None when the string matches none of the supported forms.
    The book name is not validated here; that happens at lookup time.
    """
    s = (ref or "").strip()
    if not s:
        warn("Empty reference string.")
        return None

    m = _CROSS_CHAPTER_RE.match(s)
    if m:
        book, c1, v1, c2, v2 = m.groups()
        return PassageDescriptor(
            book=book,
            start_chapter=int(c1),
            start_verse=int(v1),
            end_chapter=int(c2),
            end_verse=int(v2),
        )

    m = _CHAPTER_RANGE_RE.match(s)
    if m:
        book, chapter, v1, v2 = m.groups()
        return PassageDescriptor(
            book=book,
            start_chapter=int(chapter),
            start_verse=int(v1),
            end_chapter=int(chapter),
            end_verse=int(v2),
        )

    m = _SINGLE_VERSE_RE.match(s)
    if m:
        book, chapter, verse = m.groups()
        return PassageDescriptor(
            book=book,
            start_chapter=int(chapter),
            start_verse=int(verse),
            end_chapter=int(chapter),
            end_verse=int(verse),
        )

    warn(f"Could not parse reference: {ref!r}")
    return None

