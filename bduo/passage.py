"""
Passage resolution for BibleDuo.

This module provides:

- resolve_verses(desc, translation_code, document)
    Verses of a parsed passage, across chapters, in reading order

- get_passage(ref, translation_code, document)
    Parse-and-resolve for a reference like "Genesis 1:1-2:25"

- get_chapter(book, chapter, document)
    A whole chapter, for browsing

- get_day_passages(plan, day, translation_code, document)
    Every passage scheduled for a plan day

- print_passage(ref, verses)
    Pretty-print a passage to the console

An empty verse list means "passage not available"; it is never an error.
"""

from __future__ import annotations

from typing import List, Tuple

from .books import map_book_name
from .documents import BibleDocument
from .model import PassageDescriptor, ReadingPlan, Verse
from .plans import readings_for_day
from .reference import parse_reference
from .util import info, warn


# (reference, verses) for one reading of a plan day
DayPassage = Tuple[str, List[Verse]]


def resolve_verses(
    desc: PassageDescriptor,
    translation_code: str,
    document: BibleDocument,
) -> List[Verse]:
    """
    Collect the verses of a passage from a Bible document.

    Parameters
    ----------
    desc:
        Parsed passage.
    translation_code:
        Translation of `document` (e.g. 'ESV', 'CUVS'); selects the
        book-name spelling used for lookup.
    document:
        Bible text to read from.

    Returns
    -------
    List[Verse]:
        Ordered by (chapter, verse). Chapters missing from the document
        are skipped, so the result may be partial or empty.
    """
    book = map_book_name(desc.book, translation_code)

    if not document.has_book(book):
        warn(f"Book not found in {translation_code} text: {book!r}")
        return []

    verses: List[Verse] = []
    for chapter in desc.chapters():
        start = desc.start_verse if chapter == desc.start_chapter else 1
        end = desc.end_verse if chapter == desc.end_chapter else None

        if not document.has_chapter(book, chapter):
            warn(f"Chapter {chapter} not found in {book!r}; skipping.")
            continue

        verses.extend(document.get_verses(book, chapter, start, end))

    return verses


def get_passage(
    ref: str,
    translation_code: str,
    document: BibleDocument,
) -> List[Verse]:
    """
    Fetch a passage like 'Genesis 1:1-2:25' or 'John 3:16'.

    Returns an empty list when the reference cannot be parsed.
    """
    info(f"=== PASSAGE === ref={ref!r}, translation={translation_code!r}")

    desc = parse_reference(ref)
    if desc is None:
        return []

    verses = resolve_verses(desc, translation_code, document)
    info(f"Passage resolved to {len(verses)} verse(s).")
    return verses


def get_chapter(book: str, chapter: int, document: BibleDocument) -> List[Verse]:
    """
    All verses of one chapter, by the document's own book name.
    """
    verses = document.get_verses(book, chapter)
    if not verses:
        warn(f"Chapter not found: {book} {chapter}")
    return verses


def get_day_passages(
    plan: ReadingPlan,
    day: int,
    translation_code: str,
    document: BibleDocument,
) -> List[DayPassage]:
    """
    Resolve every reading scheduled for a plan day.

    Readings that resolve to nothing are kept with an empty verse list
    so callers can show "passage not available" in their place.
    """
    return [
        (ref, get_passage(ref, translation_code, document))
        for ref in readings_for_day(plan, day)
    ]


def print_passage(ref: str, verses: List[Verse]) -> None:
    """
    Pretty-print a resolved passage to the console.

    A chapter heading is printed whenever the chapter changes.
    """
    print(ref)
    print("-" * len(ref))

    if not verses:
        print("    (Passage not available in this translation.)")
        print()
        return

    chapter = None
    for v in verses:
        if v.chapter != chapter:
            chapter = v.chapter
            print(f"  [{chapter}]")
        print(f"  {v.number:>3}  {v.text}")
    print()
