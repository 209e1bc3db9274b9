"""
Bible text documents for BibleDuo.

Two document shapes are supported:

- keyed (ESV):  { book: { "chapter": { "verse": text } } }
- flat (CUVS):  { "verses": [ {book_name, book, chapter, verse, text}, ... ] }

Both are wrapped in a BibleDocument so the passage resolver never needs
to know which shape it is reading. open_bible() picks the wrapper.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

from .model import Verse
from .util import warn


# chapter number -> { verse number -> text }
ChapterIndex = Dict[int, Dict[int, str]]


def _to_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class BibleDocument(ABC):
    """
    A Bible text that can answer verse lookups by book and chapter.
    """

    @abstractmethod
    def _chapter(self, book: str, chapter: int) -> Dict[int, str]:
        """Verse number -> text for one chapter; empty if absent."""

    @abstractmethod
    def book_names(self) -> List[str]:
        """Book names present in the document, in document order."""

    @abstractmethod
    def chapter_count(self, book: str) -> int:
        """Highest chapter number present for a book (0 if absent)."""

    def has_book(self, book: str) -> bool:
        return book in self.book_names()

    def has_chapter(self, book: str, chapter: int) -> bool:
        return bool(self._chapter(book, chapter))

    def get_verses(
        self,
        book: str,
        chapter: int,
        start_verse: int = 1,
        end_verse: Optional[int] = None,
    ) -> List[Verse]:
        """
        Verses of one chapter within [start_verse, end_verse], ascending.

        end_verse=None means "through the last verse present in the chapter".
        A missing book or chapter gives an empty list.
        """
        verses = self._chapter(book, chapter)
        if not verses:
            return []

        if end_verse is None:
            end_verse = max(verses)

        return [
            Verse(chapter=chapter, number=num, text=verses[num])
            for num in sorted(verses)
            if start_verse <= num <= end_verse
        ]


class KeyedBible(BibleDocument):
    """Nested book -> chapter -> verse mapping (string keys)."""

    def __init__(self, data: Mapping[str, Any]):
        self._data = data

    def _chapter(self, book: str, chapter: int) -> Dict[int, str]:
        book_data = self._data.get(book)
        if not isinstance(book_data, Mapping):
            return {}
        chapter_data = book_data.get(str(chapter))
        if not isinstance(chapter_data, Mapping):
            return {}

        result: Dict[int, str] = {}
        for key, text in chapter_data.items():
            num = _to_int(key)
            if num is None:
                continue
            result[num] = text
        return result

    def book_names(self) -> List[str]:
        return list(self._data.keys())

    def has_book(self, book: str) -> bool:
        return book in self._data

    def chapter_count(self, book: str) -> int:
        book_data = self._data.get(book)
        if not isinstance(book_data, Mapping):
            return 0
        chapters = [n for n in (_to_int(k) for k in book_data) if n is not None]
        return max(chapters, default=0)


class FlatBible(BibleDocument):
    """Unsorted list of verse records, indexed once on construction."""

    def __init__(self, data: Mapping[str, Any]):
        self._books: Dict[str, ChapterIndex] = {}
        skipped = 0

        for rec in data.get("verses") or []:
            book = rec.get("book_name")
            chapter = _to_int(rec.get("chapter"))
            verse = _to_int(rec.get("verse"))
            if not book or chapter is None or verse is None:
                skipped += 1
                continue
            self._books.setdefault(book, {}).setdefault(chapter, {})[verse] = rec.get("text", "")

        if skipped:
            warn(f"Skipped {skipped} verse record(s) missing book_name/chapter/verse.")

    def _chapter(self, book: str, chapter: int) -> Dict[int, str]:
        return self._books.get(book, {}).get(chapter, {})

    def book_names(self) -> List[str]:
        return list(self._books.keys())

    def has_book(self, book: str) -> bool:
        return book in self._books

    def chapter_count(self, book: str) -> int:
        return max(self._books.get(book, {}), default=0)


def open_bible(data: Mapping[str, Any]) -> BibleDocument:
    """
    Wrap a decoded Bible JSON document in the matching BibleDocument.

    A mapping carrying a "verses" list is the flat shape; any other
    mapping is the keyed shape.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Bible document must be a JSON object, got {type(data).__name__}.")
    if isinstance(data.get("verses"), list):
        return FlatBible(data)
    return KeyedBible(data)
