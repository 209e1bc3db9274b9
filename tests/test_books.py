import pytest

from bduo import books
from bduo.books import (
    CUVS_BOOK_NAMES,
    CUVS_NEW_TESTAMENT,
    CUVS_OLD_TESTAMENT,
    ESV_NEW_TESTAMENT,
    ESV_OLD_TESTAMENT,
    map_book_name,
)


def test_tables_cover_the_canon():
    assert len(CUVS_BOOK_NAMES) == 66
    assert len(ESV_OLD_TESTAMENT) == len(CUVS_OLD_TESTAMENT) == 39
    assert len(ESV_NEW_TESTAMENT) == len(CUVS_NEW_TESTAMENT) == 27


def test_esv_is_identity():
    assert map_book_name("1Samuel", "ESV") == "1Samuel"
    assert map_book_name("Whatever", "esv") == "Whatever"


@pytest.mark.parametrize("name, expected", [
    ("Genesis", "创世记"),
    ("1Samuel", "撒母耳记上"),
    ("Psalm", "诗篇"),
    ("SongOfSongs", "雅歌"),
    ("Revelation", "启示录"),
])
def test_cuvs_mapping(name, expected):
    assert map_book_name(name, "CUVS") == expected


@pytest.mark.parametrize("name, expected", [
    ("1 Samuel", "撒母耳记上"),
    ("Psalms", "诗篇"),
    ("Song of Solomon", "雅歌"),
    ("1 John", "约翰一书"),
])
def test_cuvs_mapping_accepts_spaced_spellings(name, expected):
    assert map_book_name(name, "cuvs") == expected


def test_unknown_book_passes_through():
    assert map_book_name("Tobit", "CUVS") == "Tobit"


def test_unknown_translation_is_identity():
    assert map_book_name("Genesis", "KJV") == "Genesis"


def test_testament_books_filters_to_available(cuvs_bible):
    old, new = books.testament_books(cuvs_bible, "CUVS")
    assert old == ["创世记", "撒母耳记上"]
    assert new == []
