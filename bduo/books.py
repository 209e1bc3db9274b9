"""
Book names and canonical order for the supported translations.

The reading plan spells books the English way ('Genesis', '1Samuel',
'Psalm', 'SongOfSongs', ...). ESV documents use those names directly;
CUVS documents key books by their Simplified Chinese names, so plan
names are mapped through CUVS_BOOK_NAMES before lookup.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .config import normalize_translation


ESV_OLD_TESTAMENT: List[str] = [
    "Genesis", "Exodus", "Leviticus", "Numbers", "Deuteronomy",
    "Joshua", "Judges", "Ruth", "1 Samuel", "2 Samuel",
    "1 Kings", "2 Kings", "1 Chronicles", "2 Chronicles",
    "Ezra", "Nehemiah", "Esther", "Job", "Psalms", "Proverbs",
    "Ecclesiastes", "Song of Solomon", "Isaiah", "Jeremiah",
    "Lamentations", "Ezekiel", "Daniel", "Hosea", "Joel",
    "Amos", "Obadiah", "Jonah", "Micah", "Nahum", "Habakkuk",
    "Zephaniah", "Haggai", "Zechariah", "Malachi",
]

ESV_NEW_TESTAMENT: List[str] = [
    "Matthew", "Mark", "Luke", "John", "Acts",
    "Romans", "1 Corinthians", "2 Corinthians", "Galatians",
    "Ephesians", "Philippians", "Colossians", "1 Thessalonians",
    "2 Thessalonians", "1 Timothy", "2 Timothy", "Titus",
    "Philemon", "Hebrews", "James", "1 Peter", "2 Peter",
    "1 John", "2 John", "3 John", "Jude", "Revelation",
]

CUVS_OLD_TESTAMENT: List[str] = [
    "创世记", "出埃及", "利未记", "民数记", "申命记",
    "约书亚记", "士师记", "路得记", "撒母耳记上", "撒母耳记下",
    "列王纪上", "列王纪下", "历代志上", "历代志下",
    "以斯拉记", "尼希米记", "以斯帖记", "约伯记", "诗篇", "箴言",
    "传道书", "雅歌", "以赛亚书", "耶利米书",
    "耶利米哀歌", "以西结书", "但以理书", "何西阿书", "约珥书",
    "阿摩司书", "俄巴底亚书", "约拿书", "弥迦书", "那鸿书", "哈巴谷书",
    "西番雅书", "哈该书", "撒迦利亚书", "玛拉基书",
]

CUVS_NEW_TESTAMENT: List[str] = [
    "马太福音", "马可福音", "路加福音", "约翰福音", "使徒行传",
    "罗马书", "歌林多前书", "歌林多后书", "加拉太书",
    "以弗所书", "腓立比书", "歌罗西书", "帖撒罗尼迦前书",
    "帖撒罗尼迦后书", "提摩太前书", "提摩太后书", "提多书",
    "腓利门书", "希伯来书", "雅各书", "彼得前书", "彼得后书",
    "约翰一书", "约翰二书", "约翰三书", "犹大书", "启示录",
]

# Plan spelling -> CUVS book name, Old + New Testament in canonical order.
PLAN_BOOK_NAMES: List[str] = [
    "Genesis", "Exodus", "Leviticus", "Numbers", "Deuteronomy",
    "Joshua", "Judges", "Ruth", "1Samuel", "2Samuel",
    "1Kings", "2Kings", "1Chronicles", "2Chronicles",
    "Ezra", "Nehemiah", "Esther", "Job", "Psalm", "Proverbs",
    "Ecclesiastes", "SongOfSongs", "Isaiah", "Jeremiah",
    "Lamentations", "Ezekiel", "Daniel", "Hosea", "Joel",
    "Amos", "Obadiah", "Jonah", "Micah", "Nahum", "Habakkuk",
    "Zephaniah", "Haggai", "Zechariah", "Malachi",
    "Matthew", "Mark", "Luke", "John", "Acts",
    "Romans", "1Corinthians", "2Corinthians", "Galatians",
    "Ephesians", "Philippians", "Colossians", "1Thessalonians",
    "2Thessalonians", "1Timothy", "2Timothy", "Titus",
    "Philemon", "Hebrews", "James", "1Peter", "2Peter",
    "1John", "2John", "3John", "Jude", "Revelation",
]

CUVS_BOOK_NAMES: Dict[str, str] = dict(
    zip(PLAN_BOOK_NAMES, CUVS_OLD_TESTAMENT + CUVS_NEW_TESTAMENT)
)

# Spellings (spaces already removed) that differ from the plan's.
_ALIASES: Dict[str, str] = {
    "Psalms": "Psalm",
    "SongofSolomon": "SongOfSongs",
    "SongofSongs": "SongOfSongs",
}

# translation code -> (book-name table or None for identity, OT order, NT order)
_TRANSLATION_BOOKS: Dict[str, Tuple[Dict[str, str] | None, List[str], List[str]]] = {
    "ESV": (None, ESV_OLD_TESTAMENT, ESV_NEW_TESTAMENT),
    "CUVS": (CUVS_BOOK_NAMES, CUVS_OLD_TESTAMENT, CUVS_NEW_TESTAMENT),
}


def _plan_spelling(name: str) -> str:
    key = name.replace(" ", "")
    return _ALIASES.get(key, key)


def map_book_name(book_name: str, translation_code: str) -> str:
    """
    Map a canonical (English) book name to the translation's spelling.

    Names the table does not know are returned unchanged, so a lookup
    with the result simply finds no book.
    """
    table, _, _ = _TRANSLATION_BOOKS.get(
        normalize_translation(translation_code), (None, [], [])
    )
    if table is None:
        return book_name
    if book_name in table:
        return table[book_name]
    return table.get(_plan_spelling(book_name), book_name)


def testament_books(document, translation_code: str) -> Tuple[List[str], List[str]]:
    """
    Books present in `document`, in canonical order, split by testament.

    Returns
    -------
    (old_testament, new_testament)
    """
    _, old, new = _TRANSLATION_BOOKS.get(
        normalize_translation(translation_code), _TRANSLATION_BOOKS["ESV"]
    )
    available = set(document.book_names())
    return (
        [b for b in old if b in available],
        [b for b in new if b in available],
    )
