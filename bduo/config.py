"""
Project configuration and versioning for BibleDuo.
"""

import os

APP_NAME = "BibleDuo Reading Companion"
__version__ = "1.0.0"

# Translation registry: code -> metadata.
# "file" is the JSON document name under the data directory (or base URL).
TRANSLATIONS = {
    "ESV": {
        "name": "English Standard Version",
        "language": "en",
        "file": "esv.json",
    },
    "CUVS": {
        "name": "Chinese Union Version (Simplified)",
        "language": "zh",
        "file": "cuvs.json",
    },
}

DEFAULT_TRANSLATION = "ESV"
DEFAULT_PLAN_FILE = os.getenv("BDUO_PLAN", "esveverydayinword_plan.json")

# Version tag written into exported progress files.
EXPORT_VERSION = "1.0"

DEFAULT_SETTINGS = {
    "translation": DEFAULT_TRANSLATION,
    "uiLanguage": "en",
    "fontSize": 16,
    "theme": "light",
    "selectedPlan": None,
    "currentDay": 1,
    "completedDays": [],
    "completionDates": {},
    "notifications": {"enabled": False, "time": "08:00"},
}


def normalize_translation(code: str) -> str:
    """Upper-case a translation code; unknown codes are returned as-is."""
    return (code or "").strip().upper()


def translation_file(code: str) -> str:
    """
    Return the JSON document name for a translation code.

    Unknown codes fall back to '<code>.json' in lower case.
    """
    code = normalize_translation(code)
    meta = TRANSLATIONS.get(code)
    if meta is None:
        return f"{code.lower()}.json"
    return meta["file"]
