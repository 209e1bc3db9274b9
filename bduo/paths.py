"""
Path configuration for the BibleDuo project.
"""

import os
from pathlib import Path

# Project root is one level up from bduo/
PROJECT_ROOT = Path(__file__).parent.parent

# Bible and plan JSON documents. May also be an http(s) base URL.
DATA_DIR = os.getenv("BDUO_DATA_DIR", str(PROJECT_ROOT / "data"))

PROGRESS_PATH = Path(os.getenv("BDUO_PROGRESS", str(PROJECT_ROOT / "progress.json")))
REPORTS_DIR = PROJECT_ROOT / "reports"


def data_source(name: str) -> str:
    """
    Join a document name onto DATA_DIR.

    Works for both local directories and http(s) base URLs.
    """
    if DATA_DIR.startswith(("http://", "https://")):
        return DATA_DIR.rstrip("/") + "/" + name
    return str(Path(DATA_DIR) / name)

