"""
Loading JSON documents (Bible texts, reading plans) from disk or HTTP.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional, Union

import requests

from .config import normalize_translation, translation_file
from .documents import BibleDocument, open_bible
from .paths import data_source
from .util import info

HTTP_TIMEOUT = 30


def is_url(source: Union[str, Path]) -> bool:
    return isinstance(source, str) and source.startswith(("http://", "https://"))


def load_json(source: Union[str, Path]) -> Any:
    """
    Decode a JSON document from a local path or an http(s) URL.

    Raises
    ------
    FileNotFoundError
        Local file does not exist.
    requests.HTTPError
        Remote server answered with an error status.
    ValueError
        Content is not valid JSON.
    """
    if is_url(source):
        info(f"Fetching {source}")
        r = requests.get(source, timeout=HTTP_TIMEOUT)
        r.raise_for_status()
        return r.json()

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    info(f"Reading {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def load_bible(translation_code: str, source: Optional[Union[str, Path]] = None) -> BibleDocument:
    """
    Load the Bible document for a translation.

    If `source` is None, '<data dir>/<translation file>' is used
    (see bduo.config.TRANSLATIONS and BDUO_DATA_DIR).
    """
    translation_code = normalize_translation(translation_code)
    if source is None:
        source = data_source(translation_file(translation_code))
    return open_bible(load_json(source))
