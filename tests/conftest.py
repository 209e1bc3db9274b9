"""Shared fixtures: small ESV-shaped and CUVS-shaped Bibles plus a plan."""

import json

import pytest

from bduo.documents import FlatBible, KeyedBible


GENESIS = {
    1: {1: "In the beginning, God created the heavens and the earth.",
        2: "The earth was without form and void.",
        3: "And God said, Let there be light.",
        4: "And God saw that the light was good.",
        5: "God called the light Day."},
    2: {1: "Thus the heavens and the earth were finished.",
        2: "And on the seventh day God finished his work.",
        3: "So God blessed the seventh day."},
    3: {1: "Now the serpent was more crafty."},
}


@pytest.fixture
def esv_data():
    data = {
        "Genesis": {
            str(ch): {str(v): text for v, text in verses.items()}
            for ch, verses in GENESIS.items()
        },
        "1Samuel": {"1": {"1": "There was a certain man of Ramathaim-zophim."}},
    }
    return data


@pytest.fixture
def cuvs_data():
    records = []
    for ch, verses in GENESIS.items():
        for v, text in verses.items():
            records.append({"book_name": "创世记", "book": 1, "chapter": ch, "verse": v, "text": text})
    records.append({"book_name": "撒母耳记上", "book": 9, "chapter": 1, "verse": 1, "text": "以法莲山地的拉玛琐非。"})
    # the CUVS export is unsorted
    records.reverse()
    return {"verses": records}


@pytest.fixture
def esv_bible(esv_data):
    return KeyedBible(esv_data)


@pytest.fixture
def cuvs_bible(cuvs_data):
    return FlatBible(cuvs_data)


@pytest.fixture
def plan_data():
    return {
        "id": "everyday",
        "name": "Every Day in the Word",
        "info": "<p>Read through the Bible in a year.</p>",
        "data": ["Genesis 1:1-2:3", "1Samuel 1:1", "Genesis 3:1", "Exodus 1:1-7"],
        "data2": [
            ["Genesis 1:1-2:3", "1Samuel 1:1"],
            ["Genesis 3:1"],
            ["Exodus 1:1-7"],
        ],
    }


@pytest.fixture
def data_dir(tmp_path, esv_data, cuvs_data, plan_data):
    d = tmp_path / "data"
    d.mkdir()
    (d / "esv.json").write_text(json.dumps(esv_data), encoding="utf-8")
    (d / "cuvs.json").write_text(json.dumps(cuvs_data, ensure_ascii=False), encoding="utf-8")
    (d / "plan.json").write_text(json.dumps(plan_data), encoding="utf-8")
    return d
