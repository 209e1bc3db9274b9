import pytest
import requests

from bduo import paths
from bduo.documents import FlatBible, KeyedBible
from bduo.model import ReadingPlan
from bduo.plans import clamp_day, load_plan, readings_for_day
from bduo.sources import load_bible, load_json


class FakeResponse:
    def __init__(self, payload, status=200):
        self._payload = payload
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._payload


def test_plan_from_dict(plan_data):
    plan = ReadingPlan.from_dict(plan_data)
    assert plan.id == "everyday"
    assert plan.total_days == 3
    assert plan.readings[0] == "Genesis 1:1-2:3"
    assert plan.daily_readings[1] == ["Genesis 3:1"]


@pytest.mark.parametrize("data", [
    {"name": "no id"},
    {"id": "x", "data2": "Genesis 1:1"},
    {"id": "x", "data2": ["Genesis 1:1"]},
])
def test_plan_from_dict_rejects_malformed(data):
    with pytest.raises(ValueError):
        ReadingPlan.from_dict(data)


def test_readings_for_day(plan_data):
    plan = ReadingPlan.from_dict(plan_data)
    assert readings_for_day(plan, 1) == ["Genesis 1:1-2:3", "1Samuel 1:1"]
    assert readings_for_day(plan, 3) == ["Exodus 1:1-7"]
    assert readings_for_day(plan, 0) == []
    assert readings_for_day(plan, 4) == []


def test_clamp_day(plan_data):
    plan = ReadingPlan.from_dict(plan_data)
    assert clamp_day(plan, -3) == 1
    assert clamp_day(plan, 2) == 2
    assert clamp_day(plan, 400) == 3


def test_load_plan_from_file(data_dir):
    plan = load_plan(data_dir / "plan.json")
    assert plan.name == "Every Day in the Word"


def test_load_json_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_json(tmp_path / "nope.json")


def test_load_bible_from_data_dir(data_dir, monkeypatch):
    monkeypatch.setattr(paths, "DATA_DIR", str(data_dir))
    assert isinstance(load_bible("esv"), KeyedBible)
    assert isinstance(load_bible("CUVS"), FlatBible)


def test_load_json_over_http(monkeypatch, plan_data):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return FakeResponse(plan_data)

    monkeypatch.setattr(requests, "get", fake_get)
    plan = load_plan("https://example.org/data/plan.json")
    assert plan.id == "everyday"
    assert calls == [("https://example.org/data/plan.json", 30)]


def test_load_bible_from_base_url(monkeypatch, esv_data):
    requested = []

    def fake_get(url, timeout):
        requested.append(url)
        return FakeResponse(esv_data)

    monkeypatch.setattr(paths, "DATA_DIR", "https://example.org/data/")
    monkeypatch.setattr(requests, "get", fake_get)
    bible = load_bible("ESV")
    assert requested == ["https://example.org/data/esv.json"]
    assert bible.chapter_count("Genesis") == 3


def test_http_errors_propagate(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda url, timeout: FakeResponse({}, status=404))
    with pytest.raises(requests.HTTPError):
        load_json("https://example.org/missing.json")

