# -*- coding: utf-8 -*-

import json

import pytest

from busho_scraper import viewer
from busho_scraper.models import Character
from busho_scraper.output import save_json, to_json


@pytest.fixture
def dataset(tmp_path, monkeypatch):
    path = tmp_path / "characters_out.json"
    records = [
        Character(name="曹操", reading="そうそう", leadership=99, death_year=220),
        Character(name="諸葛亮", reading="しょかつりょう", leadership=92, death_year=234),
    ]
    save_json(str(path), to_json(records))
    monkeypatch.setattr(viewer, "DATA_JSON_PATH", str(path))
    viewer.load_dataset.cache_clear()
    yield path
    viewer.load_dataset.cache_clear()


@pytest.fixture
def client():
    return viewer.app.test_client()


def test_index(dataset, client):
    resp = client.get("/")
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "曹操" in html
    assert "諸葛亮" in html
    assert "2人" in html


def test_api_list(dataset, client):
    data = client.get("/api/characters").get_json()
    assert data["ok"] is True
    assert data["count"] == 2
    assert [c["名前"] for c in data["characters"]] == ["曹操", "諸葛亮"]


def test_api_filter(dataset, client):
    data = client.get("/api/characters", query_string={"q": "しょかつ"}).get_json()
    assert [c["名前"] for c in data["characters"]] == ["諸葛亮"]


def test_api_one(dataset, client):
    data = client.get("/api/characters/曹操").get_json()
    assert data["character"]["統率"] == 99
    resp = client.get("/api/characters/劉備")
    assert resp.status_code == 404
    assert resp.get_json()["ok"] is False


def test_skips_invalid_entries(tmp_path, monkeypatch, client):
    path = tmp_path / "mixed.json"
    path.write_text(json.dumps([{"名前": "曹操"}, {"名前": ""}, "x", {"読み": "a"}], ensure_ascii=False), encoding="utf-8")
    monkeypatch.setattr(viewer, "DATA_JSON_PATH", str(path))
    viewer.load_dataset.cache_clear()
    try:
        assert client.get("/api/characters").get_json()["count"] == 1
    finally:
        viewer.load_dataset.cache_clear()


def test_missing_dataset(tmp_path, monkeypatch, client):
    monkeypatch.setattr(viewer, "DATA_JSON_PATH", str(tmp_path / "missing.json"))
    viewer.load_dataset.cache_clear()
    try:
        resp = client.get("/api/characters")
        assert resp.status_code == 500
        assert resp.get_json() == {"ok": False, "error": "dataset not available"}
        assert "Could not load dataset" in client.get("/").get_data(as_text=True)
        assert client.get("/api/characters/曹操").status_code == 500
    finally:
        viewer.load_dataset.cache_clear()
