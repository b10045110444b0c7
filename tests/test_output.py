# -*- coding: utf-8 -*-

import json

from busho_scraper.models import Character, derived_year_label
from busho_scraper.output import save_json, sort_by_death_year, to_json

EXPECTED_KEYS = [
    "名前", "読み", "字", "統率", "武力", "知力", "政治", "魅力", "奇才", "興味",
    "物欲", "義理", "性格", "戦略傾向", "没年", "没年-13", "戦法", "特技", "重視名声",
]


def test_to_dict_keys_and_order():
    d = Character(name="曹操", death_year=220, derived_year=207).to_dict()
    assert list(d) == EXPECTED_KEYS
    assert d["名前"] == "曹操"
    assert d["没年-13"] == 207


def test_derived_year_label():
    assert derived_year_label(-13) == "没年-13"
    assert derived_year_label(1) == "没年+1"
    assert "没年+1" in Character().to_dict(1)


def test_sort_by_death_year_is_stable():
    records = [Character(name="b", death_year=234), Character(name="a", death_year=220), Character(name="c", death_year=234)]
    assert [c.name for c in sort_by_death_year(records)] == ["a", "b", "c"]


def test_to_json():
    text = to_json([Character(name="諸葛亮", death_year=234), Character(name="曹操", death_year=220)])
    assert "諸葛亮" in text  # not \u-escaped
    assert '\n    {' in text
    data = json.loads(text)
    assert [d["名前"] for d in data] == ["曹操", "諸葛亮"]


def test_save_json_is_atomic(tmp_path):
    path = tmp_path / "out" / "result.json"
    save_json(str(path), "[]")
    assert path.read_text(encoding="utf-8") == "[]\n"
    assert not (tmp_path / "out" / "result.json.tmp").exists()
