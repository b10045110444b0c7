# -*- coding: utf-8 -*-

"""Shared fixtures: a representative character page and small HTML builders."""

from typing import Dict, List, Optional, Union

import pytest

from busho_scraper.config import Config
from busho_scraper.dom import Document, find_all
from busho_scraper.rules import DEFAULT_RULES

SAMPLE_PAGE = """
<html><head><title>曹操 - 三國志8 REMAKE 攻略 Wiki</title></head>
<body>
<div id="content">
  <h2><strong>曹操(そうそう)</strong></h2>

  <table>
    <tr><td>奇才とは</td><td style="background-color:gold">誤検出</td></tr>
  </table>

  <table>
    <tr><th>名前</th><th>字</th><th>性別</th><th>登場</th><th>生年</th><th>寿命</th><th>没年</th><th>相性</th><th>血縁</th></tr>
    <tr><td>曹操</td><td>孟徳</td><td>男</td><td>184</td><td>155</td><td>66</td><td>220</td><td>25</td><td>曹嵩</td></tr>
    <tr><td>x</td><td>別字</td><td>男</td><td>184</td><td>155</td><td>66</td><td>999</td><td>25</td><td>曹嵩</td></tr>
  </table>

  <table>
    <tr><th>統率</th><th>武力</th><th>知力</th><th>政治</th><th>魅力</th></tr>
    <tr><td>99</td><td>72</td><td>91</td><td>94</td><td>96</td></tr>
    <tr><th>性格</th><th>義理</th></tr>
    <tr><td>冷静</td><td>5</td></tr>
    <tr><td>重視名声</td><td>物欲</td><td>戦略傾向</td></tr>
    <tr><td>高名</td><td>宝物</td><td>好戦</td></tr>
    <tr><td>奇才</td><td>効果</td></tr>
    <tr><td style="background-color:gold">覇王</td><td>全能力上昇</td></tr>
  </table>

  <table>
    <tr>
      <td style="width:60px">興味</td>
      <td style="width:53px">武具</td>
      <td style="width:52px">ー</td>
      <td style="width:51px">書物</td>
      <td style="width:50px">-</td>
    </tr>
  </table>

  <table>
    <tr><th>戦法</th></tr>
    <tr><td style="width:70px">騎兵</td><td style="width:70px">突撃(大)</td><td style="width:70px">火計</td><td>説明</td></tr>
  </table>

  <table>
    <tr><th>特技</th></tr>
    <tr><td style="width:70px">智謀</td><td style="width:70px">鬼謀(特)</td><td style="width:70px"></td></tr>
  </table>
</div>
</body></html>
"""

Cell = Union[str, Dict[str, str]]


def make_doc(html: str) -> Document:
    return Document.from_html(html)


def td(value: Cell) -> str:
    """'x' -> <td>x</td>, {'text': 'x', 'style': 's'} -> <td style="s">x</td>"""
    if isinstance(value, dict):
        return f'<td style="{value["style"]}">{value["text"]}</td>'
    return f"<td>{value}</td>"


def table_html(*rows: List[Cell], header: Optional[str] = None) -> str:
    out = ["<table>"]
    if header:
        out.append(f"<tr><th>{header}</th></tr>")
    for r in rows:
        out.append("<tr>" + "".join(td(c) for c in r) + "</tr>")
    out.append("</table>")
    return "".join(out)


def first_table(html: str):
    return make_doc(html).find_first("table")


def row_of(*values: Cell):
    """(row, cells) of a one-row table."""
    table = first_table(table_html(list(values)))
    row = find_all(table, "tr")[0]
    return row, find_all(row, "td")


@pytest.fixture
def sample_doc() -> Document:
    return make_doc(SAMPLE_PAGE)


@pytest.fixture
def rules():
    return DEFAULT_RULES


@pytest.fixture
def config() -> Config:
    return Config(base_url="https://wiki.example/", base_delay=2.0, request_delay=0.5)


class FakeResponse:
    def __init__(self, status_code: int = 200, body: str = "", reason: str = "OK") -> None:
        self.status_code = status_code
        self.content = body.encode("utf-8")
        self.reason = reason


class FakeSession:
    """Stands in for requests.Session; replays responses (or raises exceptions) in order."""

    def __init__(self, *responses) -> None:
        self.headers: Dict[str, str] = {}
        self.responses = list(responses)
        self.calls: List[Dict] = []

    def get(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        item = self.responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


@pytest.fixture
def sleeps(monkeypatch):
    """Records time.sleep calls instead of sleeping."""
    calls: List[float] = []
    monkeypatch.setattr("time.sleep", lambda s: calls.append(s))
    return calls
