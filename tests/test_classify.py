# -*- coding: utf-8 -*-

import pytest

from busho_scraper.classify import TableClassifier, TableRole
from busho_scraper.rules import ParsingRules

from conftest import first_table, table_html


@pytest.fixture
def classifier():
    return TableClassifier()


@pytest.mark.parametrize(
    "rows, role",
    [
        ([["字", "没年"]], TableRole.BASIC_INFO),
        ([["統率"], ["武力"]], TableRole.ABILITY),
        ([["奇才"]], TableRole.TALENT),
        ([["字", "没年", "統率", "武力"]], TableRole.BASIC_INFO),
        ([["統率", "武力", "奇才", "効果"]], TableRole.ABILITY),
        ([["字"]], None),
        ([["統率"]], None),
        ([["戦法"]], None),
    ],
)
def test_classify_profile(classifier, rows, role):
    assert classifier.classify_profile(first_table(table_html(*rows))) is role


def test_headers_match_as_substrings(classifier):
    table = first_table(table_html(["没年は不明", "字が多い"]))
    assert classifier.classify_profile(table) is TableRole.BASIC_INFO


@pytest.mark.parametrize(
    "rows, role",
    [
        ([["戦法"]], TableRole.TACTICS),
        ([["特技"]], TableRole.SKILLS),
        ([["戦法", "特技"]], TableRole.TACTICS),
        ([["統率", "武力"]], None),
    ],
)
def test_classify_list(classifier, rows, role):
    assert classifier.classify_list(first_table(table_html(*rows))) is role


def test_talent_table_needs_effect_keyword(classifier):
    assert classifier.is_talent_table(first_table(table_html(["奇才", "効果"])))
    assert not classifier.is_talent_table(first_table(table_html(["奇才とは"])))
    assert not classifier.is_talent_table(first_table(table_html(["効果"])))


def test_alternative_rules():
    rules = ParsingRules(tactics_headers=("Tactics",), skills_headers=("Skills",))
    classifier = TableClassifier(rules)
    assert classifier.classify_list(first_table(table_html(["Tactics"]))) is TableRole.TACTICS
    assert classifier.classify_list(first_table(table_html(["戦法"]))) is None
