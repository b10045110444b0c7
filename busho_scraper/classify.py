# -*- coding: utf-8 -*-

"""
Decide what a <table> holds from the keywords found anywhere in its text.

Header rows are not reliably marked up, so a table is recognised by keyword
substrings over its whole text. Two independent passes are made over a
page: the profile pass (basic info / ability / talent) and the list pass
(tactics / skills). Within one pass a table gets at most one role.
"""

import enum
from typing import Iterable, Optional

from bs4 import Tag

from .dom import text
from .rules import DEFAULT_RULES, ParsingRules


class TableRole(enum.Enum):
    BASIC_INFO = "basic_info"
    ABILITY = "ability"
    TALENT = "talent"
    TACTICS = "tactics"
    SKILLS = "skills"


def contains_all(node: Tag, keywords: Iterable[str]) -> bool:
    body = text(node)
    return all(k in body for k in keywords)


def contains_any(node: Tag, keywords: Iterable[str]) -> bool:
    body = text(node)
    return any(k in body for k in keywords)


class TableClassifier:
    def __init__(self, rules: ParsingRules = DEFAULT_RULES) -> None:
        self.rules = rules

    def classify_profile(self, table: Tag) -> Optional[TableRole]:
        r = self.rules
        if contains_all(table, r.basic_info_headers):
            return TableRole.BASIC_INFO
        if contains_all(table, r.ability_headers):
            return TableRole.ABILITY
        if contains_any(table, r.talent_headers):
            return TableRole.TALENT
        return None

    def classify_list(self, table: Tag) -> Optional[TableRole]:
        r = self.rules
        if contains_any(table, r.tactics_headers):
            return TableRole.TACTICS
        if contains_any(table, r.skills_headers):
            return TableRole.SKILLS
        return None

    def is_talent_table(self, table: Tag) -> bool:
        """Mentions both 奇才 and 効果; a bare 奇才 is often just prose."""
        return contains_any(table, self.rules.talent_headers) and contains_all(
            table, (self.rules.talent_effect_header,)
        )
