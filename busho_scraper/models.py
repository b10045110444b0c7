# -*- coding: utf-8 -*-

from dataclasses import dataclass, fields
from typing import Any, Dict

from .config import DEFAULT_DERIVED_YEAR_OFFSET

# Output keys, in the wiki's own vocabulary. The derived-year key is built
# from the offset in use (e.g. 没年-13).
FIELD_LABELS = {
    "name": "名前",
    "reading": "読み",
    "courtesy_name": "字",
    "leadership": "統率",
    "force": "武力",
    "intelligence": "知力",
    "politics": "政治",
    "charm": "魅力",
    "talent": "奇才",
    "interests": "興味",
    "greed": "物欲",
    "loyalty": "義理",
    "personality": "性格",
    "strategy": "戦略傾向",
    "death_year": "没年",
    "derived_year": None,
    "tactics": "戦法",
    "skills": "特技",
    "fame": "重視名声",
}


def derived_year_label(offset: int) -> str:
    return f"没年{offset:+d}"


@dataclass(frozen=True)
class Character:
    """One character sheet. Unset fields keep their zero value."""

    name: str = ""
    reading: str = ""
    courtesy_name: str = ""
    leadership: int = 0
    force: int = 0
    intelligence: int = 0
    politics: int = 0
    charm: int = 0
    talent: str = ""
    interests: str = ""
    greed: str = ""
    loyalty: int = 0
    personality: str = ""
    strategy: str = ""
    death_year: int = 0
    derived_year: int = 0
    tactics: str = ""
    skills: str = ""
    fame: str = ""

    @classmethod
    def field_names(cls):
        return [f.name for f in fields(cls)]

    def to_dict(self, derived_year_offset: int = DEFAULT_DERIVED_YEAR_OFFSET) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for name in self.field_names():
            label = FIELD_LABELS[name] or derived_year_label(derived_year_offset)
            out[label] = getattr(self, name)
        return out
