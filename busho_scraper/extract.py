# -*- coding: utf-8 -*-

"""
Field extractors: one per section of the character sheet.

Every extractor returns a dict holding only the fields it actually found.
Missing tables, short rows or unexpected values simply produce fewer keys;
nothing here raises. CharacterExtractor merges the dicts in document order
(later finds overwrite earlier ones) and freezes them into a Character.
"""

import re
from typing import Any, Dict, Iterable, List, Optional, Sequence

from bs4 import Tag

from .classify import TableClassifier, TableRole, contains_any
from .config import DEFAULT_DERIVED_YEAR_OFFSET
from .dom import Document, cell_text, find_all, has_any_style_width, has_style_containing, has_style_width
from .models import Character
from .rules import DEFAULT_RULES, ParsingRules

Fields = Dict[str, Any]

INT_RE = re.compile(r"[+-]?[0-9]+")

ABILITY_FIELDS = ("leadership", "force", "intelligence", "politics", "charm")


def parse_int(s: str) -> Optional[int]:
    """Plain ASCII integer or None. '１２０', '1_000' and '12.5' are rejected."""
    s = (s or "").strip()
    if not INT_RE.fullmatch(s):
        return None
    return int(s)


def row_cells(row: Tag) -> List[Tag]:
    return find_all(row, "td")


# -----------------------------
# Name / reading
# -----------------------------

def split_name_reading(heading: str, rules: ParsingRules = DEFAULT_RULES) -> Fields:
    """
    "曹操(そうそう)" -> name + reading. Both brackets must be present,
    otherwise nothing is returned.
    """
    name, sep, rest = heading.partition(rules.reading_open)
    if not sep:
        return {}
    reading, sep, _ = rest.partition(rules.reading_close)
    if not sep:
        return {}
    return {"name": name.strip(), "reading": reading.strip()}


def extract_name_reading(doc: Document, rules: ParsingRules = DEFAULT_RULES) -> Fields:
    heading = doc.find_first(rules.name_tag)
    if heading is None:
        return {}
    return split_name_reading(cell_text(heading), rules)


# -----------------------------
# Basic info table (字 / 没年)
# -----------------------------

def extract_basic_info(table: Tag, derived_year_offset: int = DEFAULT_DERIVED_YEAR_OFFSET) -> Fields:
    """Only the first row with at least 9 cells is read."""
    for row in find_all(table, "tr"):
        cells = row_cells(row)
        if len(cells) < 9:
            continue

        out: Fields = {"courtesy_name": cell_text(cells[1])}
        death_year = parse_int(cell_text(cells[6]))
        if death_year is not None:
            out["death_year"] = death_year
            out["derived_year"] = death_year + derived_year_offset
        return out
    return {}


# -----------------------------
# Ability table rows
# -----------------------------

def extract_abilities(cells: Sequence[Tag]) -> Fields:
    """All five stats from the first five cells, or nothing."""
    if len(cells) < 5:
        return {}
    values = []
    for cell in cells[:5]:
        v = parse_int(cell_text(cell))
        if v is None:
            return {}
        values.append(v)
    if values[0] <= 0:
        return {}
    return dict(zip(ABILITY_FIELDS, values))


def extract_personality_loyalty(cells: Sequence[Tag], rules: ParsingRules = DEFAULT_RULES) -> Fields:
    if len(cells) < 2:
        return {}
    for j, cell in enumerate(cells):
        t = cell_text(cell)
        if t not in rules.personality_types:
            continue
        out: Fields = {"personality": t}
        for later in cells[j + 1:]:
            loyalty = parse_int(cell_text(later))
            if loyalty is not None:
                out["loyalty"] = loyalty
                break
        return out
    return {}


def extract_status(row: Tag, cells: Sequence[Tag], rules: ParsingRules = DEFAULT_RULES) -> Fields:
    """重視名声 / 物欲 / 戦略傾向 from a data row (header rows are skipped)."""
    if contains_any(row, rules.status_headers):
        return {}
    if len(cells) < 3:
        return {}

    for j, cell in enumerate(cells):
        t = cell_text(cell)
        if t not in rules.fame_types:
            continue

        out: Fields = {"fame": t}
        if j + 1 < len(cells):
            greed = cell_text(cells[j + 1])
            if greed not in rules.blank_values:
                out["greed"] = greed

        strategy = find_strategy(cells[j + 2:j + 4], rules)
        if strategy is not None:
            out["strategy"] = strategy
        return out
    return {}


def find_strategy(candidates: Iterable[Tag], rules: ParsingRules = DEFAULT_RULES) -> Optional[str]:
    for cell in candidates:
        t = cell_text(cell)
        if t in rules.strategy_skip:
            continue
        if t in rules.strategy_types or t == rules.strategy_placeholder:
            return t
    return None


def extract_ability_table(table: Tag, rules: ParsingRules = DEFAULT_RULES) -> Fields:
    out: Fields = {}
    for row in find_all(table, "tr"):
        cells = row_cells(row)
        out.update(extract_abilities(cells))
        out.update(extract_personality_loyalty(cells, rules))
        out.update(extract_status(row, cells, rules))
    return out


# -----------------------------
# Talent (奇才)
# -----------------------------

def extract_talent(table: Tag, classifier: TableClassifier) -> str:
    """Text of the first gold cell of a 奇才/効果 table, else ''."""
    if not classifier.is_talent_table(table):
        return ""
    for row in find_all(table, "tr"):
        for cell in row_cells(row):
            if has_style_containing(cell, classifier.rules.talent_style):
                return cell_text(cell)
    return ""


def first_talent(tables: Iterable[Tag], classifier: TableClassifier) -> str:
    for table in tables:
        talent = extract_talent(table, classifier)
        if talent:
            return talent
    return ""


def find_talent(tables: Sequence[Tag], classifier: TableClassifier) -> str:
    """
    Two phases: tables whose profile role can carry a talent, then every
    table on the page. The second phase only runs when the first finds nothing.
    """
    # First classified table with a talent wins; a later one never overwrites it.
    candidates = [
        t for t in tables
        if classifier.classify_profile(t) in (TableRole.ABILITY, TableRole.TALENT)
    ]
    return first_talent(candidates, classifier) or first_talent(tables, classifier)


# -----------------------------
# Interests (興味)
# -----------------------------

def extract_interests(doc: Document, rules: ParsingRules = DEFAULT_RULES) -> List[str]:
    interests: List[str] = []
    for cell in doc.find_all("td"):
        if not has_any_style_width(cell, rules.interest_widths):
            continue
        t = cell_text(cell)
        if t in rules.interest_excludes or t not in rules.interest_items:
            continue
        interests.append(t)
    return interests


# -----------------------------
# Tactics (戦法) / skills (特技)
# -----------------------------

def clean_list_item(s: str, rules: ParsingRules = DEFAULT_RULES) -> str:
    """'火計(小)' -> '火計'"""
    return s.strip().split(rules.list_annotation_open, 1)[0].strip()


def extract_list_items(table: Tag, categories: Iterable[str], rules: ParsingRules = DEFAULT_RULES) -> List[str]:
    categories = tuple(categories)
    items: List[str] = []
    for row in find_all(table, "tr"):
        for cell in row_cells(row):
            if not has_style_width(cell, rules.list_item_width):
                continue
            t = clean_list_item(cell_text(cell), rules)
            if t and t not in categories:
                items.append(t)
    return items


# -----------------------------
# Assembly
# -----------------------------

class CharacterExtractor:
    """Turns one parsed page into a Character."""

    def __init__(
        self,
        rules: ParsingRules = DEFAULT_RULES,
        derived_year_offset: int = DEFAULT_DERIVED_YEAR_OFFSET,
    ) -> None:
        self.rules = rules
        self.derived_year_offset = derived_year_offset
        self.classifier = TableClassifier(rules)

    def extract(self, doc: Document) -> Character:
        fields: Fields = {}
        fields.update(extract_name_reading(doc, self.rules))
        fields.update(self.extract_profile(doc))
        fields["interests"] = ", ".join(extract_interests(doc, self.rules))
        fields.update(self.extract_lists(doc))
        return Character(**fields)

    def extract_profile(self, doc: Document) -> Fields:
        out: Fields = {}
        tables = doc.find_all("table")
        for table in tables:
            role = self.classifier.classify_profile(table)
            if role is TableRole.BASIC_INFO:
                out.update(extract_basic_info(table, self.derived_year_offset))
            elif role is TableRole.ABILITY:
                out.update(extract_ability_table(table, self.rules))

        talent = find_talent(tables, self.classifier)
        if talent:
            out["talent"] = talent
        return out

    def extract_lists(self, doc: Document) -> Fields:
        tactics: List[str] = []
        skills: List[str] = []
        for table in doc.find_all("table"):
            role = self.classifier.classify_list(table)
            if role is TableRole.TACTICS:
                tactics.extend(extract_list_items(table, self.rules.tactic_categories, self.rules))
            elif role is TableRole.SKILLS:
                skills.extend(extract_list_items(table, self.rules.skill_categories, self.rules))
        return {"tactics": ", ".join(tactics), "skills": ", ".join(skills)}
