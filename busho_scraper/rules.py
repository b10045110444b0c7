# -*- coding: utf-8 -*-

"""
The fixed rule set used to recognise tables and cells.

Pages carry no useful ids or classes, so every decision is made from header
keywords, vocabularies and inline width styles. The rules are a frozen value
passed to the classifier and the extractors; tests can swap in their own.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ParsingRules:
    # Vocabularies
    tactic_categories: Tuple[str, ...] = ("歩兵", "騎兵", "弓兵", "艦船", "軍略", "補助", "遁甲")
    skill_categories: Tuple[str, ...] = ("任務", "智謀", "兵科", "軍事")
    interest_items: Tuple[str, ...] = (
        "武具", "書物", "宝物", "茶器", "名馬", "美術", "酒", "音楽", "詩歌", "絵画", "香", "薬草",
    )
    personality_types: Tuple[str, ...] = ("豪胆", "冷静", "剛胆", "沈着", "猪突", "温和", "臆病")
    fame_types: Tuple[str, ...] = ("無関心", "重視", "文武不問", "武名", "高名")
    strategy_types: Tuple[str, ...] = ("好戦", "普通", "積極", "消極", "私欲")

    # Cell styles
    interest_widths: Tuple[str, ...] = ("60px", "53px", "52px", "51px", "50px")
    list_item_width: str = "70px"
    list_annotation_open: str = "("
    talent_style: str = "background-color:gold"

    # Cell texts that never count as a value
    interest_excludes: Tuple[str, ...] = ("ー", "", "興味", "-")
    blank_values: Tuple[str, ...] = ("", "-", "ー")
    strategy_skip: Tuple[str, ...] = ("", "ー")
    strategy_placeholder: str = "-"

    # Table header keywords
    basic_info_headers: Tuple[str, ...] = ("字", "没年")
    ability_headers: Tuple[str, ...] = ("統率", "武力")
    status_headers: Tuple[str, ...] = ("重視名声", "物欲", "戦略傾向")
    talent_headers: Tuple[str, ...] = ("奇才",)
    talent_effect_header: str = "効果"
    tactics_headers: Tuple[str, ...] = ("戦法",)
    skills_headers: Tuple[str, ...] = ("特技",)

    # Name(Reading) in the page heading
    name_tag: str = "strong"
    reading_open: str = "("
    reading_close: str = ")"

    # Throttling. Markers are matched against our own error messages only;
    # raw transport texts carry URLs and object addresses, so only the phrase
    # (or a typed 429 status) counts there.
    rate_limit_status: int = 429
    rate_limit_markers: Tuple[str, ...] = ("429", "Too Many Requests")
    rate_limit_phrases: Tuple[str, ...] = ("Too Many Requests",)

    def is_rate_limit_text(self, text: str) -> bool:
        return any(m in text for m in self.rate_limit_markers)

    def is_rate_limit_phrase(self, text: str) -> bool:
        return any(p in text for p in self.rate_limit_phrases)


DEFAULT_RULES = ParsingRules()
