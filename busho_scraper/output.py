# -*- coding: utf-8 -*-

import json
import os
from typing import Iterable, List

from .config import DEFAULT_DERIVED_YEAR_OFFSET
from .models import Character


def sort_by_death_year(records: Iterable[Character]) -> List[Character]:
    return sorted(records, key=lambda c: c.death_year)


def to_json(records: Iterable[Character], derived_year_offset: int = DEFAULT_DERIVED_YEAR_OFFSET) -> str:
    data = [c.to_dict(derived_year_offset) for c in sort_by_death_year(records)]
    return json.dumps(data, ensure_ascii=False, indent=4)


def save_json(path: str, text: str) -> None:
    d = os.path.dirname(os.path.abspath(path))
    os.makedirs(d, exist_ok=True)
    tmp = path + ".tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        f.write(text)
        f.write("\n")
    os.replace(tmp, path)
