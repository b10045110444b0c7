# -*- coding: utf-8 -*-

"""
Lists of characters to scrape.

The input file groups character names by category:

    {
      "奇才": ["曹操", "諸葛亮"],
      "呉": ["孫権", "周瑜"]
    }
"""

import json
import os
from typing import Dict, List, Sequence

from .errors import SourceError
from .pipeline import resolve_url

Categories = Dict[str, List[str]]


def load_categories(path: str) -> Categories:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise SourceError(f"could not read {path}", cause=e) from e
    except ValueError as e:
        raise SourceError(f"invalid JSON in {path}", cause=e) from e

    if not isinstance(data, dict):
        raise SourceError(f"{path}: root must be an object of category -> names")

    out: Categories = {}
    for category, names in data.items():
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise SourceError(f"{path}: category {category!r} must be a list of names")
        out[str(category)] = list(names)
    return out


def describe_categories(categories: Categories) -> str:
    lines = ["Available categories:"]
    for category, names in categories.items():
        lines.append(f"  {category} ({len(names)}人)")
    return "\n".join(lines)


def select_category(categories: Categories, category: str) -> List[str]:
    if category not in categories:
        raise SourceError(
            f"category {category!r} not found",
            details={"available": sorted(categories)},
        )
    return list(categories[category])


def find_duplicates(urls: Sequence[str]) -> List[str]:
    """
    "<url> (位置: first, dup)" for every repeated URL, 1-based positions.
    """
    seen: Dict[str, int] = {}
    duplicates: List[str] = []
    for i, url in enumerate(urls):
        if url not in seen:
            seen[url] = i
            continue
        info = f"{url} (位置: {seen[url] + 1}, {i + 1})"
        if info not in duplicates:
            duplicates.append(info)
    return duplicates


def load_targets(path: str, category: str, base_url: str) -> List[str]:
    """Resolved page URLs for one category of the input file."""
    if not os.path.exists(path):
        raise SourceError(f"input file not found: {path}")
    names = select_category(load_categories(path), category)
    urls = [resolve_url(n, base_url) for n in names]

    duplicates = find_duplicates(urls)
    if duplicates:
        raise SourceError("duplicate URLs: " + ", ".join(duplicates))
    return urls
