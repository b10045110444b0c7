# -*- coding: utf-8 -*-

"""
Small query helpers over a BeautifulSoup tree.

Nothing here mutates the tree. All helpers accept any node and treat a
missing attribute as "no match".
"""

from typing import Dict, Iterable, List, Optional, Tuple, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PageElement

Node = Union[Tag, NavigableString, PageElement]


def find_all(root: Node, tag: str) -> List[Tag]:
    """
    Every element named `tag` under `root`, in document order (pre-order).
    `root` itself counts when it matches.
    """
    if not isinstance(root, Tag):
        return []
    found: List[Tag] = []
    if root.name == tag:
        found.append(root)
    found.extend(root.find_all(tag))
    return found


def find_first(root: Node, tag: str) -> Optional[Tag]:
    if not isinstance(root, Tag):
        return None
    if root.name == tag:
        return root
    return root.find(tag)


def text(node: Optional[Node]) -> str:
    """All text nodes under `node`, concatenated without separators."""
    if node is None:
        return ""
    if isinstance(node, Tag):
        return node.get_text()
    if type(node) is NavigableString:
        return str(node)
    # comments, doctypes, processing instructions
    return ""


def cell_text(node: Optional[Node]) -> str:
    return text(node).strip()


def has_style_containing(node: Node, substring: str) -> bool:
    if not isinstance(node, Tag):
        return False
    style = node.get("style")
    if not style:
        return False
    if not isinstance(style, str):
        style = " ".join(style)
    return substring in style


def has_style_width(node: Node, width: str) -> bool:
    return has_style_containing(node, "width:" + width)


def has_any_style_width(node: Node, widths: Iterable[str]) -> bool:
    return any(has_style_width(node, w) for w in widths)


class Document:
    """
    A parsed page. `find_all` results are cached per tag; the tree is
    read-only so the cache never goes stale.
    """

    def __init__(self, root: BeautifulSoup, url: Optional[str] = None) -> None:
        self.root = root
        self.url = url
        self._cache: Dict[str, Tuple[Tag, ...]] = {}

    @classmethod
    def from_html(cls, html: str, url: Optional[str] = None) -> "Document":
        return cls(BeautifulSoup(html, "html.parser"), url=url)

    def find_all(self, tag: str) -> Tuple[Tag, ...]:
        if tag not in self._cache:
            self._cache[tag] = tuple(find_all(self.root, tag))
        return self._cache[tag]

    def find_first(self, tag: str) -> Optional[Tag]:
        found = self.find_all(tag)
        return found[0] if found else None
