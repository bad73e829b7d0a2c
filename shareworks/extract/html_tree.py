"""Document tree provider and small navigation helpers.

The statement is parsed with BeautifulSoup on top of the lxml parser; the
rest of the extractor only talks to the tree through CSS selectors and the
helpers below.
"""
from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup, Tag

from ..errors import ParseFailureError

DATATABLE_CLASS = "sw-datatable"


def parse_html(html_bytes: bytes) -> BeautifulSoup:
    try:
        return BeautifulSoup(html_bytes, "lxml")
    except Exception as exc:
        raise ParseFailureError(f"failed to parse html: {exc}") from exc


def cell_text(el: Optional[Tag]) -> str:
    if el is None:
        return ""
    return el.get_text().strip()


def first_text(el: Tag, selector: str) -> str:
    """Untrimmed text of the first descendant matching `selector`, or ''."""
    found = el.select_one(selector)
    if found is None:
        return ""
    return found.get_text()


def next_element(el: Tag) -> Optional[Tag]:
    # Skips whitespace text and comments between siblings.
    for sib in el.next_siblings:
        if isinstance(sib, Tag):
            return sib
    return None


def is_datatable(el: Optional[Tag]) -> bool:
    if el is None or el.name != "table":
        return False
    return DATATABLE_CLASS in (el.get("class") or [])
