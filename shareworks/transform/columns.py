"""Column naming and discovery-order tracking.

No column headings are hard-coded: the first time any row produces a key, that
key becomes the next output column. A handful of raw keys mean the same thing
for Buy and Sell events and are folded onto one canonical name.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Tuple

logger = logging.getLogger(__name__)

# (event type, raw key) -> canonical key
COLUMN_ALIASES: Dict[Tuple[str, str], str] = {
    ("Buy", "Number of Restricted Awards Disbursed:"): "stocks report",
    ("Sell", "Shares Sold:"): "stocks report",
    ("Buy", "Release Price:"): "price per unit",
    ("Sell", "Market Price Per Unit:"): "price per unit",
}


def normalize_column_name(raw_key: str, event_type: str) -> str:
    return COLUMN_ALIASES.get((event_type, raw_key), raw_key)


class ColumnOrder:
    """Append-once ordered set of column names."""

    def __init__(self) -> None:
        self._names: List[str] = []
        self._seen: set[str] = set()

    def add(self, name: str) -> bool:
        if name in self._seen:
            return False
        self._seen.add(name)
        self._names.append(name)
        return True

    def as_list(self) -> List[str]:
        return list(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._seen

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)


def accumulate(columns: ColumnOrder, row: Dict[str, str], key: str, value: str) -> None:
    canonical = normalize_column_name(key, row.get("Type", ""))
    if canonical in row:
        # Last write wins; the earlier value is lost.
        logger.debug(f"Overwriting {canonical!r}: {row[canonical]!r} -> {value!r} (raw key {key!r})")
    row[canonical] = value
    columns.add(canonical)
