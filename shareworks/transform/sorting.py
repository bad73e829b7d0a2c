"""Chronological ordering of finished rows by settlement date."""
from __future__ import annotations

import logging
from datetime import datetime
from functools import cmp_to_key
from typing import List, Mapping, Optional

logger = logging.getLogger(__name__)

SETTLEMENT_DATE = "Settlement Date"
DEFAULT_DATE_FORMAT = "%d-%b-%Y"


def _parse_date(value: str, date_format: str) -> Optional[datetime]:
    try:
        return datetime.strptime(value, date_format)
    except ValueError as exc:
        logger.warning(f"Could not parse date {value!r}: {exc}")
        return None


def sort_entries(
    rows: List[Mapping[str, str]], date_format: str = DEFAULT_DATE_FORMAT
) -> List[Mapping[str, str]]:
    """Return rows ordered by settlement date.

    A comparison involving a missing or unparseable date never answers
    "earlier", so the stable sort keeps such pairs in discovery order.
    """

    def compare(left: Mapping[str, str], right: Mapping[str, str]) -> int:
        if SETTLEMENT_DATE not in left or SETTLEMENT_DATE not in right:
            return 0
        d1 = _parse_date(left[SETTLEMENT_DATE], date_format)
        if d1 is None:
            return 0
        d2 = _parse_date(right[SETTLEMENT_DATE], date_format)
        if d2 is None:
            return 0
        return -1 if d1 < d2 else 0

    return sorted(rows, key=cmp_to_key(compare))
