"""Pull auxiliary breakdown and totals tables into the event's row.

An event table is often followed by sibling tables (value of shares sold,
sale breakdown, transfer fees, ...) and a one-cell totals table. None of
them say which event they belong to; adjacency is the only link.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from bs4 import Tag

from ..transform.columns import ColumnOrder, accumulate
from .html_tree import cell_text, first_text, is_datatable, next_element

logger = logging.getLogger(__name__)

HEADING_SELECTOR = "th.newReportHeadingStyle"
ANY_HEADING_SELECTOR = "th.newReportHeadingStyle, th.newReportTitleStyle"
CELL_SELECTOR = "td.newReportCellStyle"
BOLD_SELECTOR = "td.defaultTableModelTextBold"

TOTAL_PREFIX = "Total Value:"
RELEASE_VALUE_HEADING = "Value of Shares Sold"
WITHDRAWAL_HEADINGS = frozenset(
    {"Sale Breakdown", "Electronic Share Transfer", "Mail cash to broker", "Net Proceeds"}
)


def value_table_pairs(table: Tag) -> List[Tuple[str, str]]:
    """Key/value pairs from a two-column value table, header row skipped."""
    pairs: List[Tuple[str, str]] = []
    for tr in table.select("tr")[1:]:
        cells = tr.select(CELL_SELECTOR)[:2]
        key = cell_text(cells[0]) if cells else ""
        value = cell_text(cells[1]) if len(cells) > 1 else ""
        if key and value:
            pairs.append((key, value))
    return pairs


def total_value(table: Optional[Tag]) -> Optional[str]:
    if not is_datatable(table):
        return None
    text = first_text(table, BOLD_SELECTOR).strip()
    if not text.startswith(TOTAL_PREFIX):
        return None
    return text[len(TOTAL_PREFIX):].strip()


def _extract_value_table(table: Tag, row: Dict[str, str], columns: ColumnOrder) -> None:
    for key, value in value_table_pairs(table):
        accumulate(columns, row, key, value)


def link_release(table: Tag, row: Dict[str, str], columns: ColumnOrder) -> None:
    value_table = next_element(table)
    if not is_datatable(value_table):
        return
    if first_text(value_table, HEADING_SELECTOR).strip() != RELEASE_VALUE_HEADING:
        return
    _extract_value_table(value_table, row, columns)

    total = total_value(next_element(value_table))
    if total is not None:
        accumulate(columns, row, "Total Value", total)


def link_withdrawal(table: Tag, row: Dict[str, str], columns: ColumnOrder) -> None:
    current = next_element(table)
    while is_datatable(current):
        heading = first_text(current, ANY_HEADING_SELECTOR)
        if heading == "":
            current = next_element(current)
            continue
        heading = heading.strip()

        if heading in WITHDRAWAL_HEADINGS:
            _extract_value_table(current, row, columns)
            total_table = next_element(current)
            total = total_value(total_table)
            if total is not None:
                accumulate(columns, row, f"{heading} Total", total)
                current = next_element(total_table)
                continue
        else:
            logger.debug(f"Skipping sibling table headed {heading!r}")
        current = next_element(current)
