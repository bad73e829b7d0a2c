"""Build one output row from one event table.

The vendor renders two independent key/value lists side by side in a single
four-column table (KVKV). Column-1 cells hold keys and column-2 cells hold
values; within each table row the first of each belongs to the left list
and the second to the right list. The left list is read top to bottom, then
the right list.
"""
from __future__ import annotations

from typing import Dict, List, Tuple

from bs4 import Tag

from ..errors import StructuralMismatchError
from ..transform.columns import ColumnOrder, accumulate
from .html_tree import cell_text

KEY_CELL_SELECTOR = "td.staticViewTableColumn1"
VALUE_CELL_SELECTOR = "td.staticViewTableColumn2"


def _split_alternating(cells: List[Tag], even: List[str], odd: List[str]) -> None:
    for i, cell in enumerate(cells):
        (even if i % 2 == 0 else odd).append(cell_text(cell))


def paired_grid_pairs(table: Tag, title: str = "") -> List[Tuple[str, str]]:
    left_keys: List[str] = []
    right_keys: List[str] = []
    left_values: List[str] = []
    right_values: List[str] = []
    for tr in table.select("tr"):
        _split_alternating(tr.select(KEY_CELL_SELECTOR), left_keys, right_keys)
        _split_alternating(tr.select(VALUE_CELL_SELECTOR), left_values, right_values)

    if len(left_keys) != len(left_values) or len(right_keys) != len(right_values):
        raise StructuralMismatchError(
            f"event table {title!r} has {len(left_keys)}+{len(right_keys)} keys "
            f"but {len(left_values)}+{len(right_values)} values"
        )
    return list(zip(left_keys, left_values)) + list(zip(right_keys, right_values))


def build_event_row(
    table: Tag, title: str, event_type: str, schedule: str, columns: ColumnOrder
) -> Dict[str, str]:
    row: Dict[str, str] = {}
    accumulate(columns, row, "Distribution Schedule", schedule)
    accumulate(columns, row, "Event", title)
    accumulate(columns, row, "Type", event_type)
    for key, value in paired_grid_pairs(table, title):
        accumulate(columns, row, key, value)
    return row
