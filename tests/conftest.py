"""HTML builders that mimic the Shareworks statement layout."""
from __future__ import annotations

from typing import Callable, Dict, Sequence, Tuple

import pytest

Pairs = Sequence[Tuple[str, str]]


def _event_table(title: str, left: Pairs, right: Pairs = ()) -> str:
    rows = [f'<tr><th class="newReportTitleStyle" colspan="4">{title}</th></tr>']
    for i in range(max(len(left), len(right))):
        cells = []
        for side in (left, right):
            if i < len(side):
                k, v = side[i]
                cells.append(f'<td class="staticViewTableColumn1">{k}</td>')
                cells.append(f'<td class="staticViewTableColumn2">{v}</td>')
        rows.append("<tr>" + "".join(cells) + "</tr>")
    return '<table class="sw-datatable">' + "".join(rows) + "</table>"


def _value_table(heading: str, pairs: Pairs) -> str:
    rows = [f'<tr><th class="newReportHeadingStyle" colspan="2">{heading}</th></tr>']
    for k, v in pairs:
        rows.append(
            f'<tr><td class="newReportCellStyle">{k}</td><td class="newReportCellStyle">{v}</td></tr>'
        )
    return '<table class="sw-datatable">' + "".join(rows) + "</table>"


def _total_table(amount: str) -> str:
    return (
        '<table class="sw-datatable"><tr>'
        f'<td class="defaultTableModelTextBold">Total Value: {amount}</td>'
        "</tr></table>"
    )


def _heading(text: str) -> str:
    return f"<h2>{text}</h2>"


def _document(*parts: str) -> bytes:
    body = "\n<!-- section -->\n".join(parts)
    return f"<html><head><title>Statement</title></head><body>\n{body}\n</body></html>".encode("utf-8")


@pytest.fixture
def html() -> Dict[str, Callable]:
    return {
        "event": _event_table,
        "value": _value_table,
        "total": _total_table,
        "heading": _heading,
        "document": _document,
    }
