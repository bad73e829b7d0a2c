"""CSV output: header row from the column order, one record per event."""
from __future__ import annotations

import io
from typing import List, Mapping, Sequence, TextIO

import pandas as pd


def rows_to_frame(columns: Sequence[str], rows: Sequence[Mapping[str, str]]) -> pd.DataFrame:
    # Sparse rows: absent columns become empty strings, never NaN.
    records = [[row.get(c, "") for c in columns] for row in rows]
    return pd.DataFrame(records, columns=list(columns), dtype=object)


def emit_csv(
    sink: TextIO,
    columns: Sequence[str],
    rows: Sequence[Mapping[str, str]],
    line_terminator: str = "\r\n",
) -> None:
    df = rows_to_frame(columns, rows)
    df.to_csv(sink, index=False, lineterminator=line_terminator)


def render_csv(
    columns: Sequence[str], rows: Sequence[Mapping[str, str]], line_terminator: str = "\r\n"
) -> str:
    buf = io.StringIO()
    emit_csv(buf, columns, rows, line_terminator=line_terminator)
    return buf.getvalue()
