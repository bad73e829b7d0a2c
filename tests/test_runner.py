import pytest

from shareworks.errors import (
    BadExtensionError,
    NoCandidateTablesError,
    ReadFailureError,
    WrongExtractionError,
)
from shareworks.runner import munge_bytes, munge_file


def test_rows_are_sorted_by_settlement_date(html):
    doc = html["document"](
        html["event"]("Release on 01-Mar-2021", [("Settlement Date", "05-Mar-2021")]),
        html["event"]("Release on 01-Jan-2021", [("Settlement Date", "01-Jan-2021")]),
    )
    result = munge_bytes(doc)
    assert [r["Settlement Date"] for r in result.rows] == ["01-Jan-2021", "05-Mar-2021"]


def test_no_datatables_fails(html):
    with pytest.raises(NoCandidateTablesError):
        munge_bytes(html["document"]("<p>nothing to see</p>"))


def test_enclosing_document_fails(html):
    doc = html["document"]('<iframe id="transaction-statement-iframe"></iframe>')
    with pytest.raises(WrongExtractionError):
        munge_bytes(doc)


def test_bad_extension_is_rejected_before_reading(tmp_path):
    with pytest.raises(BadExtensionError):
        munge_file(tmp_path / "does-not-exist.pdf")


def test_unreadable_file(tmp_path):
    with pytest.raises(ReadFailureError) as ei:
        munge_file(tmp_path / "missing.html")
    assert isinstance(ei.value.__cause__, OSError)


def test_munge_file_reads_from_disk(tmp_path, html):
    p = tmp_path / "statement.html"
    p.write_bytes(html["document"](html["event"]("Release on 01-Jan-2020", [("Release Price:", "10.00")])))
    result = munge_file(p)
    assert result.rows[0]["price per unit"] == "10.00"
