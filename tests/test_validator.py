import pytest

from shareworks.errors import NoCandidateTablesError, NoReleaseTablesError, WrongExtractionError
from shareworks.extract import parse_html, validate_document


def test_enclosing_document_is_rejected_regardless_of_content(html):
    doc = html["document"](
        '<iframe id="transaction-statement-iframe" src="statement.html"></iframe>',
        html["event"]("Release on 01-Jan-2020", [("Release Price:", "10.00")]),
    )
    with pytest.raises(WrongExtractionError) as ei:
        validate_document(parse_html(doc))
    assert "iframe" in str(ei.value)


def test_no_datatables(html):
    doc = html["document"]("<table><tr><td>hello</td></tr></table>")
    with pytest.raises(NoCandidateTablesError):
        validate_document(parse_html(doc))


def test_no_release_titles(html):
    doc = html["document"](html["event"]("Withdrawal on 02-Feb-2021", [("Shares Sold:", "3")]))
    with pytest.raises(NoReleaseTablesError):
        validate_document(parse_html(doc))


def test_valid_document_passes(html):
    doc = html["document"](html["event"]("Release on 01-Jan-2020", [("Release Price:", "10.00")]))
    validate_document(parse_html(doc))
