"""Structural sanity checks run before any extraction.

These catch the common ways of saving the wrong page and turn them into
errors that tell the user what to do about it.
"""
from __future__ import annotations

from bs4 import BeautifulSoup

from ..errors import NoCandidateTablesError, NoReleaseTablesError, WrongExtractionError
from .html_tree import first_text

WRONG_EXTRACTION_SELECTOR = "iframe#transaction-statement-iframe"
DATATABLE_SELECTOR = "table.sw-datatable"
TITLE_SELECTOR = "th.newReportTitleStyle"


def validate_document(soup: BeautifulSoup) -> None:
    if soup.select_one(WRONG_EXTRACTION_SELECTOR) is not None:
        raise WrongExtractionError()

    tables = soup.select(DATATABLE_SELECTOR)
    if not tables:
        raise NoCandidateTablesError()

    # Summary tables carry no event facts; only the Release ones matter here.
    if not any("Release" in first_text(t, TITLE_SELECTOR) for t in tables):
        raise NoReleaseTablesError()
