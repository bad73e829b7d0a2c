"""Per-file failure kinds.

Every error here stops processing of one input file only; the CLI reports it
and moves on to the next file.
"""
from __future__ import annotations


class ShareworksError(Exception):
    detail = "Failed to munge statement."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.detail)


# === INPUT ===

class BadExtensionError(ShareworksError):
    detail = "This tool works with html files (a '.html' suffix) only."


class ReadFailureError(ShareworksError):
    detail = "Failed to read html file."


class ParseFailureError(ShareworksError):
    detail = "Failed to parse html file."


# === STRUCTURE ===

class WrongExtractionError(ShareworksError):
    detail = (
        "Wrong html -- it looks like you got the enclosing document. "
        "The statement lives inside the iframe element; save the content of "
        "the iframe rather than the page around it."
    )


class NoCandidateTablesError(ShareworksError):
    detail = "Found no shareworks data tables -- are you sure this is the right html?"


class NoReleaseTablesError(ShareworksError):
    detail = (
        "None of the shareworks data tables had titles containing the word "
        "'Release' -- are you sure this is the right html? Every statement is "
        "expected to contain at least one Release event."
    )


class StructuralMismatchError(ShareworksError):
    detail = "Event table has a key column and value column of different lengths."
