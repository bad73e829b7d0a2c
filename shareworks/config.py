"""Centralized configuration for the statement munger.

Defaults match the Shareworks export as it is downloaded today. Each knob can
be overridden through an environment variable for one-off runs.
"""
from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class ShareworksConfig:
    # Inputs must carry this suffix; anything else is rejected before reading.
    html_suffix: str = os.getenv("SHAREWORKS_HTML_SUFFIX", ".html")

    # Settlement dates look like "05-Mar-2021".
    date_format: str = os.getenv("SHAREWORKS_DATE_FORMAT", "%d-%b-%Y")

    # Process exit status when at least one file failed.
    failure_exit_code: int = int(os.getenv("SHAREWORKS_FAILURE_EXIT_CODE", "14"))

    # Spreadsheet tools are happiest with CRLF.
    csv_line_terminator: str = os.getenv("SHAREWORKS_CSV_LINE_TERMINATOR", "\r\n")

    log_level: str = os.getenv("SHAREWORKS_LOG_LEVEL", "WARNING")


def load_config() -> ShareworksConfig:
    return ShareworksConfig()
