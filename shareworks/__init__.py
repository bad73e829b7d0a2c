"""
Shareworks statement munger: equity-compensation events from HTML to CSV.

Layout
- config.py: runtime knobs (input suffix, date format, exit code, CSV line endings)
- errors.py: per-file failure kinds
- extract/: tree parsing, structural checks, the section walk, event rows, supplemental tables
- transform/: column normalization + discovery order, settlement-date sort
- export/csv_emitter.py: pandas-backed CSV writer
- runner.py / cli.py: per-file pipeline and the `shareworks-munge` command

Note: the statement must be the content of the transaction-statement iframe,
not the page that embeds it.
"""
