from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import load_config
from .errors import ShareworksError
from .export.csv_emitter import emit_csv
from .runner import munge_file


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser("Shareworks statement munger (HTML -> CSV)")
    ap.add_argument("files", nargs="*", help="Statement html files saved from the transaction-statement iframe")
    ap.add_argument("--output-dir", default="", help="Write <name>.csv per input here instead of to stdout")
    ap.add_argument("--log-level", default="", help="Logging level (overrides SHAREWORKS_LOG_LEVEL)")

    args = ap.parse_args(argv)
    cfg = load_config()
    logging.basicConfig(level=(args.log_level or cfg.log_level).upper())

    if not args.files:
        print(
            "Give this program some arguments!  It needs the name of an html file with your data to munge.",
            file=sys.stderr,
        )
        return 0

    out_dir = Path(args.output_dir) if args.output_dir else None
    some_errors = False
    for f in args.files:
        try:
            result = munge_file(f, cfg)
        except ShareworksError as exc:
            some_errors = True
            print(f"{f!r}: failed: {exc}", file=sys.stderr)
            continue

        if out_dir is not None:
            out_dir.mkdir(parents=True, exist_ok=True)
            out = out_dir / f"{Path(f).stem}.csv"
            with out.open("w", newline="", encoding="utf-8") as fh:
                emit_csv(fh, result.columns, result.rows, line_terminator=cfg.csv_line_terminator)
            print(f"{f!r}: munged successfully: saved {out}", file=sys.stderr)
        else:
            emit_csv(sys.stdout, result.columns, result.rows, line_terminator=cfg.csv_line_terminator)
            sys.stdout.flush()
            print(
                f"{f!r}: munged successfully: copy the above to a file (or use shell redirection) to save it.",
                file=sys.stderr,
            )

    return cfg.failure_exit_code if some_errors else 0


if __name__ == '__main__':
    raise SystemExit(main())
