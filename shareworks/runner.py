"""Per-file pipeline: check name, read, parse, validate, walk, sort."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from .config import ShareworksConfig, load_config
from .errors import BadExtensionError, ReadFailureError
from .extract import MungeResult, classify_nodes, parse_html, validate_document, walk
from .transform.sorting import sort_entries


def munge_bytes(html_bytes: bytes, cfg: Optional[ShareworksConfig] = None) -> MungeResult:
    cfg = cfg or load_config()
    soup = parse_html(html_bytes)
    validate_document(soup)
    result = walk(classify_nodes(soup))
    result.rows = sort_entries(result.rows, date_format=cfg.date_format)
    return result


def munge_file(path: str | Path, cfg: Optional[ShareworksConfig] = None) -> MungeResult:
    cfg = cfg or load_config()
    p = Path(path)
    if not str(p).endswith(cfg.html_suffix):
        raise BadExtensionError(
            f"not munging file {str(p)!r}; this tool works with html files "
            f"(a {cfg.html_suffix!r} suffix) only"
        )
    try:
        html_bytes = p.read_bytes()
    except OSError as exc:
        raise ReadFailureError(f"failed to open html file {str(p)!r}: {exc}") from exc
    return munge_bytes(html_bytes, cfg)
