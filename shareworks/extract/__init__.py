from .html_tree import parse_html
from .validator import validate_document
from .walker import MungeResult, classify_nodes, walk

__all__ = ["parse_html", "validate_document", "MungeResult", "classify_nodes", "walk"]
