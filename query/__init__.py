"""
query — silnik zapytań i formatowanie wyników.

Moduły:
  engine    — info, toc, search_keyword, search_regex, slice_lines, find_section
  formatter — to_record, to_json, render_text
"""

from .engine import (
    DEFAULT_BUDGET,
    DEFAULT_CONTEXT_LINES,
    TRUNCATION_MARKER,
    info,
    toc,
    search_keyword,
    search_regex,
    slice_lines,
    find_section,
)
from .formatter import to_record, to_json, render_text

__all__ = [
    "DEFAULT_BUDGET",
    "DEFAULT_CONTEXT_LINES",
    "TRUNCATION_MARKER",
    "info",
    "toc",
    "search_keyword",
    "search_regex",
    "slice_lines",
    "find_section",
    "to_record",
    "to_json",
    "render_text",
]
