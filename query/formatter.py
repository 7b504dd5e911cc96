"""
query/formatter.py — prezentacja wyników zapytań.

  to_record(result)   → dict gotowy do json.dumps (z polem "type")
  render_text(result) → czytelny blok tekstu dla człowieka

Formatter niczego nie liczy: flagi truncated, score i podpowiedzi błędów
są przepisywane bez zmian.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from data_model.results import (
    ErrorResult,
    InfoResult,
    QueryResult,
    SearchResult,
    SectionResult,
    SliceResult,
    TocResult,
)

_TYPE_TAGS: dict[type, str] = {
    InfoResult:    "info",
    TocResult:     "toc",
    SearchResult:  "search",
    SliceResult:   "slice",
    SectionResult: "section",
    ErrorResult:   "error",
}


def to_record(result: QueryResult) -> dict[str, Any]:
    record: dict[str, Any] = {"type": _TYPE_TAGS[type(result)]}
    record.update(asdict(result))
    return record


def to_json(result: QueryResult) -> str:
    return json.dumps(to_record(result), ensure_ascii=False, indent=2)


# ---------------------------------------------------------------------------
# Widok tekstowy
# ---------------------------------------------------------------------------

def _render_error(r: ErrorResult) -> str:
    out = [f"Error [{r.kind}]: {r.message}"]
    if r.hint:
        out.append("")
        out.append(r.hint)
    available = (r.details or {}).get("available_sections")
    if available:
        out.extend(f"  - {heading}" for heading in available)
    return "\n".join(out)


def _render_info(r: InfoResult) -> str:
    out = [
        "Document Info",
        f"   Path: {r.path}",
        f"   Format: {r.format}",
        f"   Characters: {r.char_count:,}",
        f"   Lines: {r.line_count:,}",
        f"   Headings: {r.heading_count}",
        f"   Sections: {r.section_count}",
        f"   Est. Tokens: ~{r.estimated_tokens:,}",
        f"   Complexity: {r.complexity.upper()}",
    ]
    if r.collisions:
        out.append(f"   Duplicate section keys: {', '.join(r.collisions)}")
    return "\n".join(out)


def _render_toc(r: TocResult) -> str:
    out = [f"Table of Contents ({r.heading_count} headings)", ""]
    for h in r.headings:
        out.append(f"{'  ' * (h.level - 1)}{h.text} (line {h.line})")
    return "\n".join(out)


def _render_search(r: SearchResult) -> str:
    out = [f'Search ({r.mode}): "{r.query}"', f"   Matches: {r.match_count}", ""]
    for hit in r.hits:
        out.append(f"--- Line {hit.line} (context: {hit.context_start}-{hit.context_end}) ---")
        out.append(hit.context)
        out.append("")
    if r.truncated:
        out.append(f"[!] {r.message}")
    return "\n".join(out)


def _render_slice(r: SliceResult) -> str:
    out = [f"Lines {r.start}-{r.end} ({r.line_count} lines, {r.char_count} chars)"]
    if r.truncated:
        out.append("[!] Output truncated due to budget")
    out.append("")
    out.append(r.text)
    return "\n".join(out)


def _render_section(r: SectionResult) -> str:
    out = [
        f'Section: "{r.found}"',
        f"   Match score: {r.score:.2f}",
        f"   Lines: {r.start_line}-{r.end_line}",
        f"   Characters: {r.char_count}",
    ]
    if r.truncated:
        out.append("[!] Output truncated due to budget")
    out.append("")
    out.append(r.text)
    return "\n".join(out)


_RENDERERS = {
    ErrorResult:   _render_error,
    InfoResult:    _render_info,
    TocResult:     _render_toc,
    SearchResult:  _render_search,
    SliceResult:   _render_slice,
    SectionResult: _render_section,
}


def render_text(result: QueryResult) -> str:
    return _RENDERERS[type(result)](result)  # type: ignore[operator]
