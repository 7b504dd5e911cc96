"""
query/engine.py — ograniczone budżetem zapytania do zwirtualizowanego dokumentu.

Operacje (dokument przekazywany jawnie, None → NoDocumentLoaded):
  info(doc)                                   metadane + złożoność
  toc(doc)                                    lista nagłówków
  search_keyword(doc, keyword, context, budget)
  search_regex(doc, pattern, context, budget)
  slice_lines(doc, range, budget)             "start-end", 1-based, włącznie
  find_section(doc, query, budget)            dopasowanie po znormalizowanym kluczu

Dwie polityki przycinania:
  - wyszukiwanie odrzuca całe trafienia, gdy kolejne okno przekroczyłoby budżet;
    okna sąsiednich trafień nie są deduplikowane (tekst może się powtarzać),
  - slice_lines / find_section tną tekst dokładnie na granicy budżetu
    (także w środku linii) i dopisują TRUNCATION_MARKER.
Żadna operacja nie modyfikuje dokumentu.
"""

from __future__ import annotations

import math
import re
from typing import Callable

from data_model.documents import Document, Section
from data_model.results import (
    ErrorKind,
    ErrorResult,
    InfoResult,
    SearchHit,
    SearchResult,
    SectionResult,
    SliceResult,
    TocResult,
)
from indexer.complexity import assess
from indexer.sections import normalize_key

DEFAULT_BUDGET = 15_000
DEFAULT_CONTEXT_LINES = 2

TRUNCATION_MARKER = "\n... [truncated]"

# ~4 znaki na token
_CHARS_PER_TOKEN = 4

# Ile nagłówków podpowiadamy przy SectionNotFound
_MAX_SECTION_HINTS = 10

_RANGE_RE = re.compile(r"^\s*(\d+)\s*-\s*(\d+)\s*$")


def _no_document() -> ErrorResult:
    return ErrorResult(
        kind=ErrorKind.NO_DOCUMENT_LOADED,
        message="No document loaded",
        hint="Load a document first.",
    )


# ---------------------------------------------------------------------------
# info / toc
# ---------------------------------------------------------------------------

def info(doc: Document | None) -> InfoResult | ErrorResult:
    if doc is None:
        return _no_document()
    return InfoResult(
        path=str(doc.path),
        format=doc.format,
        char_count=doc.char_count,
        line_count=doc.line_count,
        heading_count=len(doc.headings),
        section_count=len(doc.sections),
        estimated_tokens=math.ceil(doc.char_count / _CHARS_PER_TOKEN),
        complexity=assess(doc),
        collisions=list(doc.collisions),
    )


def toc(doc: Document | None) -> TocResult | ErrorResult:
    if doc is None:
        return _no_document()
    return TocResult(heading_count=len(doc.headings), headings=list(doc.headings))


# ---------------------------------------------------------------------------
# Wyszukiwanie
# ---------------------------------------------------------------------------

def search_keyword(
    doc: Document | None,
    keyword: str,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    budget: int = DEFAULT_BUDGET,
) -> SearchResult | ErrorResult:
    """Dopasowanie podciągu bez rozróżniania wielkości liter, linia po linii."""
    if doc is None:
        return _no_document()
    needle = keyword.lower()

    def matcher(line: str) -> list[str] | None:
        return [] if needle in line.lower() else None

    return _search(doc, "keyword", keyword, matcher, context_lines, budget)


def search_regex(
    doc: Document | None,
    pattern: str,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    budget: int = DEFAULT_BUDGET,
) -> SearchResult | ErrorResult:
    if doc is None:
        return _no_document()
    try:
        regex = re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        return ErrorResult(
            kind=ErrorKind.INVALID_REGEX,
            message=f"Invalid regex: {e}",
            hint="Escape special characters or use a keyword search instead.",
            details={"pattern": pattern},
        )

    def matcher(line: str) -> list[str] | None:
        found = [m.group(0) for m in regex.finditer(line)]
        return found or None

    return _search(doc, "regex", pattern, matcher, context_lines, budget)


def _search(
    doc: Document,
    mode: str,
    query: str,
    matcher: Callable[[str], list[str] | None],
    context_lines: int,
    budget: int,
) -> SearchResult:
    lines = doc.lines
    last = len(lines) - 1
    context_lines = max(0, context_lines)

    hits: list[SearchHit] = []
    used = 0
    truncated = False
    message = ""

    for i, line in enumerate(lines):
        matches = matcher(line)
        if matches is None:
            continue

        start = max(0, i - context_lines)
        end = min(last, i + context_lines)
        context = "\n".join(lines[start:end + 1])

        if used + len(context) > budget:
            truncated = True
            message = f"Budget exceeded. Showing {len(hits)} of potential matches."
            break

        hits.append(SearchHit(
            line=i + 1,
            text=line,
            context=context,
            context_start=start + 1,
            context_end=end + 1,
            matches=matches,
        ))
        used += len(context)

    return SearchResult(
        mode=mode,
        query=query,
        match_count=len(hits),
        hits=hits,
        truncated=truncated,
        message=message,
    )


# ---------------------------------------------------------------------------
# Wycinki i sekcje
# ---------------------------------------------------------------------------

def _cut(text: str, budget: int) -> tuple[str, bool]:
    if len(text) > budget:
        return text[:max(0, budget)] + TRUNCATION_MARKER, True
    return text, False


def slice_lines(
    doc: Document | None,
    range_str: str,
    budget: int = DEFAULT_BUDGET,
) -> SliceResult | ErrorResult:
    """Zwraca linie start..end (1-based, włącznie); end przycinany do końca dokumentu."""
    if doc is None:
        return _no_document()

    m = _RANGE_RE.match(range_str)
    if not m:
        return ErrorResult(
            kind=ErrorKind.INVALID_RANGE,
            message="Invalid range format. Use: start-end (e.g., 100-200)",
            hint=f"Document has {doc.line_count} lines.",
            details={"range": range_str},
        )

    start, end = int(m.group(1)), int(m.group(2))
    total = doc.line_count
    if start < 1 or end < start or start > total:
        return ErrorResult(
            kind=ErrorKind.INVALID_RANGE,
            message=f"Invalid range. Document has {total} lines.",
            hint=f"Use a range within 1-{total}.",
            details={"range": range_str, "line_count": total},
        )

    end = min(end, total)
    selected = doc.lines[start - 1:end]
    text, truncated = _cut("\n".join(selected), budget)

    return SliceResult(
        start=start,
        end=end,
        line_count=len(selected),
        char_count=len(text),
        truncated=truncated,
        text=text,
    )


def _best_section(doc: Document, query: str) -> tuple[Section, float] | None:
    exact = doc.sections.get(query)
    if exact is not None:
        return exact, 1.0

    for section in doc.sections.values():
        if section.label is not None and section.label == query:
            return section, 1.0

    best: Section | None = None
    best_score = 0.0
    for key, section in doc.sections.items():
        if not key:
            continue
        if query in key or key in query:
            score = len(query) / len(key)
            if score > best_score:
                best, best_score = section, score

    return (best, best_score) if best is not None else None


def find_section(
    doc: Document | None,
    query: str,
    budget: int = DEFAULT_BUDGET,
) -> SectionResult | ErrorResult:
    if doc is None:
        return _no_document()

    normalized = normalize_key(query)
    found = _best_section(doc, normalized) if normalized else None

    if found is None:
        available = [s.heading for s in list(doc.sections.values())[:_MAX_SECTION_HINTS]]
        return ErrorResult(
            kind=ErrorKind.SECTION_NOT_FOUND,
            message=f'Section not found: "{query}"',
            hint="Available sections:",
            details={"available_sections": available},
        )

    section, score = found
    text, truncated = _cut(section.text, budget)

    return SectionResult(
        query=query,
        found=section.heading,
        score=score,
        start_line=section.start_line,
        end_line=section.end_line,
        char_count=section.char_count,
        truncated=truncated,
        text=text,
    )
