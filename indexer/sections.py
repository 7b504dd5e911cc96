"""
indexer/sections.py — indeks nagłówków i sekcji dokumentu.

Architektura:
  text → split("\\n") → linie
  → extract_headings()  (reguły z heading_patterns.RULES, pierwsza wygrywa)
  → build_sections()    (nagłówek → zakres linii, klucz = normalize_key)
  → Document

Sekcje zachodzą na siebie: sekcja nadrzędna zawiera tekst wszystkich
podsekcji, bo kończy się dopiero przed nagłówkiem o poziomie <= własnemu.

Kluczowe funkcje publiczne:
  extract_headings(text) -> list[Heading]
  build_sections(lines, headings) -> dict[str, Section]
  build_document(path, fmt, text) -> Document
"""

from __future__ import annotations

import re
from collections import Counter
from pathlib import Path
from types import MappingProxyType
from typing import Sequence

from data_model.documents import Document, DocumentFormat, Heading, Section
from indexer.heading_patterns import RULES, HeadingRule

_KEY_STRIP_RE = re.compile(r"[^a-z0-9\s]")


def normalize_key(text: str) -> str:
    """Klucz sekcji: małe litery, bez znaków spoza [a-z0-9\\s], przycięty."""
    return _KEY_STRIP_RE.sub("", text.lower()).strip()


def _match_line(line: str) -> tuple[HeadingRule, re.Match[str]] | None:
    for rule in RULES:
        m = rule.regex.match(line)
        if m:
            return rule, m
    return None


def extract_headings(text: str) -> list[Heading]:
    headings: list[Heading] = []
    for index, line in enumerate(text.split("\n"), start=1):
        found = _match_line(line)
        if found is None:
            continue
        rule, m = found
        headings.append(Heading(level=rule.level(m), text=rule.extract_text(m), line=index))
    return headings


def _label_for(heading: Heading) -> str | None:
    found = _match_line(heading.text)
    if found is None:
        return None
    rule, m = found
    return rule.extract_label(m) if rule.extract_label else None


def _section_end(headings: Sequence[Heading], i: int, last_line: int) -> int:
    level = headings[i].level
    for nxt in headings[i + 1:]:
        if nxt.level <= level:
            return nxt.line - 1
    return last_line


def build_sections(lines: Sequence[str], headings: Sequence[Heading]) -> dict[str, Section]:
    """
    Buduje mapę klucz → Section.

    Dwa nagłówki o tym samym kluczu: późniejszy nadpisuje wcześniejszy
    (pozycja klucza w mapie pozostaje z pierwszego wystąpienia).
    Kolizje raportuje find_collisions().
    """
    sections: dict[str, Section] = {}
    last_line = len(lines)

    for i, heading in enumerate(headings):
        start = heading.line
        end = _section_end(headings, i, last_line)
        key = normalize_key(heading.text)
        sections[key] = Section(
            key=key,
            heading=heading.text,
            level=heading.level,
            start_line=start,
            end_line=end,
            text="\n".join(lines[start - 1:end]),
            label=_label_for(heading),
        )

    return sections


def find_collisions(headings: Sequence[Heading]) -> list[str]:
    """Klucze sekcji wytworzone przez więcej niż jeden nagłówek."""
    counts = Counter(normalize_key(h.text) for h in headings)
    return [key for key, n in counts.items() if n > 1]


def build_document(path: str | Path, fmt: DocumentFormat, text: str) -> Document:
    lines = text.split("\n")
    headings = extract_headings(text)
    sections = build_sections(lines, headings)
    return Document(
        path=Path(path),
        format=fmt,
        text=text,
        lines=tuple(lines),
        headings=tuple(headings),
        sections=MappingProxyType(sections),
        collisions=tuple(find_collisions(headings)),
    )
