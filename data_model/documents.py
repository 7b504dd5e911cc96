"""
data_model/documents.py — model zwirtualizowanego dokumentu.

Document jest niezmienny: powstaje wyłącznie w wyniku udanego load()
(lub build_document() z już wyekstrahowanego tekstu) i jest współdzielony
przez wszystkie zapytania bez blokad.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from types import MappingProxyType
from typing import Mapping


class DocumentFormat(StrEnum):
    """Zamknięty zbiór formatów rozpoznawanych po rozszerzeniu."""

    TEXT       = "text"
    MARKDOWN   = "markdown"
    PDF        = "pdf"
    DOCX       = "docx"
    DOC_LEGACY = "doc-legacy"
    UNKNOWN    = "unknown"


class Complexity(StrEnum):
    LOW    = "low"
    MEDIUM = "medium"
    HIGH   = "high"


@dataclass(frozen=True, slots=True)
class Heading:
    level: int           # 1..6
    text: str
    line: int            # 1-based


@dataclass(frozen=True, slots=True)
class Section:
    """
    Sekcja zakotwiczona w nagłówku.

    - key:        znormalizowany tekst nagłówka (klucz w Document.sections)
    - start_line: linia nagłówka (1-based)
    - end_line:   linia przed następnym nagłówkiem o poziomie <= level,
                  albo ostatnia linia dokumentu
    - text:       linie start_line..end_line (z podsekcjami)
    - label:      znormalizowany oznacznik prawny, np. "article 7"
                  (tylko dla nagłówków typu Article/Section/Part/Chapter)
    """

    key: str
    heading: str
    level: int
    start_line: int
    end_line: int
    text: str
    label: str | None = None

    @property
    def char_count(self) -> int:
        return len(self.text)


@dataclass(frozen=True, slots=True)
class Document:
    path: Path
    format: DocumentFormat
    text: str
    lines: tuple[str, ...]
    headings: tuple[Heading, ...]
    sections: Mapping[str, Section] = field(default_factory=lambda: MappingProxyType({}))
    collisions: tuple[str, ...] = ()    # klucze sekcji nadpisane (last-write-wins)

    @property
    def char_count(self) -> int:
        return len(self.text)

    @property
    def line_count(self) -> int:
        return len(self.lines)
