"""
data_model/results.py — wyniki zapytań i kody błędów.

Każda operacja silnika zapytań zwraca jeden z wariantów:
  InfoResult, TocResult, SearchResult, SliceResult, SectionResult
albo ErrorResult ze stałym kodem (ErrorKind) i podpowiedzią dla wywołującego.
Błędy zapytań nigdy nie są rzucane jako wyjątki — agent może je odczytać
i ponowić zapytanie z innymi parametrami.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from .documents import Complexity, DocumentFormat, Heading


class ErrorKind(StrEnum):
    """Stałe kody błędów (ładowanie + zapytania)."""

    # ładowanie dokumentu
    FILE_NOT_FOUND                = "FileNotFound"
    UNSUPPORTED_FORMAT            = "UnsupportedFormat"
    MISSING_EXTRACTION_DEPENDENCY = "MissingExtractionDependency"
    EXTRACTION_FAILURE            = "ExtractionFailure"

    # zapytania
    INVALID_REGEX                 = "InvalidRegex"
    INVALID_RANGE                 = "InvalidRange"
    SECTION_NOT_FOUND             = "SectionNotFound"
    NO_DOCUMENT_LOADED            = "NoDocumentLoaded"


class LoadError(Exception):
    """Nieudane ładowanie dokumentu. Terminalne dla danego wywołania load()."""

    def __init__(self, kind: ErrorKind, message: str, hint: str = "") -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.hint = hint

    def to_result(self) -> ErrorResult:
        return ErrorResult(kind=self.kind, message=self.message, hint=self.hint)


@dataclass(slots=True)
class ErrorResult:
    """
    Błąd zapytania.

    - kind:    stały identyfikator klasy błędu
    - message: czytelny opis
    - hint:    krótka podpowiedź dla wywołującego (np. "Available sections:")
    - details: opcjonalne dane dodatkowe (np. lista dostępnych sekcji)
    """

    kind: ErrorKind
    message: str
    hint: str = ""
    details: dict[str, Any] | None = None


@dataclass(slots=True)
class InfoResult:
    path: str
    format: DocumentFormat
    char_count: int
    line_count: int
    heading_count: int
    section_count: int
    estimated_tokens: int
    complexity: Complexity
    collisions: list[str] = field(default_factory=list)


@dataclass(slots=True)
class TocResult:
    heading_count: int
    headings: list[Heading]


@dataclass(slots=True)
class SearchHit:
    line: int                   # linia dopasowania (1-based)
    text: str                   # pełna treść dopasowanej linii
    context: str                # okno kontekstu (linie połączone \n)
    context_start: int
    context_end: int
    matches: list[str] = field(default_factory=list)   # tylko regex


@dataclass(slots=True)
class SearchResult:
    mode: str                   # "keyword" | "regex"
    query: str
    match_count: int
    hits: list[SearchHit]
    truncated: bool = False
    message: str = ""


@dataclass(slots=True)
class SliceResult:
    start: int
    end: int                    # po przycięciu do liczby linii
    line_count: int
    char_count: int             # długość zwróconego tekstu
    truncated: bool
    text: str


@dataclass(slots=True)
class SectionResult:
    query: str
    found: str                  # tekst nagłówka
    score: float
    start_line: int
    end_line: int
    char_count: int             # pełna długość sekcji
    truncated: bool
    text: str


type QueryResult = (
    InfoResult | TocResult | SearchResult | SliceResult | SectionResult | ErrorResult
)
