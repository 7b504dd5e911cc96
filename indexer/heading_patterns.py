"""
indexer/heading_patterns.py — reguły rozpoznawania nagłówków w liniach tekstu.

Każdy HeadingRule zawiera:
  - name        : nazwa reguły (diagnostyka)
  - regex       : skompilowany wzorzec dopasowywany do surowej linii
  - level       : funkcja wyznaczająca poziom (1..6) z Match
  - extract_text: funkcja wyciągająca tekst nagłówka z Match
  - extract_label: opcjonalny oznacznik prawny, np. "article 7"

Reguły są testowane w kolejności; pierwsza pasująca wygrywa,
w jednej linii jest co najwyżej jeden nagłówek.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class HeadingRule:
    name: str
    regex: re.Pattern[str]
    level: Callable[[re.Match[str]], int]
    extract_text: Callable[[re.Match[str]], str]
    extract_label: Callable[[re.Match[str]], str] | None = None


def _whole_line(m: re.Match[str]) -> str:
    return m.group(0).strip()


RULES: list[HeadingRule] = [
    # -------------------------------------------------------------------------
    # Markdown ATX: "# Tytuł" .. "###### Tytuł" → poziom = liczba '#'
    # -------------------------------------------------------------------------
    HeadingRule(
        name="markdown-atx",
        regex=re.compile(r"^(#{1,6})\s+(.+)$"),
        level=lambda m: len(m.group(1)),
        extract_text=lambda m: m.group(2).strip(),
    ),

    # -------------------------------------------------------------------------
    # Numeracja prawna: Article / Section / Part / Chapter + liczba lub rzymska
    # Article → poziom 1, pozostałe → poziom 2
    # -------------------------------------------------------------------------
    HeadingRule(
        name="legal-numbering",
        regex=re.compile(
            r"^(Article|Section|Part|Chapter)\s+(\d+|[IVXLCDM]+)[.:]?\s*.*$",
            re.IGNORECASE,
        ),
        level=lambda m: 1 if m.group(1).lower() == "article" else 2,
        extract_text=_whole_line,
        extract_label=lambda m: f"{m.group(1)} {m.group(2)}".lower(),
    ),

    # -------------------------------------------------------------------------
    # Krótka linia WIELKIMI LITERAMI (6–99 znaków, tylko dozwolone znaki)
    # — heurystyczny nagłówek typowy dla umów i regulaminów;
    # linie bez liter ("------", "2024 01") także pasują
    # -------------------------------------------------------------------------
    HeadingRule(
        name="all-caps",
        regex=re.compile(r"^(?=.{6,99}$)[A-Z0-9\s.,;:()-]+$"),
        level=lambda m: 2,
        extract_text=_whole_line,
    ),
]
