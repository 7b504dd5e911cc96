"""
indexer/complexity.py — ocena złożoności dokumentu (low / medium / high).

Sygnał dla wywołującego: LOW → dokument można bezpiecznie przeczytać w całości,
HIGH → wymagany dostęp progresywny (wyszukiwanie, wycinki, sekcje z budżetem).

Gęstości liczone na 10 000 znaków:
  cross_ref_density = liczba nagłówków / znaki * 10000
  ref_density       = liczba odwołań ("see section", "pursuant to article" …)
                      / znaki * 10000
"""

from __future__ import annotations

import re

from data_model.documents import Complexity, Document

_REF_RE = re.compile(
    r"(?:see|refer to|as defined in|pursuant to|in accordance with)"
    r"\s+(?:section|article|clause|paragraph)",
    re.IGNORECASE,
)

_PER_CHARS = 10_000

LOW_MAX_CHARS     = 10_000
MEDIUM_MAX_CHARS  = 50_000
LOW_MAX_XREF      = 1.0
MEDIUM_MAX_XREF   = 3.0
MEDIUM_MAX_REFS   = 1.0


def _density(count: int, char_count: int) -> float:
    return count / char_count * _PER_CHARS if char_count else 0.0


def densities(document: Document) -> tuple[float, float]:
    """Zwraca (cross_ref_density, ref_density)."""
    chars = document.char_count
    cross_ref = _density(len(document.headings), chars)
    refs = _density(len(_REF_RE.findall(document.text)), chars)
    return cross_ref, refs


def assess(document: Document) -> Complexity:
    chars = document.char_count
    cross_ref, refs = densities(document)

    if chars < LOW_MAX_CHARS and cross_ref < LOW_MAX_XREF:
        return Complexity.LOW
    if chars < MEDIUM_MAX_CHARS and cross_ref < MEDIUM_MAX_XREF and refs < MEDIUM_MAX_REFS:
        return Complexity.MEDIUM
    return Complexity.HIGH
