"""
indexer — indeks nagłówków/sekcji i ocena złożoności dokumentu.

Moduły:
  heading_patterns — uporządkowana tabela reguł nagłówków (RULES)
  sections         — extract_headings, build_sections, build_document
  complexity       — assess
"""

from .sections import (
    normalize_key,
    extract_headings,
    build_sections,
    find_collisions,
    build_document,
)
from .complexity import assess

__all__ = [
    "normalize_key",
    "extract_headings",
    "build_sections",
    "find_collisions",
    "build_document",
    "assess",
]
