"""
loader — wykrywanie formatu i ładowanie dokumentów.

Moduły:
  formats    — detect_format
  extractors — TextExtractor (Protocol), default_extractors
  loader     — load
"""

from .formats import detect_format
from .extractors import TextExtractor, default_extractors
from .loader import load

__all__ = [
    "detect_format",
    "TextExtractor",
    "default_extractors",
    "load",
]
