"""
data_model — struktury danych docrepl.

Użycie:
  from data_model import Document, Section, SearchResult, ErrorKind, ...

Moduły:
  documents — DocumentFormat, Complexity, Heading, Section, Document
  results   — ErrorKind, LoadError, ErrorResult, InfoResult, TocResult,
              SearchHit, SearchResult, SliceResult, SectionResult, QueryResult
"""

from .documents import (
    DocumentFormat,
    Complexity,
    Heading,
    Section,
    Document,
)
from .results import (
    ErrorKind,
    LoadError,
    ErrorResult,
    InfoResult,
    TocResult,
    SearchHit,
    SearchResult,
    SliceResult,
    SectionResult,
    QueryResult,
)

__all__ = [
    # documents
    "DocumentFormat",
    "Complexity",
    "Heading",
    "Section",
    "Document",
    # results
    "ErrorKind",
    "LoadError",
    "ErrorResult",
    "InfoResult",
    "TocResult",
    "SearchHit",
    "SearchResult",
    "SliceResult",
    "SectionResult",
    "QueryResult",
]
