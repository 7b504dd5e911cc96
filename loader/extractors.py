"""
loader/extractors.py — interfejs ekstraktora tekstu i domyślny rejestr.

Rdzeń nie zależy od żadnej biblioteki PDF/DOCX: loader dostaje mapowanie
DocumentFormat → TextExtractor. Konkretne ekstraktory (pakiet `extractors`)
importują swoje biblioteki leniwie w extract(), więc brak biblioteki
objawia się jako ImportError dopiero przy ładowaniu danego formatu.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Protocol

from data_model.documents import DocumentFormat


class TextExtractor(Protocol):
    """
    Ekstraktor surowego tekstu z pliku binarnego.

    - name:    czytelna nazwa (komunikaty błędów)
    - install: nazwa pakietu do podpowiedzi "pip install …"
    - extract: zwraca tekst; ImportError = brak biblioteki,
               inny wyjątek = uszkodzony plik
    """

    name: str
    install: str

    def extract(self, path: Path) -> str:
        ...


def default_extractors() -> Mapping[DocumentFormat, TextExtractor]:
    from extractors.docx_extractor import DocxExtractor
    from extractors.pdf_extractor import PdfExtractor

    return {
        DocumentFormat.PDF: PdfExtractor(),
        DocumentFormat.DOCX: DocxExtractor(),
    }
