"""loader/formats.py — wykrywanie formatu dokumentu po rozszerzeniu pliku."""

from __future__ import annotations

from pathlib import Path

from data_model.documents import DocumentFormat

EXTENSION_FORMATS: dict[str, DocumentFormat] = {
    ".txt":      DocumentFormat.TEXT,
    ".md":       DocumentFormat.MARKDOWN,
    ".markdown": DocumentFormat.MARKDOWN,
    ".pdf":      DocumentFormat.PDF,
    ".docx":     DocumentFormat.DOCX,
    ".doc":      DocumentFormat.DOC_LEGACY,
}


def detect_format(path: str | Path) -> DocumentFormat:
    """Tylko rozszerzenie — bez zaglądania do treści."""
    return EXTENSION_FORMATS.get(Path(path).suffix.lower(), DocumentFormat.UNKNOWN)
