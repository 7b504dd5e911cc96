"""
loader/loader.py — ładowanie i wirtualizacja dokumentu.

Architektura:
  path → detect_format() → odczyt tekstu (txt/md/unknown)
                          | TextExtractor (pdf/docx, wstrzyknięty)
  → build_document() → Document (niezmienny)

Ładowanie to jedyny krok blokujący. Odczyt/ekstrakcja działa w wątku
roboczym (daemon), ograniczonym przez timeout i opcjonalne zdarzenie
anulowania — ekstrakcja uszkodzonego PDF/DOCX potrafi się zawiesić.

Kluczowe funkcje publiczne:
  load(path, extractors, timeout, cancel) -> Document   (LoadError przy błędzie)
"""

from __future__ import annotations

import threading
import time
from pathlib import Path
from typing import Callable, Mapping

from data_model.documents import Document, DocumentFormat
from data_model.results import ErrorKind, LoadError
from indexer.sections import build_document
from loader.extractors import TextExtractor, default_extractors
from loader.formats import detect_format

# Co ile sekund wątek wywołujący sprawdza anulowanie / timeout
_POLL_INTERVAL = 0.05

_TEXT_FORMATS = {DocumentFormat.TEXT, DocumentFormat.MARKDOWN, DocumentFormat.UNKNOWN}


class _TimedOut(Exception):
    pass


class _Cancelled(Exception):
    pass


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def load(
    path: str | Path,
    extractors: Mapping[DocumentFormat, TextExtractor] | None = None,
    timeout: float | None = None,
    cancel: threading.Event | None = None,
) -> Document:
    """
    Ładuje dokument i buduje jego indeks.

    Args:
        path:       Ścieżka do pliku.
        extractors: Rejestr ekstraktorów pdf/docx (domyślnie: PyMuPDF, python-docx).
        timeout:    Limit czasu odczytu/ekstrakcji w sekundach (None = bez limitu).
        cancel:     Zdarzenie, którego ustawienie przerywa oczekiwanie.

    Raises:
        LoadError: FileNotFound, UnsupportedFormat, MissingExtractionDependency,
                   ExtractionFailure. Bez ponowień.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise LoadError(
            ErrorKind.FILE_NOT_FOUND,
            f"File not found: {file_path}",
            "Check the path and try again.",
        )

    fmt = detect_format(file_path)

    if fmt is DocumentFormat.DOC_LEGACY:
        raise LoadError(
            ErrorKind.UNSUPPORTED_FORMAT,
            "Legacy .doc format not supported.",
            "Please convert to .docx or .pdf",
        )

    if fmt in _TEXT_FORMATS:
        text = _bounded(lambda: _read_text(file_path), timeout, cancel, "Reading")
        return build_document(file_path, fmt, text)

    registry = default_extractors() if extractors is None else extractors
    extractor = registry.get(fmt)
    if extractor is None:
        raise LoadError(
            ErrorKind.MISSING_EXTRACTION_DEPENDENCY,
            f"No text extractor available for {fmt} documents.",
            "Register a TextExtractor for this format.",
        )

    text = _bounded(lambda: _extract(extractor, file_path), timeout, cancel, "Extraction")
    return build_document(file_path, fmt, text)


# ---------------------------------------------------------------------------
# Wewnętrzna implementacja
# ---------------------------------------------------------------------------

def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise LoadError(ErrorKind.EXTRACTION_FAILURE, f"Cannot read {path}: {e}") from e


def _extract(extractor: TextExtractor, path: Path) -> str:
    try:
        return extractor.extract(path)
    except LoadError:
        raise
    except ImportError as e:
        raise LoadError(
            ErrorKind.MISSING_EXTRACTION_DEPENDENCY,
            f"{extractor.name} is not installed: {e}",
            f"Run: pip install {extractor.install}",
        ) from e
    except Exception as e:
        raise LoadError(
            ErrorKind.EXTRACTION_FAILURE,
            f"{extractor.name} failed to extract {path.name}: {e}",
            "The file may be malformed or password-protected.",
        ) from e


def _bounded(
    fn: Callable[[], str],
    timeout: float | None,
    cancel: threading.Event | None,
    what: str,
) -> str:
    if timeout is None and cancel is None:
        return fn()
    try:
        return _run_in_worker(fn, timeout, cancel)
    except _TimedOut:
        raise LoadError(
            ErrorKind.EXTRACTION_FAILURE,
            f"{what} timed out after {timeout:g}s.",
            "Increase the timeout or convert the document to plain text.",
        ) from None
    except _Cancelled:
        raise LoadError(ErrorKind.EXTRACTION_FAILURE, f"{what} cancelled.") from None


def _run_in_worker(
    fn: Callable[[], str],
    timeout: float | None,
    cancel: threading.Event | None,
) -> str:
    """Uruchamia fn w wątku daemon; porzuca go przy timeoucie/anulowaniu."""
    outcome: dict[str, object] = {}

    def target() -> None:
        try:
            outcome["value"] = fn()
        except Exception as e:
            outcome["error"] = e

    worker = threading.Thread(target=target, name="docrepl-load", daemon=True)
    worker.start()

    deadline = None if timeout is None else time.monotonic() + timeout
    while worker.is_alive():
        if cancel is not None and cancel.is_set():
            raise _Cancelled()
        wait = _POLL_INTERVAL
        if deadline is not None:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise _TimedOut()
            wait = min(wait, remaining)
        worker.join(wait)

    if "error" in outcome:
        raise outcome["error"]  # type: ignore[misc]
    return outcome["value"]  # type: ignore[return-value]
