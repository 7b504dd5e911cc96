"""Testy wykrywania formatu i ładowania dokumentów."""

from __future__ import annotations

import threading
from pathlib import Path

import pytest

from data_model.documents import DocumentFormat
from data_model.results import ErrorKind, LoadError
from loader.formats import detect_format
from loader.loader import load


class FakeExtractor:
    name = "fake-extractor"
    install = "fake-extractor"

    def __init__(self, text: str = "", error: Exception | None = None, gate: threading.Event | None = None):
        self.text = text
        self.error = error
        self.gate = gate
        self.calls: list[Path] = []

    def extract(self, path: Path) -> str:
        self.calls.append(path)
        if self.gate is not None:
            self.gate.wait(5)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def pdf_file(tmp_path: Path) -> Path:
    path = tmp_path / "contract.pdf"
    path.write_bytes(b"%PDF-1.4 fake")
    return path


@pytest.mark.parametrize("name, expected", [
    ("notes.txt", DocumentFormat.TEXT),
    ("README.md", DocumentFormat.MARKDOWN),
    ("guide.markdown", DocumentFormat.MARKDOWN),
    ("CONTRACT.PDF", DocumentFormat.PDF),
    ("offer.docx", DocumentFormat.DOCX),
    ("old.doc", DocumentFormat.DOC_LEGACY),
    ("data.csv", DocumentFormat.UNKNOWN),
    ("no_extension", DocumentFormat.UNKNOWN),
])
def test_detect_format(name, expected):
    assert detect_format(name) == expected


class TestLoadText:

    def test_markdown(self, contract_file):
        doc = load(contract_file)

        assert doc.format == DocumentFormat.MARKDOWN
        assert doc.path == contract_file
        assert doc.line_count == 16
        assert doc.lines[0] == "# Service Agreement"
        assert "article 7 termination" in doc.sections

    def test_unknown_extension_is_read_as_text(self, tmp_path):
        path = tmp_path / "server.log"
        path.write_text("ERROR LOG OUTPUT\nline two", encoding="utf-8")

        doc = load(path)

        assert doc.format == DocumentFormat.UNKNOWN
        assert doc.line_count == 2
        assert doc.headings[0].text == "ERROR LOG OUTPUT"

    def test_undecodable_bytes_are_replaced(self, tmp_path):
        path = tmp_path / "broken.txt"
        path.write_bytes(b"ok \xff\xfe text")

        doc = load(path)

        assert doc.text.startswith("ok ")
        assert "\ufffd" in doc.text

    def test_text_load_with_timeout(self, contract_file):
        doc = load(contract_file, timeout=5)

        assert doc.line_count == 16


class TestLoadErrors:

    def test_file_not_found(self, tmp_path):
        with pytest.raises(LoadError) as exc:
            load(tmp_path / "missing.md")

        assert exc.value.kind == ErrorKind.FILE_NOT_FOUND

    def test_directory_is_not_a_document(self, tmp_path):
        with pytest.raises(LoadError) as exc:
            load(tmp_path)

        assert exc.value.kind == ErrorKind.FILE_NOT_FOUND

    def test_legacy_doc_is_unsupported(self, tmp_path):
        path = tmp_path / "old.doc"
        path.write_bytes(b"\xd0\xcf\x11\xe0")

        with pytest.raises(LoadError) as exc:
            load(path)

        assert exc.value.kind == ErrorKind.UNSUPPORTED_FORMAT
        assert ".docx" in exc.value.hint

    def test_no_registered_extractor(self, pdf_file):
        with pytest.raises(LoadError) as exc:
            load(pdf_file, extractors={})

        assert exc.value.kind == ErrorKind.MISSING_EXTRACTION_DEPENDENCY

    def test_missing_library(self, pdf_file):
        extractor = FakeExtractor(error=ImportError("No module named 'fitz'"))

        with pytest.raises(LoadError) as exc:
            load(pdf_file, extractors={DocumentFormat.PDF: extractor})

        assert exc.value.kind == ErrorKind.MISSING_EXTRACTION_DEPENDENCY
        assert exc.value.hint == "Run: pip install fake-extractor"

    def test_malformed_file(self, pdf_file):
        extractor = FakeExtractor(error=ValueError("cannot open broken document"))

        with pytest.raises(LoadError) as exc:
            load(pdf_file, extractors={DocumentFormat.PDF: extractor})

        assert exc.value.kind == ErrorKind.EXTRACTION_FAILURE
        assert "cannot open broken document" in exc.value.message

    def test_load_error_as_result(self, tmp_path):
        with pytest.raises(LoadError) as exc:
            load(tmp_path / "missing.md")

        result = exc.value.to_result()
        assert result.kind == ErrorKind.FILE_NOT_FOUND
        assert result.message == exc.value.message


class TestInjectedExtractors:

    def test_pdf_uses_injected_extractor(self, pdf_file):
        extractor = FakeExtractor(text="Article 1: Scope\nThe services.")

        doc = load(pdf_file, extractors={DocumentFormat.PDF: extractor})

        assert extractor.calls == [pdf_file]
        assert doc.format == DocumentFormat.PDF
        assert doc.headings[0].text == "Article 1: Scope"

    def test_docx_uses_injected_extractor(self, tmp_path):
        path = tmp_path / "offer.docx"
        path.write_bytes(b"PK")
        extractor = FakeExtractor(text="# Offer\nbody")

        doc = load(path, extractors={DocumentFormat.DOCX: extractor})

        assert doc.format == DocumentFormat.DOCX
        assert list(doc.sections) == ["offer"]

    def test_timeout(self, pdf_file):
        gate = threading.Event()
        extractor = FakeExtractor(text="late", gate=gate)
        try:
            with pytest.raises(LoadError) as exc:
                load(pdf_file, extractors={DocumentFormat.PDF: extractor}, timeout=0.1)
        finally:
            gate.set()

        assert exc.value.kind == ErrorKind.EXTRACTION_FAILURE
        assert "timed out" in exc.value.message

    def test_cancel(self, pdf_file):
        gate = threading.Event()
        cancel = threading.Event()
        cancel.set()
        extractor = FakeExtractor(text="never", gate=gate)
        try:
            with pytest.raises(LoadError) as exc:
                load(pdf_file, extractors={DocumentFormat.PDF: extractor}, cancel=cancel)
        finally:
            gate.set()

        assert exc.value.kind == ErrorKind.EXTRACTION_FAILURE
        assert "cancelled" in exc.value.message

    def test_errors_cross_worker_thread(self, pdf_file):
        extractor = FakeExtractor(error=RuntimeError("boom"))

        with pytest.raises(LoadError) as exc:
            load(pdf_file, extractors={DocumentFormat.PDF: extractor}, timeout=5)

        assert exc.value.kind == ErrorKind.EXTRACTION_FAILURE


class TestDefaultExtractors:

    def test_docx_roundtrip(self, tmp_path):
        docx = pytest.importorskip("docx")
        path = tmp_path / "agreement.docx"
        document = docx.Document()
        document.add_paragraph("Article 1: Scope")
        document.add_paragraph("The services are described below.")
        document.save(str(path))

        doc = load(path)

        assert doc.format == DocumentFormat.DOCX
        assert [h.text for h in doc.headings] == ["Article 1: Scope"]

    def test_pdf_extraction(self, tmp_path):
        fitz = pytest.importorskip("fitz")
        path = tmp_path / "agreement.pdf"
        pdf = fitz.open()
        page = pdf.new_page()
        page.insert_text((72, 120), "Article 1: Scope")
        page.insert_text((72, 200), "The services are described below.")
        pdf.save(str(path))
        pdf.close()

        doc = load(path)

        assert doc.format == DocumentFormat.PDF
        assert "Article 1: Scope" in doc.lines
        assert "article 1 scope" in doc.sections
