"""
extractors/pdf_extractor.py — ekstrakcja tekstu z PDF (PyMuPDF).

Architektura:
  pdf_path → fitz.open() → strony → bloki tekstu (PyMuPDF dict)
  → collect_repeated_texts() (nagłówki/stopki stron)
  → clean_block() + join_blocks() per strona
  → strony rozdzielone pustą linią
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from extractors.text_cleaner import clean_block, collect_repeated_texts, join_blocks

if TYPE_CHECKING:
    import fitz


class PdfExtractor:
    name = "PyMuPDF"
    install = "PyMuPDF"

    def extract(self, path: Path) -> str:
        import fitz  # PyMuPDF

        doc = fitz.open(str(path))
        try:
            pages = _extract_pages(doc)
        finally:
            doc.close()
        return pages_to_text(pages)


def _extract_pages(doc: fitz.Document) -> list[list[dict]]:
    """Lista stron; każda strona to lista bloków PyMuPDF z dopisanym page_height."""
    import fitz

    pages: list[list[dict]] = []
    for page in doc:
        page_dict = page.get_text("dict", flags=fitz.TEXT_PRESERVE_WHITESPACE)
        height = page.rect.height
        blocks = []
        for block in page_dict.get("blocks", []):
            block["page_height"] = height
            blocks.append(block)
        pages.append(blocks)
    return pages


def pages_to_text(pages: list[list[dict]]) -> str:
    repeated = collect_repeated_texts(pages)
    page_texts: list[str] = []

    for blocks in pages:
        texts: list[str] = []
        gaps: list[float] = []
        prev_y1: float | None = None
        for block in blocks:
            cleaned = clean_block(block, repeated)
            if cleaned is None:
                continue
            y0, y1 = block["bbox"][1], block["bbox"][3]
            if texts:
                gaps.append(y0 - prev_y1 if prev_y1 is not None else 0.0)
            texts.append(cleaned)
            prev_y1 = y1
        page_text = join_blocks(texts, gaps)
        if page_text:
            page_texts.append(page_text)

    return "\n\n".join(page_texts)
