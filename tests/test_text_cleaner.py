"""Testy czyszczenia bloków PDF (bez PyMuPDF — bloki budowane ręcznie)."""

from __future__ import annotations

from extractors.pdf_extractor import pages_to_text
from extractors.text_cleaner import clean_block, collect_repeated_texts, join_blocks


def _block(*lines: str, y0: float = 100.0, y1: float | None = None, kind: int = 0) -> dict:
    return {
        "type": kind,
        "bbox": (72.0, y0, 500.0, y1 if y1 is not None else y0 + 12.0 * len(lines)),
        "lines": [{"spans": [{"text": line}]} for line in lines],
        "page_height": 800.0,
    }


def test_repeated_edge_texts_are_collected():
    pages = [
        [_block("ACME Corp Confidential", y0=10), _block("Article 1: Scope")],
        [_block("ACME Corp Confidential", y0=10), _block("Article 1: Scope")],
    ]

    repeated = collect_repeated_texts(pages)

    assert repeated == {"ACME Corp Confidential"}


def test_single_page_header_is_kept():
    assert collect_repeated_texts([[_block("Title", y0=10)]]) == set()


def test_page_numbers_are_dropped():
    assert clean_block(_block("12"), set()) is None
    assert clean_block(_block("- 3 -"), set()) is None
    assert clean_block(_block("Page 3 of 10"), set()) is None


def test_image_blocks_are_dropped():
    assert clean_block(_block("x", kind=1), set()) is None


def test_hyphen_breaks_and_spaces():
    block = _block("the termi-", "nation    clause  ")

    assert clean_block(block, set()) == "the termination clause"


def test_join_blocks_uses_gap():
    assert join_blocks(["a", "b", "c"], [20.0, 2.0]) == "a\n\nb\nc"
    assert join_blocks([], []) == ""


def test_pages_to_text():
    pages = [
        [
            _block("ACME Corp", y0=10, y1=30),
            _block("Article 1: Scope", y0=100, y1=120),
            _block("Text one", y0=125, y1=140),
        ],
        [
            _block("ACME Corp", y0=10, y1=30),
            _block("Article 2: Fees", y0=100, y1=120),
            _block("7", y0=770, y1=790),
        ],
    ]

    assert pages_to_text(pages) == "Article 1: Scope\nText one\n\nArticle 2: Fees"
