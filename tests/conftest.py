"""Wspólne fixtures dla testów docrepl."""

from __future__ import annotations

from pathlib import Path

import pytest

from data_model.documents import Document, DocumentFormat
from indexer.sections import build_document

CONTRACT_MD = """# Service Agreement
This agreement is made between the parties.

## Definitions
Terms used in this agreement.

Article 1: Scope
The services are described below. See section 4 for fees.

Article 7: Termination
Either party may terminate this agreement.
Termination requires written notice.

PAYMENT AND FEES
Fees are payable monthly.
"""


def make_doc(text: str, name: str = "memory.md", fmt: DocumentFormat = DocumentFormat.MARKDOWN) -> Document:
    return build_document(name, fmt, text)


@pytest.fixture
def contract_doc() -> Document:
    return make_doc(CONTRACT_MD)


@pytest.fixture
def twenty_lines_doc() -> Document:
    return make_doc("\n".join(f"line {i}" for i in range(1, 21)), name="lines.txt", fmt=DocumentFormat.TEXT)


@pytest.fixture
def contract_file(tmp_path: Path) -> Path:
    path = tmp_path / "contract.md"
    path.write_text(CONTRACT_MD, encoding="utf-8")
    return path


@pytest.fixture
def doc_factory():
    return make_doc
