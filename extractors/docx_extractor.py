"""extractors/docx_extractor.py — ekstrakcja surowego tekstu z DOCX (python-docx)."""

from __future__ import annotations

from pathlib import Path


class DocxExtractor:
    name = "python-docx"
    install = "python-docx"

    def extract(self, path: Path) -> str:
        from docx import Document

        doc = Document(str(path))
        blocks = [p.text for p in doc.paragraphs]

        # Tabele na końcu, wiersz po wierszu: "komórka | komórka"
        for table in doc.tables:
            rows = [
                " | ".join(cell.text.strip() for cell in row.cells)
                for row in table.rows
            ]
            blocks.append("\n".join(rows))

        return "\n\n".join(blocks)
