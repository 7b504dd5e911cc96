"""
extractors — konkretne implementacje TextExtractor.

  pdf_extractor  — PdfExtractor  (PyMuPDF / fitz)
  docx_extractor — DocxExtractor (python-docx)
  text_cleaner   — czyszczenie bloków PDF (nagłówki/stopki, numery stron)

Biblioteki są importowane dopiero w extract().
"""

from .pdf_extractor import PdfExtractor
from .docx_extractor import DocxExtractor

__all__ = ["PdfExtractor", "DocxExtractor"]
