"""
extractors/text_cleaner.py — oczyszczanie tekstu bloków PyMuPDF.

Usuwamy:
  - powtarzające się nagłówki/stopki stron (blisko krawędzi, >= 2 strony)
  - samotne numery stron ("12", "- 12 -", "Page 12 of 40")
  - łamanie wyrazów z myślnikiem ("termi-\\nnation" → "termination")
  - nadmiarowe spacje w środku linii

Zachowujemy podział na linie — indeks nagłówków działa linia po linii,
więc "Article 7: Termination" musi zostać osobną linią.
"""

from __future__ import annotations

import re
from collections import defaultdict

# Odległość od krawędzi strony (pt), poniżej której blok może być
# nagłówkiem/stopką strony.
_MARGIN_THRESHOLD_PT = 50.0

# Minimalna liczba stron z tym samym tekstem przy krawędzi.
_REPEAT_MIN_PAGES = 2

# Przerwa pionowa (pt), powyżej której bloki rozdziela pusta linia.
PARAGRAPH_GAP_PT = 12.0

_PAGE_NUMBER_RE = re.compile(
    r"^\s*(?:page\s+)?[-–]?\s*\d{1,4}\s*[-–]?(?:\s+of\s+\d{1,4})?\s*$",
    re.IGNORECASE,
)
_HYPHEN_BREAK_RE = re.compile(r"(\w)-\n(\w)")
_MULTI_SPACE_RE = re.compile(r"(?<=\S)[ \t]{2,}")


def block_text(block: dict) -> str:
    """Tekst bloku PyMuPDF (lines → spans), linie rozdzielone \\n."""
    return "\n".join(
        "".join(span.get("text", "") for span in line.get("spans", []))
        for line in block.get("lines", [])
    )


def collect_repeated_texts(pages_blocks: list[list[dict]]) -> set[str]:
    """
    Teksty bloków przy górnej/dolnej krawędzi, które powtarzają się
    na co najmniej _REPEAT_MIN_PAGES stronach.

    pages_blocks: lista stron; blok to dict PyMuPDF z kluczami
                  'type', 'bbox', 'lines' oraz dopisanym 'page_height'.
    """
    page_count: dict[str, int] = defaultdict(int)

    for blocks in pages_blocks:
        seen: set[str] = set()
        for block in blocks:
            if block.get("type") != 0:
                continue
            height = block.get("page_height", 0.0)
            y0, y1 = block["bbox"][1], block["bbox"][3]
            if y0 >= _MARGIN_THRESHOLD_PT and y1 <= height - _MARGIN_THRESHOLD_PT:
                continue
            text = block_text(block).strip()
            if text and text not in seen:
                seen.add(text)
                page_count[text] += 1

    return {text for text, n in page_count.items() if n >= _REPEAT_MIN_PAGES}


def clean_block(block: dict, repeated: set[str]) -> str | None:
    """Oczyszczony tekst bloku albo None, gdy blok należy pominąć."""
    if block.get("type") != 0:
        return None

    raw = block_text(block).strip()
    if not raw or raw in repeated or _PAGE_NUMBER_RE.match(raw):
        return None

    text = _HYPHEN_BREAK_RE.sub(r"\1\2", raw)
    text = _MULTI_SPACE_RE.sub(" ", text)
    return "\n".join(line.rstrip() for line in text.split("\n"))


def join_blocks(texts: list[str], gaps: list[float]) -> str:
    """
    Scala bloki strony.

    gaps[i] = przerwa pionowa (pt) przed blokiem i+1.
    """
    if not texts:
        return ""
    parts = [texts[0]]
    for i, text in enumerate(texts[1:]):
        gap = gaps[i] if i < len(gaps) else 0.0
        parts.append("\n\n" if gap > PARAGRAPH_GAP_PT else "\n")
        parts.append(text)
    return re.sub(r"\n{3,}", "\n\n", "".join(parts)).strip()
