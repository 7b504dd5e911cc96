"""
docrepl — narzędzie CLI do wirtualizacji dokumentów.

Dokument nie trafia w całości do kontekstu wywołującego (agenta LLM);
zamiast tego odpytuje się go programowo, z budżetem znaków na wynik.

Użycie:
  docrepl --load=<plik> [operacja] [opcje]

Operacje (jedna na wywołanie, domyślnie --info):
  --info              Metadane: rozmiar, format, złożoność.
  --toc               Spis treści (nagłówki).
  --search=SŁOWO      Wyszukiwanie słowa z kontekstem.
  --regex=WZORZEC     Wyszukiwanie wyrażenia regularnego z kontekstem.
  --slice=OD-DO       Linie OD..DO (1-based, włącznie).
  --section=NAZWA     Sekcja po nagłówku (dopasowanie przybliżone).

Kody wyjścia:
  0 = sukces
  1 = błąd
  2 = brak wyników wyszukiwania
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8 dla treści dokumentów.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from rich.console import Console
from rich.markup import escape

from data_model.documents import Document
from data_model.results import ErrorResult, LoadError, QueryResult, SearchResult
from docrepl import __version__
from docrepl._config import Settings, get_settings
from loader.loader import load
from query import engine
from query.formatter import render_text, to_json

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_RESULTS = 2

console = Console()
err_console = Console(stderr=True)


def _emit(text: str) -> None:
    """Surowy tekst na stdout — bez markupu, emoji i zawijania linii."""
    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)


# ---------------------------------------------------------------------------
# Wykonanie operacji
# ---------------------------------------------------------------------------

def _execute(doc: Document, args: argparse.Namespace) -> QueryResult:
    if args.toc:
        return engine.toc(doc)
    if args.search is not None:
        return engine.search_keyword(doc, args.search, args.context, args.budget)
    if args.regex is not None:
        return engine.search_regex(doc, args.regex, args.context, args.budget)
    if args.slice is not None:
        return engine.slice_lines(doc, args.slice, args.budget)
    if args.section is not None:
        return engine.find_section(doc, args.section, args.budget)
    return engine.info(doc)


def exit_code_for(result: QueryResult) -> int:
    if isinstance(result, ErrorResult):
        return EXIT_ERROR
    if isinstance(result, SearchResult) and result.match_count == 0:
        return EXIT_NO_RESULTS
    return EXIT_OK


def _load(args: argparse.Namespace) -> Document | None:
    if args.verbose:
        err_console.print(f"[dim]Ładowanie dokumentu:[/dim] {escape(args.load)}")

    try:
        doc = load(args.load, timeout=args.timeout)
    except LoadError as e:
        if args.json:
            _emit(to_json(e.to_result()))
        else:
            err_console.print(f"[red]Error {escape(f'[{e.kind}]')}:[/red] {escape(e.message)}")
            if e.hint:
                err_console.print(f"[dim]{escape(e.hint)}[/dim]")
        return None

    if args.verbose:
        err_console.print(
            f"[green]Załadowano:[/green] {doc.char_count} znaków, "
            f"{doc.line_count} linii, {len(doc.headings)} nagłówków ({doc.format})"
        )
        if doc.collisions:
            err_console.print(
                "[yellow]Zduplikowane klucze sekcji (wygrywa ostatni nagłówek):[/yellow] "
                + escape(", ".join(doc.collisions))
            )
    return doc


def run(args: argparse.Namespace) -> int:
    doc = _load(args)
    if doc is None:
        return EXIT_ERROR

    result = _execute(doc, args)
    _emit(to_json(result) if args.json else render_text(result))
    return exit_code_for(result)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def build_parser(settings: Settings | None = None) -> argparse.ArgumentParser:
    settings = settings or get_settings()

    parser = argparse.ArgumentParser(
        prog="docrepl",
        description="docrepl — programowe, ograniczone budżetem zapytania do dużych dokumentów.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Obsługiwane formaty:
  .txt, .md    bezpośrednio
  .pdf         PyMuPDF       (pip install PyMuPDF)
  .docx        python-docx   (pip install python-docx)

Przykłady:
  docrepl --load=umowa.pdf --info
  docrepl --load=notatki.md --search=authentication
  docrepl --load=umowa.docx --section="Article 7"
  docrepl --load=raport.txt --slice=500-600 --budget=20000
        """,
    )
    parser.add_argument("--version", action="version", version=f"docrepl {__version__}")
    parser.add_argument(
        "--load",
        metavar="PLIK",
        required=True,
        help="Ścieżka do dokumentu (wymagana).",
    )

    ops = parser.add_mutually_exclusive_group()
    ops.add_argument("--info", action="store_true", help="Metadane dokumentu (domyślna operacja).")
    ops.add_argument("--toc", action="store_true", help="Spis treści (nagłówki).")
    ops.add_argument("--search", metavar="SŁOWO", default=None, help="Wyszukiwanie słowa z kontekstem.")
    ops.add_argument("--regex", metavar="WZORZEC", default=None, help="Wyszukiwanie regex z kontekstem.")
    ops.add_argument("--slice", metavar="OD-DO", default=None, help="Linie OD..DO, np. 100-200.")
    ops.add_argument("--section", metavar="NAZWA", default=None, help="Sekcja po nagłówku.")

    parser.add_argument(
        "--context",
        type=int,
        metavar="N",
        default=settings.context_lines,
        help=f"Linie kontekstu wokół trafienia (domyślnie: {settings.context_lines}).",
    )
    parser.add_argument(
        "--budget",
        type=int,
        metavar="N",
        default=settings.budget,
        help=f"Budżet znaków na wynik (domyślnie: {settings.budget}).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        metavar="S",
        default=settings.load_timeout,
        help="Limit czasu ładowania/ekstrakcji w sekundach.",
    )
    parser.add_argument("--json", action="store_true", help="Wynik jako JSON.")
    parser.add_argument("--verbose", action="store_true", help="Informacje diagnostyczne na stderr.")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    raise SystemExit(run(args))


if __name__ == "__main__":
    main()
