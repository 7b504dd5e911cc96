"""
Konfiguracja docrepl — przez zmienne środowiskowe.

Zmienne:
  DOCREPL_BUDGET        budżet znaków na wynik       (domyślnie 15000)
  DOCREPL_CONTEXT       linie kontekstu przy trafieniu (domyślnie 2)
  DOCREPL_LOAD_TIMEOUT  limit czasu ładowania w s    (domyślnie brak)

Opcjonalnie plik .env w katalogu głównym projektu:
  DOCREPL_BUDGET=20000
"""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

from query.engine import DEFAULT_BUDGET, DEFAULT_CONTEXT_LINES

_ENV_FILE = pathlib.Path(__file__).resolve().parent.parent / ".env"


@dataclass(frozen=True, slots=True)
class Settings:
    budget: int = DEFAULT_BUDGET
    context_lines: int = DEFAULT_CONTEXT_LINES
    load_timeout: float | None = None


def _int_env(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name, "").strip()
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


def _float_env(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def get_settings() -> Settings:
    # Zmienne już ustawione w środowisku mają pierwszeństwo przed .env
    load_dotenv(_ENV_FILE, override=False)
    return Settings(
        budget        = _int_env("DOCREPL_BUDGET", DEFAULT_BUDGET),
        context_lines = _int_env("DOCREPL_CONTEXT", DEFAULT_CONTEXT_LINES, minimum=0),
        load_timeout  = _float_env("DOCREPL_LOAD_TIMEOUT"),
    )
