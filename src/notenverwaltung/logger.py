"""
Zentrales Logging.

Alle Module holen sich ihren Logger über `get_logger(__name__)`.
Ausgabe geht nach stderr, damit Log-Zeilen nicht in die Tabellen geraten.
"""

from __future__ import annotations

import logging
import sys

from . import config

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def _init_logging() -> None:
    """Konfiguriert den Root-Logger genau einmal."""
    global _initialized
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(getattr(logging, config.LOG_LEVEL, logging.WARNING))
    root.addHandler(handler)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Liefert einen benannten Logger.

    Args:
        name: Meist ``__name__`` des aufrufenden Moduls.
    """
    _init_logging()
    return logging.getLogger(name)


def setze_level(level: str) -> None:
    """Ändert das Log-Level zur Laufzeit (z.B. für --verbose)."""
    _init_logging()
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.WARNING))
