"""
Entry point für die Schülerverwaltung.
Dieses Modul startet die Anwendung.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from . import config
from .controller import SchuelerController, Status
from .domain import Bestand
from .logger import get_logger, setze_level
from .persistence import JsonSchuelerRepository, SchuelerRepository
from .view import ConsoleView

logger = get_logger(__name__)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    """Liest die Kommandozeile."""
    parser = argparse.ArgumentParser(
        prog="notenverwaltung",
        description="Schülerdaten anzeigen, suchen, filtern und auswerten.",
    )
    parser.add_argument(
        "--daten",
        default=str(config.DATEN_PFAD),
        help="Pfad zur JSON-Datei mit den Schülern (Standard: %(default)s)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Ausführliches Logging (INFO)",
    )
    parser.add_argument(
        "befehl",
        nargs=argparse.REMAINDER,
        help="Einzelner Befehl, z.B. 'stats' oder 'filter 15'. Ohne Befehl startet der interaktive Modus.",
    )
    return parser.parse_args(argv)


def lade_bestand(repo: SchuelerRepository) -> Bestand:
    """
    Lädt den Bestand einmal beim Start.
    Ein leerer Bestand ist kein Abbruchgrund.
    """
    bestand = repo.lade()
    if not bestand:
        logger.warning("Keine Schüler geladen, es wird mit leerem Bestand gearbeitet.")
    return bestand


def main(argv: Optional[List[str]] = None) -> None:
    """
    Startpunkt der Anwendung.
    Ablauf:
    - Argumente lesen
    - Bestand einmal laden
    - Komponenten erstellen
    - Einzelbefehl ausführen oder Befehls-Schleife starten
    """
    args = _parse_args(argv)
    if args.verbose:
        setze_level("INFO")

    try:
        # Datenquelle laden. Fehler führen zu einem leeren Bestand.
        repo: SchuelerRepository = JsonSchuelerRepository(args.daten)
        bestand = lade_bestand(repo)

        view = ConsoleView()
        controller = SchuelerController(bestand, view)

        if args.befehl:
            status = controller.fuehre_befehl(" ".join(args.befehl))
            sys.exit(2 if status is Status.fehler else 0)

        controller.starte_app()

    except KeyboardInterrupt:
        # Sauberer Abbruch per Strg+C.
        print("\nAnwendung beendet.")
        sys.exit(0)

    except Exception as e:
        # Unerwarteter Fehler.
        logger.exception("Unerwarteter Fehler")
        print(f"\nFEHLER: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
