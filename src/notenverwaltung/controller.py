"""
Controller layer

Der SchuelerController steuert die App. Er verbindet Bestand, Service und View.

Aufgaben:
- Befehle lesen und zerlegen
- Abfragen über den Service ausführen
- Ausgabe über ConsoleView
- Eingabefehler melden, ohne abzubrechen
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List

from . import service
from .domain import Bestand, UngueltigeEingabeError
from .logger import get_logger
from .view import ConsoleView

logger = get_logger(__name__)


class Status(Enum):
    """Ergebnis eines Befehls."""
    ok = "ok"
    fehler = "fehler"
    ende = "ende"


class SchuelerController:
    """
    Hauptcontroller für die Schülerverwaltung.

    Der Bestand wird einmal übergeben und nur gelesen.
    """

    def __init__(self, bestand: Bestand, view: ConsoleView) -> None:
        """
        Erstellt den Controller.

        - bestand: geladene Schüler
        - view: Ein-/Ausgabe
        """
        self._bestand = bestand
        self._view = view
        self._befehle: Dict[str, Callable[[List[str]], Status]] = {
            "list": self.zeige_liste,
            "search": self.suche,
            "filter": self.filtere,
            "stats": self.zeige_statistik,
            "test": self.selbsttest,
            "help": self.hilfe,
            "quit": self._beenden,
            "exit": self._beenden,
        }

    def starte_app(self) -> None:
        """
        Startet die Befehls-Schleife.

        - Hilfe anzeigen
        - Befehle bis quit/exit, Strg+D oder Strg+C
        """
        self._view.show_message(f"Schülerverwaltung gestartet ({len(self._bestand)} Schüler geladen).")
        self._view.render_hilfe()

        while True:
            try:
                zeile = self._view.prompt("> ")
            except (EOFError, KeyboardInterrupt):
                self._view.show_message("")
                self._beenden([])
                break

            if self.fuehre_befehl(zeile) is Status.ende:
                break

    def fuehre_befehl(self, zeile: str) -> Status:
        """
        Führt eine Befehlszeile aus.
        - Leere Zeile wird ignoriert.
        - Unbekannter Befehl -> Hinweis auf help.
        - Unerwartete Fehler werden gemeldet, die Schleife läuft weiter.
        """
        teile = zeile.split()
        if not teile:
            return Status.ok

        befehl = teile[0].lower()
        args = teile[1:]

        handler = self._befehle.get(befehl)
        if handler is None:
            self._view.show_message(f'Unbekannter Befehl: "{befehl}"')
            self._view.show_message('Tippe "help" für die verfügbaren Befehle.')
            return Status.fehler

        try:
            return handler(args)
        except UngueltigeEingabeError as e:
            self._view.show_message(e.meldung)
            if e.hinweis:
                self._view.show_message(e.hinweis)
            return Status.fehler
        except Exception as e:
            logger.exception("Fehler bei Befehl %r", befehl)
            self._view.show_message(f"Fehler: {e}")
            return Status.fehler

    def zeige_liste(self, args: List[str]) -> Status:
        """Zeigt alle Schüler."""
        self._view.render_tabelle(
            "LISTE ALLER SCHÜLER",
            service.liste_alle(self._bestand),
            "Keine Schüler gefunden.",
        )
        return Status.ok

    def suche(self, args: List[str]) -> Status:
        """Sucht nach Namen. Mehrere Wörter werden mit Leerzeichen verbunden."""
        suchbegriff = " ".join(args)
        treffer = service.suche_nach_name(self._bestand, suchbegriff)
        self._view.render_tabelle(
            f'SUCHE NACH "{suchbegriff}"',
            treffer,
            "Kein Schüler mit diesem Namen gefunden.",
        )
        return Status.ok

    def filtere(self, args: List[str]) -> Status:
        """Filtert nach Mindestdurchschnitt (erstes Argument)."""
        raw = args[0] if args else None
        schwelle = service.parse_mindestdurchschnitt(raw)
        treffer = service.filtere_ueber_schwelle(self._bestand, schwelle)
        self._view.render_tabelle(
            f"SCHÜLER MIT EINEM DURCHSCHNITT ÜBER {schwelle:g}",
            treffer,
            f"Kein Schüler hat einen Durchschnitt über {schwelle:g}.",
        )
        return Status.ok

    def zeige_statistik(self, args: List[str]) -> Status:
        """Zeigt die Statistik."""
        self._view.render_statistik(service.berechne_statistik(self._bestand))
        return Status.ok

    def selbsttest(self, args: List[str]) -> Status:
        """Prüft die Fehlerbehandlung."""
        self._view.render_selbsttest(service.fuehre_selbsttest(self._bestand))
        return Status.ok

    def hilfe(self, args: List[str]) -> Status:
        """Zeigt die Hilfe."""
        self._view.render_hilfe()
        return Status.ok

    def _beenden(self, args: List[str]) -> Status:
        """Verabschiedung."""
        self._view.show_message("Auf Wiedersehen!")
        return Status.ende
