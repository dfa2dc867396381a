"""
Persistence layer (JSON)

Die Schülerdaten liegen als JSON-Array in einer Datei. Die Domain selbst bleibt frei von JSON-Details.
- SchuelerRepository: Schnittstelle (lade)
- FileStorage: Datei lesen
- JsonSerializer: Mapping zwischen JSON und Schueler
- JsonSchuelerRepository: Datei-Repository

Fehlerbehandlung an der Ladegrenze:
- Datei fehlt oder JSON kaputt -> leerer Bestand + Warnung, kein Abbruch.
- Einzelne kaputte Einträge werden übersprungen (mit Warnung).
- Adresse und Noten werden tolerant ergänzt.
"""

from __future__ import annotations

import json
import math
from typing import Any, List, Optional, Protocol, Tuple

from . import config
from .domain import Bestand, Schueler
from .logger import get_logger

logger = get_logger(__name__)


class SchuelerRepository(Protocol):
    """
    Schnittstelle für Persistenz.
    Es wird nur gelesen.
    """
    def lade(self) -> Bestand:
        """Lädt den Bestand."""
        ...


class FileStorage:
    """
    Klasse für Dateihandling beim Laden.
    - Nur lesen.
    - UTF-8 wird fest genutzt.
    """

    def lese_text(self, pfad: str) -> str:
        """
        Liest eine Datei als Text.
        Fehlerbehandlung:
        - FileNotFoundError, wenn Datei fehlt
        - OSError bei Leseproblemen
        """
        with open(pfad, "r", encoding="utf-8") as f:
            return f.read()


class JsonSerializer:
    """
    Wandelt JSON -> Schueler.
    - Erwartet ein Array von Objekten mit name, address, notes.
    - Parsing ist tolerant bei Adresse und Noten.
    - Noten müssen endliche Zahlen im Bereich 0..20 sein.
    """

    def from_json(self, raw: str) -> List[Schueler]:
        """
        Baut die Schülerliste aus JSON.
        Ungültige Einträge werden übersprungen.

        Raises:
            ValueError: JSON ist nicht lesbar oder kein Array.
        """
        payload = json.loads(raw)
        if not isinstance(payload, list):
            raise ValueError(f"JSON-Array erwartet, erhalten: {type(payload).__name__}")

        schueler: List[Schueler] = []
        for i, eintrag in enumerate(payload, 1):
            try:
                schueler.append(self._schueler_from_dict(eintrag))
            except ValueError as e:
                logger.warning("Eintrag %d übersprungen: %s", i, e)
        return schueler

    def _schueler_from_dict(self, d: Any) -> Schueler:
        """Mapping für einen Schüler."""
        if not isinstance(d, dict):
            raise ValueError(f"Objekt erwartet, erhalten: {type(d).__name__}")

        name = d.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Name fehlt oder ist ungültig: {name!r}")

        return Schueler(
            name=name,
            adresse=self._parse_adresse(d.get("address")),
            noten=self._parse_noten(name, d.get("notes")),
        )

    def _parse_adresse(self, raw: Any) -> str:
        """Fehlende Adresse -> leerer Text."""
        if raw is None:
            return ""
        return raw if isinstance(raw, str) else str(raw)

    def _parse_noten(self, name: str, raw: Any) -> Tuple[float, ...]:
        """
        Prüft die Notenliste.
        - Keine Liste -> keine Noten (Durchschnitt 0), mit Warnung.
        - Ungültige Note -> ValueError, der Eintrag wird verworfen.
        """
        if raw is None:
            return ()
        if not isinstance(raw, list):
            logger.warning("Noten von %r sind keine Liste (%s), werden ignoriert.", name, type(raw).__name__)
            return ()

        noten = []
        for n in raw:
            if isinstance(n, bool) or not isinstance(n, (int, float)):
                raise ValueError(f"Ungültige Note {n!r} bei {name!r}")
            try:
                endlich = math.isfinite(n)
            except OverflowError:
                # Sehr große JSON-Ganzzahl passt in keinen float.
                endlich = False
            if not endlich:
                raise ValueError(f"Ungültige Note bei {name!r}: keine endliche Zahl")
            if not (config.NOTE_MIN <= n <= config.NOTE_MAX):
                raise ValueError(
                    f"Note {n!r} bei {name!r} liegt nicht im Bereich "
                    f"{config.NOTE_MIN:g}..{config.NOTE_MAX:g}"
                )
            noten.append(n)
        return tuple(noten)


class JsonSchuelerRepository:
    """
    Repository für eine JSON-Datei.
    - FileStorage für Datei-Zugriff
    - JsonSerializer für Mapping
    """

    def __init__(
        self,
        pfad: str,
        storage: Optional[FileStorage] = None,
        serializer: Optional[JsonSerializer] = None
    ) -> None:
        """
        Erstellt das Repository.
        """
        self._pfad = pfad
        self._storage = storage or FileStorage()
        self._serializer = serializer or JsonSerializer()

    def lade(self) -> Bestand:
        """
        Lädt die Datei und baut den Bestand.
        Jeder Fehler der Datenquelle führt zu einem leeren Bestand.
        """
        try:
            raw = self._storage.lese_text(self._pfad)
            schueler = self._serializer.from_json(raw)
        except (OSError, ValueError, OverflowError, RecursionError) as e:
            logger.warning("Fehler beim Laden der Daten aus %s: %s", self._pfad, e)
            return Bestand()

        logger.info("%d Schüler geladen aus %s", len(schueler), self._pfad)
        return Bestand.aus_liste(schueler)
