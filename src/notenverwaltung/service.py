"""
Application/Use-Case layer

Abfragen auf dem Bestand. Der Bestand wird jeder Funktion explizit übergeben.
Es gibt keinen globalen Zustand. Ergebnisse sind immer neue Tupel.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from . import config
from .domain import Bestand, Schueler, UngueltigeEingabeError

SUCHE_USAGE = "Usage: search <name>   Beispiel: search EMILY"
FILTER_USAGE = "Usage: filter <durchschnitt>   Beispiel: filter 15"


@dataclass(frozen=True, slots=True)
class Statistik:
    """
    Kennzahlen über alle Schüler.
    beste/schwaechste enthalten alle Schüler mit dem Extremwert (Gleichstand inklusive).
    """
    anzahl: int
    gesamtdurchschnitt: float
    bester_durchschnitt: float
    schwaechster_durchschnitt: float
    beste: Tuple[Schueler, ...]
    schwaechste: Tuple[Schueler, ...]


@dataclass(frozen=True, slots=True)
class Pruefergebnis:
    """Ergebnis eines Selbsttest-Schritts."""
    beschreibung: str
    ergebnis: str
    ok: bool


def liste_alle(bestand: Bestand) -> Tuple[Schueler, ...]:
    """Alle Schüler in Originalreihenfolge."""
    return tuple(bestand)


def suche_nach_name(bestand: Bestand, suchbegriff: object) -> Tuple[Schueler, ...]:
    """
    Sucht Schüler, deren Name den Suchbegriff enthält.
    - Groß/Klein wird ignoriert.
    - Reihenfolge bleibt erhalten.
    - Leerer Suchbegriff ist ein Eingabefehler.
    """
    if not isinstance(suchbegriff, str) or not suchbegriff.strip():
        raise UngueltigeEingabeError("Bitte einen Namen für die Suche angeben.", SUCHE_USAGE)

    needle = suchbegriff.strip().casefold()
    return tuple(s for s in bestand if needle in s.name.casefold())


def parse_mindestdurchschnitt(raw: Union[str, float, int, None]) -> float:
    """
    Liest den Schwellwert für den Filter.
    - Text mit Punkt oder Komma ist erlaubt.
    - Muss eine endliche Zahl im Bereich 0..20 sein.
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise UngueltigeEingabeError("Bitte einen Mindestdurchschnitt angeben.", FILTER_USAGE)

    if isinstance(raw, bool):
        wert = math.nan
    elif isinstance(raw, (int, float)):
        wert = float(raw)
    else:
        try:
            wert = float(str(raw).strip().replace(",", "."))
        except ValueError:
            wert = math.nan

    if not math.isfinite(wert) or not (config.NOTE_MIN <= wert <= config.NOTE_MAX):
        raise UngueltigeEingabeError(
            f"Bitte einen gültigen Durchschnitt zwischen "
            f"{config.NOTE_MIN:g} und {config.NOTE_MAX:g} angeben.",
            FILTER_USAGE,
        )
    return wert


def filtere_nach_durchschnitt(
    bestand: Bestand, mindestdurchschnitt: Union[str, float, int, None]
) -> Tuple[Schueler, ...]:
    """
    Schüler mit Durchschnitt echt größer als der Schwellwert.
    Gleichheit zählt nicht.
    """
    return filtere_ueber_schwelle(bestand, parse_mindestdurchschnitt(mindestdurchschnitt))


def filtere_ueber_schwelle(bestand: Bestand, schwelle: float) -> Tuple[Schueler, ...]:
    """Filter mit bereits geprüftem Schwellwert (siehe parse_mindestdurchschnitt)."""
    return tuple(s for s in bestand if s.durchschnitt() > schwelle)


def berechne_statistik(bestand: Bestand) -> Optional[Statistik]:
    """
    Berechnet die Kennzahlen.
    Leerer Bestand -> None (keine Daten), es wird nicht gerechnet.
    """
    if not bestand:
        return None

    durchschnitte = [s.durchschnitt() for s in bestand]
    bester = max(durchschnitte)
    schwaechster = min(durchschnitte)

    return Statistik(
        anzahl=len(bestand),
        gesamtdurchschnitt=sum(durchschnitte) / len(durchschnitte),
        bester_durchschnitt=bester,
        schwaechster_durchschnitt=schwaechster,
        beste=tuple(s for s, d in zip(bestand, durchschnitte) if d == bester),
        schwaechste=tuple(s for s, d in zip(bestand, durchschnitte) if d == schwaechster),
    )


def fuehre_selbsttest(bestand: Bestand) -> List[Pruefergebnis]:
    """
    Prüft die Fehlerbehandlung der Abfragen.
    1) Suche mit leerem Namen -> Eingabefehler
    2) Filter mit 25 -> Eingabefehler
    3) Filter mit -5 -> Eingabefehler
    4) Suche nach "XYZ123" -> keine Treffer
    """
    ergebnisse: List[Pruefergebnis] = []

    for beschreibung, aufruf in (
        ("Suche mit leerem Namen", lambda: suche_nach_name(bestand, "")),
        ("Filter mit unmöglichem Durchschnitt (>20)", lambda: filtere_nach_durchschnitt(bestand, 25)),
        ("Filter mit negativem Durchschnitt", lambda: filtere_nach_durchschnitt(bestand, -5)),
    ):
        try:
            treffer = aufruf()
        except UngueltigeEingabeError as e:
            ergebnisse.append(Pruefergebnis(beschreibung, f"abgelehnt: {e.meldung}", True))
        else:
            ergebnisse.append(Pruefergebnis(beschreibung, f"{len(treffer)} Treffer", False))

    treffer = suche_nach_name(bestand, "XYZ123")
    ergebnisse.append(Pruefergebnis(
        'Suche nach "XYZ123"',
        f"{len(treffer)} Treffer",
        len(treffer) == 0,
    ))

    return ergebnisse
