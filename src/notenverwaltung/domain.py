"""
Domain beinhaltet die Entities + Fehlerklassen

Dieses Modul enthält nur die Fachlogik.
Es enthält keine UI- oder JSON-Logik.

- Entities sind unveränderliche Dataclasses.
- Der Durchschnitt wird immer berechnet und nicht gespeichert.
- Gerundet wird erst bei der Anzeige.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence, Tuple


class NotenverwaltungError(Exception):
    """Basisklasse für fachliche Fehler."""


class UngueltigeEingabeError(NotenverwaltungError):
    """
    Ungültige Eingabe für eine Abfrage.
    hinweis enthält einen Usage-Text für den Nutzer.
    """

    def __init__(self, meldung: str, hinweis: str = "") -> None:
        super().__init__(meldung)
        self.meldung = meldung
        self.hinweis = hinweis


def berechne_durchschnitt(noten: object) -> float:
    """
    Arithmetisches Mittel der Noten.
    Leere Folge oder keine Liste/Tupel -> 0.0 (kein Fehler).
    """
    if not isinstance(noten, (list, tuple)) or not noten:
        return 0.0
    return sum(noten) / len(noten)


@dataclass(frozen=True, slots=True)
class Schueler:
    """
    Ein Schüler mit Adresse und Noten.
    Namen sind nicht eindeutig. Es gibt keine ID.
    """
    name: str
    adresse: str = ""
    noten: Tuple[float, ...] = ()

    def durchschnitt(self) -> float:
        """Durchschnitt der Noten, ungerundet."""
        return berechne_durchschnitt(self.noten)


@dataclass(frozen=True, slots=True)
class Bestand:
    """
    Alle geladenen Schüler in Originalreihenfolge.
    Wird einmal beim Start gebaut und danach nur gelesen.
    """
    schueler: Tuple[Schueler, ...] = field(default_factory=tuple)

    @classmethod
    def aus_liste(cls, schueler: Sequence[Schueler]) -> "Bestand":
        """Baut einen Bestand aus einer beliebigen Folge."""
        return cls(tuple(schueler))

    def __len__(self) -> int:
        return len(self.schueler)

    def __iter__(self) -> Iterator[Schueler]:
        return iter(self.schueler)

    def __getitem__(self, index: int) -> Schueler:
        return self.schueler[index]

    def __bool__(self) -> bool:
        return bool(self.schueler)
