"""
UI layer für die Console

Diese View zeigt die Ergebnisse in der Konsole.
- Tabellen formatieren und ausgeben
- Statistik und Hilfe anzeigen
- Eingaben lesen
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .domain import Schueler
from .service import Pruefergebnis, Statistik


class ConsoleView:
    """
    View für die Konsole.

    Spalten der Tabelle: Nr., Name, Adresse, Noten, Durchschnitt.
    """

    SPALTEN = ("Nr.", "Name", "Adresse", "Noten", "Durchschnitt")

    def render_tabelle(self, titel: str, schueler: Sequence[Schueler], leer_text: str) -> None:
        """
        Zeigt eine Ergebnisliste als Tabelle.
        Leeres Ergebnis -> leer_text statt Tabelle.
        """
        print()
        print(titel)
        print("=" * 60)

        if not schueler:
            print(leer_text)
            return

        print(self._build_tabelle(schueler))

    def render_statistik(self, stat: Optional[Statistik]) -> None:
        """Zeigt die allgemeine Statistik."""
        print()
        print("STATISTIK")
        print("=" * 40)

        if stat is None:
            print("Keine Daten für die Statistik vorhanden.")
            return

        print(f"Anzahl Schüler:        {stat.anzahl}")
        print(f"Gesamtdurchschnitt:    {self.fmt_durchschnitt(stat.gesamtdurchschnitt)}")
        print(f"Bester Durchschnitt:   {self.fmt_durchschnitt(stat.bester_durchschnitt)}")
        print(f"Schwächster Durchschnitt: {self.fmt_durchschnitt(stat.schwaechster_durchschnitt)}")

        print()
        print("Beste Schüler:")
        for s in stat.beste:
            print(f"  + {s.name} - {self.fmt_durchschnitt(s.durchschnitt())}")

        print()
        print("Schüler mit dem schwächsten Durchschnitt:")
        for s in stat.schwaechste:
            print(f"  - {s.name} - {self.fmt_durchschnitt(s.durchschnitt())}")

    def render_selbsttest(self, ergebnisse: Sequence[Pruefergebnis]) -> None:
        """Zeigt die Ergebnisse des Selbsttests."""
        print()
        print("SELBSTTEST FEHLERBEHANDLUNG")
        print("=" * 40)
        for i, e in enumerate(ergebnisse, 1):
            mark = "✓" if e.ok else "X"
            print(f"{mark} Test {i}: {e.beschreibung} -> {e.ergebnis}")

    def render_hilfe(self) -> None:
        """Zeigt die verfügbaren Befehle."""
        print()
        print("SCHÜLERVERWALTUNG - VERFÜGBARE BEFEHLE")
        print("=" * 70)
        print("list                    - Alle Schüler anzeigen")
        print("search <name>           - Schüler nach Namen suchen")
        print("filter <durchschnitt>   - Schüler mit höherem Durchschnitt anzeigen")
        print("stats                   - Allgemeine Statistik anzeigen")
        print("test                    - Fehlerbehandlung prüfen")
        print("help                    - Diese Hilfe anzeigen")
        print("quit / exit             - Programm beenden")
        print("=" * 70)
        print("Beispiele:")
        print("   search EMILY")
        print("   filter 15")
        print("   list")
        print("=" * 70)

    def prompt(self, frage: str) -> str:
        """
        Fragt den Nutzer nach Eingabe.
        """
        return input(frage)

    def show_message(self, text: str) -> None:
        """
        Gibt eine Nachricht aus.
        """
        print(text)

    def _build_tabelle(self, schueler: Sequence[Schueler]) -> str:
        """
        Baut die Tabelle als Text.
        Die Spaltenbreite richtet sich nach dem längsten Wert.
        """
        zeilen: List[Sequence[str]] = [self.SPALTEN]
        for i, s in enumerate(schueler, 1):
            zeilen.append((
                str(i),
                s.name,
                s.adresse,
                self.fmt_noten(s.noten),
                self.fmt_durchschnitt(s.durchschnitt()),
            ))

        breiten = [max(len(z[i]) for z in zeilen) for i in range(len(self.SPALTEN))]

        def _zeile(werte: Sequence[str]) -> str:
            return "│ " + " │ ".join(w.ljust(b) for w, b in zip(werte, breiten)) + " │"

        sep = "├─" + "─┼─".join("─" * b for b in breiten) + "─┤"
        oben = "┌─" + "─┬─".join("─" * b for b in breiten) + "─┐"
        unten = "└─" + "─┴─".join("─" * b for b in breiten) + "─┘"

        out = [oben, _zeile(zeilen[0]), sep]
        out.extend(_zeile(z) for z in zeilen[1:])
        out.append(unten)
        return "\n".join(out)

    @staticmethod
    def fmt_noten(noten: Sequence[float]) -> str:
        """
        Formatiert die Noten als [a, b, c].
        Ganze Zahlen ohne Nachkommastellen.
        """
        return "[" + ", ".join(f"{n:g}" for n in noten) + "]"

    @staticmethod
    def fmt_durchschnitt(wert: float) -> str:
        """Zwei Nachkommastellen mit Suffix /20."""
        return f"{wert:.2f}/20"
