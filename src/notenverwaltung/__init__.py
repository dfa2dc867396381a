"""
notenverwaltung package

Konsolen-Werkzeug zur Anzeige von Schülerdaten (Name, Adresse, Noten 0..20).

Schichtenarchitektur:
- domain.py: Schueler, Bestand + Durchschnitt
- persistence.py: JSON-Laden mit Prüfung an der Ladegrenze
- service.py: Abfragen (Liste, Suche, Filter, Statistik, Selbsttest)
- view.py: Tabellen-Ausgabe
- controller.py: Befehls-Schleife
- config.py / logger.py: Konfiguration (.env) und Logging
- main.py: Einstiegspunkt
"""

__version__ = "1.0.0"
