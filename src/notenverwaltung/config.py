"""
Konfiguration

Lädt Umgebungsvariablen aus einer .env-Datei und stellt sie als typisierte Konstanten bereit.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

# .env im aktuellen Arbeitsverzeichnis (oder darüber)
load_dotenv(find_dotenv(usecwd=True))

# Repo-Root: .../src/notenverwaltung/config.py
REPO_ROOT: Path = Path(__file__).resolve().parents[2]

# ── Daten ─────────────────────────────────────────────────
DATEN_PFAD: Path = Path(
    os.getenv("NOTEN_DATEN_PFAD", str(REPO_ROOT / "data" / "schueler.json"))
)

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("NOTEN_LOG_LEVEL", "WARNING").upper()

# ── Notenskala ────────────────────────────────────────────
NOTE_MIN: float = 0.0
NOTE_MAX: float = 20.0
