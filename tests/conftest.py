import json

import pytest

from notenverwaltung.domain import Bestand, Schueler


@pytest.fixture
def emily():
    return Schueler(name="Emily", adresse="12 rue des Lilas", noten=(12, 14, 16))


@pytest.fixture
def tom():
    return Schueler(name="Tom", adresse="3 avenue Foch", noten=(18, 20))


@pytest.fixture
def bestand(emily, tom):
    return Bestand.aus_liste([emily, tom])


@pytest.fixture
def schreibe_daten(tmp_path):
    """Schreibt Inhalt in eine Datei und liefert den Pfad als Text."""
    def _schreibe(inhalt, name="schueler.json"):
        pfad = tmp_path / name
        if not isinstance(inhalt, str):
            inhalt = json.dumps(inhalt)
        pfad.write_text(inhalt, encoding="utf-8")
        return str(pfad)
    return _schreibe
