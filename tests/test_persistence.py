import logging

from notenverwaltung.domain import Schueler
from notenverwaltung.persistence import FileStorage, JsonSchuelerRepository, JsonSerializer


def test_lade_gueltige_datei(schreibe_daten):
    pfad = schreibe_daten([
        {"name": "Emily", "address": "Lyon", "notes": [12, 14, 16]},
        {"name": "Tom", "address": "Paris", "notes": [18, 20]},
    ])
    bestand = JsonSchuelerRepository(pfad).lade()
    assert list(bestand) == [
        Schueler("Emily", "Lyon", (12, 14, 16)),
        Schueler("Tom", "Paris", (18, 20)),
    ]


def test_fehlende_datei_ergibt_leeren_bestand(tmp_path, caplog):
    bestand = JsonSchuelerRepository(str(tmp_path / "fehlt.json")).lade()
    assert len(bestand) == 0
    assert "Fehler beim Laden" in caplog.text


def test_kaputtes_json_ergibt_leeren_bestand(schreibe_daten, caplog):
    bestand = JsonSchuelerRepository(schreibe_daten("[{name: ")).lade()
    assert not bestand
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_kein_array_ergibt_leeren_bestand(schreibe_daten, caplog):
    bestand = JsonSchuelerRepository(schreibe_daten({"name": "Tom"})).lade()
    assert not bestand
    assert "JSON-Array erwartet" in caplog.text


def test_ungueltige_eintraege_werden_uebersprungen(schreibe_daten, caplog):
    pfad = schreibe_daten([
        "kein objekt",
        {"address": "ohne Namen", "notes": [10]},
        {"name": "   ", "notes": [10]},
        {"name": "Zu hoch", "notes": [12, 25]},
        {"name": "Negativ", "notes": [-1]},
        {"name": "Text", "notes": ["12"]},
        {"name": "Bool", "notes": [True]},
        {"name": "Gut", "address": "Nantes", "notes": [10, 20]},
    ])
    bestand = JsonSchuelerRepository(pfad).lade()
    assert [s.name for s in bestand] == ["Gut"]
    assert caplog.text.count("übersprungen") == 7


def test_adresse_und_noten_werden_ergaenzt(schreibe_daten):
    pfad = schreibe_daten([
        {"name": "Ohne Alles"},
        {"name": "Zahl als Adresse", "address": 42, "notes": None},
        {"name": "Noten kein Array", "address": None, "notes": "12, 14"},
        {"name": "Leere Noten", "notes": []},
    ])
    bestand = JsonSchuelerRepository(pfad).lade()
    assert [s.adresse for s in bestand] == ["", "42", "", ""]
    assert all(s.noten == () for s in bestand)
    assert all(s.durchschnitt() == 0 for s in bestand)


def test_reihenfolge_bleibt_erhalten(schreibe_daten):
    namen = ["Zoe", "Anna", "Max", "Anna"]
    pfad = schreibe_daten([{"name": n, "notes": [10]} for n in namen])
    assert [s.name for s in JsonSchuelerRepository(pfad).lade()] == namen


def test_nan_wird_abgelehnt():
    schueler = JsonSerializer().from_json('[{"name": "X", "notes": [NaN]}, {"name": "Y", "notes": [1.5]}]')
    assert [s.name for s in schueler] == ["Y"]


def test_storage_und_serializer_sind_austauschbar():
    class FakeStorage(FileStorage):
        def lese_text(self, pfad):
            assert pfad == "egal.json"
            return '[{"name": "Emily", "address": "Lyon", "notes": [14]}]'

    bestand = JsonSchuelerRepository("egal.json", storage=FakeStorage()).lade()
    assert bestand[0].name == "Emily"
    assert bestand[0].durchschnitt() == 14


def test_riesige_ganzzahl_als_note_wird_uebersprungen(schreibe_daten, caplog):
    pfad = schreibe_daten('[{"name": "X", "notes": [' + "1" * 400 + ']}, {"name": "Y", "notes": [10]}]')
    bestand = JsonSchuelerRepository(pfad).lade()
    assert [s.name for s in bestand] == ["Y"]
    assert "keine endliche Zahl" in caplog.text


def test_tief_verschachteltes_json_ergibt_leeren_bestand(schreibe_daten, caplog):
    pfad = schreibe_daten("[" * 100000 + "]" * 100000)
    bestand = JsonSchuelerRepository(pfad).lade()
    assert not bestand
    assert "Fehler beim Laden" in caplog.text
