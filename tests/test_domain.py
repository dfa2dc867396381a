import dataclasses

import pytest

from notenverwaltung.domain import Bestand, Schueler, berechne_durchschnitt


def test_durchschnitt_ist_summe_durch_anzahl():
    assert berechne_durchschnitt([12, 14, 16]) == 14.0
    assert berechne_durchschnitt((18, 20)) == 19.0
    assert berechne_durchschnitt([12.5, 13]) == pytest.approx(12.75)


def test_durchschnitt_wird_nicht_gerundet():
    assert berechne_durchschnitt([10, 10, 11]) == pytest.approx(31 / 3)


@pytest.mark.parametrize("noten", [[], (), None, "12,14", 15, {"a": 1}])
def test_durchschnitt_leer_oder_keine_folge_ist_null(noten):
    assert berechne_durchschnitt(noten) == 0


def test_schueler_delegiert_durchschnitt(emily, tom):
    assert emily.durchschnitt() == 14.0
    assert tom.durchschnitt() == 19.0
    assert Schueler(name="Leer").durchschnitt() == 0


def test_schueler_ist_unveraenderlich(emily):
    with pytest.raises(dataclasses.FrozenInstanceError):
        emily.name = "Anders"


def test_bestand_verhaelt_sich_wie_folge(bestand, emily, tom):
    assert len(bestand) == 2
    assert list(bestand) == [emily, tom]
    assert bestand[1] is tom
    assert bestand
    assert not Bestand()
