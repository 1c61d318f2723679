from __future__ import annotations

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from core.models import Foto
from modules.gares.services.services_gares_vista import agrupar_por_prestation, listar_vista


T0 = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)


def _gare(id, prestation, nombre):
    return SimpleNamespace(id=id, prestation=prestation, nombre=nombre)


def _scan(id, gare_id, label):
    return SimpleNamespace(id=id, gare_id=gare_id, label=label)


def _prod(id, gare_id, name, action="repor"):
    return SimpleNamespace(id=id, gare_id=gare_id, name=name, action=action)


def _foto(id, gare_id, minutes, note=None):
    return SimpleNamespace(
        id=id,
        gare_id=gare_id,
        filename=f"{id}_{gare_id}.jpg",
        note=note,
        created_at=T0 + timedelta(minutes=minutes),
    )


def test_groups_by_prestation_in_first_appearance_order() -> None:
    gares = [
        _gare(1, "FOD", "G33"),
        _gare(2, "MIP", "Pulse 1"),
        _gare(3, "FOD", "G44"),
        _gare(4, "ESAT", "Daher"),
    ]

    vista = agrupar_por_prestation(gares, [], [], [])

    assert [p["name"] for p in vista] == ["FOD", "MIP", "ESAT"]
    assert [g["id"] for g in vista[0]["gares"]] == [1, 3]
    all_ids = [g["id"] for p in vista for g in p["gares"]]
    assert sorted(all_ids) == [1, 2, 3, 4]


def test_empty_station_has_empty_lists_and_null_scan() -> None:
    vista = agrupar_por_prestation([_gare(7, "Rail CLS", "Polaris 4")], [], [], [])

    gare = vista[0]["gares"][0]
    assert gare == {
        "id": 7,
        "name": "Polaris 4",
        "scan": None,
        "products": [],
        "photos": [],
    }


def test_scan_takes_first_matching_row() -> None:
    scans = [
        _scan(1, 2, "other"),
        _scan(2, 1, "Ponto de scan A"),
        _scan(3, 1, "Ponto de scan A bis"),
    ]

    vista = agrupar_por_prestation([_gare(1, "Obturateur", "A")], scans, [], [])

    assert vista[0]["gares"][0]["scan"] == "Ponto de scan A"


def test_products_and_photos_attached_to_their_station() -> None:
    gares = [_gare(1, "MIP", "Pulse 1"), _gare(2, "MIP", "Pulse 2")]
    productos = [_prod(10, 1, "Cola"), _prod(11, 2, "Tape", "tirar"), _prod(12, 1, "Gloves")]
    fotos = [_foto(30, 2, 5, note="cracked"), _foto(31, 1, 3), _foto(32, 2, 1)]

    vista = agrupar_por_prestation(gares, [], productos, fotos)
    g1, g2 = vista[0]["gares"]

    assert [p["name"] for p in g1["products"]] == ["Cola", "Gloves"]
    assert g2["products"] == [{"id": 11, "gare_id": 2, "name": "Tape", "action": "tirar"}]
    assert [f["id"] for f in g1["photos"]] == [31]
    assert [f["id"] for f in g2["photos"]] == [30, 32]
    assert g2["photos"][0]["note"] == "cracked"
    assert g2["photos"][0]["created_at"].startswith("2026-10-01T12:05:00")


def test_listar_vista_sorts_photos_newest_first(api, db) -> None:
    for minutes, note in ((1, "old"), (30, "newest"), (10, "middle")):
        db.add(Foto(gare_id=2, filename=f"vista_{minutes}.jpg", note=note, created_at=T0 + timedelta(minutes=minutes)))
    db.commit()

    vista = listar_vista(db)
    gare = next(g for p in vista for g in p["gares"] if g["id"] == 2)

    assert [f["note"] for f in gare["photos"]] == ["newest", "middle", "old"]
