# core/bootstrap.py
from __future__ import annotations

from sqlalchemy.orm import Session

from core.database import SessionLocal
from core.logging_config import logger
from core.models import Gare, ScanPoint


# Prestation -> gares (orden de inserción = orden de ids)
SEED_DATA: dict[str, list[str]] = {
    "MIP": ["Pulse 1", "Pulse 2", "PAT"],
    "Kickboard": ["Polaris 3", "PAT"],
    "Avis 05/09": [
        "G44",
        "Pulse 1",
        "Pulse 2",
        "Polaris 3 Avis 09",
        "Polaris 3 Avis 05",
        "Polaris 2 table d'arrivée",
    ],
    "ESAT": ["ESAT", "Daher"],
    # "Salsa" dos veces: son dos gares distintas (el id es la clave)
    "Plinthes": ["Pulse 1", "Pulse 2", "Polaris 3", "Polaris 1 5éme ligne", "Salsa", "Salsa", "ISS"],
    "Obturateur": ["B", "A", "5éme", "6éme", "G33"],
    "FOD": ["G33", "G44", "G73", "Avion", "Pulse 1", "Pulse 2"],
    "Rail CLS": ["Polaris 4", "G33"],
}

SCAN_LABEL_PREFIX = "Ponto de scan "


def seed_gares(db: Session, data: dict[str, list[str]] | None = None) -> int:
    """
    Inserta gares + scan point SOLO si la tabla gares está vacía.
    Idempotente: devuelve cuántas gares se crearon (0 si ya había datos).
    """
    if db.query(Gare.id).first() is not None:
        logger.info("[BOOTSTRAP] gares ya existen, seed omitido")
        return 0

    creadas = 0
    for prestation, nombres in (data or SEED_DATA).items():
        for nombre in nombres:
            gare = Gare(prestation=prestation, nombre=nombre)
            db.add(gare)
            db.flush()  # genera ID sin cerrar transacción
            db.add(ScanPoint(gare_id=gare.id, label=SCAN_LABEL_PREFIX + nombre))
            creadas += 1

    db.commit()
    logger.info("[BOOTSTRAP] seed creado gares=%s", creadas)
    return creadas


def ensure_seed_data() -> None:
    db = SessionLocal()
    try:
        seed_gares(db)
    except Exception as exc:
        db.rollback()
        logger.exception("[BOOTSTRAP] error creando seed: %s", exc)
        raise
    finally:
        db.close()
