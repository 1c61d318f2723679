# core/services/services_observability.py
"""
Observability / Health – GARES

✔ Health check DB (SELECT 1)
✔ Snapshot de entidades (conteos por tabla)
✔ Logs consistentes
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import text
from sqlalchemy.orm import Session

from core.logging_config import logger
from core.models import Foto, Gare, Producto, ScanPoint


# ============================================================
#  HELPERS INTERNOS
# ============================================================

def _safe_count(fn, label: str) -> int:
    """
    Ejecuta un count. Si falla, retorna -1 y loggea.
    """
    try:
        return int(fn())
    except Exception as exc:
        logger.exception("[HEALTH][COUNT] Error en %s: %s", label, exc)
        return -1


# ============================================================
#  API PÚBLICA PARA ROUTES_HEALTH
# ============================================================

def check_db_connection(db: Session) -> bool:
    """
    Ping mínimo a DB usando la sesión inyectada.
    """
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        logger.exception("[HEALTH][DB] Error en SELECT 1")
        return False


def check_core_entities(db: Session) -> dict[str, Any]:
    return {
        "gares": _safe_count(lambda: db.query(Gare).count(), "Gare.count"),
        "scan_points": _safe_count(lambda: db.query(ScanPoint).count(), "ScanPoint.count"),
        "products": _safe_count(lambda: db.query(Producto).count(), "Producto.count"),
        "photos": _safe_count(lambda: db.query(Foto).count(), "Foto.count"),
    }
