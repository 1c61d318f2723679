# modules/gares/services/services_gares_core.py
"""
Core de dominio – Gares

- Errores de dominio tipados (no HTTP aquí)
- Acciones de producto canon (repor / tirar)
"""

from __future__ import annotations

from typing import Final

from sqlalchemy.orm import Session

from core.models import Gare
from core.models.enums import ProductoAccion


# =========================================================
# EXCEPCIONES DE DOMINIO
# =========================================================

class GaresDomainError(Exception):
    """Error de dominio para el módulo Gares."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message


# =========================================================
# ACCIONES (canon)
# =========================================================

ACCION_DEFAULT: Final[str] = ProductoAccion.REPOR.value
ACCIONES_VALIDAS = {e.value for e in ProductoAccion}

# Rango de INTEGER en SQLite (64 bits con signo)
ID_MIN: Final[int] = -(2**63)
ID_MAX: Final[int] = 2**63 - 1


def id_en_rango(value: int) -> bool:
    return ID_MIN <= value <= ID_MAX


def normalizar_accion(accion: str | None) -> str:
    raw = (accion or "").strip()
    if not raw:
        return ACCION_DEFAULT
    low = raw.lower()
    if low not in ACCIONES_VALIDAS:
        raise GaresDomainError(f"Acción inválida: '{accion}'. Debe ser repor o tirar.")
    return low


# =========================================================
# HELPERS DE DOMINIO
# =========================================================

def obtener_gare(db: Session, gare_id: int) -> Gare:
    """
    Devuelve la gare; si no existe lanza GaresDomainError.
    """
    if not id_en_rango(gare_id):
        raise GaresDomainError(f"Gare no encontrada: {gare_id}")

    gare = db.query(Gare).filter(Gare.id == gare_id).first()
    if gare is None:
        raise GaresDomainError(f"Gare no encontrada: {gare_id}")
    return gare
