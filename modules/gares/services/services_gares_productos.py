# modules/gares/services/services_gares_productos.py
from __future__ import annotations

from sqlalchemy.orm import Session

from core.logging_config import logger
from core.models import Producto

from .services_gares_core import GaresDomainError, id_en_rango, normalizar_accion, obtener_gare


def crear_producto(
    db: Session,
    *,
    gare_id: int,
    name: str,
    action: str | None = None,
) -> Producto:
    nombre = (name or "").strip()
    if not nombre:
        raise GaresDomainError("El nombre del producto es obligatorio.")

    gare = obtener_gare(db, int(gare_id))

    producto = Producto(
        gare_id=gare.id,
        name=nombre,
        action=normalizar_accion(action),
    )
    db.add(producto)
    db.flush()

    logger.info(
        "[PRODUCTS] creado id=%s gare_id=%s action=%s",
        producto.id,
        producto.gare_id,
        producto.action,
    )
    return producto


def eliminar_producto(db: Session, *, producto_id: int) -> bool:
    """
    Borra el producto. Devuelve False si no existía (no es error).
    """
    if not id_en_rango(producto_id):
        logger.info("[PRODUCTS] delete id=%s fuera de rango", producto_id)
        return False

    producto = db.query(Producto).filter(Producto.id == producto_id).first()
    if producto is None:
        logger.info("[PRODUCTS] delete id=%s inexistente", producto_id)
        return False

    db.delete(producto)
    db.flush()
    logger.info("[PRODUCTS] eliminado id=%s", producto_id)
    return True
