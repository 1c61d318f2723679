# modules/gares/routes/routes_gares_api.py
from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.orm import Session

from core.database import get_db
from core.logging_config import logger
from modules.gares.schemas import ProductoCreate
from modules.gares.services.services_gares_core import GaresDomainError
from modules.gares.services.services_gares_productos import (
    crear_producto,
    eliminar_producto,
)
from modules.gares.services.services_gares_vista import listar_vista


router = APIRouter(
    prefix="/api",
    tags=["gares"],
)


# =========================================================
# VISTA COMPLETA
# =========================================================

@router.get("/data")
async def api_data(db: Session = Depends(get_db)):
    return JSONResponse(listar_vista(db))


# =========================================================
# PRODUCTOS
# =========================================================

@router.post("/products")
async def api_productos_crear(
    payload: ProductoCreate,
    db: Session = Depends(get_db),
):
    try:
        crear_producto(
            db,
            gare_id=payload.gare_id,
            name=payload.name,
            action=payload.action,
        )
        db.commit()
        return JSONResponse({"ok": True})

    except GaresDomainError as e:
        db.rollback()
        return PlainTextResponse(e.message, status_code=400)

    except Exception as e:
        db.rollback()
        logger.exception("[PRODUCTS] error inesperado creando producto")
        return JSONResponse({"ok": False, "error": str(e)}, status_code=500)


@router.delete("/products/{producto_id}")
async def api_productos_eliminar(
    producto_id: int,
    db: Session = Depends(get_db),
):
    try:
        eliminar_producto(db, producto_id=producto_id)
        db.commit()
        return JSONResponse({"ok": True})

    except Exception as e:
        db.rollback()
        logger.exception("[PRODUCTS] error inesperado eliminando producto id=%s", producto_id)
        return JSONResponse({"ok": False, "error": str(e)}, status_code=500)
