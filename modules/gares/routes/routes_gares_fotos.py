# modules/gares/routes/routes_gares_fotos.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse
from sqlalchemy.orm import Session

from core.database import get_db
from core.logging_config import logger
from core.storage import PhotoStore, media_type_for
from modules.gares.services.services_gares_core import GaresDomainError
from modules.gares.services.services_gares_fotos import (
    eliminar_foto,
    registrar_subida,
)

from .gares_common import get_photo_store

router = APIRouter(tags=["fotos"])


# =========================================================
# ARCHIVO
# =========================================================

@router.get("/photos/{filename}")
async def foto_archivo(
    filename: str,
    store: PhotoStore = Depends(get_photo_store),
):
    if not store.exists(filename):
        raise HTTPException(status_code=404, detail="not found")

    return FileResponse(store.path_for(filename), media_type=media_type_for(filename))


# =========================================================
# SUBIR (multipart crudo)
# =========================================================

@router.post("/api/photos")
async def api_fotos_subir(
    request: Request,
    db: Session = Depends(get_db),
    store: PhotoStore = Depends(get_photo_store),
):
    body = await request.body()

    try:
        foto = registrar_subida(
            db,
            store,
            content_type=request.headers.get("content-type"),
            body=body,
        )
        db.commit()
        return JSONResponse({"ok": True, "filename": foto.filename})

    except GaresDomainError as e:
        db.rollback()
        logger.info("[PHOTOS] subida rechazada: %s", e.message)
        return PlainTextResponse(e.message, status_code=400)

    except Exception as e:
        db.rollback()
        logger.exception("[PHOTOS] error inesperado al subir foto")
        return JSONResponse({"ok": False, "error": str(e)}, status_code=500)


# =========================================================
# ELIMINAR
# =========================================================

@router.delete("/api/photos/{foto_id}")
async def api_fotos_eliminar(
    foto_id: int,
    db: Session = Depends(get_db),
    store: PhotoStore = Depends(get_photo_store),
):
    try:
        eliminar_foto(db, store, foto_id=foto_id)
        db.commit()
        return JSONResponse({"ok": True})

    except Exception as e:
        db.rollback()
        logger.exception("[PHOTOS] error inesperado al eliminar foto id=%s", foto_id)
        return JSONResponse({"ok": False, "error": str(e)}, status_code=500)
