# modules/gares/services/services_gares_fotos.py
from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from core.logging_config import logger
from core.models import Foto
from core.models.time import utcnow
from core.multipart import extract_boundary, find_part, parse_multipart
from core.storage import PhotoStore

from .services_gares_core import GaresDomainError, id_en_rango, obtener_gare


# =========================================================
# CREAR
# =========================================================

def crear_foto(
    db: Session,
    store: PhotoStore,
    *,
    gare_id: int,
    original_name: Optional[str],
    data: bytes,
    note: Optional[str] = None,
) -> Foto:
    """
    Escribe el blob y luego la fila.
    Sin atomicidad entre ambos pasos: un fallo entre medio deja un blob huérfano.
    """
    obtener_gare(db, gare_id)

    filename = store.new_filename(gare_id, original_name)
    store.save(filename, data)

    foto = Foto(
        gare_id=gare_id,
        filename=filename,
        note=(note or "").strip() or None,
        created_at=utcnow(),
    )
    db.add(foto)
    db.flush()

    logger.info("[PHOTOS] subida id=%s gare_id=%s filename=%s", foto.id, gare_id, filename)
    return foto


def registrar_subida(
    db: Session,
    store: PhotoStore,
    *,
    content_type: str | None,
    body: bytes,
) -> Foto:
    """
    Flujo completo de POST /api/photos sobre el body crudo:
    boundary -> partes -> photo / gare_id / note -> crear_foto.
    """
    boundary = extract_boundary(content_type)
    if not boundary:
        raise GaresDomainError("no boundary")

    parts = parse_multipart(body, boundary)
    file_part = find_part(parts, "photo")
    gare_part = find_part(parts, "gare_id")
    note_part = find_part(parts, "note")

    if file_part is None or gare_part is None:
        raise GaresDomainError("missing")

    raw_gare_id = gare_part.text().strip()
    try:
        gare_id = int(raw_gare_id)
    except ValueError:
        raise GaresDomainError(f"gare_id inválido: '{raw_gare_id}'")

    return crear_foto(
        db,
        store,
        gare_id=gare_id,
        original_name=file_part.filename,
        data=file_part.data,
        note=note_part.text() if note_part is not None else None,
    )


# =========================================================
# ELIMINAR
# =========================================================

def eliminar_foto(db: Session, store: PhotoStore, *, foto_id: int) -> bool:
    """
    Borra blob (si existe) y fila. Foto inexistente => False, no es error.
    """
    if not id_en_rango(foto_id):
        logger.info("[PHOTOS] delete id=%s fuera de rango", foto_id)
        return False

    foto = db.query(Foto).filter(Foto.id == foto_id).first()
    if foto is None:
        logger.info("[PHOTOS] delete id=%s inexistente", foto_id)
        return False

    if not store.delete(foto.filename):
        logger.warning("[PHOTOS] blob ausente para id=%s filename=%s", foto_id, foto.filename)

    db.delete(foto)
    db.flush()
    logger.info("[PHOTOS] eliminada id=%s", foto_id)
    return True
