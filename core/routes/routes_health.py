# core/routes/routes_health.py
"""
Health routes – GARES

✔ Health básico (rápido y seguro)
✔ Respuestas JSON consistentes
✔ Sin exponer datos sensibles
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from core.database import get_db
from core.logging_config import logger
from core.models.time import utcnow
from core.services.services_observability import (
    check_core_entities,
    check_db_connection,
)


router = APIRouter(tags=["health"])


@router.get("/health")
async def health_root(db: Session = Depends(get_db)):
    start = utcnow()

    try:
        db_ok = check_db_connection(db)

        ts_dt = utcnow()
        elapsed_ms = (ts_dt - start).total_seconds() * 1000

        payload: dict[str, Any] = {
            "status": "ok" if db_ok else "degraded",
            "timestamp_utc": ts_dt.isoformat(),
            "elapsed_ms": round(elapsed_ms, 2),
            "db": {"ok": db_ok},
        }

        if db_ok:
            entities = check_core_entities(db)
            payload["entities"] = entities
            logger.info("[HEALTH] status=%s db_ok=%s entities=%s", payload["status"], db_ok, entities)
        else:
            logger.warning("[HEALTH] status=degraded db_ok=false")

        return JSONResponse(status_code=200, content=payload)

    except Exception as exc:
        logger.exception("[HEALTH] error")
        return JSONResponse(
            status_code=500,
            content={
                "status": "error",
                "timestamp_utc": utcnow().isoformat(),
                "error": str(exc),
            },
        )
