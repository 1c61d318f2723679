# modules/gares/schemas.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from modules.gares.services.services_gares_core import GaresDomainError, normalizar_accion


# ----- ALTA DE PRODUCTO (POST /api/products) -----
class ProductoCreate(BaseModel):
    gare_id: int
    name: str
    action: Optional[str] = None   # None / "" => repor

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v_norm = v.strip()
        if not v_norm:
            raise ValueError("El nombre del producto es obligatorio.")
        return v_norm

    @field_validator("action")
    @classmethod
    def validate_action(cls, v: Optional[str]) -> str:
        try:
            return normalizar_accion(v)
        except GaresDomainError as e:
            raise ValueError(e.message) from e


# ----- RESPUESTA DE PRODUCTO -----
class ProductoOut(BaseModel):
    id: int
    gare_id: int
    name: str
    action: str

    model_config = ConfigDict(from_attributes=True)  # permite partir de modelos SQLAlchemy


# ----- RESPUESTA DE FOTO -----
class FotoOut(BaseModel):
    id: int
    gare_id: int
    filename: str
    note: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
