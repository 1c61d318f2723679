"""
Modelos ORM de GARES

✔ Gares agrupadas por prestation (columna, no tabla)
✔ Scan points, productos y fotos cuelgan de una gare por FK
✔ Timestamps UTC timezone-aware
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    ForeignKey,
    Text,
)
from sqlalchemy.orm import relationship

from core.database import Base
from core.models.enums import ProductoAccion
from core.models.time import utcnow


# =========================================================
# GARES
# =========================================================

class Gare(Base):
    __tablename__ = "gares"

    id = Column(Integer, primary_key=True, autoincrement=True)
    prestation = Column(String, nullable=False, index=True)
    nombre = Column("gare", String, nullable=False)

    scan_points = relationship("ScanPoint", back_populates="gare")
    productos = relationship("Producto", back_populates="gare")
    fotos = relationship("Foto", back_populates="gare")


class ScanPoint(Base):
    __tablename__ = "scan_points"

    id = Column(Integer, primary_key=True, autoincrement=True)
    gare_id = Column(Integer, ForeignKey("gares.id"), nullable=False, index=True)
    label = Column(String, nullable=True)

    gare = relationship("Gare", back_populates="scan_points")


# =========================================================
# PRODUCTOS
# =========================================================

class Producto(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    gare_id = Column(Integer, ForeignKey("gares.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    # La validación repor/tirar vive en services, la columna acepta texto libre
    action = Column(String, nullable=False, default=ProductoAccion.REPOR.value)

    gare = relationship("Gare", back_populates="productos")


# =========================================================
# FOTOS
# =========================================================

class Foto(Base):
    """
    Foto subida para una gare.
    El binario vive en el PhotoStore (filesystem); aquí solo metadata.
    """
    __tablename__ = "photos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    gare_id = Column(Integer, ForeignKey("gares.id"), nullable=False, index=True)
    filename = Column(String, nullable=False)
    note = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    gare = relationship("Gare", back_populates="fotos")


__all__ = [
    "Gare",
    "ScanPoint",
    "Producto",
    "Foto",
    "ProductoAccion",
]
