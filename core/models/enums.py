from __future__ import annotations
import enum

class ProductoAccion(str, enum.Enum):
    REPOR = "repor"
    TIRAR = "tirar"
