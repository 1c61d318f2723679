# modules/gares/services/services_gares_vista.py
"""
Vista agregada prestation -> gares -> {scan, products, photos}.

La agrupación es una función pura sobre las cuatro listas de filas, así se
puede probar sin base de datos. `listar_vista` solo se encarga de leerlas
en el orden correcto.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from sqlalchemy.orm import Session

from core.models import Foto, Gare, Producto, ScanPoint
from modules.gares.schemas import FotoOut, ProductoOut


# =========================================================
# SERIALIZACIÓN
# =========================================================

def producto_to_dict(p: Producto) -> dict[str, Any]:
    return ProductoOut.model_validate(p).model_dump()


def foto_to_dict(f: Foto) -> dict[str, Any]:
    # created_at en ISO-8601
    return FotoOut.model_validate(f).model_dump(mode="json")


# =========================================================
# AGRUPACIÓN (pura)
# =========================================================

def agrupar_por_prestation(
    gares: Sequence[Gare],
    scans: Iterable[ScanPoint],
    productos: Iterable[Producto],
    fotos: Iterable[Foto],
) -> list[dict[str, Any]]:
    """
    - `gares` debe venir ordenado por id asc: el orden de las prestations es
      el de primera aparición.
    - `fotos` debe venir ordenado por created_at desc; el orden se conserva
      dentro de cada gare.
    - scan: label del primer ScanPoint de la gare (None si no hay).
    """
    scans = list(scans)
    productos = list(productos)
    fotos = list(fotos)

    prestations: dict[str, dict[str, Any]] = {}

    for g in gares:
        grupo = prestations.setdefault(g.prestation, {"name": g.prestation, "gares": []})

        scan = next((s for s in scans if s.gare_id == g.id), None)

        grupo["gares"].append(
            {
                "id": g.id,
                "name": g.nombre,
                "scan": scan.label if scan is not None else None,
                "products": [producto_to_dict(p) for p in productos if p.gare_id == g.id],
                "photos": [foto_to_dict(f) for f in fotos if f.gare_id == g.id],
            }
        )

    return list(prestations.values())


# =========================================================
# LECTURA
# =========================================================

def listar_vista(db: Session) -> list[dict[str, Any]]:
    gares = db.query(Gare).order_by(Gare.id.asc()).all()
    scans = db.query(ScanPoint).order_by(ScanPoint.id.asc()).all()
    productos = db.query(Producto).order_by(Producto.id.asc()).all()
    fotos = (
        db.query(Foto)
        .order_by(Foto.created_at.desc(), Foto.id.desc())
        .all()
    )
    return agrupar_por_prestation(gares, scans, productos, fotos)
