# modules/gares/routes/gares_common.py
from __future__ import annotations

from fastapi import Request

from core.storage import PhotoStore


def get_photo_store(request: Request) -> PhotoStore:
    """
    PhotoStore construido en el lifespan (main.py) y colgado de app.state.
    """
    return request.app.state.photo_store
