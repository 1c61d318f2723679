# core/storage.py
"""
Storage de fotos en filesystem.

El PhotoStore es un blob store plano: filename -> bytes bajo un solo
directorio. El filename es la clave que guarda la fila Foto.
"""

from __future__ import annotations

import re
import time
from pathlib import Path
from typing import Callable, Optional

from core.logging_config import logger


_EXT_SAFE_RE = re.compile(r"^\.[A-Za-z0-9]{1,10}$")
_DEFAULT_EXT = ".jpg"

_MEDIA_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
    ".gif": "image/gif",
}


def media_type_for(filename: str) -> str:
    return _MEDIA_TYPES.get(Path(filename).suffix.lower(), "application/octet-stream")


def _ext_from_name(original_name: Optional[str]) -> str:
    ext = Path(original_name or "").suffix
    if not ext or not _EXT_SAFE_RE.match(ext):
        return _DEFAULT_EXT
    return ext


class PhotoStore:
    """
    Directorio de fotos.
    - `clock` devuelve epoch en segundos (inyectable para tests).
    """

    def __init__(self, root: Path, clock: Callable[[], float] = time.time) -> None:
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)
        self._clock = clock

    def path_for(self, filename: str) -> Path:
        # solo basename: nunca salir del directorio
        return self.root / Path(filename).name

    def exists(self, filename: str) -> bool:
        name = Path(filename).name
        return bool(name) and self.path_for(name).is_file()

    def new_filename(self, gare_id: int, original_name: Optional[str]) -> str:
        """
        <epoch-ms>_<gare_id><ext>; si el nombre ya existe en disco,
        avanza el timestamp de a 1 ms hasta encontrar uno libre.
        """
        ext = _ext_from_name(original_name)
        ms = int(self._clock() * 1000)

        filename = f"{ms}_{gare_id}{ext}"
        while self.exists(filename):
            ms += 1
            filename = f"{ms}_{gare_id}{ext}"
        return filename

    def save(self, filename: str, data: bytes) -> Path:
        path = self.path_for(filename)
        with open(path, "wb") as f:
            f.write(data)
        logger.debug("[PHOTOS] blob escrito %s (%s bytes)", path.name, len(data))
        return path

    def delete(self, filename: str) -> bool:
        """
        Borra el blob. Archivo inexistente NO es error (doble delete benigno).
        """
        if not self.exists(filename):
            return False
        try:
            self.path_for(filename).unlink()
        except FileNotFoundError:
            return False
        logger.debug("[PHOTOS] blob eliminado %s", Path(filename).name)
        return True
