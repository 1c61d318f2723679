# core/multipart.py
"""
Parser multipart/form-data para subidas de fotos.

✔ Trabaja sobre el body completo en memoria (sin streaming)
✔ Nunca lanza por input malformado: las partes inválidas se descartan
✔ Headers leídos con un tokenizer explícito (sin regex)

Reglas:
- Cada parte vive entre dos ocurrencias consecutivas de "--<boundary>".
- Parte sin separador CRLFCRLF entre headers y body => se descarta.
- Parte final sin delimitador de cierre => se descarta.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


CRLF = b"\r\n"
HEADER_SEPARATOR = b"\r\n\r\n"
DEFAULT_CONTENT_TYPE = "text/plain"


@dataclass(frozen=True)
class MultipartPart:
    name: str
    filename: Optional[str]
    content_type: str
    data: bytes

    def text(self, encoding: str = "utf-8") -> str:
        return self.data.decode(encoding, errors="replace")


# =========================================================
# CONTENT-TYPE
# =========================================================

def extract_boundary(content_type: str | None) -> str | None:
    """
    Extrae el token boundary de un header Content-Type.
    Devuelve None si no viene (o viene vacío).
    """
    for param in (content_type or "").split(";"):
        key, sep, value = param.strip().partition("=")
        if sep and key.strip().lower() == "boundary":
            value = value.strip().strip('"')
            return value or None
    return None


# =========================================================
# HEADERS DE UNA PARTE
# =========================================================

def _disposition_params(value: str) -> dict[str, str]:
    """
    Tokeniza los parámetros de Content-Disposition:
      form-data; name="photo"; filename="x.png"
    Los valores entre comillas pueden contener ';'.
    Si un parámetro se repite gana el primero.
    """
    params: dict[str, str] = {}
    i, n = 0, len(value)

    while i < n:
        while i < n and value[i] in " \t;":
            i += 1

        start = i
        while i < n and value[i] not in "=;":
            i += 1
        key = value[start:i].strip().lower()

        # token suelto (ej: "form-data")
        if i >= n or value[i] == ";":
            continue

        i += 1  # '='
        if i < n and value[i] == '"':
            i += 1
            start = i
            while i < n and value[i] != '"':
                i += 1
            val = value[start:i]
            i += 1  # comilla de cierre
        else:
            start = i
            while i < n and value[i] != ";":
                i += 1
            val = value[start:i].strip()

        if key:
            params.setdefault(key, val)

    return params


def _parse_headers(block: bytes) -> tuple[str, Optional[str], str]:
    name = ""
    filename: Optional[str] = None
    content_type = DEFAULT_CONTENT_TYPE

    for line in block.decode("utf-8", errors="replace").split("\r\n"):
        key, sep, value = line.partition(":")
        if not sep:
            continue

        key = key.strip().lower()
        if key == "content-disposition":
            params = _disposition_params(value)
            name = params.get("name") or ""
            filename = params.get("filename") or None
        elif key == "content-type":
            tokens = value.split()
            if tokens:
                content_type = tokens[0]

    return name, filename, content_type


# =========================================================
# PARSER
# =========================================================

def parse_multipart(body: bytes, boundary: str) -> list[MultipartPart]:
    """
    Divide `body` en partes usando el delimitador "--<boundary>".
    Devuelve lista vacía si hay menos de dos delimitadores.
    """
    parts: list[MultipartPart] = []
    if not body or not boundary:
        return parts

    delimiter = b"--" + boundary.encode("latin-1")
    start = 0

    while True:
        idx = body.find(delimiter, start)
        if idx == -1:
            break

        nxt = body.find(delimiter, idx + len(delimiter))
        if nxt == -1:
            # parte sin cierre
            break

        # salta el CRLF tras el delimitador y el CRLF previo al siguiente
        chunk = body[idx + len(delimiter) + len(CRLF):nxt - len(CRLF)]
        start = nxt

        header_end = chunk.find(HEADER_SEPARATOR)
        if header_end == -1:
            continue

        name, filename, content_type = _parse_headers(chunk[:header_end])
        parts.append(
            MultipartPart(
                name=name,
                filename=filename,
                content_type=content_type,
                data=chunk[header_end + len(HEADER_SEPARATOR):],
            )
        )

    return parts


def find_part(parts: Iterable[MultipartPart], name: str) -> Optional[MultipartPart]:
    """Primera parte con ese field name (o None)."""
    for part in parts:
        if part.name == name:
            return part
    return None
