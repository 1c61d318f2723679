from __future__ import annotations

import os
import tempfile
from pathlib import Path

# Entorno aislado ANTES de importar la app (settings se lee al importar)
_TMP_ROOT = Path(tempfile.mkdtemp(prefix="gares-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{(_TMP_ROOT / 'gares.db').as_posix()}"
os.environ["PHOTOS_DIR"] = str(_TMP_ROOT / "photos")
os.environ["LOG_DIR"] = str(_TMP_ROOT / "logs")
os.environ["SEED_ON_STARTUP"] = "true"

import pytest
from fastapi.testclient import TestClient

from core.database import SessionLocal
from core.models import Foto, Producto
from main import app


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def photo_store(client):
    return app.state.photo_store


@pytest.fixture
def api(client, photo_store):
    """
    Cliente con productos/fotos vacíos (las gares seed se mantienen).
    """
    db = SessionLocal()
    try:
        db.query(Producto).delete()
        db.query(Foto).delete()
        db.commit()
    finally:
        db.close()

    for path in photo_store.root.iterdir():
        if path.is_file():
            path.unlink()

    return client


@pytest.fixture
def db(client):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
