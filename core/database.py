# core/database.py
from __future__ import annotations

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base

from core.config import settings


# =========================================================
# ENGINE / SESSION
# =========================================================

DATABASE_URL = settings.DATABASE_URL
IS_SQLITE = DATABASE_URL.startswith("sqlite")

# SQLite: el handler async y el threadpool comparten conexiones
connect_args = {"check_same_thread": False} if IS_SQLITE else {}

engine = create_engine(
    DATABASE_URL,
    connect_args=connect_args,
    future=True,
    pool_pre_ping=True,
)

if IS_SQLITE:
    @event.listens_for(engine, "connect")
    def _sqlite_foreign_keys(dbapi_conn, _record) -> None:
        # SQLite no aplica FKs salvo que se pida por conexión
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    future=True,
)

Base = declarative_base()


# =========================================================
# DEPENDENCY (una sesión por request)
# =========================================================

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """
    Crea las tablas (sin migraciones). Los modelos se importan aquí para
    registrarlos en Base.metadata sin ciclos database <-> models.
    """
    import core.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
