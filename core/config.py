# core/config.py
"""
Configuración central de GARES.

✔ Pydantic Settings v2
✔ Multi-entorno (development / staging / production)
✔ Rutas de fotos y logs configurables por entorno
"""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # ============================
    #   Pydantic settings
    # ============================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # ============================
    #   ENTORNO
    # ============================
    APP_ENV: Literal["development", "staging", "production"] = "development"
    APP_DEBUG: bool = True  # Se fuerza automáticamente según entorno

    # ============================
    #   BASE DE DATOS
    # ============================
    DATABASE_URL: str = "sqlite:///./gares.db"

    # ============================
    #   STORAGE / LOGS
    # ============================
    PHOTOS_DIR: Path = BASE_DIR / "photos"
    LOG_DIR: Path = BASE_DIR / "logs"

    # ============================
    #   SERVIDOR
    # ============================
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Seed inicial de gares + scan points (solo si la tabla está vacía)
    SEED_ON_STARTUP: bool = True

    def model_post_init(self, __context) -> None:
        """
        Ajustes automáticos por entorno.
        """
        env = (self.APP_ENV or "development").lower()

        if env in ("production", "staging"):
            object.__setattr__(self, "APP_DEBUG", False)
        else:
            object.__setattr__(self, "APP_DEBUG", True)


# ============================
#   INSTANCIA GLOBAL
# ============================
settings = Settings()
