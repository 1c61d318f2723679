# core/logging_config.py
"""
Logging de GARES: consola + archivo rotativo en settings.LOG_DIR.
DEBUG en development, INFO en el resto.
"""

from __future__ import annotations

import logging
from logging.config import dictConfig

from core.config import settings


LOG_DIR = settings.LOG_DIR
LOG_DIR.mkdir(parents=True, exist_ok=True)

LOG_FILE = LOG_DIR / "gares.log"

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging() -> None:
    log_level = "DEBUG" if settings.APP_DEBUG else "INFO"

    logging.captureWarnings(True)

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": _FORMAT},
                # archivo: con módulo:línea para rastrear [PHOTOS]/[PRODUCTS]
                "verbose": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | "
                    "%(module)s:%(lineno)d | %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "level": log_level,
                },
                "file": {
                    "class": "logging.handlers.RotatingFileHandler",
                    "formatter": "verbose",
                    "filename": str(LOG_FILE),
                    "maxBytes": 5 * 1024 * 1024,
                    "backupCount": 10,
                    "encoding": "utf-8",
                    "level": log_level,
                },
            },
            "root": {"level": log_level, "handlers": ["console", "file"]},
            "loggers": {
                "gares": {"level": log_level},
                "uvicorn.access": {"level": "WARNING"},
                # SQL solo visible en development
                "sqlalchemy.engine": {"level": "INFO" if settings.APP_DEBUG else "WARNING"},
            },
        }
    )


logger = logging.getLogger("gares")
