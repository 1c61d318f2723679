from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

from core.logging_config import LOG_FILE, setup_logging
from core.templates import templates


def test_setup_logging_writes_to_rotating_file() -> None:
    setup_logging()

    root = logging.getLogger()
    files = [h for h in root.handlers if isinstance(h, RotatingFileHandler)]

    assert len(files) == 1
    assert files[0].baseFilename == os.path.abspath(str(LOG_FILE))
    assert logging.getLogger("gares").level == logging.DEBUG
    assert logging.getLogger("uvicorn.access").level == logging.WARNING


def test_template_globals() -> None:
    assert templates.env.globals["app_name"] == "GARES"
    assert "app_year" not in templates.env.globals
