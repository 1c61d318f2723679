# core/templates.py
from __future__ import annotations

from pathlib import Path

from fastapi.templating import Jinja2Templates


def create_templates(base_dir: Path) -> Jinja2Templates:
    """
    Motor Jinja2 de GARES sobre <base_dir>/templates, con el nombre de la app
    como global.
    """
    templates = Jinja2Templates(directory=str(base_dir / "templates"))
    templates.env.globals["app_name"] = "GARES"
    return templates


BASE_DIR = Path(__file__).resolve().parent.parent
templates = create_templates(BASE_DIR)
