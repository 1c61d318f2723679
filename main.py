# main.py
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from fastapi.responses import HTMLResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.bootstrap import ensure_seed_data
from core.config import settings
from core.database import init_db
from core.logging_config import setup_logging, logger
from core.storage import PhotoStore
from core.templates import templates

# Routers
from core.routes import routes_health
from modules.gares.routes.routes_gares_api import router as gares_api_router
from modules.gares.routes.routes_gares_fotos import router as gares_fotos_router


BASE_DIR = Path(__file__).resolve().parent


# ============================
#   APP, STATIC, LIFESPAN
# ============================

@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()

    if settings.SEED_ON_STARTUP:
        ensure_seed_data()

    app.state.photo_store = PhotoStore(settings.PHOTOS_DIR)
    logger.info("[STARTUP] fotos en %s", settings.PHOTOS_DIR)

    yield


setup_logging()

app = FastAPI(
    title="GARES",
    version="1.0.0",
    debug=settings.APP_DEBUG,
    lifespan=lifespan,
)

logger.info("GARES iniciado")


# ============================
#   ERRORES -> TEXTO PLANO
# ============================

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    msgs = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err.get("loc", ()) if x != "body")
        msgs.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    logger.info("[HTTP] 400 %s %s %s", request.method, request.url.path, msgs)
    return PlainTextResponse("; ".join(msgs) or "bad request", status_code=400)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # el router responde 404 también ante verbo incorrecto
    if exc.status_code == 405:
        return PlainTextResponse("Not found", status_code=404)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


# ============================
#   RUTA PÚBLICA: UI
# ============================

@app.get("/", response_class=HTMLResponse)
async def index_page(request: Request):
    return templates.TemplateResponse(request, "index.html", {})


# ============================
#   ROUTERS + STATIC
# ============================

app.include_router(routes_health.router)
app.include_router(gares_api_router)
app.include_router(gares_fotos_router)

app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")


# Cualquier método/ruta sin match (incluye verbo incorrecto sobre ruta conocida)
@app.api_route(
    "/{path:path}",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
async def not_found(path: str):
    return PlainTextResponse("Not found", status_code=404)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.APP_DEBUG,
    )
