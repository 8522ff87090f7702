# app/main.py
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_exception_handlers
from app.api.routers import beers
from app.core.config import settings
from app.core.logging import setup_logging
from app.core.metrics import export_metrics
from app.middleware import ObservabilityMiddleware

# --- Models registration (necesario para que Alembic los detecte) ---
import app.models.beer  # noqa: F401

setup_logging()

TAGS_METADATA = [
    {"name": "beers", "description": "Alta, consulta, baja y movimientos de stock de cervezas."},
]

app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    description=(
        "API de control de stock de cervezas.\n\n"
        "- **Beers**: alta con nombre único, consulta por nombre, listado y baja.\n"
        "- **Stock**: incremento acotado por `max` y decremento sin pasar de 0."
    ),
    openapi_tags=TAGS_METADATA,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# --- Middlewares ---
app.add_middleware(ObservabilityMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Ajustar en producción para mayor seguridad
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# --- Routers ---
app.include_router(beers.router, prefix=settings.API_V1_STR)


@app.get("/", include_in_schema=False)
def root():
    return {"status": "ok", "docs_url": "/docs", "redoc_url": "/redoc"}


@app.get("/metrics", include_in_schema=False)
def metrics():
    payload, content_type = export_metrics()
    return Response(content=payload, media_type=content_type)
