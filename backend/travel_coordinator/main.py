"""
Point d'entrée principal de l'API Travel Coordinator.
Démarrage : uvicorn travel_coordinator.main:app --reload
(depuis le dossier backend/, ou après pip install -e .)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import travel_coordinator.models  # noqa: F401  enregistre les modèles dans Base.metadata avant les routers
from travel_coordinator.config import settings
from travel_coordinator.logging_config import setup_logging
from travel_coordinator.routers import trips

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie de l'application : configure les logs au démarrage."""
    setup_logging(settings.LOG_LEVEL)
    logger.info("API démarrée (env=%s)", settings.ENV)
    yield
    logger.info("API arrêtée.")


app = FastAPI(
    title="Travel Coordinator API",
    description="Calendrier de voyages partagé : voyages, dates et voyageurs",
    version=VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# CORS: origines autorisées par regex (localhost en développement).
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=settings.CORS_ORIGIN_REGEX,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept"],
)


app.include_router(trips.router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées pour garantir que la réponse 500
    passe bien par CORSMiddleware (qui injecte les headers CORS).
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Une erreur interne est survenue."},
    )


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "Travel Coordinator API", "version": VERSION}
