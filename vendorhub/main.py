"""Vendor Hub API - FastAPI application factory."""


import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vendorhub import __version__
from vendorhub.core.config import settings
from vendorhub.core.exceptions import register_exception_handlers
from vendorhub.db.base import create_tables, engine
from vendorhub.middleware.request_log import RequestLogMiddleware
from vendorhub.schemas.common import HealthResponse

# v1 routers
from vendorhub.routers.v1.vendors import router as vendors_v1_router

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.app_env == "development" else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Starting %s (env=%s, uploads=%s)",
        settings.app_name, settings.app_env, settings.upload_dir,
    )
    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
    if settings.create_tables_on_startup:
        await create_tables()
    try:
        yield
    finally:
        logger.info("Shutting down %s", settings.app_name)
        await engine.dispose()


def create_app() -> FastAPI:
    _configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.app_env == "development" else None,
        redoc_url="/redoc" if settings.app_env == "development" else None,
    )

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Request logging ---
    app.add_middleware(RequestLogMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- v1 API routes (/api/v1/*) ---
    app.include_router(vendors_v1_router, prefix="/api/v1")

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env, version=__version__)

    return app


app = create_app()
