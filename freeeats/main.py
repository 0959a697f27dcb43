from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from freeeats import __version__
from freeeats.api.v1.router import router as api_v1_router
from freeeats.config.settings import settings
from freeeats.core.logging import get_logger, setup_logging
from freeeats.core.middleware import register_exception_handlers, register_middlewares
from freeeats.db.init_db import init_db

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Configures title, version, debug mode from Settings.
    - Registers CORS, core middleware, and exception handlers.
    - Includes the versioned API router under /api/v1.
    """
    setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Credentials cannot be combined with a wildcard origin
    wildcard = not settings.CORS_ORIGINS or "*" in settings.CORS_ORIGINS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if wildcard else settings.CORS_ORIGINS,
        allow_credentials=not wildcard,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Process-Time"],
    )

    register_middlewares(app)
    register_exception_handlers(app)

    app.include_router(api_v1_router, prefix=settings.API_V1_STR)

    @app.get("/health", tags=["Health"])
    def health() -> dict:
        return {"status": "ok", "version": __version__, "environment": settings.ENVIRONMENT}

    # Development convenience; production schemas are managed separately
    @app.on_event("startup")
    async def on_startup() -> None:
        if not settings.is_production():
            init_db(seed=settings.SEED_CAMPUSES_ON_STARTUP)
            logger.info("Database initialized")

    return app


app = create_app()
