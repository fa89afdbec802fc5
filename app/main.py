from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import get_settings
from app.core.container import ApplicationContainer, build_container
from app.core.logging import configure_logging, request_id_middleware
from app.transactions.router import router as transactions_router

logger = logging.getLogger(__name__)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report unparseable bodies as 400 with an error message."""
    logger.warning(f"Invalid request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "invalid request body"},
    )


def create_app(container: Optional[ApplicationContainer] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        container: Prebuilt collaborators. When omitted they are built
            from the settings during startup.
    """
    settings = container.settings if container else get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("=" * 70)
        logger.info("🚀 Starting Transaction Relay...")
        logger.info(f"Environment: {settings.ENV}")
        logger.info(f"Notifications: {settings.NOTIFICATIONS_MODE}")
        logger.info("=" * 70)

        app.state.container = container or build_container(settings)
        logger.info(
            f"✓ Startup complete - store backend: "
            f"{app.state.container.store.get_backend_name()}"
        )

        yield

        logger.info("🛑 Transaction Relay shut down")

    app = FastAPI(title="Transaction Relay", version="0.1.0", lifespan=lifespan)
    app.middleware("http")(request_id_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(transactions_router)

    @app.get("/")
    def health_check():
        logger.debug("Health check endpoint called")
        return {"status": "ok"}

    @app.get("/healthz")
    def healthz():
        return {"status": "healthy", "env": settings.ENV}

    return app


_settings = get_settings()
configure_logging(_settings.ENV, _settings.DEBUG)

app = create_app()
