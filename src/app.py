"""Main FastAPI application module.

This module builds the FastAPI application, wires the store into it and
registers all procedure routers.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

import pytz
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import catalog, gamification, landing
from config import (
    API_HOST,
    API_PORT,
    APP_DESCRIPTION,
    APP_TITLE,
    APP_VERSION,
    CORS_ALLOWED_ORIGINS,
)
from core.database import Database
from core.exceptions import StoreError
from core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the application around a store.

    Args:
        database: Store to serve from. Built from ``DATABASE_URL`` if omitted.

    Returns:
        Configured FastAPI application.
    """
    database = database or Database()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database.init_db()
        try:
            yield
        finally:
            database.dispose()

    app = FastAPI(
        title=APP_TITLE,
        description=APP_DESCRIPTION,
        version=APP_VERSION,
        lifespan=lifespan,
    )
    app.state.database = database

    # Configure CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        # Cause is logged by the manager; callers get an opaque failure
        logger.error("Store failure on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    # Register route handlers
    app.include_router(landing.router)
    app.include_router(catalog.router)
    app.include_router(gamification.router)

    @app.get("/rpc/healthcheck", summary="Health check", tags=["Health"])
    def healthcheck() -> dict:
        """Health check endpoint.

        Returns:
            Dictionary with status "ok" and the current UTC time.
        """
        return {"status": "ok", "timestamp": datetime.now(pytz.utc).isoformat()}

    @app.get("/", summary="API root", tags=["Info"])
    def root() -> dict:
        return {
            "name": APP_TITLE,
            "version": APP_VERSION,
            "docs": {
                "swagger": "/docs",
                "redoc": "/redoc",
            },
            "health": "/rpc/healthcheck",
        }

    return app


# Setup logging
setup_logging()

app = create_app()


# --- Startup code for direct execution ---
if __name__ == "__main__":
    import uvicorn

    logger.info("Landing page API listening at http://%s:%s", API_HOST, API_PORT)
    uvicorn.run("app:app", host=API_HOST, port=API_PORT)
