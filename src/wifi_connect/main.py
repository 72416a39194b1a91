# src/wifi_connect/main.py
"""Main entry point for the WiFi Connect application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from wifi_connect.api import (
    admin_router,
    connections_router,
    statistics_router,
    system_router,
)
from wifi_connect.api.dependencies import failure_response
from wifi_connect.core.settings import settings
from wifi_connect.db.session import create_tables, engine

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Install a root handler at the configured level."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


# Initialize FastAPI app
app = FastAPI(
    title="WiFi Connect API",
    description="Simulated WiFi onboarding with connection statistics",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(connections_router, prefix="/api")
app.include_router(statistics_router, prefix="/api")
app.include_router(admin_router, prefix="/api")
app.include_router(system_router, prefix="/api")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies with the generic failure contract."""
    logger.warning("Invalid request to %s: %s", request.url.path, exc.errors())
    return failure_response("Invalid request")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler so callers never see a traceback."""
    logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
    return failure_response("Internal server error")


@app.on_event("startup")
async def on_startup() -> None:
    configure_logging()
    if settings.auto_create_tables:
        create_tables()
    logger.info("WiFi Connect server starting")
    logger.info("WiFi network: %s", settings.wifi_ssid)
    logger.info("Security: %s", settings.wifi_security)


@app.on_event("shutdown")
async def on_shutdown() -> None:
    engine.dispose()
    logger.info("Database connection closed")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Simulated WiFi onboarding with connection statistics",
        "network": settings.wifi_ssid,
        "docs": "/docs",
        "redoc": "/redoc",
    }


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run("wifi_connect.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()
