# app/entrypoints/fastapi_app.py
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..domain.errors import DataSourceError, ValidationError
from ..logging_setup import configure_logging
from .api.routers import deals, health

log = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(title="DealFinder - Marketplace Deal Scorer")

    @app.exception_handler(ValidationError)
    async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        return _error(400, str(exc) or "Query is required")

    @app.exception_handler(RequestValidationError)
    async def _bad_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        log.info(f"Rejected request body on {request.url.path}: {exc.errors()}")
        return _error(400, "Invalid request body")

    @app.exception_handler(DataSourceError)
    async def _data_source_error(request: Request, exc: DataSourceError) -> JSONResponse:
        log.error(f"Error finding deals: {exc}", exc_info=exc)
        return _error(500, "Failed to find deals")

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
        # ServerErrorMiddleware re-raises after sending this, so the server logs the traceback
        return _error(500, "Failed to find deals")

    # Routers
    app.include_router(health.router)
    app.include_router(deals.router)

    return app
