"""Persistence failures surfaced as readable 503 responses"""
import logging

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from postgrest.exceptions import APIError

from mindsync.infra.supabase import SupabaseNotConfiguredError

logger = logging.getLogger(__name__)

DATABASE_REQUEST_FAILED = "Database request failed. Please try again."
DATABASE_UNREACHABLE = "Database is unreachable. Please try again."
DATABASE_NOT_CONFIGURED = "Database is not configured."


def _unavailable(detail: str) -> JSONResponse:
    return JSONResponse(status_code=503, content={"detail": detail})


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    logger.error(f"Database error on {request.method} {request.url.path}: {exc.code} {exc.message}")
    return _unavailable(DATABASE_REQUEST_FAILED)


async def transport_error_handler(request: Request, exc: httpx.HTTPError) -> JSONResponse:
    logger.error(f"Database unreachable on {request.method} {request.url.path}: {exc}")
    return _unavailable(DATABASE_UNREACHABLE)


async def not_configured_handler(request: Request, exc: SupabaseNotConfiguredError) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} needs the database: {exc}")
    return _unavailable(DATABASE_NOT_CONFIGURED)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(httpx.HTTPError, transport_error_handler)
    app.add_exception_handler(SupabaseNotConfiguredError, not_configured_handler)
