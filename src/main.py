"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from config.settings import settings
from src.jp_common.database import engine, ping_database
from src.jp_common.errors import AppError, InvalidRequestError, StorageError
from src.jp_common.logging_setup import configure_logging
from src.jp_common.response import error_response
from src.jp_contribution.api.router import router as contribution_router
from src.jp_event.api.router import router as event_router
from src.jp_gateway.middleware.request_log import RequestLogMiddleware
from src.jp_jackpot.api.router import router as jackpot_router
from src.jp_payout.api.router import router as payout_router
from src.jp_payout.api.rules_router import router as payout_rules_router
from src.jp_venue.api.router import router as venue_router

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: verify the database answers. Shutdown: release the pool."""
    await ping_database()
    logger.info("%s started", settings.APP_NAME)
    yield
    await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_origin_regex=settings.CORS_ORIGIN_REGEX or None,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    max_age=86400,
)


def _error_json(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(
        exc.code, exc.message, request_id=getattr(request.state, "request_id", None)
    )
    return JSONResponse(status_code=exc.http_status, content=resp.model_dump())


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return _error_json(request, exc)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    return _error_json(request, InvalidRequestError(details))


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Storage failure on %s %s", request.method, request.url.path)
    return _error_json(request, StorageError())


app.include_router(venue_router, prefix="/api/v1")
app.include_router(contribution_router, prefix="/api/v1")
app.include_router(payout_router, prefix="/api/v1")
app.include_router(payout_rules_router, prefix="/api/v1")
app.include_router(jackpot_router, prefix="/api/v1")
app.include_router(event_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": "0.1.0"}
