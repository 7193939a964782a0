"""FastAPI application entrypoint — lifespan, routers, middleware, error bodies."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException

from krishi_sahayak.config import get_settings
from krishi_sahayak.database import engine
from krishi_sahayak.middleware.logging import (
    RequestLoggingMiddleware,
    configure_structured_logging,
)
from krishi_sahayak.routes import crops, diseases, feedback, users

logger = logging.getLogger("krishi_sahayak")

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application startup / shutdown lifecycle.

    Startup:
      1. Initialize structured logging
      2. Verify database connectivity

    Shutdown:
      1. Dispose SQLAlchemy engine
    """
    configure_structured_logging()
    settings = get_settings()
    logger.info(
        "Krishi Sahayak starting",
        extra={"log_level": settings.log_level, "enforce_admin": settings.enforce_admin},
    )

    try:
        async with engine.connect() as connection:
            await connection.execute(text("SELECT 1"))
    except Exception as exc:
        logger.exception("startup failure", extra={"error": str(exc)})
        raise

    yield

    logger.info("Krishi Sahayak shutting down")
    await engine.dispose()


app = FastAPI(
    title="Krishi Sahayak API",
    description=(
        "Bilingual (Hindi/English) crop and crop-disease reference API — "
        "crops, diseases with symptoms, causes, treatment and prevention, "
        "farmer feedback, and phone-number users."
    ),
    version=VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── Middleware ──────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)


# ── Error bodies ────────────────────────────────────────────────────────────
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies and path parameters are 400 with per-field errors."""
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid data", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = {"message": exc.detail}
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


# ── Health check ────────────────────────────────────────────────────────────
@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Liveness probe; does not touch the database."""
    return {
        "status": "ok",
        "service": "krishi-sahayak",
        "version": VERSION,
    }


# ── Router registration ────────────────────────────────────────────────────
app.include_router(crops.router, prefix="/api")
app.include_router(diseases.router, prefix="/api")
app.include_router(feedback.router, prefix="/api")
app.include_router(users.router, prefix="/api")
