"""rendergate — HTTP surface for the renderer contract and taste gates.

FastAPI application with lifespan logging and global error handling.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from rendergate import __version__
from rendergate.api.router import api_router
from rendergate.config import get_settings
from rendergate.errors import GateSetupError
from rendergate.logging_config import configure_logging

configure_logging(get_settings())

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()

    logger.info(
        "app_started",
        debug=settings.DEBUG,
        contract_schema=str(settings.CONTRACT_SCHEMA_PATH),
        registry_schema=str(settings.REGISTRY_SCHEMA_PATH),
        taste_ruleset=str(settings.TASTE_RULESET_PATH),
    )

    yield

    logger.info("app_stopped")


# ── Create Application ──

app = FastAPI(
    title="rendergate",
    description=(
        "Deterministic build-time compliance gates for UI renderer outputs. "
        "Decisions are made from declared metadata only."
    ),
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Global Exception Handlers ──

@app.exception_handler(GateSetupError)
async def setup_error_handler(request: Request, exc: GateSetupError):
    """A configured schema or ruleset is missing or unreadable."""
    logger.error(
        "gate_setup_failed",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={"error": "setup_error", "message": str(exc)},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred.",
        },
    )


# ── Routes ──

app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint — API info."""
    return {
        "name": "rendergate",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/v1/health",
    }
