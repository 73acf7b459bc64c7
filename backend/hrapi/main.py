"""
HR API Backend — FastAPI Application Factory
==============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   uvicorn (`uvicorn hrapi.main:app`) and the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────────┐ ┌─────────────────┐  │
    │  │  Req ID  │→│  Access Log  │→│  CORS           │  │
    │  └──────────┘ └──────────────┘ └─────────────────┘  │
    │                                                     │
    │  Routes (/api/v1):                                  │
    │  ┌──────────────┐ ┌───────────────┐ ┌────────────┐  │
    │  │  /branches   │ │  /employees   │ │  /health   │  │
    │  └──────────────┘ └───────────────┘ └────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ ValidationError→400 │ SQLAlchemyError→500 │   │   │
    │  │ Exception→500                                │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:   configure logging, optionally create tables, log readiness
    Shutdown:  dispose the database engine (close all pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from hrapi import __version__
from hrapi.config import Settings, settings as default_settings
from hrapi.database import Database
from hrapi.exceptions import ValidationError
from hrapi.middleware.logging import RequestLoggingMiddleware
from hrapi.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from hrapi.routes import branches, employees, health

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(settings: Settings) -> None:
    """
    Configure logging for the entire application.

    Format: 2024-01-15T12:00:00 [INFO] hrapi.access: GET /api/v1/branches 200 3.1ms
    Called once during startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # uvicorn's own access log duplicates RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup and shutdown around the running application."""
    settings: Settings = app.state.settings
    database: Database = app.state.database

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(settings)
    logger.info("HR API %s starting up...", __version__)

    if settings.db_auto_create:
        await database.create_all()

    logger.info("Server ready at http://%s:%d%s", settings.backend_host, settings.backend_port, settings.api_prefix)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("HR API shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "") or request_id_var.get("")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers.

    Handler map:
        ValidationError   → 400 {"error": "Validation error: <Section>: <message>"}
        SQLAlchemyError   → 500 generic database message, details logged only
        Exception         → 500 generic message, stack trace logged only

    Services and route handlers never catch store errors; they all end up here.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] %s", _request_id(request), exc.message)
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(SQLAlchemyError)
    async def handle_database_error(request: Request, exc: SQLAlchemyError):
        rid = _request_id(request)
        logger.error(
            "[%s] Database error on %s %s: %s",
            rid,
            request.method,
            request.url.path,
            exc,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={"error": "A database error occurred", "request_id": rid},
            headers={REQUEST_ID_HEADER: rid} if rid else None,
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = _request_id(request)
        logger.error(
            "[%s] Unexpected error on %s %s: %s",
            rid,
            request.method,
            request.url.path,
            exc,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={"error": "An unexpected error occurred", "request_id": rid},
            headers={REQUEST_ID_HEADER: rid} if rid else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to use; defaults to the environment-loaded
                  singleton. Tests pass their own (e.g. an in-memory SQLite URL).

    Returns:
        FastAPI instance with its Database handle on app.state.database.
    """
    settings = settings or default_settings

    app = FastAPI(
        title="HR API",
        description="CRUD API for company branches and their employees.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Owned by the app: created here, disposed by the lifespan
    app.state.settings = settings
    app.state.database = Database(settings)

    # ── Register Middleware ───────────────────────────────────────────────
    # Executes in reverse order of addition: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.index_router)
    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(branches.router, prefix=settings.api_prefix)
    app.include_router(employees.router, prefix=settings.api_prefix)

    return app


# uvicorn expects `hrapi.main:app` to be importable
app = create_app()
