"""
Evening Coffee Backend - FastAPI Application Factory
======================================================

What:  Creates and configures the café website application.
How:   Factory pattern: create_app(app_id, settings) returns a configured
       FastAPI instance. A module-level `app` built from the environment is
       provided for `uvicorn eveningcoffee.main:app`.
Who:   uvicorn (standalone), a parent ASGI host (embedded), and the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────┐ ┌────────┐ ┌─────────┐ ┌──────────────┐   │
    │  │ CORS │→│ Req ID │→│ Logging │→│ Err Fallback │   │
    │  └──────┘ └────────┘ └─────────┘ └──────────────┘   │
    │                                                     │
    │  Routes ({prefix} = "" or "/api/{app_id}"):         │
    │  ┌──────────────────┐ ┌────────────┐ ┌───────────┐  │
    │  │ POST contact,    │ │ GET menu,  │ │ GET health│  │
    │  │ POST reservation │ │ GET info   │ │           │  │
    │  └──────────────────┘ └────────────┘ └───────────┘  │
    │  ┌────────────────────────────────────────────────┐ │
    │  │ GET /, GET /{path}: static files (unprefixed)  │ │
    │  └────────────────────────────────────────────────┘ │
    └─────────────────────────────────────────────────────┘

Embedded vs standalone:
    Decided exactly once, when the app is created. Embedded apps expose their
    API under /api/{app_id} so several café sites can share one host server;
    standalone apps expose it at the root.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from eveningcoffee import __version__
from eveningcoffee.config import Settings, settings as default_settings
from eveningcoffee.exceptions import EveningCoffeeError, NotFoundError
from eveningcoffee.middleware.cors import CORSHeadersMiddleware
from eveningcoffee.middleware.errors import ErrorFallbackMiddleware
from eveningcoffee.middleware.logging import RequestLoggingMiddleware
from eveningcoffee.middleware.request_id import RequestIDMiddleware, request_id_var
from eveningcoffee.routes import catalog, health, static, submissions
from eveningcoffee.services.submission_service import SubmissionService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s

    Called from the lifespan, i.e. only when the app is actually served.
    Importing or constructing the app never touches global logging config.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    config: Settings = app.state.settings
    setup_logging(config.log_level)

    logger.info("Evening Coffee backend starting for app %s", app.state.app_id)
    logger.info("Serving static files from %s", config.static_root)
    if app.state.api_base:
        logger.info("Embedded mode: API mounted under %s", app.state.api_base)

    yield

    logger.info("Evening Coffee backend for app %s shut down", app.state.app_id)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to HTTP responses.

    Handler hierarchy:
        NotFoundError           → 404 Not Found
        EveningCoffeeError      → 500 Internal Server Error

    Anything else is left to ErrorFallbackMiddleware.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=404,
            content={
                "error": "not_found",
                "message": exc.message,
                "request_id": request_id_var.get(""),
            },
        )

    @app.exception_handler(EveningCoffeeError)
    async def handle_app_error(request: Request, exc: EveningCoffeeError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    app_id: str,
    settings: Optional[Settings] = None,
    *,
    embedded: Optional[bool] = None,
    submission_logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """
    Create and configure the café application for one app identifier.

    Args:
        app_id:            Identifier of this instance; appears in the health
                           payload and, when embedded, in the route prefix.
        settings:          Configuration; defaults to the environment-loaded
                           module singleton.
        embedded:          Overrides settings.embedded_mode when given.
        submission_logger: Logger receiving contact/reservation records.

    Returns:
        FastAPI instance with API routes under "" or "/api/{app_id}".
    """
    config = settings or default_settings
    if embedded is not None:
        config = config.model_copy(update={"embedded_mode": embedded})
    api_base = config.api_base(app_id)

    app = FastAPI(
        title="Evening Coffee API",
        description="Menu, store information and form intake for the Evening Coffee website.",
        version=__version__,
        docs_url=f"{api_base}/docs",
        redoc_url=None,
        openapi_url=f"{api_base}/openapi.json",
        lifespan=lifespan,
    )

    app.state.app_id = app_id
    app.state.api_base = api_base
    app.state.settings = config
    app.state.submission_service = SubmissionService(logger=submission_logger)

    # ── Register Middleware ───────────────────────────────────────────────
    # Executes in REVERSE order of addition: CORS runs first, GZip last
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(ErrorFallbackMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(CORSHeadersMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    # Static router last: its GET catch-all must not shadow the API
    app.include_router(submissions.router, prefix=api_base)
    app.include_router(catalog.router, prefix=api_base)
    app.include_router(health.router, prefix=api_base)
    app.include_router(static.router)

    logger.info("Evening Coffee module initialized for app %s", app_id)
    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn eveningcoffee.main:app
app = create_app(default_settings.app_id)
