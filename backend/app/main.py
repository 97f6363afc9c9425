"""
Store Admin Backend — FastAPI Application Factory
===================================================

What:  Builds the Store Admin API: middleware, error serialization, routers.
How:   create_app() assembles a FastAPI instance; `app` is the module-level
       instance served by `uvicorn app.main:app`.

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Middleware Chain:                                       │
    │  ┌──────────┐ ┌──────────┐ ┌────────┐ ┌──────┐           │
    │  │  Req ID  │→│ Logging  │→│  GZip  │→│ CORS │           │
    │  └──────────┘ └──────────┘ └────────┘ └──────┘           │
    │                                                          │
    │  Routes:                                                 │
    │  /api/stores   /api/{storeId}/{plural}                   │
    │  /dashboard/{storeId}/{plural}   /health                 │
    │                                                          │
    │  Exception Handlers (plain-text bodies):                 │
    │  Unauthenticated→401 │ Validation→422 │ Forbidden→403    │
    │  Internal→500 "Internal Error" │ Exception→500           │
    └──────────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import PlainTextResponse

from app import __version__
from app.config import settings
from app.database import dispose_engine
from app.exceptions import InternalError, StoreAdminError
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.routes import dashboard, entities, health, stores

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: 2024-01-15T12:00:00 [INFO] app.services.entity_service: message
    Called once during app startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party libraries that log every operation at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Store Admin Backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving: public listings and /health still work
        logger.error("Configuration error: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Store Admin Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Serialize typed errors into plain-text responses.

    StoreAdminError (and subclasses) → exc.status_code with exc.message
    Exception (fallback)             → 500 "Internal Error"

    Client errors are logged at DEBUG only; the access log already records
    the status. Unexpected failures were logged with their handler tag at
    the point they were caught.
    """

    @app.exception_handler(StoreAdminError)
    async def handle_store_admin_error(request: Request, exc: StoreAdminError):
        rid = request_id_var.get("")
        logger.debug(
            "[%s] %s (%d): %s | Context: %s",
            rid, exc.kind, exc.status_code, exc.message, exc.context,
        )
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        error = InternalError()
        return PlainTextResponse(error.message, status_code=error.status_code)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    app = FastAPI(
        title="Store Admin API",
        description=(
            "Store management admin backend: ownership-scoped creation and listing "
            "of billboards, categories, sizes, colors and products, plus "
            "dashboard-ready table rows."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(stores.router)
    for router in entities.routers:
        app.include_router(router)
    app.include_router(dashboard.router)
    app.include_router(health.router)

    return app


app = create_app()
