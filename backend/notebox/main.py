"""
Notebox - FastAPI Application Factory
=====================================

What:  Creates and configures the FastAPI application instance.
How:   create_app(settings) wires the store, services, middleware, exception
       handlers and routers for one store file.
Who:   Called by the CLI (python -m notebox), by tests, or by an external
       server via `uvicorn --factory notebox.main:create_app` (settings then
       come from NOTEBOX_* environment variables).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌───────────────────┐    │
    │  │  Req ID  │→│ Logging  │→│ CORS (optional)   │    │
    │  └──────────┘ └──────────┘ └───────────────────┘    │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────────┐ ┌─────────────┐  │
    │  │ /notes[/..]  │ │ POST /write  │ │ GET /health │  │
    │  │              │ │ UploadForm   │ │             │  │
    │  └──────────────┘ └──────────────┘ └─────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ NotFound→404 │ Exists→400 │ Store/File→500   │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Create the store file as [] if absent (before accepting requests)
    3. Log startup complete
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from notebox import __version__
from notebox.config import Settings
from notebox.exceptions import (
    FileStorageError,
    NoteAlreadyExistsError,
    NoteNotFoundError,
    StoreError,
)
from notebox.middleware.logging import RequestLoggingMiddleware
from notebox.middleware.request_id import RequestIDMiddleware, request_id_var
from notebox.routes import form, health, notes
from notebox.services.file_service import FileService
from notebox.services.note_service import NoteService
from notebox.services.store_service import NoteStore

logger = logging.getLogger(__name__)

# Every 500 body carries this text; details go to the server log only
GENERIC_ERROR_MESSAGE = "An internal error occurred. Please try again later."


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once at startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our own access middleware replaces uvicorn's access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: logging, then store bootstrap.

    The bootstrap write completes before the first request is served; a
    failure here (StoreError) aborts startup.
    """
    settings: Settings = app.state.settings
    setup_logging(settings.log_level)
    logger.info("=" * 60)
    logger.info("Notebox %s starting up...", __version__)

    await app.state.note_service.store.ensure_exists()

    logger.info("Server ready at http://%s:%d", settings.host, settings.port)
    if settings.docs_enabled:
        logger.info("API docs: http://%s:%d/docs", settings.host, settings.port)
    logger.info("=" * 60)

    yield

    logger.info("Notebox shutting down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to responses.

    Handler hierarchy:
        NoteNotFoundError       → 404, empty body
        NoteAlreadyExistsError  → 400, empty body
        StoreError              → 500, generic JSON (covers StoreCorruptedError)
        FileStorageError        → 500, generic JSON
        Exception (fallback)    → 500, generic JSON

    Paths and OS errors are logged server-side and never returned.
    """

    @app.exception_handler(NoteNotFoundError)
    async def handle_not_found(request: Request, exc: NoteNotFoundError):
        return Response(status_code=404)

    @app.exception_handler(NoteAlreadyExistsError)
    async def handle_already_exists(request: Request, exc: NoteAlreadyExistsError):
        logger.info("[%s] %s", request_id_var.get(""), exc.message)
        return Response(status_code=400)

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError):
        rid = request_id_var.get("")
        logger.error("[%s] Store error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": GENERIC_ERROR_MESSAGE,
                "request_id": rid,
            },
        )

    @app.exception_handler(FileStorageError)
    async def handle_file_storage_error(request: Request, exc: FileStorageError):
        rid = request_id_var.get("")
        logger.error("[%s] File storage error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": GENERIC_ERROR_MESSAGE,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": GENERIC_ERROR_MESSAGE,
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Explicit settings (CLI, tests). When omitted they are read
                  from the environment, which raises if host, port or cache
                  is missing.

    Returns: Configured FastAPI instance; services hang off app.state.
    """
    if settings is None:
        settings = Settings()

    docs = settings.docs_enabled
    app = FastAPI(
        title="Notebox API",
        description=(
            "Named text notes stored in a single JSON file. "
            "Create notes with POST /write or the form at /UploadForm.html."
        ),
        version=__version__,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.note_service = NoteService(NoteStore(settings.cache))
    app.state.file_service = FileService(settings.upload_form)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → CORS
    if settings.cors_origins_list:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins_list,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["X-Request-ID"],
        )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(notes.router)
    app.include_router(form.router)
    app.include_router(health.router)

    return app
