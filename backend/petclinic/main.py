"""
PetClinic Backend - FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() assembles middleware, exception handlers, static files
       and routers; the lifespan handler sets up logging on startup and
       disposes the database engine on shutdown.
Who:   uvicorn (`uvicorn petclinic.main:app`) and the test client.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware: Request ID → Rate Limit → Logging      │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────┐ ┌──────────────────────┐ ┌─────────┐  │
    │  │ GET /    │ │ /owners/... (HTML)   │ │ /health │  │
    │  └──────────┘ └──────────────────────┘ └─────────┘  │
    │                                                     │
    │  Exception Handlers (error.html):                   │
    │  NotFound→404 │ bad path/query→400 │ DB/other→500   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from petclinic import __version__
from petclinic.config import PACKAGE_DIR, settings
from petclinic.database import dispose_engine
from petclinic.exceptions import DatabaseError, NotFoundError, PetClinicError
from petclinic.middleware.logging import RequestLoggingMiddleware
from petclinic.middleware.rate_limit import RateLimitMiddleware
from petclinic.middleware.request_id import RequestIDMiddleware, request_id_var
from petclinic.routes import health, owners, welcome
from petclinic.templating import render_error

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again or contact support."


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once, before anything else logs.

    Format: 2024-01-15T12:00:00 [INFO] petclinic.access: GET /owners 200 3.2ms [ab12cd34] from 10.0.0.1
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party libraries log every operation at DEBUG/INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("PetClinic %s starting up...", __version__)
    logger.info("Templates: %s", settings.templates_dir)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("PetClinic shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to rendered error pages.

    Handler hierarchy:
        NotFoundError            → 404 (message names the missing owner)
        DatabaseError            → 500 (generic message, context logged)
        PetClinicError (base)    → its status_code
        HTTPException            → its status code (unknown path, wrong method)
        RequestValidationError   → 400 (e.g. /owners/abc)
        Exception (fallback)     → 500 (stack trace logged)

    Internal details (SQL, stack traces) are logged, never rendered.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        logger.info("[%s] %s", request_id_var.get(""), exc.message)
        return render_error(request, 404, exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""), exc.message, exc.context,
        )
        return render_error(request, 500, exc.message)

    @app.exception_handler(PetClinicError)
    async def handle_app_error(request: Request, exc: PetClinicError):
        logger.error("[%s] %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return render_error(request, exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return render_error(request, exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        logger.warning("[%s] Bad request: %s", request_id_var.get(""), exc.errors())
        return render_error(request, 400, "The request could not be understood.")

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return render_error(request, 500, GENERIC_ERROR_MESSAGE)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Middleware executes in REVERSE order of addition: RequestIDMiddleware,
    added last, sees each request first, so 429 pages carry the request id.
    """
    app = FastAPI(
        title="PetClinic",
        description="Veterinary clinic owner, pet and visit records.",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RateLimitMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.mount("/static", StaticFiles(directory=str(Path(PACKAGE_DIR) / "static")), name="static")

    app.include_router(welcome.router)
    app.include_router(owners.router)
    app.include_router(health.router)

    return app


app = create_app()
