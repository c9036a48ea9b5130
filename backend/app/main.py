"""
Bugboard Backend — FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn app.main:app).

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                    FastAPI App                       │
    │                                                      │
    │  Middleware Chain:                                   │
    │  ┌────────┐ ┌─────────┐ ┌──────────┐ ┌──────────┐    │
    │  │ Req ID │→│ Logging │→│ Identity │→│  Errors  │    │
    │  └────────┘ └─────────┘ └──────────┘ └──────────┘    │
    │                                                      │
    │  Routes:                                             │
    │  ┌────────────┐ ┌───────────┐ ┌─────────────┐        │
    │  │ /api/posts │ │ /api/bugs │ │ GET /health │        │
    │  └────────────┘ └───────────┘ └─────────────┘        │
    │                                                      │
    │  Exception Handlers:                                 │
    │  ┌────────────────────────────────────────────────┐  │
    │  │ 400 │ 401 │ 403 │ 404 │ everything else → 500  │  │
    │  └────────────────────────────────────────────────┘  │
    └──────────────────────────────────────────────────────┘
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.database import dispose_engine
from app.error_reporter import ErrorReporter
from app.exceptions import (
    DatabaseError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from app.logging_config import setup_logging
from app.middleware.errors import ErrorReportingMiddleware
from app.middleware.identity import IdentityMiddleware
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.routes import bugs, health, posts

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("Bugboard Backend %s starting up (%s)", __version__, settings.environment)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Bugboard Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _field_errors(exc: RequestValidationError) -> Dict[str, str]:
    """Flatten FastAPI's error list into the field → message map clients expect."""
    errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc) or "body"
        errors.setdefault(field, error.get("msg", "Invalid value"))
    return errors


def register_exception_handlers(app: FastAPI, reporter: ErrorReporter) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError / RequestValidationError → 400 {"error": {field: msg}}
        UnauthorizedError                        → 401 {"error": "Unauthorized"}
        ForbiddenError                           → 403 {"error": "Forbidden"}
        NotFoundError                            → 404 {"error": "Not found"}
        DatabaseError, Exception                 → error reporter → 500

    Security: no handler exposes stack traces in the response.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning(
            "Validation failed",
            extra={"path": request.url.path, "fields": sorted(exc.errors), "request_id": request_id_var.get("")},
        )
        return JSONResponse(status_code=400, content={"error": exc.errors})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _field_errors(exc)})

    @app.exception_handler(UnauthorizedError)
    async def handle_unauthorized(request: Request, exc: UnauthorizedError):
        return JSONResponse(status_code=401, content={"error": exc.message})

    @app.exception_handler(ForbiddenError)
    async def handle_forbidden(request: Request, exc: ForbiddenError):
        logger.warning("Ownership check failed", extra=exc.context)
        return JSONResponse(status_code=403, content={"error": exc.message})

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"error": exc.message})

    # Last resort: anything not answered above becomes a logged 500.
    # ErrorReportingMiddleware catches the rest before ServerErrorMiddleware;
    # the Exception handler only sees failures raised by the outer middleware.
    app.add_exception_handler(DatabaseError, reporter)
    app.add_exception_handler(Exception, reporter)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(reporter: ErrorReporter | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        reporter: Error reporter to install; tests pass one with a
                  capturing logger. Defaults to the "bugboard.errors" logger.
    """
    app = FastAPI(
        title="Bugboard API",
        description="Blog posts and a bug tracker over a document store.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    reporter = reporter or ErrorReporter()

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute:
    #   RequestID → Logging → Identity → GZip → CORS → ErrorReporting
    app.add_middleware(ErrorReportingMiddleware, reporter=reporter)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(IdentityMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app, reporter)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(posts.router)
    app.include_router(bugs.router)
    app.include_router(health.router)

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


# ── Application Instance ─────────────────────────────────────────────────
app = create_app()
