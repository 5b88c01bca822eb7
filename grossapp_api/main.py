"""
Entry point for the GrossApp admin HTTP API.

This module creates the FastAPI application, wires up middleware and error
handlers, and mounts the entity routers under a common prefix.

Intended usage:
    uvicorn grossapp_api.main:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from starlette.exceptions import HTTPException as StarletteHTTPException

from grossapp_api import __version__
from grossapp_api.config import Settings, get_config
from grossapp_api.core.deadline import request_deadline
from grossapp_api.core.exceptions import DomainError, RequestTimeoutError
from grossapp_api.db.session import build_session_factory, get_engine, init_db
from grossapp_api.logging import get_logger
from grossapp_api.logging.config import configure_logging
from grossapp_api.routers import admins, logins, products

logger = get_logger(__name__)


def _error_body(code: str, message: str, details: Any = None) -> dict[str, Any]:
    return {"error": {"code": code, "message": message, "details": details}}


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.warning(
        "request_failed",
        code=exc.code,
        status=exc.status_code,
        path=request.url.path,
        error=exc.message,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.code, exc.message, exc.details),
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Bad bodies and malformed path/query parameters are client errors (400).
    errors = jsonable_encoder(exc.errors())
    logger.warning(
        "request_validation_failed",
        path=request.url.path,
        error_count=len(errors),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(
            "validation_error",
            "Request payload or parameters are invalid.",
            {"errors": errors},
        ),
    )


_HTTP_ERROR_CODES = {
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
}


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """
    Unknown routes and wrong methods use the same envelope as domain errors.
    """
    code = _HTTP_ERROR_CODES.get(exc.status_code, "http_error")
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(code, str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_app(
    settings: Optional[Settings] = None,
    *,
    engine: Optional[Engine] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application instance.

    ``engine`` defaults to the process-wide engine built from configuration;
    tests pass their own (e.g. an in-memory SQLite engine).
    """
    settings = settings or get_config()
    configure_logging(settings)

    engine = engine or get_engine()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "app_startup",
            env=settings.APP_ENV.value,
            version=settings.VERSION,
            api_root=settings.api_root,
            dialect=engine.dialect.name,
        )
        init_db(engine)
        yield
        logger.info("app_shutdown")
        engine.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.VERSION,
        description="Administration backend for admins, their logins and products.",
        lifespan=lifespan,
        debug=settings.DEBUG,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_timeout(request: Request, call_next: Any) -> Any:
        # Services refuse to commit past the same deadline, so a 504 always
        # means nothing was written.
        timeout = settings.REQUEST_TIMEOUT_SECONDS
        with request_deadline(timeout):
            try:
                return await asyncio.wait_for(call_next(request), timeout=timeout)
            except asyncio.TimeoutError:
                logger.error(
                    "request_timeout",
                    path=request.url.path,
                    timeout_seconds=timeout,
                )
                exc = RequestTimeoutError(timeout)
                return JSONResponse(
                    status_code=exc.status_code,
                    content=_error_body(exc.code, exc.message),
                )

    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    @app.get("/health", tags=["system"])
    async def health() -> dict:
        return {
            "status": "ok",
            "version": settings.VERSION,
            "package_version": __version__,
            "api_root": settings.api_root,
        }

    api_root = settings.api_root
    app.include_router(admins.router, prefix=api_root)
    app.include_router(products.router, prefix=api_root)
    app.include_router(logins.router, prefix=api_root)

    return app


# Default application instance
app = create_app()


# ---------------------------------------------------------------------------
# Local development entry point
# ---------------------------------------------------------------------------


if __name__ == "__main__":
    import uvicorn

    cfg = get_config()
    uvicorn.run(
        "grossapp_api.main:app",
        host=cfg.HOST,
        port=cfg.PORT,
        reload=cfg.DEBUG,
    )
