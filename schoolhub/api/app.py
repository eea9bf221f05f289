# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI Application Factory.

This module provides the main application factory for the SchoolHub API.
Storage is supplied by the caller; the API only orchestrates it.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Awaitable, Callable
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from schoolhub import __version__
from schoolhub.api.routes import health
from schoolhub.api.v1 import router as v1_router
from schoolhub.core.config import get_settings
from schoolhub.domains.student.errors import ErrorKind, StudentServiceError
from schoolhub.domains.student.repository import StudentRepository, UserRepository
from schoolhub.infrastructure.notifications import (
    AccountVerificationMailer,
    SMTPAccountVerificationMailer,
)
from schoolhub.utils.logging import bind_context, clear_context, setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Args:
        app: The FastAPI application instance.

    Yields:
        None during application runtime.
    """
    settings = get_settings()
    setup_logging(settings)
    logger.info(
        "Starting SchoolHub API (environment=%s, debug=%s)",
        settings.environment,
        settings.debug,
    )
    if not settings.smtp.is_configured:
        logger.warning("SMTP not configured; verification emails will not be delivered")

    yield

    logger.info("Shutting down SchoolHub API")


async def student_error_handler(request: Request, exc: StudentServiceError) -> JSONResponse:
    """Translate a student domain error into an HTTP response."""
    if exc.kind is ErrorKind.INTERNAL:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def request_context_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Bind a request id to every log line emitted while handling a request."""
    request_id = request.headers.get("X-Request-ID") or uuid4().hex
    bind_context(request_id=request_id, path=request.url.path)
    try:
        response = await call_next(request)
    finally:
        clear_context()
    response.headers["X-Request-ID"] = request_id
    return response


def create_app(
    student_repository: StudentRepository | None = None,
    user_repository: UserRepository | None = None,
    mailer: AccountVerificationMailer | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        student_repository: Student storage implementation.
        user_repository: User lookup implementation.
        mailer: Verification mailer; an SMTP mailer is built from
            settings when omitted.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="SchoolHub API",
        description="Student records management backend",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    app.state.student_repository = student_repository
    app.state.user_repository = user_repository
    app.state.mailer = mailer or SMTPAccountVerificationMailer(
        smtp=settings.smtp,
        verification=settings.verification,
    )

    app.add_exception_handler(StudentServiceError, student_error_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.origins_list,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allow_methods,
        allow_headers=settings.cors.allow_headers,
    )
    app.middleware("http")(request_context_middleware)

    app.include_router(health.router, tags=["Health"])
    app.include_router(v1_router)

    return app
