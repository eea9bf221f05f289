# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Health check endpoint."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from schoolhub import __version__
from schoolhub.core.config import get_settings

router = APIRouter()

_server_start_time = time.time()


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(description="Current server timestamp")
    version: str = Field(description="API version")
    environment: str = Field(description="Deployment environment")
    uptime_seconds: int = Field(description="Server uptime in seconds")
    storage_configured: bool = Field(description="Whether student repositories are attached")
    email_configured: bool = Field(description="Whether SMTP settings are complete")


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Report liveness and configuration state."""
    settings = get_settings()
    storage_configured = (
        getattr(request.app.state, "student_repository", None) is not None
        and getattr(request.app.state, "user_repository", None) is not None
    )

    return HealthResponse(
        status="healthy" if storage_configured else "degraded",
        timestamp=datetime.now(timezone.utc),
        version=__version__,
        environment=settings.environment,
        uptime_seconds=int(time.time() - _server_start_time),
        storage_configured=storage_configured,
        email_configured=settings.smtp.is_configured,
    )
