# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student API schemas.

Create and update bodies are accepted as free-form objects because
clients send several key spellings; the service normalizes them.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MessageResponse(BaseModel):
    """Confirmation returned by mutating operations."""

    message: str = Field(description="Human-readable outcome")


class StudentStatusRequest(BaseModel):
    """Request to enable or disable a student's system access."""

    model_config = ConfigDict(populate_by_name=True)

    status: bool = Field(description="New system access flag")
    reviewer_id: Any = Field(
        default=None,
        validation_alias="reviewerId",
        description="ID of the staff member performing the change",
    )


class ErrorResponse(BaseModel):
    """Error body returned for failed student operations."""

    detail: str
