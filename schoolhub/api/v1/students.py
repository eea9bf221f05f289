# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student management API endpoints.

- GET / - List students (query parameters become filters)
- GET /{student_id} - Get student detail
- POST / - Add a student and send the verification email
- PUT /{student_id} - Update a student
- PATCH /{student_id}/status - Enable or disable system access

Domain errors are translated to responses by the StudentServiceError
handler registered in create_app().
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Request, status

from schoolhub.api.dependencies import StudentServiceDep
from schoolhub.domains.student.schemas import (
    ErrorResponse,
    MessageResponse,
    StudentStatusRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_MUTATION_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


@router.get("/", responses=_NOT_FOUND)
async def list_students(
    request: Request,
    service: StudentServiceDep,
) -> list[Any]:
    """List students.

    Every query parameter is passed to storage as a filter.
    """
    filters = dict(request.query_params)
    return list(await service.list_students(filters))


@router.get("/{student_id}", responses=_NOT_FOUND)
async def get_student(
    student_id: str,
    service: StudentServiceDep,
) -> Any:
    """Get one student's detail record."""
    return await service.get_student_detail(student_id)


@router.post(
    "/",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_MUTATION_ERRORS,
)
async def add_student(
    service: StudentServiceDep,
    payload: dict[str, Any] = Body(...),
) -> MessageResponse:
    """Add a student."""
    return await service.add_student(payload)


@router.put(
    "/{student_id}",
    response_model=MessageResponse,
    responses={**_NOT_FOUND, **_MUTATION_ERRORS},
)
async def update_student(
    student_id: str,
    service: StudentServiceDep,
    payload: dict[str, Any] = Body(...),
) -> MessageResponse:
    """Update a student.

    The path id takes precedence over any id in the body.
    """
    return await service.update_student({**payload, "userId": student_id})


@router.patch(
    "/{student_id}/status",
    response_model=MessageResponse,
    responses={
        **_NOT_FOUND,
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def set_student_status(
    student_id: str,
    body: StudentStatusRequest,
    service: StudentServiceDep,
) -> MessageResponse:
    """Enable or disable a student's system access."""
    return await service.set_student_status(
        user_id=student_id,
        reviewer_id=body.reviewer_id,
        status=body.status,
    )
