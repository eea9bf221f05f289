# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI dependency injection definitions.

Collaborators (repositories and mailer) are attached to ``app.state``
by create_app(); these dependencies build services from them per
request.

Example:
    @router.get("/")
    async def list_students(
        service: StudentService = Depends(get_student_service),
    ):
        ...
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from schoolhub.domains.student.service import StudentService


def get_student_service(request: Request) -> StudentService:
    """Build a StudentService from the collaborators on app state.

    Raises:
        HTTPException: If the application was created without repositories.
    """
    state = request.app.state
    students = getattr(state, "student_repository", None)
    users = getattr(state, "user_repository", None)
    mailer = getattr(state, "mailer", None)

    if students is None or users is None or mailer is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Student storage is not configured",
        )

    return StudentService(students=students, users=users, mailer=mailer)


StudentServiceDep = Annotated[StudentService, Depends(get_student_service)]
