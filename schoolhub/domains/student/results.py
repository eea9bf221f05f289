# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Interpretation of repository results.

Existing clients depend on a few "no data means error" rules: an empty
student list answers 404 and a status change that touches no rows
answers 500. They are kept here so call sites never encode them.
"""

from collections.abc import Sequence
from typing import Any, TypeVar

from schoolhub.domains.student.errors import (
    ErrorKind,
    InternalError,
    NotFoundError,
    error_for_kind,
)
from schoolhub.domains.student.repository import MutationResult

T = TypeVar("T")

DUPLICATE_EMAIL_MESSAGE = "Email already exists"
STUDENTS_NOT_FOUND_MESSAGE = "Students not found"
STATUS_CHANGE_FAILED_MESSAGE = "Unable to disable student"


def mutation_failure_kind(message: str) -> ErrorKind:
    """Classify a persistence failure message.

    Only the exact duplicate-email message is a conflict; every other
    message is a validation failure.
    """
    if message == DUPLICATE_EMAIL_MESSAGE:
        return ErrorKind.CONFLICT
    return ErrorKind.VALIDATION


def mutation_status_code(message: str) -> int:
    """Return the status code for a persistence failure message (409 or 400)."""
    return mutation_failure_kind(message).status_code


def mutation_failure_message(result: MutationResult) -> str:
    """Join a failed result's message and description."""
    if result.description:
        return f"{result.message}. {result.description}"
    return result.message


def raise_for_mutation(result: MutationResult) -> MutationResult:
    """Raise the mapped error when persistence rejected a write.

    Returns:
        The result unchanged when it reports success.
    """
    if not result.status:
        raise error_for_kind(
            mutation_failure_kind(result.message),
            mutation_failure_message(result),
            detail={"user_id": result.user_id},
        )
    return result


def require_students(students: Sequence[T]) -> Sequence[T]:
    """Reject an empty student list."""
    if len(students) <= 0:
        raise NotFoundError(STUDENTS_NOT_FOUND_MESSAGE)
    return students


def require_status_change(affected_rows: Any) -> int:
    """Reject a status change that touched no rows."""
    if affected_rows is None or affected_rows <= 0:
        raise InternalError(STATUS_CHANGE_FAILED_MESSAGE, detail={"affected_rows": affected_rows})
    return affected_rows
