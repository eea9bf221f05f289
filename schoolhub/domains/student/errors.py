# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Error taxonomy for the student domain.

Errors carry a kind, a human-readable message and an optional detail.
The HTTP layer translates the kind into a transport status code, so
the domain itself stays transport-agnostic.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Classes of failure a student operation can report."""

    VALIDATION = "validation"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"

    @property
    def status_code(self) -> int:
        """HTTP-like status code associated with this kind."""
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.CONFLICT: 409,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


class StudentServiceError(Exception):
    """Base exception for student service errors.

    Attributes:
        kind: Failure class of the error.
        message: Error description safe to show to clients.
        detail: Optional structured context for logs.
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, detail: Any = None) -> None:
        """Initialize StudentServiceError.

        Args:
            message: Error description.
            detail: Optional structured context.
        """
        self.message = message
        self.detail = detail
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        """HTTP-like status code for this error."""
        return self.kind.status_code


class ValidationError(StudentServiceError):
    """Raised when the payload or one of its references is invalid."""

    kind = ErrorKind.VALIDATION


class ConflictError(StudentServiceError):
    """Raised when persistence rejects a duplicate."""

    kind = ErrorKind.CONFLICT


class NotFoundError(StudentServiceError):
    """Raised when a student or user does not exist."""

    kind = ErrorKind.NOT_FOUND


class InternalError(StudentServiceError):
    """Raised when an operation fails for a server-side reason."""

    kind = ErrorKind.INTERNAL


_ERRORS_BY_KIND: dict[ErrorKind, type[StudentServiceError]] = {
    ErrorKind.VALIDATION: ValidationError,
    ErrorKind.CONFLICT: ConflictError,
    ErrorKind.NOT_FOUND: NotFoundError,
    ErrorKind.INTERNAL: InternalError,
}


def error_for_kind(kind: ErrorKind, message: str, detail: Any = None) -> StudentServiceError:
    """Build the error subclass matching a kind."""
    return _ERRORS_BY_KIND[kind](message, detail=detail)
