# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student domain package.

This package provides student records management including:
- Payload normalization across key spellings
- Class and section reference validation
- Create, update, list, detail and status change operations
"""

from schoolhub.domains.student.errors import (
    ConflictError,
    ErrorKind,
    InternalError,
    NotFoundError,
    StudentServiceError,
    ValidationError,
)
from schoolhub.domains.student.payload import StudentPayload, normalize_student_payload
from schoolhub.domains.student.repository import (
    MutationResult,
    NamedReference,
    StudentRepository,
    UserRepository,
)
from schoolhub.domains.student.service import StudentService

__all__ = [
    "StudentService",
    "StudentPayload",
    "normalize_student_payload",
    "StudentRepository",
    "UserRepository",
    "MutationResult",
    "NamedReference",
    "ErrorKind",
    "StudentServiceError",
    "ValidationError",
    "ConflictError",
    "NotFoundError",
    "InternalError",
]
