# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API v1 routes package.

Modules:
    students: Student management endpoints (list, detail, add, update, status).
"""

from fastapi import APIRouter

from schoolhub.api.v1 import students

router = APIRouter(prefix="/api/v1")

router.include_router(students.router, prefix="/students", tags=["Students"])

__all__ = ["router"]
