# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student service for managing student records.

This module provides the StudentService class for:
- Listing students and fetching one student's detail
- Adding students (with an account verification email)
- Updating students
- Enabling or disabling a student's system access

Each operation runs sequentially: normalize the payload, check class
and section references, check the user exists, then delegate to the
repository and interpret its result.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from schoolhub.domains.student.errors import (
    InternalError,
    NotFoundError,
    StudentServiceError,
    ValidationError,
)
from schoolhub.domains.student.payload import StudentPayload, normalize_student_payload
from schoolhub.domains.student.repository import StudentRepository, UserRepository
from schoolhub.domains.student.results import (
    raise_for_mutation,
    require_status_change,
    require_students,
)
from schoolhub.domains.student.schemas import MessageResponse
from schoolhub.infrastructure.notifications.base import AccountVerificationMailer

logger = logging.getLogger(__name__)

STUDENT_NOT_FOUND_MESSAGE = "Student not found"
ADD_STUDENT_AND_EMAIL_SENT = "Student added and verification email sent successfully."
ADD_STUDENT_BUT_EMAIL_FAILED = "Student added, but failed to send verification email."
STATUS_CHANGED = "Student status changed successfully"

ADD_STUDENT_UNEXPECTED = "Unable to add student due to unexpected server error"
UPDATE_STUDENT_UNEXPECTED = "Unable to update student due to unexpected server error"
SET_STATUS_UNEXPECTED = "Unable to change student status due to unexpected server error"


class StudentService:
    """Service for managing students.

    Attributes:
        students: Student storage.
        users: Generic user lookups.
        mailer: Sender for account verification emails.
    """

    def __init__(
        self,
        students: StudentRepository,
        users: UserRepository,
        mailer: AccountVerificationMailer,
    ) -> None:
        """Initialize student service.

        Args:
            students: Student repository.
            users: User repository used for existence checks.
            mailer: Account verification mailer.
        """
        self.students = students
        self.users = users
        self.mailer = mailer

    async def list_students(self, filters: Mapping[str, Any] | None = None) -> Sequence[Any]:
        """List students matching the filters.

        Raises:
            NotFoundError: If no student matches.
        """
        students = await self.students.find_all_students(dict(filters or {}))
        return require_students(students)

    async def get_student_detail(self, student_id: Any) -> Any:
        """Get one student's detail record.

        Raises:
            NotFoundError: If the user or the detail record is missing.
        """
        await self._check_student_id(student_id)

        student = await self.students.find_student_detail(student_id)
        if not student:
            raise NotFoundError(STUDENT_NOT_FOUND_MESSAGE, detail={"student_id": student_id})

        return student

    async def add_student(self, payload: Mapping[str, Any] | StudentPayload) -> MessageResponse:
        """Add a student and send the account verification email.

        The email is best-effort: a delivery failure still reports the
        student as added, with a different message.

        Args:
            payload: Loosely-shaped student data.

        Returns:
            Confirmation message.

        Raises:
            ValidationError: If class/section is unknown or persistence
                rejects the payload.
            ConflictError: If the email is already registered.
            InternalError: On any unexpected failure.
        """
        try:
            canonical = await self.canonicalize_references(normalize_student_payload(payload))
            result = raise_for_mutation(await self.students.add_or_update_student(canonical))
        except StudentServiceError:
            raise
        except Exception as e:
            logger.exception("Unexpected error while adding student")
            raise InternalError(ADD_STUDENT_UNEXPECTED) from e

        logger.info("Added student: user=%s, class=%s", result.user_id, canonical.class_name)

        try:
            await self.mailer.send_account_verification_email(
                user_id=result.user_id,
                user_email=canonical.email,
            )
        except Exception as e:
            logger.warning(
                "Failed to send verification email to user %s: %s",
                result.user_id,
                str(e),
            )
            return MessageResponse(message=ADD_STUDENT_BUT_EMAIL_FAILED)

        return MessageResponse(message=ADD_STUDENT_AND_EMAIL_SENT)

    async def update_student(self, payload: Mapping[str, Any] | StudentPayload) -> MessageResponse:
        """Update an existing student.

        Args:
            payload: Loosely-shaped student data; must identify the user.

        Returns:
            Confirmation message from persistence.

        Raises:
            ValidationError: If class/section is unknown or persistence
                rejects the payload.
            NotFoundError: If the user does not exist.
            ConflictError: If the email belongs to another user.
            InternalError: On any unexpected failure.
        """
        try:
            canonical = await self.canonicalize_references(normalize_student_payload(payload))
            await self._check_student_id(canonical.user_id)
            result = raise_for_mutation(await self.students.add_or_update_student(canonical))
        except StudentServiceError:
            raise
        except Exception as e:
            logger.exception("Unexpected error while updating student")
            raise InternalError(UPDATE_STUDENT_UNEXPECTED) from e

        logger.info("Updated student: user=%s", canonical.user_id)
        return MessageResponse(message=result.message)

    async def set_student_status(
        self,
        user_id: Any,
        reviewer_id: Any,
        status: Any,
    ) -> MessageResponse:
        """Enable or disable a student's system access.

        Args:
            user_id: Student to change.
            reviewer_id: Staff member performing the change.
            status: New access flag.

        Raises:
            NotFoundError: If the user does not exist.
            InternalError: If no row was changed, or on any unexpected failure.
        """
        try:
            await self._check_student_id(user_id)
            affected_rows = await self.students.find_student_to_set_status(
                user_id=user_id,
                reviewer_id=reviewer_id,
                status=status,
            )
            require_status_change(affected_rows)
        except StudentServiceError:
            raise
        except Exception as e:
            logger.exception("Unexpected error while changing student status")
            raise InternalError(SET_STATUS_UNEXPECTED) from e

        logger.info(
            "Changed student status: user=%s, status=%s, by=%s",
            user_id,
            status,
            reviewer_id,
        )
        return MessageResponse(message=STATUS_CHANGED)

    async def canonicalize_references(self, payload: StudentPayload) -> StudentPayload:
        """Replace class and section names with their stored spelling.

        Fields that are None are left alone and never looked up.

        Returns:
            A new payload; the input is not modified.

        Raises:
            ValidationError: If a referenced class or section does not exist.
        """
        changes: dict[str, Any] = {}

        if payload.class_name is not None:
            matched_class = await self.students.find_class_by_name(payload.class_name)
            if not matched_class:
                raise ValidationError(
                    f"Invalid class '{payload.class_name}'. Class does not exist."
                )
            changes["class_name"] = matched_class.name

        if payload.section is not None:
            matched_section = await self.students.find_section_by_name(payload.section)
            if not matched_section:
                raise ValidationError(
                    f"Invalid section '{payload.section}'. Section does not exist."
                )
            changes["section"] = matched_section.name

        return dataclasses.replace(payload, extra=dict(payload.extra), **changes)

    async def _check_student_id(self, student_id: Any) -> None:
        """Ensure the user exists.

        Raises:
            NotFoundError: If not found.
        """
        user = await self.users.find_user_by_id(student_id)
        if not user:
            raise NotFoundError(STUDENT_NOT_FOUND_MESSAGE, detail={"student_id": student_id})
