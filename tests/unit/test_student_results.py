# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for repository result interpretation and error kinds."""

import pytest

from schoolhub.domains.student.errors import (
    ConflictError,
    ErrorKind,
    InternalError,
    NotFoundError,
    ValidationError,
    error_for_kind,
)
from schoolhub.domains.student.repository import MutationResult
from schoolhub.domains.student.results import (
    mutation_failure_kind,
    mutation_failure_message,
    mutation_status_code,
    raise_for_mutation,
    require_status_change,
    require_students,
)


class TestErrorKinds:
    """Tests for the error taxonomy."""

    @pytest.mark.parametrize(
        "kind,code",
        [
            (ErrorKind.VALIDATION, 400),
            (ErrorKind.CONFLICT, 409),
            (ErrorKind.NOT_FOUND, 404),
            (ErrorKind.INTERNAL, 500),
        ],
    )
    def test_status_codes(self, kind: ErrorKind, code: int) -> None:
        """Test each kind maps to its status code."""
        assert kind.status_code == code
        assert error_for_kind(kind, "boom").status_code == code

    def test_error_carries_message_and_detail(self) -> None:
        """Test errors expose message and detail."""
        error = NotFoundError("Student not found", detail={"student_id": 1})

        assert str(error) == "Student not found"
        assert error.message == "Student not found"
        assert error.detail == {"student_id": 1}
        assert error.kind is ErrorKind.NOT_FOUND


class TestMutationStatusMapping:
    """Tests for persistence failure classification."""

    def test_duplicate_email_is_conflict(self) -> None:
        """Test the exact duplicate-email message maps to 409."""
        assert mutation_failure_kind("Email already exists") is ErrorKind.CONFLICT
        assert mutation_status_code("Email already exists") == 409

    @pytest.mark.parametrize(
        "message",
        [
            "email already exists",
            "Email already exists.",
            "Email already exists for another user",
            "Invalid roll number",
            "",
        ],
    )
    def test_everything_else_is_bad_request(self, message: str) -> None:
        """Test only an exact match is a conflict."""
        assert mutation_status_code(message) == 400

    def test_message_with_description(self) -> None:
        """Test description is appended after a period."""
        result = MutationResult(status=False, message="X", description="Y")

        assert mutation_failure_message(result) == "X. Y"

    def test_message_without_description(self) -> None:
        """Test message alone when no description."""
        result = MutationResult(status=False, message="X")

        assert mutation_failure_message(result) == "X"

    def test_raise_for_mutation_conflict(self) -> None:
        """Test failed duplicate email raises ConflictError."""
        with pytest.raises(ConflictError) as exc_info:
            raise_for_mutation(MutationResult(status=False, message="Email already exists"))

        assert exc_info.value.status_code == 409

    def test_raise_for_mutation_validation(self) -> None:
        """Test other failures raise ValidationError with joined message."""
        with pytest.raises(ValidationError) as exc_info:
            raise_for_mutation(MutationResult(status=False, message="X", description="Y"))

        assert exc_info.value.message == "X. Y"
        assert exc_info.value.status_code == 400

    def test_raise_for_mutation_success_passes_through(self) -> None:
        """Test successful result is returned unchanged."""
        result = MutationResult(status=True, message="ok", user_id=5)

        assert raise_for_mutation(result) is result


class TestNoDataPolicies:
    """Tests for empty-list and zero-row handling."""

    def test_empty_students_not_found(self) -> None:
        """Test an empty list raises NotFoundError."""
        with pytest.raises(NotFoundError, match="Students not found"):
            require_students([])

    def test_students_returned_unchanged(self) -> None:
        """Test a non-empty list is returned as-is."""
        students = [{"id": 1}]

        assert require_students(students) is students

    @pytest.mark.parametrize("affected", [0, -1, None])
    def test_zero_rows_internal_error(self, affected) -> None:
        """Test no affected rows raises InternalError."""
        with pytest.raises(InternalError, match="Unable to disable student") as exc_info:
            require_status_change(affected)

        assert exc_info.value.status_code == 500

    def test_positive_rows_accepted(self) -> None:
        """Test a positive count passes."""
        assert require_status_change(2) == 2
