# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across all test types:
- Unit tests
- API tests
"""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from schoolhub.core.config import clear_settings_cache
from schoolhub.domains.student.repository import MutationResult, NamedReference


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an API-level test using TestClient"
    )


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Reload settings from the environment for every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


# =============================================================================
# Collaborator Fixtures
# =============================================================================


@pytest.fixture
def mock_student_repository() -> AsyncMock:
    """Create a student repository where every lookup succeeds."""
    repo = AsyncMock()
    repo.find_all_students = AsyncMock(return_value=[])
    repo.find_student_detail = AsyncMock(return_value=None)
    repo.find_student_to_set_status = AsyncMock(return_value=1)
    repo.add_or_update_student = AsyncMock(
        return_value=MutationResult(status=True, message="Student updated successfully", user_id=7)
    )
    repo.find_class_by_name = AsyncMock(
        side_effect=lambda name: NamedReference(name=name.title())
    )
    repo.find_section_by_name = AsyncMock(
        side_effect=lambda name: NamedReference(name=name.upper())
    )
    return repo


@pytest.fixture
def mock_user_repository(sample_user) -> AsyncMock:
    """Create a user repository that finds the sample user."""
    repo = AsyncMock()
    repo.find_user_by_id = AsyncMock(return_value=sample_user)
    return repo


@pytest.fixture
def mock_mailer() -> AsyncMock:
    """Create a verification mailer that always succeeds."""
    mailer = AsyncMock()
    mailer.send_account_verification_email = AsyncMock(return_value=None)
    return mailer


# =============================================================================
# Helper Fixtures
# =============================================================================


@pytest.fixture
def sample_user() -> MagicMock:
    """Provide a sample user record."""
    user = MagicMock()
    user.id = 7
    user.email = "student@school.com"
    user.name = "Ada Student"
    return user


@pytest.fixture
def sample_student_payload() -> dict[str, Any]:
    """Provide a loosely-shaped create payload."""
    return {
        "name": "Ada Student",
        "email": "student@school.com",
        "className": "  grade 5  ",
        "section_name": "a",
        "admission_dt": "2025-04-01",
        "father_name": "  Charles  ",
        "guardianPhone": "   ",
        "is_active": True,
    }
