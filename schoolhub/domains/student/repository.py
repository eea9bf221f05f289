# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Persistence contracts consumed by the student service.

Storage lives outside this package. Concrete repositories implement
these abstract classes against whatever database the deployment uses;
every method is async and may block on I/O.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from schoolhub.domains.student.payload import StudentPayload


@dataclass(frozen=True)
class NamedReference:
    """A stored class or section, identified by its canonical name."""

    name: str


@dataclass(frozen=True)
class MutationResult:
    """Outcome of a create-or-update call.

    Attributes:
        status: False when persistence rejected the write.
        message: Outcome description (e.g. "Email already exists").
        description: Optional extra detail appended to failure messages.
        user_id: Identifier of the created or updated user.
    """

    status: bool
    message: str
    description: str | None = None
    user_id: Any = None


class StudentRepository(ABC):
    """Storage operations for student records."""

    @abstractmethod
    async def find_all_students(self, filters: Mapping[str, Any]) -> Sequence[Any]:
        """Return the students matching the filters."""

    @abstractmethod
    async def find_student_detail(self, student_id: Any) -> Any | None:
        """Return one student's full record, or None."""

    @abstractmethod
    async def find_student_to_set_status(
        self,
        user_id: Any,
        reviewer_id: Any,
        status: Any,
    ) -> int:
        """Change a student's access status and return the affected row count."""

    @abstractmethod
    async def add_or_update_student(self, payload: StudentPayload) -> MutationResult:
        """Create or update a student from a canonical payload."""

    @abstractmethod
    async def find_class_by_name(self, name: str) -> NamedReference | None:
        """Look up a class by user-supplied name."""

    @abstractmethod
    async def find_section_by_name(self, name: str) -> NamedReference | None:
        """Look up a section by user-supplied name."""


class UserRepository(ABC):
    """Generic user lookups shared across domains."""

    @abstractmethod
    async def find_user_by_id(self, user_id: Any) -> Any | None:
        """Return the user with this id, or None."""
