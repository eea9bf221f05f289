# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Canonical student payload and the adapter that builds it.

Clients send student data with mixed key spellings (camelCase,
snake_case and a few legacy aliases). normalize_student_payload()
resolves every recognized field from its first non-null spelling,
trims text fields and turns blank strings into None.

Example:
    >>> payload = normalize_student_payload({"className": "  Grade 5  "})
    >>> payload.class_name
    'Grade 5'
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# Canonical attribute -> accepted spellings, highest priority first.
# The first spelling is also the key used in the persistence record.
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "user_id": ("userId", "id"),
    "class_name": ("class", "className", "class_name"),
    "section": ("section", "sectionName", "section_name"),
    "admission_date": ("admissionDate", "admission_dt"),
    "current_address": ("currentAddress", "current_address"),
    "permanent_address": ("permanentAddress", "permanent_address"),
    "father_name": ("fatherName", "father_name"),
    "father_phone": ("fatherPhone", "father_phone"),
    "mother_name": ("motherName", "mother_name"),
    "mother_phone": ("motherPhone", "mother_phone"),
    "guardian_name": ("guardianName", "guardian_name"),
    "guardian_phone": ("guardianPhone", "guardian_phone"),
    "relation_of_guardian": ("relationOfGuardian", "relation_of_guardian"),
    "system_access": ("systemAccess", "isActive", "is_active"),
    "email": ("email",),
}

# Fields passed through untouched; everything else is trimmed.
RAW_FIELDS = frozenset({"user_id", "admission_date", "system_access"})

KNOWN_KEYS = frozenset(key for spellings in FIELD_ALIASES.values() for key in spellings)


@dataclass(frozen=True)
class StudentPayload:
    """Student data in canonical shape.

    Text fields hold either a non-empty trimmed string or None.
    Keys the adapter does not recognize are kept in ``extra`` and
    forwarded to persistence unchanged.
    """

    user_id: Any = None
    class_name: str | None = None
    section: str | None = None
    admission_date: Any = None
    current_address: str | None = None
    permanent_address: str | None = None
    father_name: str | None = None
    father_phone: str | None = None
    mother_name: str | None = None
    mother_phone: str | None = None
    guardian_name: str | None = None
    guardian_phone: str | None = None
    relation_of_guardian: str | None = None
    system_access: Any = None
    email: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_record(self) -> dict[str, Any]:
        """Render the payload as the camelCase record stored by persistence."""
        record = dict(self.extra)
        for name, spellings in FIELD_ALIASES.items():
            record[spellings[0]] = getattr(self, name)
        return record


def normalize_text(value: Any) -> Any:
    """Trim a string, mapping blank results to None.

    Non-string values are returned unchanged.
    """
    if not isinstance(value, str):
        return value
    trimmed = value.strip()
    return trimmed if trimmed else None


def _first_present(raw: Mapping[str, Any], spellings: tuple[str, ...]) -> Any:
    for key in spellings:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def normalize_student_payload(
    raw: Mapping[str, Any] | StudentPayload | None = None,
) -> StudentPayload:
    """Build a canonical StudentPayload from a loosely-shaped mapping.

    Args:
        raw: Incoming request body, or an already canonical payload.

    Returns:
        A new StudentPayload. The input is never modified.
    """
    if raw is None:
        raw = {}
    elif isinstance(raw, StudentPayload):
        raw = raw.to_record()

    values: dict[str, Any] = {}
    for name, spellings in FIELD_ALIASES.items():
        value = _first_present(raw, spellings)
        values[name] = value if name in RAW_FIELDS else normalize_text(value)

    extra = {key: value for key, value in raw.items() if key not in KNOWN_KEYS}
    return StudentPayload(**values, extra=extra)
