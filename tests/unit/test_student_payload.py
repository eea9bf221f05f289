# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for student payload normalization."""

from datetime import date

import pytest

from schoolhub.domains.student.payload import (
    FIELD_ALIASES,
    StudentPayload,
    normalize_student_payload,
    normalize_text,
)


class TestNormalizeText:
    """Tests for text trimming."""

    def test_trims_whitespace(self) -> None:
        """Test surrounding whitespace is removed."""
        assert normalize_text("  Grade 5  ") == "Grade 5"

    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    def test_blank_becomes_none(self, value: str) -> None:
        """Test blank strings become None."""
        assert normalize_text(value) is None

    def test_non_string_passes_through(self) -> None:
        """Test non-string values are returned unchanged."""
        assert normalize_text(5) == 5
        assert normalize_text(False) is False
        assert normalize_text(None) is None


class TestNormalizeStudentPayload:
    """Tests for alias resolution."""

    def test_canonical_name_wins_over_aliases(self) -> None:
        """Test 'class' is preferred over 'className' and 'class_name'."""
        payload = normalize_student_payload(
            {"class": "Grade 5", "className": "Grade 6", "class_name": "Grade 7"}
        )

        assert payload.class_name == "Grade 5"

    def test_camel_case_wins_over_snake_case(self) -> None:
        """Test camelCase alias is preferred over snake_case."""
        payload = normalize_student_payload(
            {"sectionName": "B", "section_name": "C"}
        )

        assert payload.section == "B"

    def test_null_alias_falls_through(self) -> None:
        """Test a None value does not shadow a lower-priority spelling."""
        payload = normalize_student_payload({"class": None, "class_name": "Grade 2"})

        assert payload.class_name == "Grade 2"

    def test_blank_string_alias_does_not_fall_through(self) -> None:
        """Test an empty string is taken then normalized to None."""
        payload = normalize_student_payload({"class": "", "className": "Grade 3"})

        assert payload.class_name is None

    def test_text_fields_trimmed(self) -> None:
        """Test text fields are trimmed and blanks removed."""
        payload = normalize_student_payload(
            {
                "class": "  Grade 5  ",
                "father_name": " Charles ",
                "motherPhone": "",
                "guardianName": "   ",
                "email": " ada@school.com ",
            }
        )

        assert payload.class_name == "Grade 5"
        assert payload.father_name == "Charles"
        assert payload.mother_phone is None
        assert payload.guardian_name is None
        assert payload.email == "ada@school.com"

    def test_raw_fields_untouched(self) -> None:
        """Test identity, dates and access flag are not trimmed."""
        admitted = date(2025, 4, 1)
        payload = normalize_student_payload(
            {"id": " 12 ", "admission_dt": admitted, "is_active": False}
        )

        assert payload.user_id == " 12 "
        assert payload.admission_date == admitted
        assert payload.system_access is False

    def test_system_access_aliases(self) -> None:
        """Test systemAccess is resolved before isActive and is_active."""
        payload = normalize_student_payload({"isActive": True, "is_active": False})

        assert payload.system_access is True

    def test_user_id_prefers_user_id_over_id(self) -> None:
        """Test userId wins over id."""
        payload = normalize_student_payload({"userId": 3, "id": 4})

        assert payload.user_id == 3

    def test_missing_fields_are_none(self) -> None:
        """Test an empty input produces an all-None payload."""
        payload = normalize_student_payload({})

        assert payload == StudentPayload()
        assert normalize_student_payload(None) == StudentPayload()

    def test_unknown_keys_kept_in_extra(self) -> None:
        """Test unrecognized keys are preserved and aliases are not."""
        payload = normalize_student_payload(
            {"name": "Ada", "roll": 14, "className": "Grade 5"}
        )

        assert payload.extra == {"name": "Ada", "roll": 14}

    def test_input_not_modified(self) -> None:
        """Test the incoming mapping is left intact."""
        raw = {"className": "  Grade 5 "}
        normalize_student_payload(raw)

        assert raw == {"className": "  Grade 5 "}

    def test_renormalizing_is_a_fixed_point(self, sample_student_payload) -> None:
        """Test normalizing a canonical payload changes nothing."""
        once = normalize_student_payload(sample_student_payload)

        assert normalize_student_payload(once) == once
        assert normalize_student_payload(once.to_record()) == once


class TestToRecord:
    """Tests for the persistence record rendering."""

    def test_record_uses_primary_spellings(self) -> None:
        """Test the record is keyed by each field's first spelling."""
        payload = normalize_student_payload(
            {"class_name": "Grade 5", "is_active": True, "name": "Ada"}
        )

        record = payload.to_record()

        assert record["class"] == "Grade 5"
        assert record["systemAccess"] is True
        assert record["name"] == "Ada"
        assert set(record) == {spellings[0] for spellings in FIELD_ALIASES.values()} | {"name"}
