# -*- coding: utf-8 -*-
"""
PersonRecord / RawDocument tests.
"""
# Standard library
from pathlib import Path

# Local imports
from dv_intake.utils.dataclasses import RECORD_KEYS, DocumentKind, PersonRecord, RawDocument


class TestPersonRecord:
    """Tests for PersonRecord."""

    def test_blank_uses_sentinel_everywhere_but_folder(self):
        record = PersonRecord.blank("Applicant1", sentinel="Manque")
        as_dict = record.to_dict()

        assert as_dict.pop("folder") == "Applicant1"
        assert set(as_dict.values()) == {"Manque"}

    def test_overlay_ignores_unknown_keys(self):
        record = PersonRecord.blank("A").overlay({"entrant_name": "Jane", "status": "x"})

        assert record.entrant_name == "Jane"
        assert "status" not in record.to_dict()

    def test_overlay_returns_copy(self):
        blank = PersonRecord.blank("A")
        blank.overlay({"gender": "Female"})

        assert blank.gender == "Missing"

    def test_key_order(self):
        assert list(PersonRecord().to_dict()) == list(RECORD_KEYS.values())
        assert list(RECORD_KEYS.values())[0] == "entrantName"
        assert list(RECORD_KEYS.values())[-1] == "folder"

    def test_serialized_record_has_eleven_fields(self):
        record = PersonRecord.blank("A").overlay({"entrant_name": "Jane Doe", "extra": "x"})

        assert len(record.to_dict()) == 11
        assert not hasattr(record, "__len__")


class TestRawDocument:
    """Tests for RawDocument."""

    def test_get_defaults_to_sentinel(self):
        doc = RawDocument(path=Path("a.html"), folder_key="A", kind=DocumentKind.UNKNOWN)

        assert doc.get("entrant_name") == "Missing"
        assert doc.get("entrant_name", "Manque") == "Manque"
