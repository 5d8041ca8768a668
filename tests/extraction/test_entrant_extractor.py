# -*- coding: utf-8 -*-
"""
Entrant extractor tests: label scans, year token, sentinel fallback.
"""
# Third-party
import pytest

# Local imports
from config.intake_config import ENTRANT_LABELS
from dv_intake.extraction.entrant_extractor import compile_label_patterns, extract_entrant_fields


SAMPLE_PLAIN = "Entrant Name: Jane Doe\nConfirmation Number: 123456\nYear of Birth: 1990"


class TestEntrantExtractor:
    """Tests for extract_entrant_fields."""

    def test_plain_text_all_fields(self):
        fields = extract_entrant_fields(SAMPLE_PLAIN, sentinel="Missing")

        assert fields == {
            "entrant_name": "Jane Doe",
            "confirmation_number": "123456",
            "year_of_birth": "1990",
        }

    def test_html_page_has_no_sentinels(self, make_confirmation):
        fields = extract_entrant_fields(make_confirmation(), sentinel="Missing")

        assert "Missing" not in fields.values()
        assert fields["confirmation_number"] == "2025AF1234567890"

    def test_missing_label_is_field_local(self, make_confirmation):
        fields = extract_entrant_fields(make_confirmation(number=None), sentinel="Missing")

        assert fields["confirmation_number"] == "Missing"
        assert fields["entrant_name"] == "Jane Doe"
        assert fields["year_of_birth"] == "1990"

    def test_year_requires_four_digits(self):
        fields = extract_entrant_fields("Year of Birth: 90", sentinel="Missing")

        assert fields["year_of_birth"] == "Missing"

    def test_year_takes_only_the_digits(self):
        fields = extract_entrant_fields("Year of Birth: 1990 (verified)", sentinel="Missing")

        assert fields["year_of_birth"] == "1990"

    def test_no_labels_is_all_sentinel(self):
        fields = extract_entrant_fields("<p>Nothing to see</p>", sentinel="Manque")

        assert fields == {
            "entrant_name": "Manque",
            "confirmation_number": "Manque",
            "year_of_birth": "Manque",
        }

    def test_value_trimmed(self):
        fields = extract_entrant_fields("Entrant Name:    Jane Doe   \r\n", sentinel="Missing")

        assert fields["entrant_name"] == "Jane Doe"

    def test_idempotent(self, make_confirmation):
        html = make_confirmation()

        assert extract_entrant_fields(html) == extract_entrant_fields(html)

    def test_unknown_rule_rejected(self):
        with pytest.raises(ValueError):
            compile_label_patterns([{"field": "x", "label": "X:", "rule": "nope"}])

    def test_default_table_covers_three_fields(self):
        patterns = compile_label_patterns(ENTRANT_LABELS)

        assert list(patterns) == ["entrant_name", "confirmation_number", "year_of_birth"]


class TestEmptyLabels:
    """A label with no value on its line."""

    def test_empty_name_does_not_take_next_label(self):
        html = (
            "<html><body>\n<p>Entrant Name:</p>\n"
            "<p>Confirmation Number: 123456</p>\n<p>Year of Birth: 1990</p>\n</body></html>"
        )

        fields = extract_entrant_fields(html, sentinel="Missing")

        assert fields == {
            "entrant_name": "Missing",
            "confirmation_number": "123456",
            "year_of_birth": "1990",
        }

    def test_empty_number_does_not_take_next_label(self):
        fields = extract_entrant_fields(
            "Entrant Name: Jane Doe\nConfirmation Number:\nYear of Birth: 1990", sentinel="Missing"
        )

        assert fields["confirmation_number"] == "Missing"
        assert fields["year_of_birth"] == "1990"

    def test_value_in_next_cell(self):
        html = (
            "<html><body>\n<div>Entrant Name:</div>\n<div>Jane Doe</div>\n"
            "<div>Year of Birth: 1990</div>\n</body></html>"
        )

        fields = extract_entrant_fields(html, sentinel="Missing")

        assert fields["entrant_name"] == "Jane Doe"
        assert fields["year_of_birth"] == "1990"

    def test_year_stays_on_its_line(self):
        fields = extract_entrant_fields("Year of Birth:\n1990", sentinel="Missing")

        assert fields["year_of_birth"] == "Missing"

    def test_custom_labels(self):
        fields = extract_entrant_fields(
            "Entrant Name:\nNOTE: pending", sentinel="Missing", labels=["NOTE:"]
        )

        assert fields["entrant_name"] == "Missing"
