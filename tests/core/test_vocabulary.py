"""
Unit tests for the fixed field vocabularies.
"""

import pytest

from sheet_toolkit.core.models import FIELD_KEYS, FREE_TEXT_KEY, FieldRecord
from sheet_toolkit.core.vocabulary import VOCABULARY, check_record, options_for


def test_vocabulary_covers_every_constrained_field():
    """All fields except the free-text one have options."""
    constrained = set(FIELD_KEYS) - {FREE_TEXT_KEY}
    assert set(VOCABULARY) == constrained


def test_aspect_ratio_options_match_presets():
    assert options_for("aspect_ratio") == ("1:1", "3:4", "4:3", "9:16", "16:9", "21:9")


def test_options_for_free_text_is_empty():
    assert options_for(FREE_TEXT_KEY) == ()


def test_options_for_unknown_key_raises():
    with pytest.raises(KeyError):
        options_for("colour")


def test_check_record_when_all_known_then_no_issues():
    # Arrange
    record = FieldRecord.from_mapping({
        "purpose": "SNS Post",
        "gender": "Female",
        "city": "Tokyo",
        "aspect_ratio": "1:1",
        "additional_words": "anything goes here",
    })

    # Act & Assert
    assert check_record(record) == []


def test_check_record_when_unknown_value_then_reports_label():
    record = FieldRecord.from_mapping({"gender": "Robot"})

    issues = check_record(record)

    assert issues == ["Gender: 'Robot' is not a known option"]


def test_check_record_ignores_empty_values():
    assert check_record(FieldRecord.empty()) == []
