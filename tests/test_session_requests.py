"""
Tests for quiz setup validation.
"""

import pytest

from app.catalog_registry import get_catalog_spec
from app.session_requests import InvalidQuizRequest, normalize_quiz_request


class TestNormalizeQuizRequest:

    def test_valid_request(self):
        request = normalize_quiz_request("kanji", "5", "30", max_items=16)

        assert request.item_count == 5
        assert request.total_questions == 30
        assert request.storage_key == "kanji-5"

    @pytest.mark.parametrize("item_count", ["3", "17", "abc", "", None, True])
    def test_rejects_bad_item_count(self, item_count):
        with pytest.raises(InvalidQuizRequest):
            normalize_quiz_request("kanji", item_count, "20", max_items=16)

    @pytest.mark.parametrize("total_questions,expected", [
        ("", 20),
        ("abc", 20),
        ("0", 20),
        ("2", 12),
        ("25", 25),
    ])
    def test_question_count_defaults_and_floor(self, total_questions, expected):
        request = normalize_quiz_request("vocab", 12, total_questions, max_items=16)

        assert request.total_questions == expected

    def test_default_grows_with_item_count(self):
        request = normalize_quiz_request("vocab", 30, "", max_items=40)

        assert request.total_questions == 30

    @pytest.mark.parametrize("catalog_type,expected", [
        ("kanji", "kanji-5"),
        ("vocab", "vocab-5"),
    ])
    def test_registry_catalogs_use_short_storage_keys(self, catalog_type, expected):
        spec = get_catalog_spec(catalog_type)
        request = normalize_quiz_request(spec.catalog_type, 5, "", max_items=16)

        assert request.storage_key == expected
