"""Tolerant JSON extraction from model output."""

from __future__ import annotations

import json

import pytest

from report.parser import ExtractionError, extract_json


# ---------------------------------------------------------------------------
# Strict path
# ---------------------------------------------------------------------------

class TestStrictParse:
    """Text that is valid JSON on its own is parsed as-is."""

    def test_nested_object(self):
        assert extract_json('{"a": {"b": 1}}') == {"a": {"b": 1}}

    def test_matches_json_loads(self):
        text = '{"summary": "x", "severity": 7, "constraints": ["time", "money"], "pattern": null}'
        assert extract_json(text) == json.loads(text)

    def test_surrounding_whitespace(self):
        assert extract_json('\n  {"a": 1}  \n') == {"a": 1}

    def test_non_object_value_is_returned(self):
        assert extract_json("[1, 2, 3]") == [1, 2, 3]
        assert extract_json('"just a string"') == "just a string"


# ---------------------------------------------------------------------------
# Fallback path
# ---------------------------------------------------------------------------

class TestFallbackParse:
    """Wrapped JSON is recovered from the first '{' to the last '}'."""

    def test_code_fence(self):
        assert extract_json('```json\n{"a":1}\n```') == {"a": 1}

    def test_leading_prose(self):
        text = 'Here is your report: {"summary":"ok","severity":5}'
        assert extract_json(text) == {"summary": "ok", "severity": 5}

    def test_prose_on_both_sides(self):
        text = 'Sure.\n{"pathways": [{"name": "Quick Win"}]}\nHope this helps!'
        assert extract_json(text) == {"pathways": [{"name": "Quick Win"}]}

    def test_idempotent(self):
        text = 'Report follows: {"a": [1, {"b": 2}]} end'
        assert extract_json(text) == extract_json(text)


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

class TestExtractionFailure:

    def test_no_braces(self):
        with pytest.raises(ExtractionError, match="no valid JSON object found"):
            extract_json("no json here")

    def test_only_closing_brace_before_opening(self):
        with pytest.raises(ExtractionError):
            extract_json("} nothing here {")

    def test_invalid_content_inside_braces(self):
        with pytest.raises(ExtractionError):
            extract_json('Result: {"summary": "ok", severity: } trailing')

    def test_two_separate_objects(self):
        # The greedy span covers both objects, which is not valid JSON
        with pytest.raises(ExtractionError):
            extract_json('{"a": 1} and also {"b": 2}')

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_numbers_rejected(self, constant):
        with pytest.raises(ExtractionError):
            extract_json(f'{{"severity": {constant}}}')

    def test_non_finite_number_in_wrapped_object(self):
        with pytest.raises(ExtractionError):
            extract_json('Report: {"summary": "ok", "severity": NaN} done')

    def test_error_keeps_raw_text(self):
        with pytest.raises(ExtractionError) as info:
            extract_json("still no json")
        assert info.value.raw_text == "still no json"

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            extract_json("")
