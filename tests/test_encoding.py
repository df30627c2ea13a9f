# ==============================================
# Tests for JSON Encoding Helpers
# ==============================================

from datetime import date, datetime, timezone

import pytest

from gateway_emit.encoding import parse_json, to_compact_json


class TestParseJson:
    """Strict decoding."""

    def test_parses_objects(self):
        assert parse_json('{"a": [1, 2.5, null]}') == {"a": [1, 2.5, None]}

    @pytest.mark.parametrize("text", ["NaN", "Infinity", "-Infinity", '{"a": NaN}', "[1, Infinity]"])
    def test_rejects_non_finite_literals(self, text):
        with pytest.raises(ValueError):
            parse_json(text)


class TestToCompactJson:
    """Compact serialization."""

    def test_compact_separators(self):
        assert to_compact_json({"key": "value", "n": [1, 2]}) == '{"key":"value","n":[1,2]}'

    def test_non_ascii_kept(self):
        assert to_compact_json("héllo") == '"héllo"'

    def test_date_as_iso_string(self):
        assert to_compact_json({"when": date(2020, 1, 1)}) == '{"when":"2020-01-01"}'

    def test_datetime_as_iso_string(self):
        value = datetime(2020, 1, 1, 12, 30, tzinfo=timezone.utc)
        assert to_compact_json(value) == '"2020-01-01T12:30:00+00:00"'

    def test_set_and_bytes(self):
        assert to_compact_json({"tags": {"b", "a"}, "raw": b"hi"}) == '{"tags":["a","b"],"raw":"aGk="}'

    def test_unknown_type_still_fails(self):
        with pytest.raises(TypeError):
            to_compact_json(object())
