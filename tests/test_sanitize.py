"""Tests for JSON span extraction from model output."""

import json

import pytest

from beacon.sanitize import extract_json_span


class TestExtractJsonSpan:
    """Tests for extract_json_span."""

    def test_bare_object(self) -> None:
        assert extract_json_span('{"a": 1}') == '{"a": 1}'

    def test_bare_array(self) -> None:
        assert extract_json_span("[1, 2, 3]") == "[1, 2, 3]"

    def test_strips_commentary(self) -> None:
        raw = 'Sure! Here is the analysis:\n{"verdict": "False"}\nLet me know if...'
        assert extract_json_span(raw) == '{"verdict": "False"}'

    def test_strips_markdown_fences(self) -> None:
        raw = '```json\n{"claims": [], "biasAnalysis": {"score": 80}}\n```'
        span = extract_json_span(raw)
        assert span is not None
        assert json.loads(span) == {"claims": [], "biasAnalysis": {"score": 80}}

    def test_nested_structures(self) -> None:
        raw = 'x {"a": {"b": [1, {"c": []}]}, "d": [[]]} y'
        assert extract_json_span(raw) == '{"a": {"b": [1, {"c": []}]}, "d": [[]]}'

    def test_braces_inside_strings_are_ignored(self) -> None:
        raw = 'note {"explanation": "uses } and ] and { freely"} end'
        span = extract_json_span(raw)
        assert span is not None
        assert json.loads(span) == {"explanation": "uses } and ] and { freely"}

    def test_escaped_quotes_inside_strings(self) -> None:
        raw = r'{"explanation": "he said \"}\" loudly"}'
        span = extract_json_span(raw)
        assert span is not None
        assert json.loads(span)["explanation"] == 'he said "}" loudly'

    def test_stops_at_first_balanced_span(self) -> None:
        """Trailing braces in commentary do not extend the span."""
        raw = '{"a": 1} and then {"b": 2}'
        assert extract_json_span(raw) == '{"a": 1}'

    def test_array_before_object(self) -> None:
        raw = 'result: [{"x": 1}] trailing {"y": 2}'
        assert extract_json_span(raw) == '[{"x": 1}]'

    @pytest.mark.parametrize("raw", [None, "", "no json here at all"])
    def test_no_opener_returns_none(self, raw: str | None) -> None:
        assert extract_json_span(raw) is None

    @pytest.mark.parametrize(
        "raw",
        [
            '{"claims": ["a", "b"], "biasAnalysis": {"score": 4',
            '{"a": [1, 2}',
            '[{"a": 1]',
            '{"unterminated": "string}',
        ],
    )
    def test_unbalanced_returns_none(self, raw: str) -> None:
        """Truncated output or mismatched closers fail explicitly."""
        assert extract_json_span(raw) is None

    @pytest.mark.parametrize(
        "value",
        [
            {"claims": ["The moon is made of cheese."], "biasAnalysis": {"score": 12}},
            [1, "two", {"three": [3]}],
            {"text": "braces { } [ ] in a string", "n": None, "ok": True},
            {"unicode": "café – “quoted”"},
        ],
    )
    @pytest.mark.parametrize(
        ("prefix", "suffix"),
        [
            ("", ""),
            ("Here you go: ", ""),
            ("", "\nHope this helps."),
            ("```json\n", "\n```"),
            ("Analysis complete.\n\n", "\n\nNote: scores are approximate."),
        ],
    )
    def test_embedded_value_parses_back(self, value: object, prefix: str, suffix: str) -> None:
        raw = prefix + json.dumps(value) + suffix
        span = extract_json_span(raw)
        assert span is not None
        assert json.loads(span) == value
