"""Tests for the result value and its formatted rendering."""

import os

from textstats import EMPTY, TextAnalysisResult, analyze, format, format_result


class TestFormatResult:
    """Report layout."""

    def test_contains_all_values(self):
        result = TextAnalysisResult(
            word_count=5,
            sentence_count=2,
            average_word_length=4.5,
            longest_word="hello",
        )

        formatted = format(result)

        assert "Word Count: 5" in formatted
        assert "Sentence Count: 2" in formatted
        assert "Average Word Length: 4.50" in formatted
        assert "Longest Word: hello" in formatted

    def test_empty_longest_word_shows_none(self):
        assert "Longest Word: (none)" in format(EMPTY)

    def test_header_and_footer(self):
        formatted = format(EMPTY)

        assert formatted.startswith("=== Text Analysis Result ===")
        assert formatted.endswith("============================")

    def test_exact_layout(self):
        result = TextAnalysisResult(3, 1, 7 / 3, "here")

        assert format_result(result).split(os.linesep) == [
            "=== Text Analysis Result ===",
            "Word Count: 3",
            "Average Word Length: 2.33",
            "Sentence Count: 1",
            "Longest Word: here",
            "============================",
        ]

    def test_halfway_average_rounds_up(self):
        result = TextAnalysisResult(8, 1, 1.125, "ab")

        assert "Average Word Length: 1.13" in format(result)

    def test_halfway_average_from_analysis(self):
        assert "Average Word Length: 1.13" in format(analyze("a a a a a a a ab"))

    def test_zero_average_has_two_decimals(self):
        assert "Average Word Length: 0.00" in format(EMPTY)

    def test_no_trailing_line_terminator(self):
        assert not format(EMPTY).endswith(os.linesep)

    def test_method_matches_function(self):
        result = analyze("The quick brown fox.")

        assert result.to_formatted_string() == format_result(result)
        assert TextAnalysisResult.to_formatted_string.__doc__

    def test_format_alias(self):
        assert format is format_result


class TestToDict:
    """Dictionary form of a result."""

    def test_keys_and_values(self):
        assert analyze("Hello, world!").to_dict() == {
            "word_count": 2,
            "sentence_count": 1,
            "average_word_length": 5.0,
            "longest_word": "Hello",
        }

    def test_empty(self):
        assert EMPTY.to_dict() == {
            "word_count": 0,
            "sentence_count": 0,
            "average_word_length": 0.0,
            "longest_word": "",
        }
