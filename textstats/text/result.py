"""Result value produced by the text analyzer, and its display rendering."""

import os
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Union

NONE_PLACEHOLDER = "(none)"
HEADER = "=== Text Analysis Result ==="
FOOTER = "=" * 28


@dataclass(frozen=True)
class TextAnalysisResult:
    """Descriptive statistics for a single block of text.

    When word_count is 0, average_word_length is 0.0 and longest_word is "".
    """

    word_count: int = 0
    sentence_count: int = 0
    average_word_length: float = 0.0
    longest_word: str = ""

    @classmethod
    def empty(cls) -> "TextAnalysisResult":
        """Result for blank input: every field at its zero value."""
        return EMPTY

    def to_dict(self) -> Dict[str, Union[int, float, str]]:
        """Convert analysis result to dictionary."""
        return {
            "word_count": self.word_count,
            "sentence_count": self.sentence_count,
            "average_word_length": self.average_word_length,
            "longest_word": self.longest_word,
        }

    def to_formatted_string(self) -> str:
        """Render this result with format_result()."""
        return format_result(self)


EMPTY = TextAnalysisResult()


def format_result(result: TextAnalysisResult) -> str:
    """Render a result as a fixed multi-line report.

    Lines are joined with the platform line terminator and the footer is
    not followed by one.

    Args:
        result: The analysis result to render

    Returns:
        Report starting with the header line and ending with the footer rule
    """
    lines = [HEADER]
    lines.append(f"Word Count: {result.word_count}")
    lines.append(f"Average Word Length: {_two_decimals(result.average_word_length)}")
    lines.append(f"Sentence Count: {result.sentence_count}")
    lines.append(f"Longest Word: {result.longest_word or NONE_PLACEHOLDER}")
    lines.append(FOOTER)

    return os.linesep.join(lines)


def _two_decimals(value: float) -> str:
    # Halfway values round up: 1.125 -> "1.13"
    return str(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
