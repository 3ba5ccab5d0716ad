"""textstats: descriptive statistics over a block of text.

The feature table over many texts lives in textstats.data.features.
"""

from textstats.text.analyzer import analyze
from textstats.text.result import EMPTY, TextAnalysisResult, format_result

__version__ = "0.1.0"

# format() is the short name for the result renderer
format = format_result

__all__ = [
    "analyze",
    "format",
    "format_result",
    "TextAnalysisResult",
    "EMPTY",
]
