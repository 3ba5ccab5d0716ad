"""Single-pass descriptive statistics over a block of text.

Words are whitespace-delimited fragments with every non-alphanumeric
character removed; fragments left empty by cleaning are dropped. Sentences
are counted on the raw text, independently of word cleaning.
"""

import logging
import re
from typing import List, Optional

from textstats.text.result import EMPTY, TextAnalysisResult

logger = logging.getLogger(__name__)

WORD_DELIMITERS = " \t\n\r"
SENTENCE_DELIMITERS = ".!?"

# Information separators count as whitespace for str.isspace() but not here
_NOT_BLANK = frozenset("\x1c\x1d\x1e\x1f")

_WORD_SPLIT = re.compile(f"[{re.escape(WORD_DELIMITERS)}]")
_SENTENCE_SPLIT = re.compile(f"[{re.escape(SENTENCE_DELIMITERS)}]")


def analyze(text: Optional[str]) -> TextAnalysisResult:
    """Compute word count, sentence count, average word length and longest word.

    Never raises: None, empty and whitespace-only input all return EMPTY.

    Args:
        text: The text to analyze, possibly None

    Returns:
        TextAnalysisResult for the text
    """
    if not text or _is_blank(text):
        logger.debug("Blank input, returning empty result")
        return EMPTY

    words = _extract_words(text)

    result = TextAnalysisResult(
        word_count=_count_words(words),
        sentence_count=_count_sentences(text),
        average_word_length=_average_word_length(words),
        longest_word=_longest_word(words),
    )
    logger.debug(
        f"Analyzed {len(text)} chars: {result.word_count} words, "
        f"{result.sentence_count} sentences"
    )
    return result


def _is_blank(text: str) -> bool:
    return all(char.isspace() and char not in _NOT_BLANK for char in text)


def _clean_word(word: str) -> str:
    """Keep only letters and digits."""
    return "".join(char for char in word if char.isalnum())


def _extract_words(text: str) -> List[str]:
    """Split text into cleaned words, in order of appearance.

    Returns:
        List of non-empty words with punctuation and symbols removed
    """
    fragments = [f for f in _WORD_SPLIT.split(text) if f]
    cleaned = (_clean_word(fragment) for fragment in fragments)
    return [word for word in cleaned if word]


def _count_words(words: List[str]) -> int:
    return len(words)


def _count_sentences(text: str) -> int:
    # Fragments are not stripped: "!!! ... ???" leaves two " " fragments
    return len([s for s in _SENTENCE_SPLIT.split(text) if s])


def _average_word_length(words: List[str]) -> float:
    if not words:
        return 0.0
    return sum(len(word) for word in words) / len(words)


def _longest_word(words: List[str]) -> str:
    # max() keeps the first of equally long words
    if not words:
        return ""
    return max(words, key=len)
