"""Tabulate text analysis results for many texts as a polars DataFrame.

Each input text is analyzed independently with analyze(); the results are
collected into one row per text under FEATURES_SCHEMA. describe() summarizes
the distribution of a numeric column, for example to see how word counts
spread across a corpus.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

import polars as pl

from textstats.text.analyzer import analyze

logger = logging.getLogger(__name__)

FEATURES_SCHEMA = {
    "text_id": pl.String,
    "word_count": pl.Int64,
    "sentence_count": pl.Int64,
    "average_word_length": pl.Float64,
    "longest_word": pl.String,
}

# Quantile labels reported by describe(), in output order
PERCENTILES = {
    "p10": 0.10,
    "p25": 0.25,
    "p75": 0.75,
    "p90": 0.90,
}

PROGRESS_EVERY = 100

_STAT_LABELS = [
    ("min", "Minimum"),
    ("p10", "10th Percentile"),
    ("p25", "25th Percentile"),
    ("median", "Median (50th)"),
    ("mean", "Mean"),
    ("p75", "75th Percentile"),
    ("p90", "90th Percentile"),
    ("max", "Maximum"),
]


def compute_features_for_text(text_id: str, text: Optional[str]) -> dict:
    """
    Compute analysis features for a single text.

    Args:
        text_id: Identifier stored in the text_id column
        text: The text to analyze, possibly None

    Returns:
        Dictionary with one entry per FEATURES_SCHEMA column
    """
    row = {"text_id": text_id}
    row.update(analyze(text).to_dict())
    return row


def analyze_texts(
    texts: Iterable[Optional[str]], ids: Optional[Sequence[str]] = None
) -> pl.DataFrame:
    """
    Analyze every text and return the results as a DataFrame.

    Args:
        texts: Texts to analyze, in output row order
        ids: Optional identifiers, one per text. Defaults to the
             zero-based position of each text as a string.

    Returns:
        DataFrame with FEATURES_SCHEMA, one row per text

    Raises:
        ValueError: If ids is given and its length differs from texts
    """
    texts = list(texts)
    if ids is None:
        ids = [str(idx) for idx in range(len(texts))]
    elif len(ids) != len(texts):
        raise ValueError(
            f"ids has {len(ids)} entries but texts has {len(texts)}"
        )

    total = len(texts)
    logger.info(f"Analyzing {total} texts")

    records: List[dict] = []
    for idx, (text_id, text) in enumerate(zip(ids, texts), start=1):
        records.append(compute_features_for_text(str(text_id), text))

        if idx % PROGRESS_EVERY == 0 or idx == total:
            logger.info(f"Processed {idx}/{total} texts")

    return pl.DataFrame(records, schema=FEATURES_SCHEMA)


def describe(df: pl.DataFrame, field: str) -> Dict[str, float]:
    """
    Compute distribution statistics for a numeric column.

    Args:
        df: DataFrame containing the column, typically from analyze_texts()
        field: Name of the column to summarize

    Returns:
        Mapping of min, p10, p25, median, mean, p75, p90 and max to floats.
        Every statistic is 0.0 for an empty DataFrame.

    Raises:
        ValueError: If the column is missing or not numeric
    """
    if field not in df.columns:
        raise ValueError(
            f"Missing field in dataset: {field}. Found fields: {df.columns}"
        )

    series = df[field]
    if not series.dtype.is_numeric():
        raise ValueError(f"Field '{field}' is not numeric: {series.dtype}")

    if len(series) == 0:
        return {key: 0.0 for key, _ in _STAT_LABELS}

    stats = {
        "min": float(series.min()),
        "median": float(series.median()),
        "mean": float(series.mean()),
        "max": float(series.max()),
    }
    for key, quantile in PERCENTILES.items():
        stats[key] = float(series.quantile(quantile))

    return {key: stats[key] for key, _ in _STAT_LABELS}


def format_statistics(stats: Dict[str, float], field: str) -> str:
    """
    Render statistics from describe() as a fixed-width report.

    Args:
        stats: Output of describe()
        field: Name of the summarized column, shown in the heading

    Returns:
        Multi-line string, one statistic per line
    """
    lines = ["=" * 60, f"Statistics for: {field}", "=" * 60]
    for key, label in _STAT_LABELS:
        lines.append(f"  {label + ':':<19}{stats[key]:>12.2f}")

    return "\n".join(lines)
