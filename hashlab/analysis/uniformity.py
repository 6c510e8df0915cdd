"""
Uniformity test for 8-bit hashes.

Hashes every non-blank line into one of 256 buckets and measures how
far the resulting histogram is from a flat one:

  - expected count per bucket (total / 256)
  - min / max over non-empty buckets and the number of empty buckets
  - chi-square statistic and its p-value (255 degrees of freedom)
  - counts grouped into 8 ranges of 32 consecutive hash values

A good hash gives a chi-square close to 255 (its degrees of freedom)
and a p-value well above 0.01. Values near 0 mean a suspiciously
perfect spread; very large values mean clustering.
"""

from dataclasses import dataclass
from typing import Iterable

import numpy as np
import pandas as pd
from scipy.stats import chi2

from hashlab.hashing.simple_hash import (
    HASH_MASK,
    NUM_BUCKETS,
    HashFunction,
    configured_hash_function,
    hash_name,
)
from hashlab.utils.errors import EmptyInputSet

RANGE_SIZE = 32
NUM_RANGES = NUM_BUCKETS // RANGE_SIZE
DEGREES_OF_FREEDOM = NUM_BUCKETS - 1


@dataclass(frozen=True)
class UniformityReport:
    """Summary of one uniformity run. Built once, never mutated."""

    total_lines: int
    expected_per_bucket: float
    min_count: int
    max_count: int
    empty_buckets: int
    chi_square: float
    p_value: float
    range_counts: tuple[tuple[int, int, int], ...]
    buckets: tuple[int, ...]
    hash_name: str = "simple"

    @property
    def used_buckets(self) -> int:
        return NUM_BUCKETS - self.empty_buckets

    def to_frame(self) -> pd.DataFrame:
        """Per-bucket table: one row per hash value, ascending."""
        return pd.DataFrame({
            "hash_value": np.arange(NUM_BUCKETS),
            "occurrences": np.asarray(self.buckets, dtype=np.int64),
        })


def build_histogram(lines: Iterable[str], hash_fn: HashFunction) -> np.ndarray:
    """Count hash values of the non-blank lines into 256 buckets."""
    hashes = [hash_fn(line) & HASH_MASK for line in lines if line.strip()]
    if not hashes:
        return np.zeros(NUM_BUCKETS, dtype=np.int64)
    return np.bincount(np.asarray(hashes, dtype=np.int64), minlength=NUM_BUCKETS)


def summarize_histogram(counts, hash_label: str = "simple") -> UniformityReport:
    """Compute uniformity statistics from a finished 256-bucket histogram.

    Args:
        counts: Sequence of 256 non-negative occurrence counts.
        hash_label: Name recorded in the report.

    Returns:
        UniformityReport.

    Raises:
        EmptyInputSet: if the histogram is empty (expected count would be 0).
        ValueError: if counts does not have exactly 256 entries.
    """
    counts = np.asarray(counts, dtype=np.int64)
    if counts.shape != (NUM_BUCKETS,):
        raise ValueError(f"Histogram must have {NUM_BUCKETS} buckets, got shape {counts.shape}")

    total = int(counts.sum())
    if total == 0:
        raise EmptyInputSet("Uniformity test")

    expected = total / NUM_BUCKETS
    chi_sq = float(np.sum((counts - expected) ** 2 / expected))
    p_value = float(chi2.sf(chi_sq, DEGREES_OF_FREEDOM))

    used = counts[counts > 0]
    grouped = counts.reshape(NUM_RANGES, RANGE_SIZE).sum(axis=1)
    range_counts = tuple(
        (i * RANGE_SIZE, i * RANGE_SIZE + RANGE_SIZE - 1, int(c))
        for i, c in enumerate(grouped)
    )

    return UniformityReport(
        total_lines=total,
        expected_per_bucket=expected,
        min_count=int(used.min()),
        max_count=int(used.max()),
        empty_buckets=int(np.count_nonzero(counts == 0)),
        chi_square=chi_sq,
        p_value=p_value,
        range_counts=range_counts,
        buckets=tuple(int(c) for c in counts),
        hash_name=hash_label,
    )


def analyze_uniformity(
    lines: Iterable[str], hash_fn: HashFunction | None = None
) -> UniformityReport:
    """Run the uniformity test over a sequence of lines.

    Lines that are empty after stripping whitespace are skipped; the rest
    are hashed as-is.

    Args:
        lines: Any iterable of strings.
        hash_fn: Hash to test. Defaults to the configured hash.

    Returns:
        UniformityReport.

    Raises:
        EmptyInputSet: if no non-blank line was seen.
    """
    if hash_fn is None:
        hash_fn = configured_hash_function()
    counts = build_histogram(lines, hash_fn)
    return summarize_histogram(counts, hash_label=hash_name(hash_fn))
