"""
Report formatting and result files for HashLab.

Turns UniformityReport / AvalancheReport objects into:
  1. Console text
  2. Tab-separated result files (uniformity_results.txt, avalanche_results.txt)
  3. Optional PNG charts (bucket histogram, bit-difference histogram)

Nothing here computes statistics; it only presents them.
"""

from pathlib import Path

import numpy as np
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from hashlab.analysis.avalanche import IDEAL_BITS_CHANGED, AvalancheReport
from hashlab.analysis.uniformity import UniformityReport
from hashlab.hashing.simple_hash import HASH_BITS, NUM_BUCKETS
from hashlab.utils.logger import get_logger

logger = get_logger(__name__)


def truncate(text: str, max_len: int = 20) -> str:
    """Cut text to max_len characters, marking the cut with '...'."""
    if len(text) <= max_len:
        return text
    return text[:max_len] + "..."


# ───────────────────────────────────────────────────────────────────────────
# Console text
# ───────────────────────────────────────────────────────────────────────────

def format_uniformity(report: UniformityReport) -> str:
    lines = [
        "=== UNIFORMITY TEST ===",
        "",
        f"Hash function: {report.hash_name}",
        f"Total lines processed: {report.total_lines}",
        f"Hash values used: {NUM_BUCKETS} (0-{NUM_BUCKETS - 1})",
        f"Expected per bucket: {report.expected_per_bucket:.2f}",
        f"Min occurrences: {report.min_count}",
        f"Max occurrences: {report.max_count}",
        f"Empty buckets: {report.empty_buckets}",
        f"Chi-square value: {report.chi_square:.2f}",
        f"Chi-square p-value: {report.p_value:.4f}",
        "",
        "Distribution by range:",
        "Range\t\tCount",
        "-----\t\t-----",
    ]
    for start, end, count in report.range_counts:
        lines.append(f"{start}-{end}\t\t{count}")
    return "\n".join(lines)


def format_avalanche(report: AvalancheReport) -> str:
    ideal_pct = IDEAL_BITS_CHANGED / HASH_BITS * 100
    lines = [
        "=== AVALANCHE EFFECT TEST ===",
        "",
        f"Hash function: {report.hash_name}",
        f"Total tests: {report.total_tests}",
        f"Average bits changed: {report.average_bits_changed:.2f}",
        f"Percentage: {report.percentage:.1f}%",
        f"Ideal is {ideal_pct:.0f}% ({IDEAL_BITS_CHANGED:.0f} bits out of {HASH_BITS})",
        "",
        "Bits changed\tTests",
    ]
    for bits, count in enumerate(report.bit_difference_counts):
        lines.append(f"{bits}\t\t{count}")
    lines.append("")
    lines.append("Flip rate per output bit: " +
                 " ".join(f"b{i}={r:.2f}" for i, r in enumerate(report.bit_flip_rates)))
    return "\n".join(lines)


# ───────────────────────────────────────────────────────────────────────────
# Result files
# ───────────────────────────────────────────────────────────────────────────

def _write_rows(f, table: pd.DataFrame, sep: str = "\t") -> None:
    """Write a table verbatim: no quoting, no escaping of cell text."""
    f.write("\t".join(str(c) for c in table.columns) + "\n")
    for row in table.itertuples(index=False):
        f.write(sep.join(str(v) for v in row) + "\n")


def save_distribution(report: UniformityReport, path: str | Path) -> Path:
    """Write all 256 (hash value, occurrences) rows, ascending by hash value."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = report.to_frame().rename(columns={
        "hash_value": "Hash Value",
        "occurrences": "Occurrences",
    })
    with open(path, "w", encoding="utf-8", errors="backslashreplace") as f:
        f.write("Hash Distribution Results\n")
        f.write("=========================\n\n")
        _write_rows(f, df, sep="\t\t")

    logger.info(f"Distribution saved to {path}")
    return path


def save_avalanche(report: AvalancheReport, path: str | Path, truncate_len: int = 20) -> Path:
    """Write one row per perturbation pair followed by a summary block.

    Lines are written as-is (truncated only), so a line holding a tab
    shifts its row's columns.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = report.to_frame()
    table = pd.DataFrame({
        "Original": df["original"].map(lambda s: truncate(s, truncate_len)),
        "Modified": df["modified"].map(lambda s: truncate(s, truncate_len)),
        "Hash1": df["original_hash"],
        "Hash2": df["modified_hash"],
        "Bits Changed": df["bit_difference"],
    })

    # Lone surrogates from in-memory lines are written as \udxxx escapes
    with open(path, "w", encoding="utf-8", errors="backslashreplace") as f:
        f.write("Avalanche Effect Test Results\n")
        f.write("==============================\n\n")
        _write_rows(f, table)
        f.write("\n=== SUMMARY ===\n")
        f.write(f"Total tests: {report.total_tests}\n")
        f.write(f"Average bits changed: {report.average_bits_changed:.2f}\n")
        f.write(f"Percentage: {report.percentage:.1f}%\n")

    logger.info(f"Avalanche results saved to {path}")
    return path


# ───────────────────────────────────────────────────────────────────────────
# Charts
# ───────────────────────────────────────────────────────────────────────────

def plot_distribution(report: UniformityReport, path: str | Path) -> Path:
    """Bar chart of the 256 bucket counts with the expected level marked."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(12, 5))
    ax.bar(np.arange(NUM_BUCKETS), report.buckets, width=1.0, color="steelblue")
    ax.axhline(report.expected_per_bucket, color="red", linestyle="--",
               label=f"Expected ({report.expected_per_bucket:.2f})")
    ax.set_xlim(-0.5, NUM_BUCKETS - 0.5)
    ax.set_xlabel("Hash value")
    ax.set_ylabel("Occurrences")
    ax.set_title(f"Hash distribution ({report.hash_name}), "
                 f"χ² = {report.chi_square:.2f}, p = {report.p_value:.4f}")
    ax.legend()
    fig.tight_layout()
    fig.savefig(path, dpi=120)
    plt.close(fig)

    logger.info(f"Distribution chart saved to {path}")
    return path


def plot_bit_differences(report: AvalancheReport, path: str | Path) -> Path:
    """Histogram of bits changed per test (0-8), ideal mean marked."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.bar(np.arange(HASH_BITS + 1), report.bit_difference_counts, color="darkorange")
    ax.axvline(IDEAL_BITS_CHANGED, color="green", linestyle="--", label="Ideal (4 bits)")
    ax.axvline(report.average_bits_changed, color="red", linestyle=":",
               label=f"Observed ({report.average_bits_changed:.2f})")
    ax.set_xticks(np.arange(HASH_BITS + 1))
    ax.set_xlabel("Bits changed")
    ax.set_ylabel("Tests")
    ax.set_title(f"Avalanche effect ({report.hash_name}), {report.percentage:.1f}% of bits")
    ax.legend()
    fig.tight_layout()
    fig.savefig(path, dpi=120)
    plt.close(fig)

    logger.info(f"Bit-difference chart saved to {path}")
    return path
