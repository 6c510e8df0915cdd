"""
Avalanche-effect test for 8-bit hashes.

For every non-blank line two small perturbations are made:

  1. flip_first: the first character is bumped to the next code point
     ('z' wraps to 'a', 'Z' wraps to 'A')
  2. append: a single character (default 'x') is appended

Both variants are hashed and compared with the hash of the original
line. The number of differing output bits (0 to 8) is recorded per
pair. An ideal hash flips half the output bits on average: 4 of 8, 50%.
"""

import sys
from dataclasses import dataclass
from typing import Iterable

import numpy as np
import pandas as pd

from hashlab.hashing.simple_hash import (
    HASH_BITS,
    HASH_MASK,
    HashFunction,
    configured_hash_function,
    hash_name,
)
from hashlab.utils.errors import EmptyInputSet

IDEAL_BITS_CHANGED = HASH_BITS / 2

FLIP_FIRST = "flip_first"
APPEND = "append"

SURROGATE_FIRST = 0xD800
SURROGATE_LAST = 0xDFFF


def _next_code_point(cp: int) -> int:
    """Successor of a code point, skipping surrogates and wrapping to 0."""
    cp = (cp + 1) % (sys.maxunicode + 1)
    if SURROGATE_FIRST <= cp <= SURROGATE_LAST:
        cp = SURROGATE_LAST + 1
    return cp


def flip_char(text: str, position: int = 0) -> str:
    """Change one character slightly.

    'z' → 'a', 'Z' → 'A', anything else → the next encodable code point
    (the surrogate block U+D800..U+DFFF is skipped).
    An empty string becomes "a".
    """
    if not text:
        return "a"

    c = text[position]
    if c == "z":
        new = "a"
    elif c == "Z":
        new = "A"
    else:
        new = chr(_next_code_point(ord(c)))
    return text[:position] + new + text[position + 1:]


def bit_difference(a: int, b: int) -> int:
    """Number of differing bits between two 8-bit values (0 to 8)."""
    xor = (a ^ b) & HASH_MASK
    count = 0
    for i in range(HASH_BITS):
        if xor & (1 << i):
            count += 1
    return count


@dataclass(frozen=True)
class PerturbationPair:
    """One original/modified comparison."""

    original: str
    modified: str
    original_hash: int
    modified_hash: int
    bit_difference: int
    kind: str


@dataclass(frozen=True)
class AvalancheReport:
    """Aggregate of all perturbation pairs from one run."""

    pairs: tuple[PerturbationPair, ...]
    total_tests: int
    total_bits_changed: int
    average_bits_changed: float
    percentage: float
    bit_difference_counts: tuple[int, ...]
    bit_flip_rates: tuple[float, ...]
    hash_name: str = "simple"

    def to_frame(self) -> pd.DataFrame:
        """Per-pair table in generation order."""
        return pd.DataFrame(
            [
                {
                    "original": p.original,
                    "modified": p.modified,
                    "original_hash": p.original_hash,
                    "modified_hash": p.modified_hash,
                    "bit_difference": p.bit_difference,
                    "kind": p.kind,
                }
                for p in self.pairs
            ],
            columns=["original", "modified", "original_hash",
                     "modified_hash", "bit_difference", "kind"],
        )


def perturb_line(
    line: str, hash_fn: HashFunction, append_char: str = "x"
) -> list[PerturbationPair]:
    """Build the perturbation pairs for a single line."""
    original_hash = hash_fn(line) & HASH_MASK
    variants = []
    if line:
        variants.append((FLIP_FIRST, flip_char(line, 0)))
    variants.append((APPEND, line + append_char))

    pairs = []
    for kind, modified in variants:
        modified_hash = hash_fn(modified) & HASH_MASK
        pairs.append(PerturbationPair(
            original=line,
            modified=modified,
            original_hash=original_hash,
            modified_hash=modified_hash,
            bit_difference=bit_difference(original_hash, modified_hash),
            kind=kind,
        ))
    return pairs


def summarize_pairs(
    pairs: Iterable[PerturbationPair], hash_label: str = "simple"
) -> AvalancheReport:
    """Aggregate perturbation pairs into an AvalancheReport.

    Raises:
        EmptyInputSet: if there are no pairs.
    """
    pairs = tuple(pairs)
    if not pairs:
        raise EmptyInputSet("Avalanche test")

    diffs = np.array([p.bit_difference for p in pairs], dtype=np.int64)
    xors = np.array([p.original_hash ^ p.modified_hash for p in pairs], dtype=np.uint8)

    total_tests = len(pairs)
    total_bits = int(diffs.sum())
    average = total_bits / total_tests

    # Rows of 8 bits, MSB first → reverse so index i is bit i
    flipped = np.unpackbits(xors[:, None], axis=1)[:, ::-1]
    flip_rates = flipped.mean(axis=0)

    return AvalancheReport(
        pairs=pairs,
        total_tests=total_tests,
        total_bits_changed=total_bits,
        average_bits_changed=average,
        percentage=average / HASH_BITS * 100,
        bit_difference_counts=tuple(int(c) for c in np.bincount(diffs, minlength=HASH_BITS + 1)),
        bit_flip_rates=tuple(float(r) for r in flip_rates),
        hash_name=hash_label,
    )


def analyze_avalanche(
    lines: Iterable[str],
    hash_fn: HashFunction | None = None,
    append_char: str = "x",
) -> AvalancheReport:
    """Run the avalanche test over a sequence of lines.

    Blank lines (after stripping) are skipped. The untrimmed line is what
    gets hashed and perturbed.

    Args:
        lines: Any iterable of strings.
        hash_fn: Hash to test. Defaults to the configured hash.
        append_char: Character appended for the second perturbation.

    Returns:
        AvalancheReport.

    Raises:
        EmptyInputSet: if no non-blank line was seen.
    """
    if hash_fn is None:
        hash_fn = configured_hash_function()

    pairs = []
    for line in lines:
        if not line.strip():
            continue
        pairs.extend(perturb_line(line, hash_fn, append_char))

    return summarize_pairs(pairs, hash_label=hash_name(hash_fn))
