"""
Seed management for reproducible sample corpora.

set_global_seed() seeds Python stdlib and NumPy once per run.
generator_seed() gives each sample generator its own seed derived
from the run seed and the generator's name, so a corpus section does
not change when generators are added to or reordered in the registry.

Usage:
    from hashlab.utils.seed import set_global_seed, generator_seed
    seed = set_global_seed()
    rng_seed = generator_seed(seed, "random_words")
"""

import random
import zlib

import numpy as np
from hashlab.utils.config import get_config

# numpy.random.RandomState accepts seeds in [0, 2**32)
SEED_MASK = 0xFFFFFFFF


def set_global_seed(seed: int | None = None, config: dict | None = None) -> int:
    """Set random seeds across all relevant libraries.

    Args:
        seed: Explicit seed value. If None, reads `random_seed` from config.
        config: Config dict to read from (defaults to the cached config).

    Returns:
        The seed that was actually applied.
    """
    if seed is None:
        if config is None:
            config = get_config()
        seed = config.get("random_seed", 42)

    seed = int(seed) & SEED_MASK
    random.seed(seed)
    np.random.seed(seed)

    return seed


def generator_seed(base_seed: int, name: str) -> int:
    """Stable per-generator seed: base seed mixed with a CRC32 of the name."""
    return (int(base_seed) ^ zlib.crc32(name.encode("utf-8"))) & SEED_MASK
