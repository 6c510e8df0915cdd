"""
Sample corpus generators for HashLab.

Each generator produces test strings with a different structure, so the
hash can be checked on both varied and highly regular input:

  - random_words:     random lowercase words of varying length
  - sequential_keys:  "user0001", "user0002", ... (typical table keys)
  - near_duplicates:  one base word with a single character changed

generate_samples() mixes them into one file, one string per line.

Usage:
    python -m hashlab.generators.sample_lines
"""

import string
import numpy as np
from pathlib import Path
from tqdm import tqdm

from hashlab.utils.config import get_config, PROJECT_ROOT
from hashlab.utils.logger import get_logger
from hashlab.utils.seed import generator_seed, set_global_seed

logger = get_logger(__name__)

ALPHABET = np.array(list(string.ascii_lowercase))


def generate_random_words(
    count: int, min_length: int = 3, max_length: int = 12, seed: int = 42
) -> list[str]:
    """Random lowercase words with lengths drawn uniformly in [min_length, max_length]."""
    rng = np.random.RandomState(seed)
    lengths = rng.randint(min_length, max_length + 1, size=count)
    return ["".join(rng.choice(ALPHABET, size=n)) for n in lengths]


def generate_sequential_keys(count: int, prefix: str = "user", seed: int = 42) -> list[str]:
    """Zero-padded sequential keys starting at a seed-dependent offset."""
    start = seed % 1000
    width = max(4, len(str(start + count)))
    return [f"{prefix}{i:0{width}d}" for i in range(start, start + count)]


def generate_near_duplicates(
    count: int, min_length: int = 3, max_length: int = 12, seed: int = 42
) -> list[str]:
    """Variants of one base word, each differing from it in one position."""
    rng = np.random.RandomState(seed)
    base = list(rng.choice(ALPHABET, size=max(min_length, max_length)))
    words = []
    for _ in range(count):
        word = base.copy()
        pos = rng.randint(len(word))
        word[pos] = rng.choice(ALPHABET)
        words.append("".join(word))
    return words


# Registry: name → (function, config keys it accepts)
SAMPLE_GENERATORS = {
    "random_words": (generate_random_words, ("min_length", "max_length")),
    "sequential_keys": (generate_sequential_keys, ("prefix",)),
    "near_duplicates": (generate_near_duplicates, ("min_length", "max_length")),
}


def generate_samples(output_file: str | Path | None = None, num_lines: int | None = None) -> Path:
    """Generate a mixed sample corpus and save it as a text file."""
    config = get_config()
    seed = set_global_seed(config=config)
    sample_cfg = config.get("samples", {})

    if num_lines is None:
        num_lines = sample_cfg.get("num_lines", 2000)
    if output_file is None:
        output_file = PROJECT_ROOT / sample_cfg.get("output_file", "data/samples.txt")
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    available = {
        "min_length": sample_cfg.get("min_word_length", 3),
        "max_length": sample_cfg.get("max_word_length", 12),
        "prefix": sample_cfg.get("key_prefix", "user"),
    }

    names = list(SAMPLE_GENERATORS.keys())
    per_gen = num_lines // len(names)
    remainder = num_lines % len(names)

    lines = []
    for idx, name in enumerate(tqdm(names, desc="Generating samples")):
        gen_func, keys = SAMPLE_GENERATORS[name]
        count = per_gen + (1 if idx < remainder else 0)
        kwargs = {k: available[k] for k in keys}
        lines.extend(gen_func(count, seed=generator_seed(seed, name), **kwargs))
        logger.info(f"  {name}: {count} lines")

    with open(output_file, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")

    logger.info(f"Sample corpus saved: {output_file} ({len(lines)} lines)")
    return output_file


if __name__ == "__main__":
    generate_samples()
