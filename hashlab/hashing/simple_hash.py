"""
8-bit string hashes for HashLab.

The main hash mixes each character into an 8-bit accumulator:

    hash ^= c
    hash += c * (position + 1)

and keeps only the low 8 bits, so every value lies in [0, 255].
Masking after each step gives the same answer as masking once at the
end: XOR and addition never carry information from high bits down
into the low byte.

A second, polynomial (multiplier 31) string hash is provided so the
analyzers can be run against it side by side.

Usage:
    from hashlab.hashing.simple_hash import simple_hash, get_hash_function
    simple_hash("Hello")               # 111
    get_hash_function("poly31")("Hello")
"""

from typing import Callable, Iterable

from hashlab.utils.config import get_config

HashFunction = Callable[[str], int]

HASH_BITS = 8
HASH_MASK = 0xFF
NUM_BUCKETS = 1 << HASH_BITS


def simple_hash(text: str | None) -> int:
    """Compute the 8-bit hash of a string.

    Args:
        text: String to hash. None and "" both hash to 0.

    Returns:
        Hash value between 0 and 255.
    """
    if not text:
        return 0

    h = 0
    for i, ch in enumerate(text):
        c = ord(ch)
        h ^= c
        h = (h + c * (i + 1)) & HASH_MASK
    return h


def polynomial31_hash(text: str | None) -> int:
    """Multiplier-31 polynomial string hash, reduced to its low 8 bits.

    h = 31 * h + c over 32-bit wrap-around arithmetic. Only the low byte
    is returned, so the 32-bit sign never matters.
    """
    if not text:
        return 0

    h = 0
    for ch in text:
        h = (31 * h + ord(ch)) & 0xFFFFFFFF
    return h & HASH_MASK


# Registry: name → function
HASH_FUNCTIONS: dict[str, HashFunction] = {
    "simple": simple_hash,
    "poly31": polynomial31_hash,
}


def get_hash_function(name: str | HashFunction | None = None) -> HashFunction:
    """Resolve a registry name (or pass a callable through).

    Args:
        name: Key of HASH_FUNCTIONS, a callable, or None for simple_hash.

    Returns:
        The hash callable.
    """
    if name is None:
        return simple_hash
    if callable(name):
        return name
    try:
        return HASH_FUNCTIONS[name]
    except KeyError:
        raise ValueError(
            f"Unknown hash function '{name}'. Choose from {sorted(HASH_FUNCTIONS)}"
        ) from None


def configured_hash_function(config: dict | None = None) -> HashFunction:
    """Hash named by `hashing.default` in the config (simple_hash if unset)."""
    if config is None:
        config = get_config()
    return get_hash_function(config.get("hashing", {}).get("default", "simple"))


def hash_name(hash_fn: HashFunction) -> str:
    """Registry name of a hash function, or its __name__ for custom callables."""
    for name, fn in HASH_FUNCTIONS.items():
        if fn is hash_fn:
            return name
    return getattr(hash_fn, "__name__", "custom")


def hash_lines(
    lines: Iterable[str], hash_fn: HashFunction = simple_hash
) -> list[tuple[int, int, str]]:
    """Hash every line of a source, blank lines included.

    Returns:
        List of (line_number, hash_value, content), numbered from 1.
    """
    return [(n, hash_fn(line), line) for n, line in enumerate(lines, start=1)]


def self_test_cases(hash_fn: HashFunction = simple_hash) -> list[tuple[str, str, int]]:
    """Demo rows showing consistency, distinct inputs and small changes.

    Returns:
        List of (group, input, hash_value).
    """
    groups = [
        ("Consistency", ["Hello World", "Hello World"]),
        ("Different inputs", ["Hello", "World", "Hello World"]),
        ("Small changes in input", ["test", "Test", "test1"]),
    ]
    return [(group, text, hash_fn(text)) for group, inputs in groups for text in inputs]
