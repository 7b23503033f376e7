"""Bias-free NanoID string generation by masked rejection sampling.

A random byte ANDed with ``mask`` is uniform over ``[0, mask]``. Indexes that
fall outside the alphabet are thrown away instead of being folded back with a
modulo, so every symbol stays equally likely whatever the alphabet length.
Bytes are drawn in batches of ``step`` so that, on average, a single batch
yields enough accepted symbols.
"""

from __future__ import annotations

from nanoid_sdk.core.alphabet import DEFAULT_ALPHABET, Alphabet, validate_alphabet
from nanoid_sdk.core.errors import InvalidSizeError
from nanoid_sdk.core.random_source import RandomSource

DEFAULT_SIZE = 21


def compute_mask(alphabet_length: int) -> int:
    """Smallest all-ones bitmask covering ``alphabet_length - 1``.

    Equal to ``(2 << floor(log2(alphabet_length - 1))) - 1``.
    """
    return (2 << ((alphabet_length - 1).bit_length() - 1)) - 1


def compute_step(mask: int, size: int, alphabet_length: int) -> int:
    """Bytes per batch: ``ceil(1.6 * mask * size / alphabet_length)``."""
    # 1.6 == 8 / 5, kept in integers so the ceiling is exact.
    return -(-8 * mask * size // (5 * alphabet_length))


def validate_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidSizeError(f"Size must be an integer, got {type(size).__name__}")
    if size < 0:
        raise InvalidSizeError(f"Size must not be negative, got {size}")
    return size


def generate_nanoid_string(
    random_source: RandomSource,
    size: int = DEFAULT_SIZE,
    alphabet: Alphabet = DEFAULT_ALPHABET,
) -> str:
    """Return ``size`` symbols drawn uniformly and independently from ``alphabet``.

    Arguments are validated before any randomness is consumed.

    Raises:
        InvalidSizeError: ``size`` is negative or not an integer.
        InvalidAlphabetError: ``alphabet`` has fewer than 2 or more than 256
            symbols, or repeats a symbol.
    """
    validate_size(size)
    symbols = validate_alphabet(alphabet)
    if size == 0:
        return ""

    alphabet_length = len(symbols)
    mask = compute_mask(alphabet_length)
    step = compute_step(mask, size, alphabet_length)

    out: list[str] = []
    while True:
        for byte in random_source.random_bytes(step):
            index = byte & mask
            if index < alphabet_length:
                out.append(symbols[index])
                if len(out) == size:
                    return "".join(out)
