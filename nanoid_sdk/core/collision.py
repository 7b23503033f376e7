"""Birthday-bound collision estimates.

With ``N = alphabet_length ** size`` possible identifiers, the chance that
``n`` independently generated identifiers contain at least one duplicate is
approximately ``1 - exp(-n (n - 1) / (2 N))``.

Rough guide for the default 64-symbol alphabet:

======= ============================ ===========
size    IDs for 1% collision chance  entropy
======= ============================ ===========
8       2.4e6                        48 bits
12      9.7e9                        72 bits
16      4.0e13                       96 bits
21      1.3e18                       126 bits
======= ============================ ===========
"""

from __future__ import annotations

import math

from nanoid_sdk.core.alphabet import MAX_ALPHABET_LENGTH, MIN_ALPHABET_LENGTH
from nanoid_sdk.core.errors import InvalidAlphabetError, InvalidProbabilityError
from nanoid_sdk.core.generator import validate_size


def _check_alphabet_length(alphabet_length: int) -> None:
    if not MIN_ALPHABET_LENGTH <= alphabet_length <= MAX_ALPHABET_LENGTH:
        raise InvalidAlphabetError(
            f"Alphabet length must be between {MIN_ALPHABET_LENGTH} and "
            f"{MAX_ALPHABET_LENGTH}, got {alphabet_length}"
        )


def _check_probability(probability: float) -> None:
    if not 0.0 < probability < 1.0:
        raise InvalidProbabilityError(
            f"Probability must be strictly between 0 and 1, got {probability}"
        )


def entropy_bits(size: int, alphabet_length: int) -> float:
    """Bits of randomness carried by one identifier."""
    validate_size(size)
    _check_alphabet_length(alphabet_length)
    return size * math.log2(alphabet_length)


def collision_probability(count: int, size: int, alphabet_length: int) -> float:
    """Probability of at least one duplicate among ``count`` identifiers."""
    validate_size(size)
    _check_alphabet_length(alphabet_length)
    if count < 0:
        raise ValueError(f"Count must not be negative, got {count}")
    if count < 2:
        return 0.0
    space = alphabet_length**size
    if count > space:
        return 1.0
    # expm1 keeps precision when the exponent is tiny.
    return -math.expm1(-(count * (count - 1)) / (2 * space))


def ids_until_collision(probability: float, size: int, alphabet_length: int) -> float:
    """Number of identifiers after which a duplicate has ``probability`` odds."""
    _check_probability(probability)
    validate_size(size)
    _check_alphabet_length(alphabet_length)
    # n ~ sqrt(2 N ln(1 / (1 - p))), evaluated in log space so large N cannot overflow.
    log_space = size * math.log(alphabet_length)
    return math.exp(0.5 * (math.log(2.0) + log_space + math.log(-math.log1p(-probability))))


def size_for_collision_probability(
    count: int, probability: float, alphabet_length: int
) -> int:
    """Smallest size keeping the collision odds of ``count`` IDs at or below ``probability``."""
    _check_probability(probability)
    _check_alphabet_length(alphabet_length)
    if count < 0:
        raise ValueError(f"Count must not be negative, got {count}")
    size = 1
    while collision_probability(count, size, alphabet_length) > probability:
        size += 1
    return size
