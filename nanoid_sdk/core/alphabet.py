"""Alphabets and alphabet validation."""

from __future__ import annotations

import string
from typing import Sequence, Union

from nanoid_sdk.core.errors import InvalidAlphabetError


Alphabet = Union[str, Sequence[str]]

# URL-safe, 64 symbols: each symbol carries exactly 6 bits.
DEFAULT_ALPHABET = string.digits + string.ascii_uppercase + "_" + string.ascii_lowercase + "-"

NUMBERS = string.digits
LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
ALPHANUMERIC = string.digits + string.ascii_uppercase + string.ascii_lowercase
HEX_LOWERCASE = string.digits + "abcdef"
# Drops 0O1lI and friends that are easy to misread.
NO_LOOKALIKES = "346789ABCDEFGHJKLMNPQRTUVWXYabcdefghijkmnpqrtwxyz"

MIN_ALPHABET_LENGTH = 2
# A single random byte can address at most 256 indexes.
MAX_ALPHABET_LENGTH = 256


def validate_alphabet(alphabet: Alphabet) -> Alphabet:
    """Check that ``alphabet`` can drive unbiased generation.

    Returns the alphabet unchanged when it is a ``str`` and as a tuple
    otherwise, so callers can index it repeatedly.

    Raises:
        InvalidAlphabetError: fewer than 2 or more than 256 symbols, a
            non-string or empty symbol, or a repeated symbol.
    """
    if alphabet is None:
        raise InvalidAlphabetError("Alphabet must not be None")
    symbols = alphabet if isinstance(alphabet, str) else tuple(alphabet)

    length = len(symbols)
    if length < MIN_ALPHABET_LENGTH:
        raise InvalidAlphabetError(
            f"Alphabet must contain at least {MIN_ALPHABET_LENGTH} symbols, got {length}"
        )
    if length > MAX_ALPHABET_LENGTH:
        raise InvalidAlphabetError(
            f"Alphabet must contain at most {MAX_ALPHABET_LENGTH} symbols, got {length}"
        )
    for symbol in symbols:
        if not isinstance(symbol, str) or not symbol:
            raise InvalidAlphabetError(f"Alphabet symbols must be non-empty strings: {symbol!r}")
    if len(set(symbols)) != length:
        repeated = sorted({s for s in symbols if symbols.count(s) > 1})
        raise InvalidAlphabetError(f"Alphabet symbols must be distinct, repeated: {repeated}")
    return symbols
