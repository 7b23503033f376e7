"""Generator configuration models."""

from __future__ import annotations

from dataclasses import dataclass

from nanoid_sdk.core.alphabet import DEFAULT_ALPHABET, Alphabet, validate_alphabet
from nanoid_sdk.core.generator import DEFAULT_SIZE, validate_size


@dataclass
class GeneratorConfig:
    size: int = DEFAULT_SIZE
    alphabet: Alphabet = DEFAULT_ALPHABET

    def validate(self) -> None:
        """Raise ``InvalidSizeError`` / ``InvalidAlphabetError`` on bad settings."""
        validate_size(self.size)
        validate_alphabet(self.alphabet)
