"""One-line entry points."""

from __future__ import annotations

from nanoid_sdk.config import GeneratorConfig
from nanoid_sdk.core.alphabet import DEFAULT_ALPHABET, Alphabet
from nanoid_sdk.core.generator import DEFAULT_SIZE, generate_nanoid_string
from nanoid_sdk.core.id_generator import NanoIdGenerator
from nanoid_sdk.core.random_source import RandomSourceLike, as_random_source
from nanoid_sdk.core.types import NanoID


def generate(
    size: int = DEFAULT_SIZE,
    alphabet: Alphabet = DEFAULT_ALPHABET,
    random_source: RandomSourceLike = None,
) -> str:
    """Random NanoID string; the shared secure source is used unless one is given."""
    return generate_nanoid_string(as_random_source(random_source), size, alphabet)


def nanoid(
    size: int = DEFAULT_SIZE,
    alphabet: Alphabet = DEFAULT_ALPHABET,
    random_source: RandomSourceLike = None,
) -> NanoID:
    return NanoID.generate(size, alphabet, random_source)


def create_id_generator(
    config: GeneratorConfig | None = None,
    random_source: RandomSourceLike = None,
) -> NanoIdGenerator:
    """One-line factory for a configured generator with default components."""
    return NanoIdGenerator(config=config, random_source=random_source)
