"""NanoID SDK: short, URL-safe, unbiased random identifiers."""

import logging

from nanoid_sdk.api import create_id_generator, generate, nanoid
from nanoid_sdk.config import GeneratorConfig
from nanoid_sdk.core.alphabet import (
    ALPHANUMERIC,
    DEFAULT_ALPHABET,
    HEX_LOWERCASE,
    LOWERCASE,
    NO_LOOKALIKES,
    NUMBERS,
    UPPERCASE,
)
from nanoid_sdk.core.collision import (
    collision_probability,
    entropy_bits,
    ids_until_collision,
    size_for_collision_probability,
)
from nanoid_sdk.core.errors import (
    IdentifierDecodeError,
    InvalidAlphabetError,
    InvalidProbabilityError,
    InvalidSizeError,
    NanoIdError,
)
from nanoid_sdk.core.generator import DEFAULT_SIZE, generate_nanoid_string
from nanoid_sdk.core.id_generator import IdGenerator, NanoIdGenerator
from nanoid_sdk.core.random_source import (
    RandomModuleSource,
    RandomSource,
    SeededRandomSource,
    SystemRandomSource,
    default_random_source,
)
from nanoid_sdk.core.types import NanoID

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ALPHANUMERIC",
    "DEFAULT_ALPHABET",
    "DEFAULT_SIZE",
    "HEX_LOWERCASE",
    "LOWERCASE",
    "NO_LOOKALIKES",
    "NUMBERS",
    "UPPERCASE",
    "GeneratorConfig",
    "IdGenerator",
    "IdentifierDecodeError",
    "InvalidAlphabetError",
    "InvalidProbabilityError",
    "InvalidSizeError",
    "NanoID",
    "NanoIdError",
    "NanoIdGenerator",
    "RandomModuleSource",
    "RandomSource",
    "SeededRandomSource",
    "SystemRandomSource",
    "collision_probability",
    "create_id_generator",
    "default_random_source",
    "entropy_bits",
    "generate",
    "generate_nanoid_string",
    "ids_until_collision",
    "nanoid",
    "size_for_collision_probability",
]
