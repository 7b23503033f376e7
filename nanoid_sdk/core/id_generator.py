"""ID generation utilities."""

from __future__ import annotations

import logging
from typing import Protocol

from nanoid_sdk.config import GeneratorConfig
from nanoid_sdk.core.alphabet import validate_alphabet
from nanoid_sdk.core.collision import collision_probability
from nanoid_sdk.core.generator import generate_nanoid_string
from nanoid_sdk.core.random_source import RandomSource, RandomSourceLike, as_random_source
from nanoid_sdk.core.types import NanoID

logger = logging.getLogger(__name__)


class IdGenerator(Protocol):
    def generate(self) -> str: ...


class NanoIdGenerator:
    """Default implementation: NanoID with a fixed size, alphabet and source.

    The configuration is validated once, here, so a bad alphabet fails when
    the generator is built rather than on first use.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        random_source: RandomSourceLike = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.config.validate()
        self._alphabet = validate_alphabet(self.config.alphabet)
        self._random = as_random_source(random_source)
        logger.debug(
            "NanoIdGenerator ready: size=%d alphabet_length=%d source=%s",
            self.config.size,
            len(self._alphabet),
            type(self._random).__name__,
        )

    @property
    def random_source(self) -> RandomSource:
        return self._random

    def generate(self) -> str:
        return generate_nanoid_string(self._random, self.config.size, self._alphabet)

    def new_id(self) -> NanoID:
        return NanoID.from_string(self.generate())

    def new_ids(self, count: int) -> list[NanoID]:
        if count < 0:
            raise ValueError(f"Count must not be negative, got {count}")
        return [self.new_id() for _ in range(count)]

    def collision_probability(self, count: int) -> float:
        """Odds of a duplicate among ``count`` IDs from this generator."""
        return collision_probability(count, self.config.size, len(self._alphabet))
