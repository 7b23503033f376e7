"""Random byte sources for identifier generation."""

from __future__ import annotations

import logging
import random
import secrets
import threading
from typing import Protocol, Union, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class RandomSource(Protocol):
    def random_bytes(self, n: int) -> bytes: ...


class SystemRandomSource:
    """Default implementation: the operating system CSPRNG.

    Safe to share between threads; every call reads fresh bytes from the OS.
    """

    def random_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)


class RandomModuleSource:
    """Adapts a ``random.Random`` instance.

    Only as secure as the wrapped generator: ``random.SystemRandom`` is,
    a seeded ``random.Random`` is not. Not thread-safe unless the wrapped
    generator is.
    """

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    def random_bytes(self, n: int) -> bytes:
        return self._rng.randbytes(n)


class SeededRandomSource(RandomModuleSource):
    """Deterministic Mersenne Twister source for reproducible output."""

    def __init__(self, seed: int | str | bytes) -> None:
        super().__init__(random.Random(seed))
        self.seed = seed


_default_source: SystemRandomSource | None = None
_default_lock = threading.Lock()


def default_random_source() -> SystemRandomSource:
    """Return the process-wide secure source, creating it on first use."""
    global _default_source
    if _default_source is None:
        with _default_lock:
            if _default_source is None:
                _default_source = SystemRandomSource()
                logger.debug("Created default random source %r", _default_source)
    return _default_source


RandomSourceLike = Union[RandomSource, random.Random, None]


def as_random_source(source: RandomSourceLike) -> RandomSource:
    """Resolve ``None``, a ``RandomSource`` or a ``random.Random`` to a source."""
    if source is None:
        return default_random_source()
    if isinstance(source, random.Random):
        return RandomModuleSource(source)
    if isinstance(source, RandomSource):
        return source
    raise TypeError(
        f"Expected a RandomSource or random.Random, got {type(source).__name__}"
    )
