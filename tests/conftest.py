"""Shared test fixtures."""

from __future__ import annotations

import pytest

from nanoid_sdk.core.random_source import SeededRandomSource


class ScriptedRandomSource:
    """Random source that replays a fixed byte script.

    Records the size of every request so tests can assert how many batches
    the generator drew.
    """

    def __init__(self, script: bytes | list[int]):
        self._script = bytes(script)
        self._pos = 0
        self.requests: list[int] = []

    def random_bytes(self, n: int) -> bytes:
        self.requests.append(n)
        if self._pos + n > len(self._script):
            raise AssertionError(
                f"script exhausted: wanted {n} bytes at offset {self._pos}"
            )
        chunk = self._script[self._pos : self._pos + n]
        self._pos += n
        return chunk


@pytest.fixture
def seeded_source():
    return SeededRandomSource(20240611)


@pytest.fixture
def scripted_source():
    return ScriptedRandomSource
