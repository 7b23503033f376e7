"""The NanoID value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from nanoid_sdk.core.alphabet import DEFAULT_ALPHABET, Alphabet
from nanoid_sdk.core.errors import IdentifierDecodeError
from nanoid_sdk.core.generator import DEFAULT_SIZE, generate_nanoid_string
from nanoid_sdk.core.random_source import RandomSourceLike, as_random_source


BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


@dataclass(frozen=True, eq=False, repr=False)
class NanoID:
    """Immutable identifier backed by a byte sequence.

    The bytes are normally the UTF-8 encoding of a generated string, but any
    byte sequence is accepted as is: no alphabet or length check is made.
    ``NanoID()`` with no argument generates a fresh default identifier
    (21 symbols, URL-safe alphabet, shared secure random source).
    """

    value: bytes = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.value is None:
            data = generate_nanoid_string(as_random_source(None)).encode("utf-8")
        elif isinstance(self.value, (str, int)):
            raise TypeError(
                f"NanoID wraps bytes, got {type(self.value).__name__}; "
                "use NanoID.from_string() for text"
            )
        else:
            data = bytes(self.value)
        object.__setattr__(self, "value", data)

    # -- constructors -------------------------------------------------------

    @classmethod
    def generate(
        cls,
        size: int = DEFAULT_SIZE,
        alphabet: Alphabet = DEFAULT_ALPHABET,
        random_source: RandomSourceLike = None,
    ) -> NanoID:
        text = generate_nanoid_string(as_random_source(random_source), size, alphabet)
        return cls(text.encode("utf-8"))

    @classmethod
    def from_bytes(cls, data: BytesLike) -> NanoID:
        return cls(data)

    @classmethod
    def from_string(cls, text: str) -> NanoID:
        """Wrap the UTF-8 encoding of ``text``; inverse of :meth:`to_string`."""
        return cls(text.encode("utf-8"))

    # -- accessors ----------------------------------------------------------

    def as_bytes(self) -> bytes:
        return self.value

    def size(self) -> int:
        """Number of bytes, not decoded characters."""
        return len(self.value)

    def to_string(self) -> str:
        """Decode as UTF-8, replacing malformed sequences with U+FFFD."""
        return self.value.decode("utf-8", errors="replace")

    def decode(self) -> str:
        """Decode as UTF-8, raising on malformed sequences."""
        try:
            return self.value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise IdentifierDecodeError(
                f"Identifier bytes are not valid UTF-8 at offset {exc.start}"
            ) from exc

    # -- protocol -----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if other is None:
            return False
        if not isinstance(other, NanoID):
            return False
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __len__(self) -> int:
        return len(self.value)

    def __bytes__(self) -> bytes:
        return self.value

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"NanoID({self.to_string()!r})"
