"""Tests for core utilities: alphabets, random sources, collision math, errors."""

from __future__ import annotations

import math
import random
import re

import pytest

from nanoid_sdk.config import GeneratorConfig
from nanoid_sdk.core import alphabet as alphabets
from nanoid_sdk.core.alphabet import DEFAULT_ALPHABET, NO_LOOKALIKES, validate_alphabet
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
from nanoid_sdk.core.random_source import (
    RandomModuleSource,
    RandomSource,
    SeededRandomSource,
    SystemRandomSource,
    as_random_source,
    default_random_source,
)


# ---- Errors ----

@pytest.mark.parametrize(
    "exc",
    [InvalidAlphabetError, InvalidSizeError, InvalidProbabilityError, IdentifierDecodeError],
)
def test_errors_share_base_and_value_error(exc):
    assert issubclass(exc, NanoIdError)
    assert issubclass(exc, ValueError)


# ---- Alphabet ----

def test_default_alphabet_is_64_url_safe_symbols():
    assert len(DEFAULT_ALPHABET) == 64
    assert len(set(DEFAULT_ALPHABET)) == 64
    assert re.fullmatch(r"[A-Za-z0-9_-]+", DEFAULT_ALPHABET)


@pytest.mark.parametrize(
    "name",
    ["DEFAULT_ALPHABET", "NUMBERS", "LOWERCASE", "UPPERCASE", "ALPHANUMERIC", "HEX_LOWERCASE", "NO_LOOKALIKES"],
)
def test_named_alphabets_are_valid(name):
    value = getattr(alphabets, name)
    assert validate_alphabet(value) == value


def test_no_lookalikes_excludes_confusable_symbols():
    assert not set("01lIOo25SsZ") & set(NO_LOOKALIKES)


def test_validate_returns_tuple_for_sequences():
    assert validate_alphabet(["a", "b"]) == ("a", "b")
    assert validate_alphabet(iter(["a", "b"])) == ("a", "b")


@pytest.mark.parametrize("bad", [None, "", "a", ["a"], ["a", ""], ["a", 1], "aa", ["x", "y", "x"]])
def test_validate_rejects(bad):
    with pytest.raises(InvalidAlphabetError):
        validate_alphabet(bad)


def test_validate_names_repeated_symbols():
    with pytest.raises(InvalidAlphabetError, match=r"\['a', 'c'\]"):
        validate_alphabet("abcacd")


# ---- RandomSource ----

def test_system_source_returns_requested_length():
    src = SystemRandomSource()
    assert len(src.random_bytes(0)) == 0
    assert len(src.random_bytes(33)) == 33
    assert src.random_bytes(32) != src.random_bytes(32)


def test_default_source_is_shared():
    assert default_random_source() is default_random_source()
    assert isinstance(default_random_source(), SystemRandomSource)


def test_seeded_source_deterministic():
    assert SeededRandomSource(42).random_bytes(16) == SeededRandomSource(42).random_bytes(16)
    assert SeededRandomSource(42).random_bytes(16) != SeededRandomSource(43).random_bytes(16)


def test_random_module_source_wraps_system_random():
    src = RandomModuleSource(random.SystemRandom())
    assert len(src.random_bytes(8)) == 8


def test_sources_satisfy_protocol():
    assert isinstance(SystemRandomSource(), RandomSource)
    assert isinstance(SeededRandomSource(1), RandomSource)


def test_as_random_source_resolution():
    assert as_random_source(None) is default_random_source()
    custom = SeededRandomSource(1)
    assert as_random_source(custom) is custom
    wrapped = as_random_source(random.Random(5))
    assert wrapped.random_bytes(4) == random.Random(5).randbytes(4)


def test_as_random_source_rejects_other_objects():
    with pytest.raises(TypeError):
        as_random_source(object())


# ---- Collision math ----

def test_entropy_bits_default():
    assert entropy_bits(21, 64) == pytest.approx(126.0)
    assert entropy_bits(0, 64) == 0.0


@pytest.mark.parametrize("count", [0, 1])
def test_fewer_than_two_ids_never_collide(count):
    assert collision_probability(count, 21, 64) == 0.0


def test_collision_probability_birthday_formula():
    assert collision_probability(2, 1, 2) == pytest.approx(1 - math.exp(-1 / 2))
    assert collision_probability(1000, 8, 64) == pytest.approx(
        1 - math.exp(-1000 * 999 / (2 * 64**8))
    )


def test_collision_probability_certain_past_space():
    assert collision_probability(3, 1, 2) == 1.0


def test_collision_probability_monotonic_in_count():
    values = [collision_probability(n, 6, 64) for n in (10, 1000, 100000, 10000000)]
    assert values == sorted(values)
    assert 0.0 < values[0] < values[-1] <= 1.0


def test_collision_probability_tiny_for_default_ids():
    assert 0.0 <= collision_probability(10**9, 21, 64) < 1e-17


def test_ids_until_collision_matches_closed_form():
    expected = math.sqrt(2 * 64**8 * -math.log1p(-0.01))
    assert ids_until_collision(0.01, 8, 64) == pytest.approx(expected, rel=1e-9)


def test_ids_until_collision_inverts_probability():
    n = round(ids_until_collision(0.5, 10, 64))
    assert collision_probability(n, 10, 64) == pytest.approx(0.5, rel=1e-3)


def test_size_for_collision_probability():
    assert size_for_collision_probability(1_000_000, 0.01, 64) == 8
    assert size_for_collision_probability(0, 0.01, 64) == 1


@pytest.mark.parametrize("p", [0.0, 1.0, -0.1, 1.5])
def test_invalid_probability(p):
    with pytest.raises(InvalidProbabilityError):
        ids_until_collision(p, 21, 64)
    with pytest.raises(InvalidProbabilityError):
        size_for_collision_probability(10, p, 64)


@pytest.mark.parametrize("length", [0, 1, 257])
def test_collision_math_rejects_bad_alphabet_length(length):
    with pytest.raises(InvalidAlphabetError):
        collision_probability(10, 21, length)


def test_collision_math_rejects_bad_size_and_count():
    with pytest.raises(InvalidSizeError):
        entropy_bits(-1, 64)
    with pytest.raises(ValueError):
        collision_probability(-1, 21, 64)


# ---- Config ----

def test_config_defaults():
    cfg = GeneratorConfig()
    assert cfg.size == 21
    assert cfg.alphabet == DEFAULT_ALPHABET
    cfg.validate()


def test_config_validate_rejects_bad_values():
    with pytest.raises(InvalidSizeError):
        GeneratorConfig(size=-5).validate()
    with pytest.raises(InvalidAlphabetError):
        GeneratorConfig(alphabet="z").validate()
