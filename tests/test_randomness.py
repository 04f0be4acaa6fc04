"""Tests for the random sources and the bit helpers behind the quantum source."""

import pytest

from passgen.entropy import (
    amplify_entropy,
    bits_to_bytes,
    bits_to_int,
    bytes_to_bits,
    combine_streams,
)
from passgen.randomness import SeededRandomSource, SystemRandomSource


@pytest.mark.parametrize("source", [SystemRandomSource(), SeededRandomSource(3)])
def test_randbelow_stays_in_range(source):
    for n in (1, 2, 10, 97):
        assert all(0 <= source.randbelow(n) < n for _ in range(200))


@pytest.mark.parametrize("source", [SystemRandomSource(), SeededRandomSource(3)])
def test_randbelow_rejects_non_positive(source):
    with pytest.raises(ValueError):
        source.randbelow(0)


def test_shuffle_is_a_permutation(rng):
    items = list(range(50))
    rng.shuffle(items)
    assert sorted(items) == list(range(50))
    assert items != list(range(50))


def test_choice_of_empty_sequence_raises(rng):
    with pytest.raises(IndexError):
        rng.choice("")


def test_seeded_sources_repeat():
    a, b = SeededRandomSource(11), SeededRandomSource(11)
    assert [a.randbelow(1000) for _ in range(20)] == [b.randbelow(1000) for _ in range(20)]


def test_bits_and_bytes():
    assert bits_to_bytes([]) == b""
    assert bits_to_bytes([1, 0, 1]) == bytes([0b10100000])
    assert bytes_to_bits(b"\x81") == [1, 0, 0, 0, 0, 0, 0, 1]
    assert bits_to_int([1, 0, 1, 1]) == 11


def test_combine_streams_xors():
    assert combine_streams([[1, 0, 1], [1, 1, 0]]) == [0, 1, 1]
    assert combine_streams([]) == []
    with pytest.raises(ValueError):
        combine_streams([[1, 0], [1]])


def test_amplify_entropy():
    bits = [1, 0, 1, 1, 0, 0, 1]
    assert amplify_entropy(bits, rounds=0) == bits

    mixed = amplify_entropy(bits, rounds=2)
    assert len(mixed) == 256
    assert amplify_entropy(bits, rounds=2, counter=1) != mixed
