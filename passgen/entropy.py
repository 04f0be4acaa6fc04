"""
Bit-level helpers for the quantum random source:
XOR-combining measurement streams, SHA-256 mixing and turning bits into integers.
"""

from __future__ import annotations

import hashlib
from typing import Iterable, List


def bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack a list of bits [0,1,1,0,...] into bytes, MSB first.
    A trailing partial byte is zero-padded on the right.
    """
    if not bits:
        return b""

    pad_len = (8 - (len(bits) % 8)) % 8
    padded = bits + [0] * pad_len
    return bytes(
        bits_to_int(padded[i : i + 8]) for i in range(0, len(padded), 8)
    )


def bytes_to_bits(data: bytes) -> List[int]:
    return [(byte >> (7 - i)) & 1 for byte in data for i in range(8)]


def bits_to_int(bits: Iterable[int]) -> int:
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


def combine_streams(streams: List[List[int]]) -> List[int]:
    """
    XOR equally long bit streams into one.
    """
    if not streams:
        return []

    combined = list(streams[0])
    for bits in streams[1:]:
        if len(bits) != len(combined):
            raise ValueError(
                "Quantum streams produced different bit-lengths; "
                "this should not happen."
            )
        combined = [b ^ c for b, c in zip(bits, combined)]
    return combined


def amplify_entropy(bits: List[int], rounds: int = 1, counter: int = 0) -> List[int]:
    """
    Mix bits through SHA-256 `rounds` times.

    `counter` is folded into the first round so that two batches with the
    same raw measurement still give different output.
    With rounds <= 0 the input is returned unchanged.
    """
    if rounds <= 0:
        return bits

    data = counter.to_bytes(8, "big") + bits_to_bytes(bits)
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()

    return bytes_to_bits(data)
