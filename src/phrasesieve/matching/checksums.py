"""Lightweight digests used as a stand-in for pattern text."""

from __future__ import annotations

import zlib
from collections.abc import Iterable, Sequence

_CRC_MODULUS = 0xFFFFFFFF


def text_checksum(tokens: Sequence[str]) -> int:
    """CRC-32 (IEEE) of the tokens joined by single spaces, UTF-8 encoded."""
    return zlib.crc32(" ".join(tokens).encode("utf-8")) % _CRC_MODULUS


def sequence_checksum(codes: Iterable[int]) -> int:
    """Fletcher-style checksum over vocabulary codes."""
    sum1 = 0
    sum2 = 0
    for code in codes:
        sum1 = (sum1 + code) % 255
        sum2 = (sum2 + sum1) % 255
    return sum1 * 256 + sum2


def checksum_pair(tokens: Sequence[str], codes: Iterable[int]) -> tuple[int, int]:
    return text_checksum(tokens), sequence_checksum(codes)
