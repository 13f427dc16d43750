"""Multiply-xor string hashes producing unsigned 32-bit values."""

from __future__ import annotations

_MASK = 0xFFFFFFFF


def _multiply_xor(text: str | bytes, a: int, b: int, seed: int) -> int:
    data = text.encode("utf-8") if isinstance(text, str) else text
    h = seed
    for byte in data:
        signed = byte - 256 if byte >= 128 else byte
        h = ((h * a) ^ (signed * b)) & _MASK
    return h


def simple_hash(text: str | bytes) -> int:
    """A small multiply-xor hash of ``text``."""
    return _multiply_xor(text, 456, 235, 13)


def cool_hash(text: str | bytes) -> int:
    """A multiply-xor hash of ``text`` with larger constants."""
    return _multiply_xor(text, 94583, 41733, 19203)