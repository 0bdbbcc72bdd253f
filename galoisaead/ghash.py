"""GHASH universal hash over GF(2^128), as used by Galois/Counter Mode."""

from __future__ import annotations

from collections.abc import Iterator

BLOCK_SIZE = 16

# Reduction constant for x^128 + x^7 + x^2 + x + 1 in GCM's reflected bit order.
_R = 0xE1 << 120


def _gf_mul(x: int, y: int) -> int:
    """Multiply two field elements in GCM bit ordering."""
    z = 0
    v = y
    for bit in range(127, -1, -1):
        if (x >> bit) & 1:
            z ^= v
        v = (v >> 1) ^ _R if v & 1 else v >> 1
    return z


def _blocks(data: bytes) -> Iterator[bytes]:
    view = memoryview(data)
    while view:
        yield bytes(view[:BLOCK_SIZE])
        view = view[BLOCK_SIZE:]


class GHash:
    """Incremental GHASH keyed by the 16-byte hash subkey H."""

    def __init__(self, key: bytes) -> None:
        key = bytes(key)
        if len(key) != BLOCK_SIZE:
            raise ValueError(f"GHASH key must be {BLOCK_SIZE} bytes, got {len(key)}")
        self._h = int.from_bytes(key, "big")
        self._y = 0

    def _absorb(self, block: bytes) -> None:
        self._y = _gf_mul(self._y ^ int.from_bytes(block, "big"), self._h)

    def update(self, data: bytes) -> None:
        """Absorb whole 16-byte blocks; the length must be a multiple of 16."""
        data = bytes(data)
        if len(data) % BLOCK_SIZE:
            raise ValueError("GHASH input must be a whole number of 16-byte blocks")
        for block in _blocks(data):
            self._absorb(block)

    def update_padded(self, data: bytes) -> None:
        """Absorb data, zero-padding the final partial block."""
        for block in _blocks(bytes(data)):
            self._absorb(block.ljust(BLOCK_SIZE, b"\x00"))

    def finalize(self) -> bytes:
        """Return the current 16-byte hash value."""
        return self._y.to_bytes(BLOCK_SIZE, "big")

    def copy(self) -> GHash:
        """Return an independent copy of this hash state."""
        clone = GHash.__new__(GHash)
        clone._h = self._h
        clone._y = self._y
        return clone