"""A byte-array Bloom filter with FNV-1 and MurmurHash3 64-bit hashes."""

import struct

_MASK = (1 << 64) - 1
_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3
_C1 = 0x87C37B91114253D5
_C2 = 0x4CF5AD432745937F


def _as_bytes(data):
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def fnv1_64(data):
    """64-bit FNV-1 hash of ``data``."""
    h = _FNV_OFFSET
    for byte in _as_bytes(data):
        h = (h * _FNV_PRIME) & _MASK
        h ^= byte
    return h


def _rotl(x, r):
    return ((x << r) | (x >> (64 - r))) & _MASK


def _fmix(k):
    k ^= k >> 33
    k = (k * 0xFF51AFD7ED558CCD) & _MASK
    k ^= k >> 33
    k = (k * 0xC4CEB9FE1A85EC53) & _MASK
    k ^= k >> 33
    return k


def _mix_k1(k1):
    k1 = (k1 * _C1) & _MASK
    k1 = _rotl(k1, 31)
    return (k1 * _C2) & _MASK


def _mix_k2(k2):
    k2 = (k2 * _C2) & _MASK
    k2 = _rotl(k2, 33)
    return (k2 * _C1) & _MASK


def murmur3_64(data, seed=0):
    """First 64 bits of the x64 128-bit MurmurHash3 of ``data``."""
    data = _as_bytes(data)
    length = len(data)
    h1 = h2 = seed & _MASK
    body = length - length % 16

    for k1, k2 in struct.iter_unpack("<QQ", data[:body]):
        h1 ^= _mix_k1(k1)
        h1 = _rotl(h1, 27)
        h1 = (h1 + h2) & _MASK
        h1 = (h1 * 5 + 0x52DCE729) & _MASK
        h2 ^= _mix_k2(k2)
        h2 = _rotl(h2, 31)
        h2 = (h2 + h1) & _MASK
        h2 = (h2 * 5 + 0x38495AB5) & _MASK

    tail = data[body:]
    if len(tail) > 8:
        h2 ^= _mix_k2(int.from_bytes(tail[8:], "little"))
    if tail:
        h1 ^= _mix_k1(int.from_bytes(tail[:8], "little"))

    h1 ^= length
    h2 ^= length
    h1 = (h1 + h2) & _MASK
    h2 = (h2 + h1) & _MASK
    h1 = _fmix(h1)
    h2 = _fmix(h2)
    return (h1 + h2) & _MASK


class BloomFilter:
    """Set membership with false positives but no false negatives.

    Each hash picks a byte by ``value % size`` and a bit by ``value & 7``.
    """

    def __init__(self, size, hashes=(fnv1_64, murmur3_64)):
        if size <= 0:
            raise ValueError("size must be positive")
        self.bits = bytearray(size)
        self.hashes = tuple(hashes)

    def _positions(self, data):
        data = _as_bytes(data)
        for hash_func in self.hashes:
            value = hash_func(data)
            yield value % len(self.bits), value & 7

    def add(self, data):
        """Record ``data`` in the filter."""
        for row, col in self._positions(data):
            self.bits[row] |= 1 << col

    def __contains__(self, data):
        return all(self.bits[row] >> col & 1 for row, col in self._positions(data))