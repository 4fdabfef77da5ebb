"""Stable structural hashing of arbitrary data, used for change detection."""

from __future__ import annotations

import dataclasses
import functools
import struct
import types
from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

__all__ = ["DataHasher", "compute_hash"]

_MASK = (1 << 64) - 1
_P1 = 11400714785074694791
_P2 = 14029467366897019727
_P3 = 1609587929392839161
_P4 = 9650029242287828579
_P5 = 2870177450012600261

_CALLABLE_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.BuiltinMethodType,
    functools.partial,
    type,
)


def _rotl(x: int, r: int) -> int:
    return ((x << r) | (x >> (64 - r))) & _MASK


def _round(acc: int, lane: int) -> int:
    acc = (acc + lane * _P2) & _MASK
    return (_rotl(acc, 31) * _P1) & _MASK


def _merge(acc: int, val: int) -> int:
    acc ^= _round(0, val)
    return (acc * _P1 + _P4) & _MASK


def _xxh64(data: bytes) -> int:
    """XXH64 digest of ``data`` with seed 0."""
    n = len(data)
    stripes_end = n - n % 32
    if n >= 32:
        v1 = (_P1 + _P2) & _MASK
        v2 = _P2
        v3 = 0
        v4 = (-_P1) & _MASK
        for a, b, c, d in struct.iter_unpack("<4Q", data[:stripes_end]):
            v1 = _round(v1, a)
            v2 = _round(v2, b)
            v3 = _round(v3, c)
            v4 = _round(v4, d)
        h = (_rotl(v1, 1) + _rotl(v2, 7) + _rotl(v3, 12) + _rotl(v4, 18)) & _MASK
        for v in (v1, v2, v3, v4):
            h = _merge(h, v)
    else:
        h = _P5
    h = (h + n) & _MASK

    tail = data[stripes_end:]
    words_end = len(tail) - len(tail) % 8
    for (k,) in struct.iter_unpack("<Q", tail[:words_end]):
        h ^= _round(0, k)
        h = (_rotl(h, 27) * _P1 + _P4) & _MASK
    tail = tail[words_end:]
    if len(tail) >= 4:
        (k,) = struct.unpack_from("<I", tail)
        h ^= (k * _P1) & _MASK
        h = (_rotl(h, 23) * _P2 + _P3) & _MASK
        tail = tail[4:]
    for b in tail:
        h ^= (b * _P5) & _MASK
        h = (_rotl(h, 11) * _P1) & _MASK

    h ^= h >> 33
    h = (h * _P2) & _MASK
    h ^= h >> 29
    h = (h * _P3) & _MASK
    h ^= h >> 32
    return h


def _hash_words(words: Iterable[int]) -> int:
    """Hash a sequence of 64-bit words written big-endian."""
    return _xxh64(b"".join((w & _MASK).to_bytes(8, "big") for w in words))


@runtime_checkable
class DataHasher(Protocol):
    """Implemented by objects that supply their own hash to :func:`compute_hash`."""

    def data_hash(self) -> int:
        """Return a 64-bit hash representing the object's current state."""


def _public_fields(value: Any) -> list[Any] | None:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return [
            getattr(value, f.name)
            for f in dataclasses.fields(value)
            if not f.name.startswith("_")
        ]
    attrs = getattr(value, "__dict__", None)
    if isinstance(attrs, dict):
        return [v for k, v in attrs.items() if not k.startswith("_")]
    return None


def compute_hash(value: Any) -> int:
    """Walk ``value`` and return a stable 64-bit hash of its contents.

    Mappings are ordered by key hash, ``None`` hashes to 0, names starting
    with an underscore are skipped on objects, and objects implementing
    :class:`DataHasher` are asked for their own hash.
    """
    if value is None:
        return 0
    if isinstance(value, DataHasher):
        return value.data_hash()
    if isinstance(value, bool):
        return _xxh64(b"\x01" + bytes(7) if value else bytes(8))
    if isinstance(value, int):
        return _xxh64((value & _MASK).to_bytes(8, "big"))
    if isinstance(value, float):
        return _xxh64(struct.pack(">d", value))
    if isinstance(value, complex):
        return _xxh64(struct.pack(">dd", value.real, value.imag))
    if isinstance(value, str):
        return _xxh64(value.encode("utf-8"))
    if isinstance(value, _CALLABLE_TYPES):
        return _hash_words([id(value)])
    if isinstance(value, Mapping):
        # later keys win on collision, keeping the result stable for the same input
        by_hash = {compute_hash(k): k for k in value}
        words: list[int] = []
        for kh in sorted(by_hash):
            words.append(kh)
            words.append(compute_hash(value[by_hash[kh]]))
        return _hash_words(words)
    if isinstance(value, (set, frozenset)):
        return _hash_words(sorted({compute_hash(item) for item in value}))
    if isinstance(value, (list, tuple, bytes, bytearray, memoryview, range)):
        return _hash_words(compute_hash(item) for item in value)
    fields = _public_fields(value)
    if fields is not None:
        return _hash_words(compute_hash(f) for f in fields)
    return 0