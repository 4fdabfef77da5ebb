"""Integer codes ("atoms") for frequently occurring HTML tag and attribute names.

Looking up ``"div"`` yields the atom for ``div``, and ``str()`` of that atom
gives back ``"div"``.  The zero atom stands for "no atom" and renders as an
empty string.  Codes are not guaranteed to be stable or ordered.
"""

from __future__ import annotations

from .atom_table import ATOM_TEXT, HASH0, MAX_ATOM_LEN, TABLE

__all__ = ["Atom", "lookup", "string"]

_U32 = 0xFFFFFFFF
_FNV_PRIME = 16777619
_TABLE_MASK = len(TABLE) - 1


class Atom(int):
    """A 32-bit code for an HTML name: offset in the text shifted by 8, plus length."""

    def __new__(cls, value: int = 0) -> Atom:
        if not 0 <= value <= _U32:
            raise ValueError(f"atom code out of range: {value!r}")
        return super().__new__(cls, value)

    def __str__(self) -> str:
        start = self >> 8
        n = self & 0xFF
        if start + n > len(ATOM_TEXT):
            return ""
        return ATOM_TEXT[start : start + n]

    def __repr__(self) -> str:
        return f"Atom({int(self):#x})"

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return int.__format__(int(self), spec)


def _fnv(h: int, data: bytes) -> int:
    for b in data:
        h ^= b
        h = (h * _FNV_PRIME) & _U32
    return h


def _as_bytes(s: str | bytes | bytearray) -> bytes:
    if isinstance(s, str):
        return s.encode("utf-8")
    return bytes(s)


def _matches(code: int, data: bytes) -> bool:
    if code & 0xFF != len(data):
        return False
    start = code >> 8
    return ATOM_TEXT[start : start + len(data)].encode("ascii") == data


def lookup(s: str | bytes | bytearray) -> Atom:
    """Return the atom named ``s``, or ``Atom(0)`` if there is none.

    The lookup is case sensitive.
    """
    data = _as_bytes(s)
    if not data or len(data) > MAX_ATOM_LEN:
        return Atom(0)
    h = _fnv(HASH0, data)
    for slot in (h & _TABLE_MASK, (h >> 16) & _TABLE_MASK):
        code = TABLE[slot]
        if _matches(code, data):
            return Atom(code)
    return Atom(0)


def string(s: str | bytes | bytearray) -> str:
    """Return a string equal to ``s``, shared with the atom's name when one exists."""
    a = lookup(s)
    if a:
        return str(a)
    if isinstance(s, str):
        return s
    return bytes(s).decode("utf-8", errors="surrogateescape")