"""Stable short identifiers for articles."""

from __future__ import annotations

import array
import sys

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_MIN_LENGTH = 8
_MAX_LENGTH = 16


def _utf16_units(text: str) -> array.array:
    units = array.array("H")
    units.frombytes(text.encode("utf-16-le", "surrogatepass"))
    if sys.byteorder == "big":
        units.byteswap()
    return units


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_ALPHABET[rem])
    return "".join(reversed(digits))


def generate_id(title: str, link: str) -> str:
    """Derive a deterministic 8-16 character id from ``title`` and ``link``.

    The hash walks UTF-16 code units so that text outside the basic plane
    (emoji, some CJK) hashes the same way it would in a browser.
    """

    hashed = 0
    for unit in _utf16_units(title + link):
        hashed = _to_int32((hashed << 5) - hashed + unit)
    encoded = _base36(abs(hashed))
    return encoded[:_MAX_LENGTH].rjust(_MIN_LENGTH, "0")


__all__ = ["generate_id"]
