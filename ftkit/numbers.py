"""Conversions between decimal text and integers.

``atoi`` and ``atol`` parse the same loose format: leading whitespace, an
optional sign, then as many decimal digits as follow. Anything after the
digits is ignored, and text with no digits parses as zero. Results wrap
around like fixed-width two's complement integers: 32 bits for ``atoi``
and 64 bits for ``atol``.
"""

from __future__ import annotations

__all__ = ["atoi", "atol", "itoa"]

_INT_BITS = 32
_LONG_BITS = 64
_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed integer of the given width."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def _parse(s: str) -> int:
    """Parse leading whitespace, an optional sign and decimal digits."""
    text = s.split("\0", 1)[0]
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < len(text) and text[pos] in _DIGITS:
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def atoi(s: str) -> int:
    """Parse the leading integer of ``s`` as a 32-bit signed value."""
    return _wrap(_parse(s), _INT_BITS)


def atol(s: str) -> int:
    """Parse the leading integer of ``s`` as a 64-bit signed value."""
    return _wrap(_parse(s), _LONG_BITS)


def itoa(n: int) -> str:
    """Return the decimal representation of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    limit = 1 << (_INT_BITS - 1)
    if not -limit <= n < limit:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)