"""Writing characters, strings and numbers, and a small printf.

The ``put_*`` functions write to a text stream, standard output by default.
``sprintf`` understands the conversions ``%c``, ``%s``, ``%p``, ``%d``,
``%i``, ``%u``, ``%x``, ``%X`` and ``%%``. Any other character after a
``%`` is consumed and produces nothing, as does a lone ``%`` at the end.
Integers are reduced to 32 bits the way a C ``int`` would hold them.
Pointers are reduced to 64 bits.
"""

from __future__ import annotations

import re
import sys
from typing import Any, Iterator, Optional, TextIO, Union

from ftkit.cstring import strcpy
from ftkit.numbers import itoa

CharLike = Union[str, int]

__all__ = ["put_char", "put_str", "put_endl", "put_nbr", "sprintf", "printf"]

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = (1 << 64) - 1
_CONVERSION = re.compile(r"%(.?)", re.DOTALL)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a str or int, got {type(c).__name__}")


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def put_char(c: CharLike, stream: Optional[TextIO] = None) -> None:
    """Write one character."""
    _target(stream).write(_char(c))


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` up to its terminator."""
    _target(stream).write(strcpy(s))


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` up to its terminator, followed by a newline."""
    _target(stream).write(strcpy(s) + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    _target(stream).write(itoa(n))


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = int(value) & _POINTER_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX" or not spec:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else strcpy(str(value))
    if spec == "p":
        return _pointer(value)
    if spec in "di":
        return str(_signed32(int(value)))
    if spec == "u":
        return str(int(value) & _UINT_MASK)
    return format(int(value) & _UINT_MASK, spec)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args`` in order."""
    remaining = iter(args)
    return _CONVERSION.sub(
        lambda match: _convert(match.group(1), remaining), strcpy(fmt)
    )


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text and return the number of characters written."""
    text = sprintf(fmt, *args)
    _target(stream).write(text)
    return len(text)