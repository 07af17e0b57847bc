"""Character classification and ASCII case conversion.

Every function accepts either a one-character string or an integer code
point. The classifiers return ``bool``; the case converters return a value
of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

__all__ = [
    "is_alnum",
    "is_alpha",
    "is_alpha_lower",
    "is_alpha_upper",
    "is_ascii",
    "is_digit",
    "is_print",
    "is_space",
    "str_is_space",
    "to_upper",
    "to_lower",
]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code point for a character or integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return int(c)
    raise TypeError(f"expected a str or int, got {type(c).__name__}")


def is_alpha_lower(c: CharLike) -> bool:
    """True for the ASCII letters ``a`` to ``z``."""
    return ord("a") <= _code(c) <= ord("z")


def is_alpha_upper(c: CharLike) -> bool:
    """True for the ASCII letters ``A`` to ``Z``."""
    return ord("A") <= _code(c) <= ord("Z")


def is_alpha(c: CharLike) -> bool:
    """True for any ASCII letter."""
    return is_alpha_lower(c) or is_alpha_upper(c)


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits ``0`` to ``9``."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: CharLike) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space (32) to tilde (126)."""
    return 32 <= _code(c) <= 126


def is_space(c: CharLike) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return and space."""
    code = _code(c)
    return 8 < code < 14 or code == 32


def str_is_space(s: str) -> bool:
    """True if every character of ``s`` is whitespace; an empty string counts."""
    return all(is_space(ch) for ch in s)


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if is_alpha_lower(code):
        code -= _CASE_OFFSET
    return _convert(c, code)


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if is_alpha_upper(code):
        code += _CASE_OFFSET
    return _convert(c, code)