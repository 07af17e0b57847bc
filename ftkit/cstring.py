"""String routines with NUL-terminated semantics.

Each string argument ends at its first ``"\\0"`` character, if it has one;
anything after it is ignored. Functions that would hand back a position in
the original return an index, or ``None`` where nothing was found. Functions
that would fill a caller's buffer return the resulting string instead.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

CharLike = Union[str, int]

__all__ = [
    "strlen",
    "strlcpy",
    "strlcat",
    "strchr",
    "strrchr",
    "strncmp",
    "strcmp",
    "strnstr",
    "strstr",
    "strncpy",
    "strcat",
    "strcpy",
]


def _cstr(s: str) -> str:
    """Return ``s`` up to, not including, its first NUL character."""
    return s.split("\0", 1)[0]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a str or int, got {type(c).__name__}")


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def _at(s: str, i: int) -> int:
    """Code point at ``i``, or 0 past the end, as a terminator would read."""
    return ord(s[i]) if i < len(s) else 0


def strlen(s: str) -> int:
    """Number of characters before the terminator."""
    return len(_cstr(s))


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copied string, which holds at most ``size - 1`` characters,
    and the full length of ``src``.
    """
    _check_size(size)
    text = _cstr(src)
    if size == 0:
        return "", len(text)
    return text[: size - 1], len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting string and the length that was attempted. With a
    size of zero ``dst`` is left alone and only the length of ``src`` is
    reported.
    """
    _check_size(size)
    head = _cstr(dst)
    tail = _cstr(src)
    if size == 0:
        return head, len(tail)
    room = max(0, size - 1 - len(head))
    result = head + tail[:room]
    if size < len(head):
        return result, len(tail) + size
    return result, len(head) + len(tail)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; searching for NUL finds the terminator."""
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; searching for NUL finds the terminator."""
    text = _cstr(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; a count of zero yields 1."""
    _check_size(n)
    if n == 0:
        return 1
    left = _cstr(a)
    right = _cstr(b)
    i = 0
    while (
        i < n - 1
        and _at(left, i) == _at(right, i)
        and _at(left, i) != 0
    ):
        i += 1
    return _at(left, i) - _at(right, i)


def strcmp(a: str, b: str) -> int:
    """Difference of the first differing characters, or 0 if equal."""
    left = _cstr(a)
    right = _cstr(b)
    i = 0
    while _at(left, i) == _at(right, i) and _at(left, i) != 0:
        i += 1
    return _at(left, i) - _at(right, i)


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` lying wholly in the first ``length`` characters of ``big``."""
    _check_size(length)
    needle = _cstr(little)
    if not needle:
        return 0
    index = _cstr(big)[:length].find(needle)
    return None if index < 0 else index


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle`` in ``haystack``."""
    target = _cstr(needle)
    if not target:
        return 0
    index = _cstr(haystack).find(target)
    return None if index < 0 else index


def strncpy(src: str, n: int) -> str:
    """Exactly ``n`` characters: ``src`` cut to ``n`` or padded with NULs."""
    _check_size(n)
    text = _cstr(src)[:n]
    return text + "\0" * (n - len(text))


def strcat(dest: str, src: str) -> str:
    """``dest`` followed by ``src``."""
    return _cstr(dest) + _cstr(src)


def strcpy(src: str) -> str:
    """A copy of ``src`` up to its terminator."""
    return _cstr(src)