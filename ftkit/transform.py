"""Building new strings from existing ones: copies, slices, joins, splits and maps.

As in :mod:`ftkit.cstring`, each string argument ends at its first ``"\\0"``
character, if it has one.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from ftkit.cstring import strcat, strcpy, strlen

__all__ = [
    "strdup",
    "substr",
    "strjoin",
    "strtrim",
    "count_words",
    "split",
    "strmapi",
    "striteri",
    "tab_len",
]


def _separator(sep: str) -> str:
    if not isinstance(sep, str):
        raise TypeError(f"expected a str separator, got {type(sep).__name__}")
    if len(sep) != 1:
        raise ValueError(f"expected a single-character separator, got {sep!r}")
    return sep


def strdup(s: str) -> str:
    """A fresh copy of ``s`` up to its terminator."""
    return strcpy(s)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end of ``s`` gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = strcpy(s)
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(a: str, b: str) -> str:
    """``a`` followed by ``b``, as a new string."""
    return strcat(a, b)


def strtrim(s: str, charset: str) -> str:
    """``s`` with every leading and trailing character found in ``charset`` removed."""
    return strcpy(s).strip(strcpy(charset))


def count_words(s: str, sep: str) -> int:
    """Number of non-empty runs of characters between occurrences of ``sep``."""
    return len(split(s, sep))


def split(s: str, sep: str) -> list[str]:
    """The non-empty pieces of ``s`` between occurrences of ``sep``, in order."""
    separator = _separator(sep)
    return [piece for piece in strcpy(s).split(separator) if piece]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string made of ``func(index, char)`` for each character of ``s``."""
    return "".join(func(index, ch) for index, ch in enumerate(strcpy(s)))


def striteri(s: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` on each character before the terminator.

    Where ``func`` returns a string it replaces the character; where it
    returns ``None`` the character is kept. Anything from the terminator on
    is left untouched. Returns the resulting string.
    """
    length = strlen(s)
    changed = []
    for index, ch in enumerate(s[:length]):
        replacement = func(index, ch)
        changed.append(ch if replacement is None else replacement)
    return "".join(changed) + s[length:]


def tab_len(table: Optional[Sequence[Optional[str]]]) -> int:
    """Number of entries before the first ``None`` in ``table``.

    A missing table (``None``) counts as 1.
    """
    if table is None:
        return 1
    count = 0
    for entry in table:
        if entry is None:
            break
        count += 1
    return count