"""Splitting text into tokens one at a time.

Only the first character of a delimiter string is used as the separator;
runs of it are skipped. An empty delimiter makes the rest of the text a
single token.
"""

from __future__ import annotations

from typing import Optional

from ftkit.cstring import strcpy

__all__ = ["Tokenizer", "strtok"]


class Tokenizer:
    """Hands out successive tokens of a piece of text."""

    def __init__(self, text: str) -> None:
        self._text = strcpy(text)
        self._pos = 0

    def reset(self, text: str) -> None:
        """Start over on new text."""
        self._text = strcpy(text)
        self._pos = 0

    def next_token(self, delim: str) -> Optional[str]:
        """The next token separated by ``delim[0]``, or None when none are left."""
        text = self._text
        end_of_text = len(text)
        pos = self._pos
        if delim:
            sep = delim[0]
            while pos < end_of_text and text[pos] == sep:
                pos += 1
        else:
            sep = ""
        if pos >= end_of_text:
            self._pos = end_of_text
            return None
        end = text.find(sep, pos) if sep else -1
        if end < 0:
            self._pos = end_of_text
            return text[pos:]
        self._pos = end + 1
        return text[pos:end]


_shared: Optional[Tokenizer] = None


def strtok(text: Optional[str], delim: str) -> Optional[str]:
    """Return the next token from a shared tokenizer.

    Passing text starts a new sequence; passing ``None`` continues the
    previous one.
    """
    global _shared
    if text is not None:
        if _shared is None:
            _shared = Tokenizer(text)
        else:
            _shared.reset(text)
    elif _shared is None:
        raise ValueError("no text to continue tokenizing")
    return _shared.next_token(delim)