"""Null-terminated string routines over Python ``str`` values.

Every string argument ends at its first ``"\\0"``, as a C string would.
Routines that locate a character return its index, or None when absent.
"""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice, takewhile
from typing import Optional, Union

NUL = "\0"

Char = Union[int, str]


def _terminated(s: str) -> str:
    """Return ``s`` up to, not including, its first NUL."""
    end = s.find(NUL)
    return s if end < 0 else s[:end]


def _as_char(c: Char) -> str:
    if isinstance(c, int):
        return chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _run_length(text: str, start: int, chars: str, member: bool) -> int:
    """Length of the run from ``start`` whose characters are (or are not) in ``chars``."""
    return sum(1 for _ in takewhile(lambda ch: (ch in chars) == member, islice(text, start, None)))


def _compare(a: str, b: str, limit: Optional[int] = None) -> int:
    pairs = zip(_terminated(a) + NUL, _terminated(b) + NUL)
    if limit is not None:
        pairs = islice(pairs, limit)
    for x, y in pairs:
        if x != y or x == NUL:
            return ord(x) - ord(y)
    return 0


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative: {n}")


def strlen(s: Optional[str]) -> int:
    """Length of ``s`` up to its terminator; None counts as empty."""
    return 0 if s is None else len(_terminated(s))


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``s``; searching for NUL finds the terminator."""
    text = _terminated(s)
    ch = _as_char(c)
    if ch == NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``s``; searching for NUL finds the terminator."""
    text = _terminated(s)
    ch = _as_char(c)
    if ch == NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strcmp(a: str, b: str) -> int:
    """Difference of the first pair of characters that differ, or 0."""
    return _compare(a, b)


def strncmp(a: str, b: str, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` characters."""
    _check_count(n)
    return _compare(a, b, n)


def strcat(dest: str, src: str) -> str:
    """Return ``src`` appended to ``dest``."""
    return _terminated(dest) + _terminated(src)


def strncat(dest: str, src: str, n: int) -> str:
    """Return at most ``n`` characters of ``src`` appended to ``dest``."""
    _check_count(n)
    return _terminated(dest) + _terminated(src)[:n]


def strcpy(dest: str, src: str) -> str:
    """Return what ``dest`` reads as after ``src`` and its terminator are copied over it.

    The terminator hides whatever ``dest`` held, so the result is ``src``.
    """
    return _terminated(src)


def strncpy(dest: str, src: str, n: int) -> str:
    """Return what ``dest`` reads as after up to ``n`` characters of ``src`` overwrite it.

    No terminator is written, so characters of ``dest`` past the copied
    part remain visible; ``dest`` is treated as a buffer that may hold NULs.
    """
    _check_count(n)
    copied = _terminated(src)[:n]
    return _terminated(copied + dest[len(copied):])


def strspn(s: str, accept: str) -> int:
    """Length of the leading run of ``s`` made only of characters in ``accept``."""
    return _run_length(_terminated(s), 0, _terminated(accept), True)


def strcspn(s: str, reject: str) -> int:
    """Length of the leading run of ``s`` free of characters in ``reject``."""
    return _run_length(_terminated(s), 0, _terminated(reject), False)


def strpbrk(s: str, accept: str) -> Optional[int]:
    """Index of the first character of ``s`` that occurs in ``accept``."""
    chars = _terminated(accept)
    return next((i for i, ch in enumerate(_terminated(s)) if ch in chars), None)


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle``; an empty needle is found at 0."""
    index = _terminated(haystack).find(_terminated(needle))
    return None if index < 0 else index


class Tokenizer:
    """Splits a string into tokens one call at a time, as strtok does.

    Leading delimiters are skipped only on the first call; after each token
    the delimiters that follow it are consumed with the set given for that
    call, so changing the set between calls can yield empty tokens.
    """

    def __init__(self, text: str) -> None:
        self._text = _terminated(text)
        self._pos = 0
        self._started = False

    def next_token(self, delim: str) -> Optional[str]:
        """Return the next token separated by any character of ``delim``, or None."""
        delims = _terminated(delim)
        text = self._text
        if not self._started:
            self._started = True
            self._pos = _run_length(text, 0, delims, True)
        if self._pos >= len(text):
            return None
        start = self._pos
        end = start + _run_length(text, start, delims, False)
        self._pos = end + _run_length(text, end, delims, True)
        return text[start:end]


def tokenize(text: str, delim: str) -> Iterator[str]:
    """Yield every token of ``text`` separated by characters of ``delim``."""
    tokenizer = Tokenizer(text)
    while (token := tokenizer.next_token(delim)) is not None:
        yield token