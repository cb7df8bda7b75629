"""Allocating string transforms: case conversion, insertion and trimming.

Arguments end at their first NUL, as C strings do; a missing (None)
string yields None, as the C routines return a null pointer.
"""

from __future__ import annotations

import string
from typing import Optional

from cstrkit.cstr import _terminated

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

DEFAULT_TRIM_CHARS = "\n\t "


def to_upper(text: Optional[str]) -> Optional[str]:
    """Return ``text`` with ASCII letters made upper case."""
    if text is None:
        return None
    return _terminated(text).translate(_TO_UPPER)


def to_lower(text: Optional[str]) -> Optional[str]:
    """Return ``text`` with ASCII letters made lower case."""
    if text is None:
        return None
    return _terminated(text).translate(_TO_LOWER)


def insert(src: Optional[str], text: Optional[str], start_index: int) -> Optional[str]:
    """Return ``src`` with ``text`` inserted at ``start_index``.

    Returns None when either string is missing or the index lies outside
    ``0..len(src)``.
    """
    if src is None or text is None:
        return None
    base = _terminated(src)
    if not 0 <= start_index <= len(base):
        return None
    return base[:start_index] + _terminated(text) + base[start_index:]


def trim(src: Optional[str], trim_chars: Optional[str] = None) -> Optional[str]:
    """Strip characters of ``trim_chars`` from both ends of ``src``.

    A missing or empty ``trim_chars`` means newline, tab and space.
    """
    if src is None:
        return None
    chars = _terminated(trim_chars) if trim_chars is not None else ""
    return _terminated(src).strip(chars or DEFAULT_TRIM_CHARS)