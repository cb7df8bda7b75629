"""Parsing of a single printf-style conversion specification."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

DEFAULT_PRECISION = 6

SPECIFIERS = frozenset("cdieEfgGosuxXpn%")
LENGTH_MODIFIERS = frozenset("hlL")
_DIGITS = frozenset("0123456789")


@dataclass
class FormatSpec:
    """Flags, width, precision, length and conversion of one ``%`` directive.

    A precision of -1 means none was given; a width of 0 means none was
    given.  ``width_star`` and ``prec_star`` hold values taken from the
    argument list for ``*``.
    """

    spec: str = ""
    minus_flag: bool = False
    plus_flag: bool = False
    space_flag: bool = False
    sharp_flag: bool = False
    zero_flag: bool = False
    width_number: int = 0
    width_star: int = 0
    prec_number: int = -1
    prec_star: int = -1
    length: str = ""


def _char_at(fmt: str, i: int) -> str:
    return fmt[i] if i < len(fmt) else ""


def _read_number(fmt: str, i: int) -> tuple[int, int]:
    """Read the run of decimal digits at ``i``; return its value and the index after it."""
    end = i
    while _char_at(fmt, end) in _DIGITS:
        end += 1
    return int(fmt[i:end]), end


def _next_star(values: Iterator[Any]) -> int:
    try:
        value = next(values)
    except StopIteration:
        raise ValueError("format needs an argument for '*'") from None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"'*' needs an int argument, got {type(value).__name__}")
    return value


def parse_spec(fmt: str, index: int, args: Iterable[Any]) -> tuple[FormatSpec, int]:
    """Parse the directive whose ``%`` is at ``fmt[index]``.

    ``args`` supplies the values for ``*`` width and precision; pass an
    iterator to keep consuming the same argument list across calls.
    Returns the parsed spec and the index of its conversion character,
    or ``len(fmt)`` when the format ends before one.
    """
    if not 0 <= index < len(fmt) or fmt[index] != "%":
        raise ValueError(f"no '%' at index {index} of {fmt!r}")
    star_values = iter(args)
    spec = FormatSpec()
    have_width = False
    have_prec = False
    i = index + 1
    while i < len(fmt):
        ch = fmt[i]

        if ch == "+":
            spec.plus_flag = True
        elif ch == "-":
            spec.minus_flag = True
        elif ch == " ":
            spec.space_flag = True
        elif ch == "#":
            spec.sharp_flag = True
        elif ch == "0" and not have_prec and not have_width:
            spec.zero_flag = True

        if ch == "*" and spec.width_number == 0 and not have_width:
            spec.width_star = _next_star(star_values)
            have_width = True
        if ch in _DIGITS and not have_width:
            spec.width_number, _ = _read_number(fmt, i)
            have_width = True

        if ch == ".":
            i += 1
            following = _char_at(fmt, i)
            if not have_prec:
                if following in _DIGITS:
                    spec.prec_number, i = _read_number(fmt, i)
                    have_prec = True
                elif following == "*":
                    spec.prec_star = _next_star(star_values)
                    spec.prec_number = spec.prec_star
                    have_prec = True
                else:
                    spec.prec_number = 0
            ch = _char_at(fmt, i)

        if ch in LENGTH_MODIFIERS:
            spec.length = ch
        if ch in SPECIFIERS:
            spec.spec = ch
            break
        if not ch:
            break
        i += 1
    return spec, i