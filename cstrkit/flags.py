"""Applying flags, width and precision to the text of a converted value."""

from __future__ import annotations

from dataclasses import replace

from cstrkit.spec import FormatSpec

_FLOAT_SPECS = frozenset("fgGeE")
_UNSIGNED_SPECS = frozenset("ouxX")
_INTEGER_SPECS = frozenset("diouxXn")
_SHARP_SPECS = frozenset("oxX")


def _check_fill(fill: str) -> None:
    if len(fill) != 1:
        raise ValueError(f"fill must be a single character, got {fill!r}")


def add_sign_or_space(text: str, spec: FormatSpec, negative: bool) -> str:
    """Prefix ``-`` for a negative value, else ``+`` or a space as the flags ask."""
    if negative:
        return "-" + text
    if spec.plus_flag:
        return "+" + text
    if spec.space_flag:
        return " " + text
    return text


def add_sharp_sign(text: str, spec: FormatSpec) -> str:
    """Add the ``0`` / ``0x`` / ``0X`` prefix of the alternate form."""
    if spec.spec in _SHARP_SPECS and text == "0":
        return text
    if spec.spec == "o" and spec.prec_number in (-1, 0):
        return "0" + text
    if spec.spec in ("x", "X"):
        return "0" + spec.spec + text
    return text


def pad_left(text: str, count: int, fill: str, spec: FormatSpec) -> str:
    """Prepend ``count`` fill characters; the zero flag makes the fill ``0``."""
    _check_fill(fill)
    if spec.zero_flag:
        fill = "0"
    return fill * max(count, 0) + text


def pad_right(text: str, count: int, fill: str) -> str:
    """Append ``count`` fill characters."""
    _check_fill(fill)
    return text + fill * max(count, 0)


def shift(text: str, negative: bool, spec: FormatSpec) -> str:
    """Add the sign and pad ``text`` out to the field width."""
    sign_size = 1 if negative or spec.plus_flag or spec.space_flag else 0
    width = spec.width_number
    if spec.minus_flag:
        signed = add_sign_or_space(text, spec, negative)
        if len(text) >= width + spec.width_star:
            return signed
        return pad_right(signed, width - len(text) - sign_size, " ")
    if len(text) >= width:
        return add_sign_or_space(text, spec, negative)
    if spec.zero_flag or text.startswith("0"):
        padded = pad_left(text, width - len(text) - sign_size, " ", spec)
        return add_sign_or_space(padded, spec, negative)
    signed = add_sign_or_space(text, spec, negative)
    return pad_left(signed, width - len(text) - sign_size, " ", spec)


def apply_flags(text: str, spec: FormatSpec) -> str:
    """Lay out the converted ``text`` of a value as ``spec`` directs.

    A leading ``-`` in ``text`` marks a negative value.  ``spec`` itself is
    left unchanged.
    """
    negative = text.startswith("-")
    body = text[1:] if negative else text

    changes = {"width_number": spec.width_number or spec.width_star}
    if spec.spec in _FLOAT_SPECS:
        changes["prec_number"] = -1
    if spec.spec in _UNSIGNED_SPECS:
        changes["plus_flag"] = False
        changes["space_flag"] = False
    spec = replace(spec, **changes)
    width = spec.width_number

    if spec.spec == "s":
        if width > len(body):
            if spec.minus_flag:
                return pad_right(body, width - len(body), " ")
            return pad_left(body, width - len(body), " ", spec)
        return body

    if (
        spec.prec_number != -1
        and spec.spec in _INTEGER_SPECS
        and spec.prec_number > len(body)
    ):
        body = pad_left(body, spec.prec_number - len(body), "0", spec)
    if spec.sharp_flag:
        body = add_sharp_sign(body, spec)
    if spec.width_number or spec.width_star:
        return shift(body, negative, spec)
    return add_sign_or_space(body, spec, negative)