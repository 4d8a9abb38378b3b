"""Parsers for the textual command-line arguments."""

from __future__ import annotations

import re
from typing import Callable, Optional, TypeVar

T = TypeVar("T")

_UNSIGNED = re.compile(r"\+?[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")


def parse_unsigned(text: str) -> int:
    """Parse a non-negative decimal integer, rejecting anything ``int`` would tolerate."""

    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    return int(text)


def parse_int(text: str) -> int:
    if not _SIGNED.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


def parse_float(text: str) -> float:
    if not text.isascii() or text != text.strip() or "_" in text:
        raise ValueError(f"invalid float: {text!r}")
    return float(text)


def parse_pair(text: str, separator: str, parse: Callable[[str], T] = parse_int) -> Optional[tuple[T, T]]:
    """Parse ``text`` as two values separated by the first ``separator``.

    ``parse`` converts each side; a ``ValueError`` from either side makes the
    whole pair fail. Returns ``None`` on failure.

    >>> parse_pair("10,20", ",")
    (10, 20)
    >>> parse_pair("0.5x1.5", "x", float)
    (0.5, 1.5)
    >>> parse_pair("10,", ",") is None
    True
    """

    index = text.find(separator)
    if index < 0:
        return None
    try:
        left = parse(text[:index])
        right = parse(text[index + len(separator):])
    except ValueError:
        return None
    return left, right


def parse_complex(text: str) -> Optional[complex]:
    """Parse ``"re,im"`` into a complex number."""

    pair = parse_pair(text, ",", parse_float)
    if pair is None:
        return None
    re_part, im_part = pair
    return complex(re_part, im_part)


def parse_dimensions(text: str) -> Optional[tuple[int, int]]:
    return parse_pair(text, "x", parse_unsigned)
