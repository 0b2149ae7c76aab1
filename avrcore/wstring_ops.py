"""Text helpers with the conversion, search and editing rules of the string class."""

from __future__ import annotations

import re

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_C_SPACE = " \t\n\v\f\r"
_LONG_MIN = -(2**31)
_LONG_MAX = 2**31 - 1

_LONG_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_DOUBLE_RE = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def format_integer(value: int, base: int = 10) -> str:
    """Render an integer in ``base``; negatives get a sign only in base 10."""
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, not {base}")
    negative = value < 0 and base == 10
    if negative:
        magnitude = -value
    elif value < 0:
        magnitude = value & 0xFFFFFFFF
    else:
        magnitude = value
    out = []
    while True:
        magnitude, digit = divmod(magnitude, base)
        out.append(_DIGITS[digit])
        if not magnitude:
            break
    if negative:
        out.append("-")
    return "".join(reversed(out))


def format_float(value: float, decimal_places: int = 2) -> str:
    """Render a float with fixed decimals, right-aligned to ``decimal_places + 2``."""
    width = decimal_places + 2
    return f"{value:{width}.{decimal_places}f}"


def index_of(text: str, target: str, from_index: int = 0) -> int:
    """First position of ``target`` at or after ``from_index``, or -1."""
    if from_index < 0 or from_index >= len(text):
        return -1
    return text.find(target, from_index)


def last_index_of(text: str, target: str, from_index: int | None = None) -> int:
    """Last position of ``target`` starting at or before ``from_index``, or -1."""
    if not target or not text or len(target) > len(text):
        return -1
    if len(target) == 1:
        if from_index is None:
            from_index = len(text) - 1
        if from_index < 0 or from_index >= len(text):
            return -1
    else:
        if from_index is None:
            from_index = len(text) - len(target)
        if from_index < 0 or from_index >= len(text):
            from_index = len(text) - 1
    return text.rfind(target, 0, from_index + len(target))


def substring(text: str, begin: int, end: int | None = None) -> str:
    """Slice between two indices, swapping them if given in reverse order."""
    if end is None:
        end = len(text)
    if begin > end:
        begin, end = end, begin
    if begin >= len(text):
        return ""
    return text[begin:min(end, len(text))]


def remove_range(text: str, index: int, count: int | None = None) -> str:
    """Remove ``count`` characters from ``index`` (all remaining when omitted)."""
    if index >= len(text):
        return text
    if count is None:
        count = len(text) - index
    if count <= 0:
        return text
    return text[:index] + text[index + count:]


def trim(text: str) -> str:
    """Strip leading and trailing C whitespace characters."""
    return text.strip(_C_SPACE)


def parse_long(text: str) -> int:
    """Leading decimal integer of ``text`` clamped to 32 bits; 0 if none."""
    match = _LONG_RE.match(text)
    if not match:
        return 0
    return max(_LONG_MIN, min(_LONG_MAX, int(match.group(1))))


def parse_double(text: str) -> float:
    """Leading floating-point number of ``text``; 0.0 if none."""
    match = _DOUBLE_RE.match(text)
    if not match:
        return 0.0
    return float(match.group(1))