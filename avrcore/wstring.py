"""A mutable string with the search, comparison and editing rules of the core string class."""

from __future__ import annotations

import struct

from .wstring_ops import (
    format_float,
    format_integer,
    index_of as _index_of,
    last_index_of as _last_index_of,
    parse_double,
    parse_long,
    remove_range,
    substring as _substring,
    trim as _trim,
)

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def _text_of(value) -> str | None:
    """Text form of a value accepted by the string; None marks an invalid value."""
    if value is None:
        return None
    if isinstance(value, WString):
        return value._text
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    if isinstance(value, bool):
        return format_integer(int(value))
    if isinstance(value, int):
        return format_integer(value)
    if isinstance(value, float):
        return format_float(value, 2)
    raise TypeError(f"cannot make a string from {type(value).__name__}")


def _strcmp(left: str, right: str) -> int:
    for a, b in zip(left, right):
        if a != b:
            return ord(a) - ord(b)
    if len(left) > len(right):
        return ord(left[len(right)])
    if len(right) > len(left):
        return -ord(right[len(left)])
    return 0


def _to_single(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return float("inf") if value > 0 else float("-inf")


class WString:
    """A string that may be invalid (falsy) and is edited in place."""

    __hash__ = None  # mutable

    def __init__(self, value="") -> None:
        self._text: str | None = _text_of(value)

    # ---- basic protocol ------------------------------------------------

    def __bool__(self) -> bool:
        return self._text is not None

    def __len__(self) -> int:
        return len(self._text) if self._text is not None else 0

    def __str__(self) -> str:
        return self._text or ""

    def __repr__(self) -> str:
        if self._text is None:
            return "WString(None)"
        return f"WString({self._text!r})"

    def __iter__(self):
        return iter(str(self))

    # ---- concatenation -------------------------------------------------

    def concat(self, value) -> bool:
        """Append ``value``; return False and leave the string unchanged if it is invalid."""
        text = _text_of(value)
        if text is None:
            return False
        if not text:
            return True
        self._text = (self._text or "") + text
        return True

    def __iadd__(self, value) -> "WString":
        self.concat(value)
        return self

    def __add__(self, value) -> "WString":
        result = WString(self)
        if not result.concat(value):
            result._text = None
        return result

    def __radd__(self, value) -> "WString":
        result = WString(value)
        if not result.concat(self):
            result._text = None
        return result

    # ---- comparison ----------------------------------------------------

    def compare_to(self, other) -> int:
        """Negative, zero or positive as this string sorts before, equal to or after ``other``."""
        other_text = _text_of(other)
        if self._text is None or other_text is None:
            if other_text:
                return -ord(other_text[0])
            if self._text:
                return ord(self._text[0])
            return 0
        return _strcmp(self._text, other_text)

    def __eq__(self, other) -> bool:
        if other is not None and not isinstance(other, (WString, str)):
            return NotImplemented
        other_text = _text_of(other)
        return len(self) == len(other_text or "") and self.compare_to(other) == 0

    def __lt__(self, other) -> bool:
        return self.compare_to(other) < 0

    def __gt__(self, other) -> bool:
        return self.compare_to(other) > 0

    def __le__(self, other) -> bool:
        return self.compare_to(other) <= 0

    def __ge__(self, other) -> bool:
        return self.compare_to(other) >= 0

    def equals_ignore_case(self, other) -> bool:
        """Equality ignoring ASCII letter case."""
        if other is self:
            return True
        other_text = _text_of(other) or ""
        mine = self._text or ""
        if len(mine) != len(other_text):
            return False
        return mine.translate(_ASCII_LOWER) == other_text.translate(_ASCII_LOWER)

    def starts_with(self, prefix, offset: int | None = None) -> bool:
        """True if ``prefix`` occurs at ``offset`` (the start when omitted)."""
        prefix_text = _text_of(prefix)
        if offset is None:
            if len(self) < len(prefix_text or ""):
                return False
            offset = 0
        if self._text is None or prefix_text is None:
            return False
        if offset < 0 or offset + len(prefix_text) > len(self._text):
            return False
        return self._text.startswith(prefix_text, offset)

    def ends_with(self, suffix) -> bool:
        suffix_text = _text_of(suffix)
        if self._text is None or suffix_text is None or len(self._text) < len(suffix_text):
            return False
        return self._text.endswith(suffix_text)

    # ---- character access ----------------------------------------------

    def char_at(self, index: int) -> str:
        """Character at ``index``, or NUL when out of range."""
        if self._text is None or index < 0 or index >= len(self._text):
            return "\0"
        return self._text[index]

    def __getitem__(self, index: int) -> str:
        return self.char_at(index)

    def set_char_at(self, index: int, char: str) -> None:
        """Replace the character at ``index``; out-of-range indices are ignored."""
        if len(char) != 1:
            raise ValueError("set_char_at needs exactly one character")
        if self._text is not None and 0 <= index < len(self._text):
            self._text = self._text[:index] + char + self._text[index + 1:]

    def __setitem__(self, index: int, char: str) -> None:
        self.set_char_at(index, char)

    # ---- search --------------------------------------------------------

    def index_of(self, target, from_index: int = 0) -> int:
        target_text = _text_of(target)
        if self._text is None or target_text is None:
            return -1
        return _index_of(self._text, target_text, from_index)

    def last_index_of(self, target, from_index: int | None = None) -> int:
        target_text = _text_of(target)
        if self._text is None or target_text is None:
            return -1
        return _last_index_of(self._text, target_text, from_index)

    def substring(self, begin: int, end: int | None = None) -> "WString":
        return WString(_substring(self._text or "", begin, end))

    # ---- modification --------------------------------------------------

    def replace(self, find, replacement) -> None:
        """Replace every occurrence of ``find`` with ``replacement`` in place."""
        find_text = _text_of(find)
        replacement_text = _text_of(replacement) or ""
        text = self._text
        if not text or not find_text:
            return
        diff = len(replacement_text) - len(find_text)
        if diff <= 0:
            self._text = text.replace(find_text, replacement_text)
            return
        if text.count(find_text) == 0:
            return
        index = len(text) - 1
        while index >= 0:
            index = _last_index_of(text, find_text, index)
            if index < 0:
                break
            text = text[:index] + replacement_text + text[index + len(find_text):]
            index -= 1
        self._text = text

    def remove(self, index: int, count: int | None = None) -> None:
        """Remove ``count`` characters from ``index`` (the rest when omitted)."""
        if self._text is None or index < 0:
            return
        self._text = remove_range(self._text, index, count)

    def to_lower_case(self) -> None:
        if self._text is not None:
            self._text = self._text.translate(_ASCII_LOWER)

    def to_upper_case(self) -> None:
        if self._text is not None:
            self._text = self._text.translate(_ASCII_UPPER)

    def trim(self) -> None:
        if self._text:
            self._text = _trim(self._text)

    # ---- conversion ----------------------------------------------------

    def to_int(self) -> int:
        return parse_long(self._text) if self._text is not None else 0

    def to_double(self) -> float:
        return parse_double(self._text) if self._text is not None else 0.0

    def to_float(self) -> float:
        """Leading number as a single-precision value."""
        return _to_single(self.to_double())