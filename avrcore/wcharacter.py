"""Character classification and case conversion with C-locale ASCII rules."""

from __future__ import annotations

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGIT = range(ord("0"), ord("9") + 1)
_HEX = frozenset(b"0123456789abcdefABCDEF")
_SPACE = frozenset(b" \t\n\v\f\r")
_BLANK = frozenset(b" \t")


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError("expected a single character")
        return ord(c)
    return c


def _same_kind(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: int | str) -> bool:
    code = _code(c)
    return code in _UPPER or code in _LOWER


def is_digit(c: int | str) -> bool:
    return _code(c) in _DIGIT


def is_alpha_numeric(c: int | str) -> bool:
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for values 0 through 127."""
    return (_code(c) & ~0x7F) == 0


def is_whitespace(c: int | str) -> bool:
    """True for a blank: space or tab."""
    return _code(c) in _BLANK


def is_control(c: int | str) -> bool:
    code = _code(c)
    return 0 <= code < 0x20 or code == 0x7F


def is_graph(c: int | str) -> bool:
    """Printable and not a space."""
    return 0x21 <= _code(c) <= 0x7E


def is_lower_case(c: int | str) -> bool:
    return _code(c) in _LOWER


def is_upper_case(c: int | str) -> bool:
    return _code(c) in _UPPER


def is_printable(c: int | str) -> bool:
    """Printable, space included."""
    return 0x20 <= _code(c) <= 0x7E


def is_punct(c: int | str) -> bool:
    """Printable, neither a space nor alphanumeric."""
    return is_graph(c) and not is_alpha_numeric(c)


def is_space(c: int | str) -> bool:
    """Space, form feed, newline, carriage return, tab or vertical tab."""
    return _code(c) in _SPACE


def is_hexadecimal_digit(c: int | str) -> bool:
    return _code(c) in _HEX


def to_ascii(c: int | str) -> int | str:
    """Clear everything above the low seven bits."""
    return _same_kind(c, _code(c) & 0x7F)


def to_lower_case(c: int | str) -> int | str:
    code = _code(c)
    return _same_kind(c, code + 32 if code in _UPPER else code)


def to_upper_case(c: int | str) -> int | str:
    code = _code(c)
    return _same_kind(c, code - 32 if code in _LOWER else code)