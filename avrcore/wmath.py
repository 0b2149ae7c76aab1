"""Random numbers, linear range mapping and word building."""

from __future__ import annotations

import random

_generator = random.Random()


def random_seed(seed: int) -> None:
    """Seed the generator; a seed of 0 is ignored."""
    if seed != 0:
        _generator.seed(seed)


def _draw() -> int:
    return _generator.getrandbits(31)


def random_below(howbig: int) -> int:
    """Random value in ``[0, |howbig|)``; 0 when ``howbig`` is 0."""
    if howbig == 0:
        return 0
    return _draw() % abs(howbig)


def random_range(howsmall: int, howbig: int) -> int:
    """Random value in ``[howsmall, howbig)``; ``howsmall`` if the range is empty."""
    if howsmall >= howbig:
        return howsmall
    return random_below(howbig - howsmall) + howsmall


def map_range(x: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Re-map ``x`` linearly from one range to another with truncating division."""
    numerator = (x - in_min) * (out_max - out_min)
    denominator = in_max - in_min
    if denominator == 0:
        raise ZeroDivisionError("input range is empty")
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        quotient = -quotient
    return quotient + out_min


def make_word(high: int, low: int | None = None) -> int:
    """Build a 16-bit word from a high and a low byte, or pass one word through."""
    if low is None:
        return high & 0xFFFF
    return ((high & 0xFF) << 8) | (low & 0xFF)