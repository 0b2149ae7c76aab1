import pytest

from avrcore.wmath import make_word, map_range, random_below, random_range, random_seed


def _draws(count=10):
    return [random_below(1000) for _ in range(count)]


def test_random_below_zero():
    assert random_below(0) == 0


@pytest.mark.parametrize("limit", [1, 2, 10, 1000])
def test_random_below_in_range(limit):
    for _ in range(200):
        assert 0 <= random_below(limit) < limit


def test_random_below_negative_limit():
    for _ in range(200):
        assert 0 <= random_below(-5) < 5


def test_seed_is_deterministic():
    random_seed(1234)
    first = _draws()
    random_seed(1234)
    assert _draws() == first


def test_seed_zero_is_ignored():
    random_seed(77)
    first = _draws()
    random_seed(77)
    random_seed(0)
    assert _draws() == first


def test_random_range_empty():
    assert random_range(5, 5) == 5
    assert random_range(10, 3) == 10


def test_random_range_bounds():
    for _ in range(200):
        assert -3 <= random_range(-3, 4) < 4


def test_map_range_endpoints():
    assert map_range(0, 0, 10, 20, 40) == 20
    assert map_range(10, 0, 10, 20, 40) == 40
    assert map_range(1023, 0, 1023, 255, 0) == 0


def test_map_range_midpoint():
    assert map_range(5, 0, 10, 0, 100) == 50


def test_map_range_truncates_toward_zero():
    assert map_range(-1, 0, 3, 0, 1) == 0


def test_map_range_monotonic():
    values = [map_range(x, 0, 100, 0, 1000) for x in range(101)]
    assert values == sorted(values)


def test_map_range_empty_input():
    with pytest.raises(ZeroDivisionError):
        map_range(1, 5, 5, 0, 10)


def test_make_word_bytes():
    assert make_word(0x12, 0x34) == 0x1234


@pytest.mark.parametrize("high, low", [(0, 0), (255, 255), (1, 200), (128, 7)])
def test_make_word_round_trip(high, low):
    word = make_word(high, low)
    assert word >> 8 == high
    assert word & 0xFF == low


def test_make_word_single_value():
    assert make_word(4660) == 4660