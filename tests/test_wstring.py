import pytest

from avrcore.wstring import WString
from avrcore.wstring_ops import format_float


def test_default_is_empty_and_valid():
    s = WString()
    assert len(s) == 0
    assert bool(s) is True
    assert str(s) == ""


def test_none_is_invalid_until_concat():
    s = WString(None)
    assert bool(s) is False
    assert s.concat("abc") is True
    assert bool(s) is True
    assert str(s) == "abc"


def test_number_construction():
    assert str(WString(42)) == str(42)
    assert str(WString(-7)) == str(-7)
    assert str(WString(3.14159)) == format_float(3.14159, 2)


def test_copy_is_independent():
    a = WString("abc")
    b = WString(a)
    b.concat("def")
    assert str(a) == "abc"
    assert str(b) == "abc" + "def"


def test_concat_none_fails_and_keeps_value():
    s = WString("keep")
    assert s.concat(None) is False
    assert str(s) == "keep"


def test_concat_number_and_float():
    s = WString("n=")
    s += 5
    s += 1.5
    assert str(s) == "n=" + str(5) + format_float(1.5, 2)


def test_add_returns_new_string():
    a = WString("Hello")
    b = a + " World"
    assert str(b) == "Hello" + " World"
    assert str(a) == "Hello"
    assert bool(a + None) is False


def test_compare_to_signs():
    assert WString("abc").compare_to("abd") < 0
    assert WString("abd").compare_to("abc") > 0
    assert WString("abc").compare_to("abc") == 0
    assert WString("ab").compare_to("abc") < 0


def test_compare_with_invalid():
    assert WString(None).compare_to("a") == -ord("a")
    assert WString("b").compare_to(WString(None)) == ord("b")
    assert WString(None).compare_to(WString(None)) == 0


def test_equality_and_ordering():
    assert WString("abc") == "abc"
    assert WString("abc") == WString("abc")
    assert not (WString("abc") == "abcd")
    assert WString("a") < WString("b")
    assert WString("b") >= "a"
    assert WString(None) == ""


def test_equals_ignore_case():
    assert WString("HeLLo").equals_ignore_case("hello")
    assert not WString("hello").equals_ignore_case("hell")
    assert WString("").equals_ignore_case("")


def test_starts_and_ends_with():
    s = WString("keyboard")
    assert s.starts_with("key")
    assert not s.starts_with("board")
    assert s.starts_with("board", 3)
    assert not s.starts_with("board", 5)
    assert s.ends_with("board")
    assert not s.ends_with("key")
    assert not WString("ab").ends_with("abc")


def test_char_access():
    s = WString("abc")
    assert s.char_at(1) == "b"
    assert s[2] == "c"
    assert s.char_at(10) == "\0"
    s.set_char_at(0, "z")
    s.set_char_at(99, "q")
    assert str(s) == "zbc"


def test_set_char_at_rejects_multiple_chars():
    with pytest.raises(ValueError):
        WString("abc").set_char_at(0, "xy")


def test_index_of_and_last_index_of():
    s = WString("abcabc")
    assert s.index_of("b") == 1
    assert s.index_of("b", 2) == 4
    assert s.index_of("bc") == 1
    assert s.index_of("x") == -1
    assert s.last_index_of("a") == 3
    assert s.last_index_of("a", 2) == 0
    assert s.last_index_of("abc") == 3
    assert WString("").last_index_of("a") == -1


def test_substring_swaps_bounds():
    s = WString("hello world")
    assert str(s.substring(6)) == "world"
    assert str(s.substring(5, 0)) == "hello"
    assert str(s.substring(20)) == ""


def test_replace_same_and_shorter_length():
    s = WString("a-b-c")
    s.replace("-", "+")
    assert str(s) == "a+b+c"
    t = WString("xxaxxbxx")
    t.replace("xx", "")
    assert str(t) == "ab"


def test_replace_longer_matches_str_replace_without_overlap():
    text = "one two one"
    s = WString(text)
    s.replace("one", "three")
    assert str(s) == text.replace("one", "three")


def test_replace_longer_overlapping_works_from_the_right():
    s = WString("aaa")
    s.replace("aa", "bbb")
    assert str(s) == "abbb"


def test_replace_nothing_found_and_empty_find():
    s = WString("abc")
    s.replace("zz", "longer")
    s.replace("", "x")
    assert str(s) == "abc"


def test_remove():
    s = WString("abcdef")
    s.remove(1, 2)
    assert str(s) == "adef"
    s.remove(2)
    assert str(s) == "ad"
    s.remove(10)
    assert str(s) == "ad"


def test_case_conversion_is_ascii_only():
    s = WString("Straße")
    s.to_upper_case()
    assert str(s) == "STRAßE"
    s.to_lower_case()
    assert str(s) == "straße"


def test_trim():
    s = WString(" \t hi there \r\n")
    s.trim()
    assert str(s) == "hi there"
    blank = WString("   ")
    blank.trim()
    assert len(blank) == 0


def test_to_int():
    assert WString("  123abc").to_int() == 123
    assert WString("-45").to_int() == -45
    assert WString("abc").to_int() == 0
    assert WString(None).to_int() == 0


def test_to_float_is_single_precision():
    assert WString("2.5").to_float() == 2.5
    value = WString("0.1").to_float()
    assert abs(value - 0.1) < 1e-7
    assert value != 0.1
    assert WString("x").to_float() == 0.0


def test_iteration_yields_characters():
    assert list(WString("abc")) == list("abc")