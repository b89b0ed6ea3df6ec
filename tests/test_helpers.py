import pytest

from wordle_board.utils.helpers import normalize_input, normalize_word


@pytest.mark.parametrize("raw, expected", [
    ("tests", "TESTS"),
    ("H3!RT", "HRT"),
    ("12", ""),
    ("  wrong\n", "WRONG"),
    (None, ""),
])
def test_normalize_word(raw, expected):
    assert normalize_word(raw) == expected


def test_normalize_input_caps_at_word_size():
    assert normalize_input("TESTS" + "EXTRA") == "TESTS"
    assert normalize_input("abcdefg", word_size=3) == "ABC"


def test_normalize_word_keeps_overlong_input():
    assert normalize_word("TESTSEXTRA") == "TESTSEXTRA"


@pytest.mark.parametrize("raw, expected", [
    ("TEﬆS", "TES"),  # the "st" ligature is not an ASCII letter
    ("straße", "STRAE"),
    ("cafés", "CAFS"),
])
def test_non_ascii_letters_are_dropped_before_uppercasing(raw, expected):
    assert normalize_word(raw) == expected
