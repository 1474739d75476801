import pytest
from vietkey.shifting import move_tone, shift_accent


@pytest.mark.parametrize(
    "word,key,expected",
    (
        ("tóa", "n", "toá"),
        ("hòa", "n", "hoà"),
        ("hóa", "i", "hoá"),
        ("thủa", "n", "thuả"),
        ("tíe", "6", "tié"),
        ("tóa", "8", "toá"),
        ("qúa", "a", "quá"),
        ("gìa", "x", "già"),
        ("mứa", "o", "mưá"),
        # ư only gives up its tone to a following vowel key
        ("mứa", "n", "mứa"),
        ("tóa", "s", "tóa"),
        ("tóa", "b", "tóa"),
        ("bá", "n", "bá"),
        ("toa", "n", "toa"),
        ("qún", "a", "qún"),
        ("a", "n", "a"),
        ("", "n", ""),
    ),
)
def test_shift_accent(word: str, key: str, expected: str):
    assert shift_accent(word, key) == expected


def test_move_tone():
    assert move_tone("trừơ", -2, -1) == "trườ"
    assert move_tone("trươ", -2, -1) == "trươ"
