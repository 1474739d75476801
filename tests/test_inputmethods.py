import pytest
from vietkey.inputmethods import InputMethod, resolve_accent, resolve_telex_shared_key
from vietkey.table import Accent


@pytest.mark.parametrize(
    "key,expected",
    (
        ("1", Accent.ACUTE),
        ("5", Accent.DOT),
        ("7", Accent.HORN),
        ("9", Accent.STROKE),
        ("0", Accent.REMOVE),
        ("s", Accent.NONE),
        ("'", Accent.NONE),
    ),
)
def test_vni(key, expected):
    assert resolve_accent(InputMethod.VNI, key, "a", "ba") is expected


@pytest.mark.parametrize(
    "key,expected",
    (
        ("'", Accent.ACUTE),
        ("`", Accent.GRAVE),
        ("?", Accent.HOOK),
        ("~", Accent.TILDE),
        (".", Accent.DOT),
        ("^", Accent.CIRCUMFLEX),
        ("+", Accent.HORN),
        ("*", Accent.HORN),
        ("(", Accent.BREVE),
        ("-", Accent.REMOVE),
        ("d", Accent.STROKE),
        ("D", Accent.STROKE),
        ("a", Accent.NONE),
        ("1", Accent.NONE),
        ("!", Accent.NONE),
    ),
)
def test_viqr(key, expected):
    assert resolve_accent(InputMethod.VIQR, key, "a", "ba") is expected


@pytest.mark.parametrize(
    "key,expected",
    (
        ("s", Accent.ACUTE),
        ("S", Accent.ACUTE),
        ("f", Accent.GRAVE),
        ("r", Accent.HOOK),
        ("x", Accent.TILDE),
        ("j", Accent.DOT),
        ("z", Accent.REMOVE),
        ("d", Accent.STROKE),
        ("b", Accent.NONE),
        ("1", Accent.NONE),
        ("'", Accent.NONE),
    ),
)
def test_telex(key, expected):
    assert resolve_accent(InputMethod.TELEX, key, "a", "ba") is expected


@pytest.mark.parametrize(
    "word,key,expected",
    (
        ("ta", "a", Accent.CIRCUMFLEX),
        ("tă", "a", Accent.CIRCUMFLEX),
        ("TA", "A", Accent.CIRCUMFLEX),
        ("to", "a", Accent.NONE),
        ("to", "o", Accent.CIRCUMFLEX),
        ("tơ", "o", Accent.CIRCUMFLEX),
        ("ta", "o", Accent.NONE),
        ("tie", "e", Accent.CIRCUMFLEX),
        ("ti", "e", Accent.NONE),
        ("ta", "w", Accent.BREVE),
        ("tu", "w", Accent.HORN),
        ("to", "w", Accent.HORN),
        ("", "w", Accent.HORN),
    ),
)
def test_telex_shared_keys(word, key, expected):
    assert resolve_accent(InputMethod.TELEX, key, word[-1:], word) is expected


def test_resolve_telex_shared_key_directly():
    assert resolve_telex_shared_key("hoan", "w", Accent.HORN) is Accent.BREVE
    assert resolve_telex_shared_key("hoan", "o", Accent.CIRCUMFLEX) is Accent.CIRCUMFLEX


@pytest.mark.parametrize(
    "key,word,expected",
    (
        ("1", "ba", Accent.ACUTE),
        ("s", "ba", Accent.ACUTE),
        ("'", "ba", Accent.ACUTE),
        ("+", "to", Accent.HORN),
        ("a", "ta", Accent.CIRCUMFLEX),
        ("w", "ta", Accent.BREVE),
        ("!", "ba", Accent.NONE),
    ),
)
def test_auto(key, word, expected):
    assert resolve_accent(InputMethod.AUTO, key, word[-1], word) is expected
