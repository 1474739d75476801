import pytest
from vietkey.engine import VietKeyEngine
from vietkey.inputmethods import InputMethod
from vietkey.settings import EngineSettings
from vietkey.surface import TextSurface


def type_with(keys: str, **kwargs) -> str:
    return TextSurface(VietKeyEngine(EngineSettings(**kwargs))).type_text(keys)


@pytest.mark.parametrize(
    "keys,expected",
    (
        ("tieengs", "tiếng"),
        ("Vieetj Nam", "Việt Nam"),
        ("ddaauf", "đầu"),
        ("nguwowif", "người"),
        ("truongwf", "trường"),
        ("DDuwowngf", "Đường"),
        ("xin chaof", "xin chào"),
        ("hoaf", "hoà"),
        ("toans", "toán"),
        ("tosan", "toán"),
        ("quas", "quá"),
        ("qusa", "quá"),
        ("khoong", "không"),
        ("mas", "má"),
        ("mass", "ma"),
        ("masz", "ma"),
        ("truwowngfz", "truong"),
        ("dd", "đ"),
    ),
)
def test_telex(keys: str, expected: str):
    assert type_with(keys) == expected


def test_telex_classic():
    assert type_with("hoaf", diacritics_position_classic=True) == "hòa"


@pytest.mark.parametrize(
    "method,keys",
    (
        (InputMethod.VNI, "tie6ng1"),
        (InputMethod.VIQR, "tie^ng'"),
        (InputMethod.AUTO, "tieeng1"),
        (InputMethod.AUTO, "tie^ngs"),
    ),
)
def test_other_methods(method: InputMethod, keys: str):
    assert type_with(keys, input_method=method) == "tiếng"


def test_vni_stroke():
    assert type_with("d9a", input_method=InputMethod.VNI) == "đa"


def test_without_smart_mark():
    assert type_with("hoas", smart_mark=False) == "hoá"
    assert type_with("tieens", smart_mark=False) == "tiêns"


def test_vietnamese_mode_off():
    assert type_with("tieengs", vietnamese_mode=False) == "tieengs"


def test_escape_and_backspace():
    assert type_with("ba\\s") == "bas"
    surface = TextSurface(VietKeyEngine())
    surface.type_text("mas")
    surface.type_key("\b")
    assert surface.text == "m"


def test_current_word():
    surface = TextSurface(VietKeyEngine(), text="xin chào")
    assert surface.current_word == "chào"
    assert surface.caret_char == "o"
    surface.type_key(" ")
    assert surface.current_word == ""
