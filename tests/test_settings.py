import json

import cattrs
import pytest
from vietkey.inputmethods import InputMethod
from vietkey.settings import EngineSettings


def test_for_test_matches_defaults():
    assert EngineSettings.for_test() == EngineSettings()


def test_save_and_load(tmp_path):
    path = tmp_path / "settings.json"
    settings = EngineSettings(input_method=InputMethod.VNI, diacritics_position_classic=True)
    settings.save(path)
    assert json.loads(path.read_text())["input_method"] == "VNI"
    assert EngineSettings.load(path) == settings


@pytest.mark.parametrize(
    "name,expected",
    (
        ("Telex", InputMethod.TELEX),
        ("telex", InputMethod.TELEX),
        ("VIQR", InputMethod.VIQR),
        ("auto", InputMethod.AUTO),
    ),
)
def test_input_method_names(name, expected):
    assert EngineSettings.from_dict({"input_method": name}).input_method is expected


def test_unknown_input_method():
    with pytest.raises((ValueError, cattrs.errors.ClassValidationError)):
        EngineSettings.from_dict({"input_method": "Dvorak"})
