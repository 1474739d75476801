import dataclasses
import json
import operator
import pathlib
import typing

import cattrs

from .inputmethods import InputMethod

DEFAULT_INPUT_METHOD = InputMethod.TELEX


def structure_input_method(v: str, typ: type[InputMethod]):
    for method in InputMethod:
        if v.lower() in (method.value.lower(), method.name.lower()):
            return method
    raise ValueError(f"Unexpected input method {v}")


settings_converter = cattrs.Converter()
settings_converter.register_unstructure_hook(InputMethod, operator.attrgetter("value"))
settings_converter.register_structure_hook(InputMethod, structure_input_method)


@dataclasses.dataclass(kw_only=True)
class EngineSettings:
    input_method: InputMethod = DEFAULT_INPUT_METHOD
    vietnamese_mode: bool = True
    smart_mark: bool = True
    diacritics_position_classic: bool = False
    repeat_key_removes_mark: bool = False

    def save(self, dest: pathlib.Path):
        raw = settings_converter.unstructure(self)
        with dest.open("w") as f:
            json.dump(raw, f, indent=2)

    @classmethod
    def load(cls, src: pathlib.Path):
        with src.open() as f:
            raw = json.load(f)
        return cls.from_dict(raw)

    @classmethod
    def from_dict(cls, raw: dict[str, typing.Any]):
        return settings_converter.structure(raw, cls)

    @classmethod
    def for_test(cls):
        return settings_converter.structure(
            {
                "input_method": "Telex",
                "vietnamese_mode": True,
                "smart_mark": True,
                "diacritics_position_classic": False,
                "repeat_key_removes_mark": False,
            },
            cls,
        )
