import argparse
import logging
import pathlib

from .engine import VietKeyEngine
from .inputmethods import InputMethod
from .settings import EngineSettings
from .surface import TextSurface


def type_keys(keys: str, settings: EngineSettings) -> str:
    surface = TextSurface(VietKeyEngine(settings))
    return surface.type_text(keys)


type_parser = argparse.ArgumentParser(description="Type keys through the Vietnamese engine and print the result.")
type_parser.add_argument("keys", nargs="+")
type_parser.add_argument("--settings", type=pathlib.Path)
type_parser.add_argument("--method", choices=[m.value for m in InputMethod])
type_parser.add_argument("--classic", action="store_true", help="put tones on the first vowel of oa, oe, uy")
type_parser.add_argument("--no-smart-mark", dest="smart_mark", action="store_false")
type_parser.add_argument("-v", "--verbose", action="store_true")


def type_cli(argv=None):
    args = type_parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    settings = EngineSettings.load(args.settings) if args.settings is not None else EngineSettings()
    if args.method is not None:
        settings.input_method = InputMethod(args.method)
    if args.classic:
        settings.diacritics_position_classic = True
    if not args.smart_mark:
        settings.smart_mark = False
    print(type_keys(" ".join(args.keys), settings))


settings_parser = argparse.ArgumentParser(description="Write a settings file with the default values.")
settings_parser.add_argument("dest", type=pathlib.Path)


def write_settings_cli(argv=None):
    args = settings_parser.parse_args(argv)
    EngineSettings().save(args.dest)
