# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import enum
import logging
import typing

import attr

from .composer import CharacterComposer
from .inputmethods import InputMethod, resolve_accent
from .placement import place_accent
from .settings import EngineSettings
from .shifting import SHIFTING_CONSONANTS, VOWELS, shift_accent

logger = logging.getLogger(__name__)

# Typed right after this character, a key is taken literally.
ESCAPE_CHAR = "\\"
# Never used for marks in any convention, so they skip the engine entirely.
NON_ACCENTS = "!@#$%&)_={}[]|:;/>,"
BACKSPACE = "\b"


class ReplacementScope(enum.Enum):
    WORD = enum.auto()
    CHARACTER = enum.auto()


@attr.frozen(kw_only=True)
class Replacement:
    """What the host should put in place of the current word (or of the character before
    the caret, for ReplacementScope.CHARACTER). The typed key is consumed either way."""

    text: str
    scope: ReplacementScope = attr.field(default=ReplacementScope.WORD)
    removed_by_repeat: bool = attr.field(default=False)


class VietKeyEngine:
    """Turns keystrokes into Vietnamese text, one key at a time.

    The host calls process_key for each typed key, passing the character before the
    caret and the word that ends at the caret. A None result means the key should be
    inserted as usual. One engine belongs to one editable buffer.
    """

    def __init__(self, settings: typing.Optional[EngineSettings] = None):
        if settings is None:
            settings = EngineSettings()
        self.input_method = settings.input_method
        self.vietnamese_mode = settings.vietnamese_mode
        self.smart_mark = settings.smart_mark
        self.diacritics_position_classic = settings.diacritics_position_classic
        self.repeat_key_removes_mark = settings.repeat_key_removes_mark
        self.composer = CharacterComposer()

    def set_input_method(self, method: InputMethod):
        self.input_method = method

    def set_vietnamese_mode(self, enabled: bool):
        self.vietnamese_mode = enabled

    def set_smart_mark(self, enabled: bool):
        self.smart_mark = enabled

    def set_diacritics_position_classic(self, classic: bool):
        self.diacritics_position_classic = classic

    def set_repeat_key_removes_mark(self, enabled: bool):
        self.repeat_key_removes_mark = enabled

    def to_settings(self) -> EngineSettings:
        return EngineSettings(
            input_method=self.input_method,
            vietnamese_mode=self.vietnamese_mode,
            smart_mark=self.smart_mark,
            diacritics_position_classic=self.diacritics_position_classic,
            repeat_key_removes_mark=self.repeat_key_removes_mark,
        )

    @property
    def mark_removed_by_repeat(self) -> bool:
        "True if the last keystroke took a mark off by repeating its key, rather than with the remove key."
        return self.composer.accent_removed

    def process_key(self, key: str, caret_char: str, word: str) -> typing.Optional[Replacement]:
        self.composer.accent_removed = False
        logger.debug("caret_char: %r key: %r word: %r", caret_char, key, word)

        if not self.vietnamese_mode:
            return None
        if caret_char != ESCAPE_CHAR and not caret_char.isalpha():
            return None
        if not key or key.isspace() or key in NON_ACCENTS or key == BACKSPACE:
            return None

        shifted = False
        if self.smart_mark and len(word) >= 2 and key.lower() in (SHIFTING_CONSONANTS + VOWELS):
            if len(word) == 2 and key.lower() in VOWELS and word.lower().startswith(("q", "g")):
                # the vowel after qu/gi takes over the tone
                new_word = shift_accent(word + key, key)
                if new_word != word + key:
                    logger.debug("shifted word: %r", new_word)
                    return Replacement(text=new_word)
            new_word = shift_accent(word, key)
            if new_word != word:
                logger.debug("shifted word: %r", new_word)
                word = new_word
                shifted = True

        accent = resolve_accent(self.input_method, key, caret_char, word)
        if accent.is_combining:
            if caret_char == ESCAPE_CHAR:
                return Replacement(text=key, scope=ReplacementScope.CHARACTER)
            if self.smart_mark:
                viet_word = place_accent(self.composer, word, accent, classic=self.diacritics_position_classic)
                if viet_word != word:
                    logger.debug("viet_word: %r", viet_word)
                    return Replacement(text=viet_word, removed_by_repeat=self._removed_by_repeat())
            else:
                viet_char = self.composer.compose(caret_char, accent)
                if viet_char != caret_char:
                    logger.debug("viet_char: %r", viet_char)
                    return Replacement(
                        text=viet_char,
                        scope=ReplacementScope.CHARACTER,
                        removed_by_repeat=self._removed_by_repeat(),
                    )

        if shifted:
            return Replacement(text=word + key)
        return None

    def _removed_by_repeat(self):
        return self.repeat_key_removes_mark and self.composer.accent_removed
