# SPDX-FileCopyrightText: 2023 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging
import typing

from .engine import BACKSPACE, ReplacementScope, VietKeyEngine

if typing.TYPE_CHECKING:
    from .engine import Replacement

logger = logging.getLogger(__name__)


# The caret is always at the end of the text. That's it. That's all there is.
class TextSurface:
    def __init__(self, engine: VietKeyEngine, text: str = ""):
        self.engine = engine
        self.text = text

    @property
    def caret_char(self) -> str:
        return self.text[-1:]

    @property
    def current_word(self) -> str:
        start = len(self.text)
        while start > 0 and self.text[start - 1].isalnum():
            start -= 1
        return self.text[start:]

    def type_key(self, key: str) -> typing.Optional[Replacement]:
        if key == BACKSPACE:
            self.text = self.text[:-1]
            return None
        word = self.current_word
        replacement = self.engine.process_key(key, self.caret_char, word)
        if replacement is None:
            self.text += key
        elif replacement.scope is ReplacementScope.CHARACTER:
            self.text = self.text[:-1] + replacement.text
        else:
            self.text = self.text[: len(self.text) - len(word)] + replacement.text
        return replacement

    def type_text(self, keys: str) -> str:
        for key in keys:
            self.type_key(key)
        logger.debug("typed %r: %r", keys, self.text)
        return self.text
