# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

from .table import Accent, Letter, Modifier, Tone, letter_of, strip_marks


class CharacterComposer:
    """Applies one accent command to one character.

    Pressing the same accent twice takes it off again. When that happens,
    accent_removed is set, so the caller can tell a repeated key apart from the
    explicit remove key. The flag describes the most recent call to compose only.
    """

    accent_removed: bool

    def __init__(self):
        self.accent_removed = False

    def compose(self, ch: str, accent: Accent) -> str:
        self.accent_removed = False
        if accent is Accent.NONE:
            return ch
        letter = letter_of(ch)
        if letter is None:
            if accent is Accent.REMOVE:
                return strip_marks(ch)
            return ch
        if accent is Accent.REMOVE:
            return self._remove(ch, letter)
        if accent.tone is not None:
            return self._toggle_tone(ch, letter, accent.tone)
        return self._toggle_modifier(ch, letter, accent.modifier)

    def _remove(self, ch: str, letter: Letter) -> str:
        if letter.modifier is Modifier.STROKE:
            # đ is its own letter; only whole-word removal turns it back into d
            return ch
        bare = Letter(base=letter.base).char
        if bare == ch:
            return strip_marks(ch)
        return bare

    def _toggle_tone(self, ch: str, letter: Letter, tone: Tone) -> str:
        if letter.tone is tone:
            self.accent_removed = True
            return letter.with_tone(Tone.NONE).char
        return letter.with_tone(tone).char or ch

    def _toggle_modifier(self, ch: str, letter: Letter, modifier: Modifier) -> str:
        if letter.modifier is modifier:
            self.accent_removed = True
            return letter.with_modifier(Modifier.NONE).char
        return letter.with_modifier(modifier).char or ch
