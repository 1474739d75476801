# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""The Vietnamese letter table.

Every letter the engine can address is a base letter plus an optional modifier
(circumflex, breve, horn, or the stroke of đ) plus an optional tone. The table is laid
out as six rows, one per tone, of twelve vowel columns in each case; d and D get their
own columns in the first two rows, with the "acute" row holding đ and Đ.
"""
from __future__ import annotations

import enum
import typing
import unicodedata

import msgspec


class Tone(enum.IntEnum):
    NONE = 0
    ACUTE = 1
    GRAVE = 2
    HOOK = 3
    TILDE = 4
    DOT = 5


class Modifier(enum.Enum):
    NONE = enum.auto()
    CIRCUMFLEX = enum.auto()
    BREVE = enum.auto()
    HORN = enum.auto()
    STROKE = enum.auto()


class Accent(enum.IntEnum):
    # Numbered after the VNI keys: 1: ' 2: ` 3: ? 4: ~ 5: . 6: ^ 7: + 8: ( 9: - 0: remove
    NONE = -1
    REMOVE = 0
    ACUTE = 1
    GRAVE = 2
    HOOK = 3
    TILDE = 4
    DOT = 5
    CIRCUMFLEX = 6
    HORN = 7
    BREVE = 8
    STROKE = 9

    @property
    def key(self) -> str:
        return "" if self is Accent.NONE else str(self.value)

    @property
    def tone(self) -> typing.Optional[Tone]:
        if Accent.ACUTE <= self <= Accent.DOT:
            return Tone(self.value)
        return None

    @property
    def modifier(self) -> typing.Optional[Modifier]:
        return _ACCENT_MODIFIERS.get(self)

    @property
    def is_combining(self):
        return self is not Accent.NONE

    @classmethod
    def from_key(cls, key: str) -> Accent:
        if len(key) == 1 and key in "0123456789":
            return cls(int(key))
        return cls.NONE


_ACCENT_MODIFIERS = {
    Accent.CIRCUMFLEX: Modifier.CIRCUMFLEX,
    Accent.HORN: Modifier.HORN,
    Accent.BREVE: Modifier.BREVE,
    Accent.STROKE: Modifier.STROKE,
}


UNI_DATA = (
    "âaăêeiôoơuưyÂAĂÊEIÔOƠUƯYdD",
    "ấáắếéíốóớúứýẤÁẮẾÉÍỐÓỚÚỨÝđĐ",
    "ầàằềèìồòờùừỳẦÀẰỀÈÌỒÒỜÙỪỲ",
    "ẩảẳểẻỉổỏởủửỷẨẢẲỂẺỈỔỎỞỦỬỶ",
    "ẫãẵễẽĩỗõỡũữỹẪÃẴỄẼĨỖÕỠŨỮỸ",
    "ậạặệẹịộọợụựỵẬẠẶỆẸỊỘỌỢỤỰỴ",
)

# (base, modifier) for each of the twelve lowercase vowel columns; the uppercase
# columns follow in the same order.
VOWEL_COLUMNS = (
    ("a", Modifier.CIRCUMFLEX),
    ("a", Modifier.NONE),
    ("a", Modifier.BREVE),
    ("e", Modifier.CIRCUMFLEX),
    ("e", Modifier.NONE),
    ("i", Modifier.NONE),
    ("o", Modifier.CIRCUMFLEX),
    ("o", Modifier.NONE),
    ("o", Modifier.HORN),
    ("u", Modifier.NONE),
    ("u", Modifier.HORN),
    ("y", Modifier.NONE),
)


class Letter(msgspec.Struct, frozen=True):
    base: str
    modifier: Modifier = Modifier.NONE
    tone: Tone = Tone.NONE

    @property
    def char(self) -> typing.Optional[str]:
        return _CHARS.get(self)

    @property
    def column(self) -> tuple[str, Modifier]:
        "The case-folded (base, modifier) pair, i.e. the table column ignoring tone."
        return (self.base.lower(), self.modifier)

    def with_tone(self, tone: Tone) -> Letter:
        return Letter(base=self.base, modifier=self.modifier, tone=tone)

    def with_modifier(self, modifier: Modifier) -> Letter:
        return Letter(base=self.base, modifier=modifier, tone=self.tone)


def _build_tables():
    letters: dict[str, Letter] = {}
    for row, chars in enumerate(UNI_DATA):
        for col, (base, modifier) in enumerate(VOWEL_COLUMNS * 2):
            if col >= len(VOWEL_COLUMNS):
                base = base.upper()
            letters[chars[col]] = Letter(base=base, modifier=modifier, tone=Tone(row))
    for plain, stroked in zip(UNI_DATA[0][24:], UNI_DATA[1][24:], strict=True):
        letters[plain] = Letter(base=plain)
        letters[stroked] = Letter(base=plain, modifier=Modifier.STROKE)
    return letters, {letter: ch for ch, letter in letters.items()}


_LETTERS, _CHARS = _build_tables()


def letter_of(ch: str) -> typing.Optional[Letter]:
    return _LETTERS.get(ch)


def tone_of(ch: str) -> Tone:
    letter = _LETTERS.get(ch)
    return Tone.NONE if letter is None else letter.tone


def has_column(ch: str, *columns: tuple[str, Modifier], toned: bool = False) -> bool:
    """Whether ch sits in one of the given case-folded columns.

    With toned=True, only letters that also carry a tone count.
    """
    letter = _LETTERS.get(ch)
    if letter is None or letter.column not in columns:
        return False
    return letter.tone is not Tone.NONE or not toned


def strip_tone(ch: str) -> str:
    letter = _LETTERS.get(ch)
    if letter is None or letter.tone is Tone.NONE:
        return ch
    return letter.with_tone(Tone.NONE).char


def set_tone(ch: str, tone: Tone) -> str:
    "Like strip_tone, but puts the given tone in place of the old one. Non-vowels are returned unchanged."
    letter = _LETTERS.get(ch)
    if letter is None:
        return ch
    return letter.with_tone(tone).char or ch


def base_char(ch: str) -> str:
    "The first code point of the canonical decomposition, in lowercase."
    if not ch:
        return ch
    return unicodedata.normalize("NFD", ch)[0].lower()


def strip_marks(text: str) -> str:
    "Removes every combining mark from the text and recomposes what is left."
    decomposed = unicodedata.normalize("NFD", text)
    return unicodedata.normalize("NFC", "".join(c for c in decomposed if not unicodedata.combining(c)))


def strip_word(word: str) -> str:
    "Removes every mark from a whole word, including the stroke of đ."
    return strip_marks(word).replace("đ", "d").replace("Đ", "D")
