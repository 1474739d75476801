# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""Keyboard conventions for typing Vietnamese marks.

Each convention turns the typed key, in the context of the word being typed, into an
Accent. The conventions follow the common definitions: VNI uses the digit keys, VIQR
uses punctuation that looks like the mark, and Telex uses letters that are rare at the
end of a Vietnamese syllable. Auto accepts all three at once.
"""
from __future__ import annotations

import collections.abc
import enum

from .table import Accent, letter_of


class InputMethod(enum.Enum):
    TELEX = "Telex"
    VIQR = "VIQR"
    VNI = "VNI"
    AUTO = "Auto"


AccentResolver = collections.abc.Callable[[str, str, str], Accent]

TELEX_KEYS = {
    "s": Accent.ACUTE,
    "f": Accent.GRAVE,
    "r": Accent.HOOK,
    "x": Accent.TILDE,
    "j": Accent.DOT,
    # a, e, o and w are shared with plain letters; see resolve_telex_shared_key
    "a": Accent.CIRCUMFLEX,
    "e": Accent.CIRCUMFLEX,
    "o": Accent.CIRCUMFLEX,
    "w": Accent.HORN,
    "d": Accent.STROKE,
    "z": Accent.REMOVE,
}

VIQR_KEYS = {
    "'": Accent.ACUTE,
    "`": Accent.GRAVE,
    "?": Accent.HOOK,
    "~": Accent.TILDE,
    ".": Accent.DOT,
    "^": Accent.CIRCUMFLEX,
    "*": Accent.HORN,
    "+": Accent.HORN,
    "(": Accent.BREVE,
    "-": Accent.REMOVE,
}

DIGITS = "0123456789"


def resolve_telex_shared_key(word: str, key: str, accent: Accent) -> Accent:
    """Decides what a, e, o or w means in Telex, given the word typed so far.

    Typing a, e or o again after the same vowel gives a circumflex (aa: â, ee: ê,
    oo: ô); without that vowel in the word, the key is just a letter. w gives a breve
    when there is an a in the word to take it (aw: ă) and a horn otherwise (ow: ơ, uw: ư).
    """
    key = key.lower()
    if accent is Accent.HORN or key == "a":
        group = "a"
    elif key == "o":
        group = "o"
    else:
        group = "e"

    for ch in word:
        letter = letter_of(ch)
        if letter is not None and letter.base.lower() == group:
            return Accent.BREVE if accent is Accent.HORN else Accent.CIRCUMFLEX
    return Accent.HORN if accent is Accent.HORN else Accent.NONE


def vni_accent(key: str, caret_char: str, word: str) -> Accent:
    return Accent.from_key(key)


def viqr_accent(key: str, caret_char: str, word: str) -> Accent:
    if not key.isalnum():
        return VIQR_KEYS.get(key, Accent.NONE)
    if key in "dD":
        return Accent.STROKE
    return Accent.NONE


def telex_accent(key: str, caret_char: str, word: str) -> Accent:
    if not key.isalpha():
        return Accent.NONE
    accent = TELEX_KEYS.get(key.lower(), Accent.NONE)
    if accent in (Accent.CIRCUMFLEX, Accent.HORN):
        accent = resolve_telex_shared_key(word, key, accent)
    return accent


def auto_accent(key: str, caret_char: str, word: str) -> Accent:
    if key in DIGITS:
        return vni_accent(key, caret_char, word)
    if key.isalpha():
        return telex_accent(key, caret_char, word)
    return VIQR_KEYS.get(key, Accent.NONE)


ACCENT_RESOLVERS: dict[InputMethod, AccentResolver] = {
    InputMethod.TELEX: telex_accent,
    InputMethod.VIQR: viqr_accent,
    InputMethod.VNI: vni_accent,
    InputMethod.AUTO: auto_accent,
}


def resolve_accent(method: InputMethod, key: str, caret_char: str, word: str) -> Accent:
    return ACCENT_RESOLVERS[method](key, caret_char, word)
