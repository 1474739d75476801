# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""Word-level accent placement.

Tone marks belong on the nucleus of the syllable, not on whatever vowel happens to sit
before the caret, so the rules here look at the last few letters of the word to find
the right one. The rules are tried in order and the first one that claims the word
wins:

1. stroke on a word that starts with d
2. a two-letter coda ending in h or g (nh, ng, ch)
3. a closing consonant (c m n p t), or a trailing i/u after u/ư
4. three-letter words starting with qu or gi
5. circumflex after u, i or y
6. u or ư followed by a bare o
7. the general vowel-pair rules
8. the last letter, if it is not a consonant
"""
from __future__ import annotations

import re
import typing

from .shifting import move_tone, shift_accent
from .table import Accent, Modifier, Tone, base_char, has_column, strip_marks, strip_tone, strip_word, tone_of

if typing.TYPE_CHECKING:
    from .composer import CharacterComposer

# Anything longer is not a single Vietnamese syllable.
MAX_WORD_LENGTH = 8
CLOSING_CONSONANTS = "cmnpt"
D_LETTERS = "DdĐđ"

# consonants and digits; d and y are left out so they can still take a mark
HARD_CONSONANT = re.compile(r"[bcfghjklmnpqrstvwxz0-9]", re.IGNORECASE | re.ASCII)
# consonants, digits and y; none of these can lead a vowel pair
NON_NUCLEUS = re.compile(r"[bcdfghjklmnpqrstvwxyz0-9]", re.IGNORECASE | re.ASCII)
BARE_LETTER = re.compile(r"[a-z]", re.IGNORECASE | re.ASCII)
TRAILING_DOUBLE_VOWEL = re.compile(r"(?:oa|oe|uy)$", re.IGNORECASE)

_U_COLUMNS = (("u", Modifier.NONE), ("u", Modifier.HORN))
_O_COLUMN = ("o", Modifier.NONE)
_O_HORN_COLUMN = ("o", Modifier.HORN)
_UNHORN = {"ư": "u", "Ư": "U"}


def place_accent(composer: CharacterComposer, word: str, accent: Accent, classic: bool = False) -> str:
    """Applies the accent to the letter of the word that should carry it.

    With classic set, a tone on a trailing oa, oe or uy goes on the first vowel (hòa);
    otherwise it goes on the second (hoà). Returns the word unchanged when no rule applies.
    """
    if not word or accent is Accent.NONE:
        return word
    if accent is Accent.STROKE and word[0] in D_LETTERS:
        return composer.compose(word[0], accent) + word[1:]
    if len(word) >= MAX_WORD_LENGTH or not word[-1].isalnum():
        return word

    placed = _place_by_structure(composer, word, accent)
    if placed is None:
        placed = _place_u_o(composer, word, accent)
        if placed is not None:
            return placed
        placed = _place_by_nucleus(composer, word, accent, classic)
    if placed is None:
        return word
    if accent is Accent.REMOVE and placed == word:
        # nothing in the table left to take off; strip whatever else is there, đ included
        return strip_word(word)
    return placed


def _place_by_structure(composer: CharacterComposer, word: str, accent: Accent) -> typing.Optional[str]:
    chars = list(word)
    length = len(chars)
    lowered = word.lower()

    if length > 2 and lowered[-1] in "hg":
        if length > 3:
            pair_uo(composer, chars, length - 4, accent)
            return "".join(chars)
        return composer.compose(chars[0], accent) + word[1:]

    if length >= 3 and (lowered[-1] in CLOSING_CONSONANTS or (lowered[-1] in "iu" and lowered[-3] in "uư")):
        pair_uo(composer, chars, length - 3, accent)
        return "".join(chars)

    if length == 3 and lowered.startswith(("qu", "gi")):
        return word[:-1] + composer.compose(chars[-1], accent)

    if length > 1 and accent is Accent.CIRCUMFLEX and base_char(chars[-2]) in "uiy":
        shifted = shift_accent(word, accent.key)
        return shifted[:-1] + composer.compose(shifted[-1], accent)

    return None


def _place_u_o(composer: CharacterComposer, word: str, accent: Accent) -> typing.Optional[str]:
    # tru + w + o + w: the o joins a u that may already carry the tone
    if accent is Accent.REMOVE or len(word) < 2:
        return None
    if not has_column(word[-2], *_U_COLUMNS) or word[-1].lower() != "o":
        return None
    o = composer.compose(word[-1], accent)
    placed = word[:-1] + o
    if o == word[-1] or tone_of(word[-2]) is Tone.NONE:
        return placed
    if accent.tone is not None:
        return placed[:-2] + strip_tone(placed[-2]) + placed[-1]
    composer.accent_removed = False
    return move_tone(placed, -2, -1)


def _place_by_nucleus(
    composer: CharacterComposer, word: str, accent: Accent, classic: bool
) -> typing.Optional[str]:
    chars = list(word)
    length = len(chars)

    if (
        length > 1
        and chars[-2] not in "đĐ"
        and not NON_NUCLEUS.fullmatch(chars[-2])
        and BARE_LETTER.fullmatch(chars[-1])
    ):
        if length > 2 and accent is Accent.HORN and chars[-3].lower() == "u":
            return word[:-3] + composer.compose(chars[-3], accent) + composer.compose(chars[-2], accent) + chars[-1]
        if length > 2 and accent is Accent.CIRCUMFLEX and base_char(chars[-3]) == "u":
            first = _UNHORN.get(chars[-3], chars[-3])
            return word[:-3] + first + composer.compose(chars[-2], accent) + chars[-1]
        if accent in (Accent.CIRCUMFLEX, Accent.HORN) and chars[-2] in "iyIY":
            # the glide before it cannot take the modifier
            return word[:-1] + composer.compose(chars[-1], accent)
        if accent is Accent.BREVE and not NON_NUCLEUS.fullmatch(chars[-1]):
            if base_char(chars[-2]) in "iuo":
                word = shift_accent(word, accent.key)
            return word[:-1] + composer.compose(word[-1], accent)
        return _place_tone(composer, chars, accent, classic)

    if not HARD_CONSONANT.fullmatch(chars[-1]):
        return word[:-1] + composer.compose(chars[-1], accent)
    return None


def _place_tone(composer: CharacterComposer, chars: list[str], accent: Accent, classic: bool) -> str:
    # lo'a'n, to'a'n: only ever one tone among the last three letters
    later = not classic and TRAILING_DOUBLE_VOWEL.search(strip_marks("".join(chars))) is not None
    if len(chars) > 2:
        chars[-3] = strip_tone(chars[-3])
    if later:
        chars[-2] = strip_tone(chars[-2])
        chars[-1] = composer.compose(chars[-1], accent)
    else:
        chars[-2] = composer.compose(chars[-2], accent)
    return "".join(chars)


def pair_uo(composer: CharacterComposer, chars: list[str], first: int, accent: Accent):
    """Applies the accent to the vowel pair at chars[first] and chars[first + 1], in place.

    The horn always goes on u and o together: uo, ưo and uơ all become ươ, and ươ
    goes back to uo.
    """
    second = first + 1
    if accent is Accent.HORN and base_char(chars[first]) == "u":
        chars[second] = composer.compose(chars[second], accent)
        chars[first] = composer.compose(chars[first], accent)
        if has_column(chars[second], _O_COLUMN):
            if chars[first] in "ưƯ":
                # was uơ: the u just gained its horn and the o lost it
                chars[second] = composer.compose(chars[second], accent)
                composer.accent_removed = False
        elif has_column(chars[second], _O_HORN_COLUMN):
            if chars[first] in "uU":
                # was ưo: the o gained the horn and the u lost it
                chars[first] = composer.compose(chars[first], accent)
                composer.accent_removed = False
    elif accent is Accent.CIRCUMFLEX:
        chars[second] = composer.compose(chars[second], accent)
        if chars[first] in "ưƯ":
            chars[first] = composer.compose(chars[first], Accent.HORN)
            composer.accent_removed = False
    else:
        if accent is Accent.REMOVE and has_column(chars[second], _O_COLUMN, _O_HORN_COLUMN):
            chars[first] = composer.compose(chars[first], accent)
        chars[second] = composer.compose(chars[second], accent)
