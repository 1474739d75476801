# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

from .table import Accent, Modifier, Tone, has_column, set_tone, strip_marks, strip_tone, tone_of

# Typing one of these after a vowel pair can move the tone onto the second vowel.
SHIFTING_CONSONANTS = "cmnpt"
VOWELS = "aeiouy"

_QU_GI_SOURCES = (("i", Modifier.NONE), ("u", Modifier.NONE))
_VOWEL_KEY_SOURCES = (
    ("i", Modifier.NONE),
    ("o", Modifier.NONE),
    ("u", Modifier.NONE),
    ("u", Modifier.HORN),
    ("y", Modifier.NONE),
)
_CONSONANT_KEY_SOURCES = (
    ("i", Modifier.NONE),
    ("o", Modifier.NONE),
    ("u", Modifier.NONE),
    ("y", Modifier.NONE),
)
_SHIFTING_REQUESTS = (Accent.CIRCUMFLEX.key, Accent.BREVE.key)


def is_qu_gi(word: str) -> bool:
    return strip_marks(word).lower().startswith(("qu", "gi"))


def shift_accent(word: str, key: str) -> str:
    """Moves the tone off the second-to-last letter and onto the last one, when the key
    typed next shows the second letter is the real nucleus. As in tòa + n -> toàn.

    The key is either a typed character or the VNI digit of a circumflex or breve
    request. Returns the word unchanged if no shift applies.
    """
    if len(word) < 2:
        return word
    key = key.lower()
    last = word[-1].lower()

    if len(word) == 3 and is_qu_gi(word):
        # the u of qu and the i of gi belong to the onset, never to the nucleus
        sources = _QU_GI_SOURCES
    elif key in "eiouy":
        if not (last in "aoơ" or key in "eu" or (last == "e" and key == "o")):
            return word
        sources = _VOWEL_KEY_SOURCES
    elif key in SHIFTING_CONSONANTS or key in _SHIFTING_REQUESTS:
        if last not in "aeoy":
            return word
        sources = _CONSONANT_KEY_SOURCES
    else:
        return word

    source = word[-2]
    if not has_column(source, *sources, toned=True):
        return word
    tone = tone_of(source)
    target = set_tone(word[-1], tone)
    if tone_of(target) is not tone:
        # the last letter cannot carry a tone, so there is nowhere to move it
        return word
    return word[:-2] + strip_tone(source) + target


def move_tone(word: str, src: int, dest: int) -> str:
    "Moves whatever tone the letter at src carries onto the letter at dest."
    tone = tone_of(word[src])
    if tone is Tone.NONE:
        return word
    chars = list(word)
    chars[src] = strip_tone(chars[src])
    chars[dest] = set_tone(chars[dest], tone)
    return "".join(chars)
