# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Keystroke stages, per key typed:
# stage 0: host; find the word ending at the caret and the character before it
# stage 1: move a tone that the new key shows to be on the wrong vowel (shifting)
# stage 2: turn the key into an accent, per the current input method (inputmethods)
# stage 3: put the accent on the right letter of the word (placement, composer)
