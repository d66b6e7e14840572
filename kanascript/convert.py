"""Hiragana <-> katakana conversion.

Both scripts occupy parallel Unicode blocks, so converting a syllable is a
fixed shift of its codepoint. The one complication is the prolonged sound
mark ``ー``: katakana writes long vowels with it, hiragana repeats the
vowel instead, so the katakana -> hiragana direction remembers the last
converted syllable to know which vowel to write.
"""

from typing import List, Optional

from kanascript import constants as c
from kanascript.chars import char_is_hiragana, char_is_katakana, char_is_long_dash, char_is_slash_dot
from kanascript.logger import logger
from kanascript.vowels import long_vowel_for

KATAKANA_SHIFT = c.KATAKANA_START - c.HIRAGANA_START
HIRAGANA_SHIFT = c.HIRAGANA_START - c.KATAKANA_START


def shift_char(char: str, offset: int) -> Optional[str]:
    """Move *char* by *offset* codepoints.

    Returns None when the result is not a Unicode scalar value (negative,
    beyond U+10FFFF or a surrogate).
    """
    code = ord(char) + offset
    if code < 0 or code > c.MAX_CODEPOINT or c.SURROGATE_START <= code <= c.SURROGATE_END:
        return None
    return chr(code)


def hiragana_to_katakana(text: str) -> str:
    """Convert hiragana in *text* to katakana.

    ``ー`` and ``・`` are kept as they are, and anything that is not
    hiragana passes through, so ``"ひらがな is a type of kana"`` becomes
    ``"ヒラガナ is a type of kana"``.
    """
    kata: List[str] = []

    for char in text:
        if char_is_long_dash(char) or char_is_slash_dot(char):
            kata.append(char)
        elif char_is_hiragana(char):
            shifted = shift_char(char, KATAKANA_SHIFT)
            if shifted is None:
                logger.debug(f"Dropping {char!r}: no katakana counterpart")
                continue
            kata.append(shifted)
        else:
            kata.append(char)

    return "".join(kata)


def katakana_to_hiragana(text: str) -> str:
    """Convert katakana in *text* to hiragana.

    A long-vowel mark is rewritten as the vowel of the syllable before it,
    e.g. ``"コーヒー"`` -> ``"こうひい"``. A mark that cannot be resolved is
    left out of the output rather than failing the whole conversion.

    Args:
        text: Text containing katakana

    Returns:
        The text with katakana replaced by hiragana; other characters
        are returned unchanged
    """
    hira: List[str] = []
    previous_kana: Optional[str] = None

    for index, char in enumerate(text):
        is_long_dash = char_is_long_dash(char)

        if char_is_slash_dot(char) or (is_long_dash and index == 0):
            # ・ does not reset previous_kana
            hira.append(char)
        elif is_long_dash and previous_kana is not None:
            # オー -> おう
            vowel = long_vowel_for(previous_kana)
            if vowel is None:
                logger.debug(f"Dropping long-vowel mark at {index}: no vowel for {previous_kana!r}")
                continue
            hira.append(vowel)
        elif not is_long_dash and char_is_katakana(char):
            shifted = shift_char(char, HIRAGANA_SHIFT)
            if shifted is None:
                logger.debug(f"Dropping {char!r}: no hiragana counterpart")
                continue
            hira.append(shifted)
            previous_kana = shifted
        else:
            hira.append(char)
            previous_kana = None

    return "".join(hira)
