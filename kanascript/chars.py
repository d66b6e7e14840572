"""Single-character predicates.

Each function takes a one-character string and answers whether its
codepoint lies in a given block or range set.
"""

from kanascript import constants as c


def char_is_long_dash(char: str) -> bool:
    return ord(char) == c.PROLONGED_SOUND_MARK


def char_is_slash_dot(char: str) -> bool:
    return ord(char) == c.KANA_SLASH_DOT


def char_is_hiragana(char: str) -> bool:
    """Hiragana block, plus the prolonged sound mark ``ー`` which sits outside it."""
    return char_is_long_dash(char) or c.is_between(char, c.HIRAGANA_START, c.HIRAGANA_END)


def char_is_katakana(char: str) -> bool:
    return c.is_between(char, c.KATAKANA_START, c.KATAKANA_END)


def char_is_kana(char: str) -> bool:
    return c.is_in_ranges(char, c.KANA_RANGES)


def char_is_romaji(char: str) -> bool:
    return c.is_in_ranges(char, c.ROMAJI_RANGES)


def char_is_kanji(char: str) -> bool:
    return c.is_between(char, c.KANJI_START, c.KANJI_END)


def char_is_japanese(char: str) -> bool:
    return c.is_in_ranges(char, c.JAPANESE_RANGES)


def char_is_japanese_punctuation(char: str) -> bool:
    return c.is_in_ranges(char, c.JA_PUNCTUATION_RANGES)


def char_is_english_punctuation(char: str) -> bool:
    return c.is_in_ranges(char, c.EN_PUNCTUATION_RANGES)


def char_is_upper_case(char: str) -> bool:
    """ASCII ``A``-``Z`` only; fullwidth letters are not upper case here."""
    return c.is_between(char, c.UPPERCASE_START, c.UPPERCASE_END)


def char_is_lower_case(char: str) -> bool:
    return c.is_between(char, c.LOWERCASE_START, c.LOWERCASE_END)


def char_is_fullwidth_letter(char: str) -> bool:
    """Zenkaku ``Ａ``-``Ｚ`` and ``ａ``-``ｚ``."""
    return (
        c.is_between(char, c.UPPERCASE_FULLWIDTH_START, c.UPPERCASE_FULLWIDTH_END)
        or c.is_between(char, c.LOWERCASE_FULLWIDTH_START, c.LOWERCASE_FULLWIDTH_END)
    )
