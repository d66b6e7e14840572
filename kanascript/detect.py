"""Whole-string script detection.

Every ``is_*`` predicate requires *all* characters to match, so an empty
string is vacuously accepted. ``is_mixed`` is the exception: it needs at
least one kana and one romaji character and rejects the empty string.
"""

from typing import Callable

from kanascript import constants as c
from kanascript.chars import (
    char_is_english_punctuation,
    char_is_hiragana,
    char_is_japanese_punctuation,
    char_is_kana,
    char_is_kanji,
    char_is_katakana,
    char_is_romaji,
)


def _all_chars(text: str, predicate: Callable[[str], bool]) -> bool:
    return all(predicate(char) for char in text)


def _all_in_ranges(text: str, ranges: c.Ranges) -> bool:
    return all(c.is_in_ranges(char, ranges) for char in text)


def is_romaji(text: str) -> bool:
    """Test if *text* is romaji, allowing Hepburn macrons and smart quotes.

    Full-width punctuation is rejected, so ``"a！b&cーd"`` is not romaji while
    ``"Tōkyō and Ōsaka"`` and ``"12a*b&c-d"`` are.

    Args:
        text: Text to check

    Returns:
        True if every character lies in the romaji ranges
    """
    return _all_in_ranges(text, c.ROMAJI_RANGES)


def is_japanese(text: str) -> bool:
    """Test if *text* only holds kanji, kana, zenkaku punctuation, Japanese
    symbols and numbers.

    Both full-width and half-width digits are accepted (``"２月1日"``), while
    half-width Latin punctuation is not (``"泣き虫.!~$"``).
    """
    return _all_in_ranges(text, c.JAPANESE_RANGES)


def is_kana(text: str) -> bool:
    """Test if *text* is kana (hiragana and/or katakana)."""
    return _all_in_ranges(text, c.KANA_RANGES)


def is_hiragana(text: str) -> bool:
    """Test if *text* is hiragana. ``ー`` counts as hiragana, so ``"げーむ"`` passes."""
    return _all_chars(text, char_is_hiragana)


def is_katakana(text: str) -> bool:
    return _all_chars(text, char_is_katakana)


def is_kanji(text: str) -> bool:
    return _all_chars(text, char_is_kanji)


def is_japanese_punctuation(text: str) -> bool:
    return _all_chars(text, char_is_japanese_punctuation)


def is_english_punctuation(text: str) -> bool:
    return _all_chars(text, char_is_english_punctuation)


def is_mixed(text: str, pass_kanji: bool = True) -> bool:
    """Test if *text* mixes romaji *and* kana.

    Args:
        text: Text to check
        pass_kanji: When True kanji are ignored; when False any kanji in
            the text disqualifies it

    Returns:
        True if there is at least one kana and one romaji character and,
        unless kanji pass through, no kanji at all
    """
    if not pass_kanji and any(char_is_kanji(char) for char in text):
        return False
    return any(char_is_kana(char) for char in text) and any(char_is_romaji(char) for char in text)
