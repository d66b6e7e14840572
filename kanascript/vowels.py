"""Lookup tables used to expand the long-vowel mark ``ー``.

``KANA_TO_ROMAJI`` maps a single hiragana character to its Hepburn
reading; only the trailing vowel letter of that reading is ever used.
``LONG_VOWELS`` maps that vowel letter to the hiragana written after the
syllable to lengthen it (``o`` lengthens with ``う``, as in こう).
"""

from types import MappingProxyType
from typing import Mapping, Optional

KANA_TO_ROMAJI: Mapping[str, str] = MappingProxyType({
    # vowels
    "あ": "a", "い": "i", "う": "u", "え": "e", "お": "o",
    "ぁ": "a", "ぃ": "i", "ぅ": "u", "ぇ": "e", "ぉ": "o",
    # k / g
    "か": "ka", "き": "ki", "く": "ku", "け": "ke", "こ": "ko",
    "が": "ga", "ぎ": "gi", "ぐ": "gu", "げ": "ge", "ご": "go",
    "ゕ": "ka", "ゖ": "ke",
    # s / z
    "さ": "sa", "し": "shi", "す": "su", "せ": "se", "そ": "so",
    "ざ": "za", "じ": "ji", "ず": "zu", "ぜ": "ze", "ぞ": "zo",
    # t / d
    "た": "ta", "ち": "chi", "つ": "tsu", "て": "te", "と": "to",
    "だ": "da", "ぢ": "ji", "づ": "zu", "で": "de", "ど": "do",
    # n
    "な": "na", "に": "ni", "ぬ": "nu", "ね": "ne", "の": "no",
    # h / b / p
    "は": "ha", "ひ": "hi", "ふ": "fu", "へ": "he", "ほ": "ho",
    "ば": "ba", "び": "bi", "ぶ": "bu", "べ": "be", "ぼ": "bo",
    "ぱ": "pa", "ぴ": "pi", "ぷ": "pu", "ぺ": "pe", "ぽ": "po",
    # m
    "ま": "ma", "み": "mi", "む": "mu", "め": "me", "も": "mo",
    # y
    "や": "ya", "ゆ": "yu", "よ": "yo",
    "ゃ": "ya", "ゅ": "yu", "ょ": "yo",
    # r
    "ら": "ra", "り": "ri", "る": "ru", "れ": "re", "ろ": "ro",
    # w
    "わ": "wa", "ゐ": "wi", "ゑ": "we", "を": "wo", "ゎ": "wa",
    # v
    "ゔ": "vu",
})

LONG_VOWELS: Mapping[str, str] = MappingProxyType({
    "a": "あ",
    "i": "い",
    "u": "う",
    "e": "え",
    "o": "う",
})


def long_vowel_for(kana: str) -> Optional[str]:
    """Return the hiragana that lengthens *kana*, or None if unknown."""
    romaji = KANA_TO_ROMAJI.get(kana)
    if not romaji:
        return None
    return LONG_VOWELS.get(romaji[-1])
