"""Japanese script detection and hiragana/katakana conversion.

This module exposes character- and string-level classifiers (romaji,
kana, hiragana, katakana, kanji, mixed) together with the two kana
converters.
"""

from .convert import hiragana_to_katakana, katakana_to_hiragana
from .detect import (
    is_english_punctuation,
    is_hiragana,
    is_japanese,
    is_japanese_punctuation,
    is_kana,
    is_kanji,
    is_katakana,
    is_mixed,
    is_romaji,
)
from .schema import ScriptReport, analyze

__all__ = [
    'hiragana_to_katakana',
    'katakana_to_hiragana',
    'is_english_punctuation',
    'is_hiragana',
    'is_japanese',
    'is_japanese_punctuation',
    'is_kana',
    'is_kanji',
    'is_katakana',
    'is_mixed',
    'is_romaji',
    'ScriptReport',
    'analyze',
]
