"""Unicode codepoint ranges used to classify Japanese text.

Every range is a closed interval: both ``start`` and ``end`` belong to it.
Range sets are plain tuples built once at import and never mutated.

CharCode references:
    http://www.rikai.com/library/kanjitables/kanji_codes.unicode.shtml
    http://unicode-table.com
"""

from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple


class CodepointRange(NamedTuple):
    """Closed interval ``[start, end]`` of codepoints."""
    start: int
    end: int


Ranges = Tuple[CodepointRange, ...]


def is_between(char: str, start: int, end: int) -> bool:
    return start <= ord(char) <= end


def is_in_ranges(char: str, ranges: Ranges) -> bool:
    """Return True if *char* falls inside any interval of *ranges*."""
    code = ord(char)
    return any(r.start <= code <= r.end for r in ranges)


# ──────────────────────────────────────────────────────────────────────────────
# BLOCKS
# ──────────────────────────────────────────────────────────────────────────────
CJK_SYMBOLS_PUNCTUATION = CodepointRange(0x3000, 0x303F)
KATAKANA_PUNCTUATION = CodepointRange(0x30FB, 0x30FC)
HIRAGANA_CHARS = CodepointRange(0x3040, 0x309F)
KATAKANA_CHARS = CodepointRange(0x30A0, 0x30FF)
ZENKAKU_NUMBERS = CodepointRange(0xFF10, 0xFF19)
ZENKAKU_PUNCTUATION_1 = CodepointRange(0xFF01, 0xFF0F)
ZENKAKU_PUNCTUATION_2 = CodepointRange(0xFF1A, 0xFF1F)
ZENKAKU_PUNCTUATION_3 = CodepointRange(0xFF3B, 0xFF3F)
ZENKAKU_PUNCTUATION_4 = CodepointRange(0xFF5B, 0xFF60)
ZENKAKU_SYMBOLS_CURRENCY = CodepointRange(0xFFE0, 0xFFEE)
KANA_PUNCTUATION = CodepointRange(0xFF61, 0xFF65)
HANKAKU_KATAKANA = CodepointRange(0xFF66, 0xFF9F)
COMMON_CJK = CodepointRange(0x4E00, 0x9FFF)
RARE_CJK = CodepointRange(0x3400, 0x4DBF)
LATIN_NUMBERS = CodepointRange(0x0030, 0x0039)
MODERN_ENGLISH = CodepointRange(0x0000, 0x007F)

SMART_QUOTE_RANGES: Ranges = (
    CodepointRange(0x2018, 0x2019),  # ‘ ’
    CodepointRange(0x201C, 0x201D),  # “ ”
)

HEPBURN_MACRON_RANGES: Ranges = (
    CodepointRange(0x0100, 0x0101),  # Ā ā
    CodepointRange(0x0112, 0x0113),  # Ē ē
    CodepointRange(0x012A, 0x012B),  # Ī ī
    CodepointRange(0x014C, 0x014D),  # Ō ō
    CodepointRange(0x016A, 0x016B),  # Ū ū
)

# ──────────────────────────────────────────────────────────────────────────────
# RANGE SETS
# ──────────────────────────────────────────────────────────────────────────────
KANA_RANGES: Ranges = (
    HIRAGANA_CHARS,
    KATAKANA_CHARS,
    KANA_PUNCTUATION,
    HANKAKU_KATAKANA,
)

JA_PUNCTUATION_RANGES: Ranges = (
    CJK_SYMBOLS_PUNCTUATION,
    KANA_PUNCTUATION,
    KATAKANA_PUNCTUATION,
    ZENKAKU_PUNCTUATION_1,
    ZENKAKU_PUNCTUATION_2,
    ZENKAKU_PUNCTUATION_3,
    ZENKAKU_PUNCTUATION_4,
    ZENKAKU_SYMBOLS_CURRENCY,
)

# Latin numbers are included since they are common in Japanese text too.
JAPANESE_RANGES: Ranges = (
    KANA_RANGES
    + JA_PUNCTUATION_RANGES
    + (LATIN_NUMBERS, ZENKAKU_NUMBERS, COMMON_CJK, RARE_CJK)
)

ROMAJI_RANGES: Ranges = (MODERN_ENGLISH,) + HEPBURN_MACRON_RANGES + SMART_QUOTE_RANGES

EN_PUNCTUATION_RANGES: Ranges = (
    CodepointRange(0x21, 0x2F),
    CodepointRange(0x3A, 0x3F),
    CodepointRange(0x5B, 0x60),
    CodepointRange(0x7B, 0x7E),
) + SMART_QUOTE_RANGES

# ──────────────────────────────────────────────────────────────────────────────
# SINGLE CODEPOINTS AND BOUNDS
# ──────────────────────────────────────────────────────────────────────────────
LOWERCASE_START = 0x61
LOWERCASE_END = 0x7A
UPPERCASE_START = 0x41
UPPERCASE_END = 0x5A
LOWERCASE_FULLWIDTH_START = 0xFF41
LOWERCASE_FULLWIDTH_END = 0xFF5A
UPPERCASE_FULLWIDTH_START = 0xFF21
UPPERCASE_FULLWIDTH_END = 0xFF3A
HIRAGANA_START = 0x3041
HIRAGANA_END = 0x3096
KATAKANA_START = 0x30A1
KATAKANA_END = 0x30FC  # includes the prolonged sound mark
KANJI_START = 0x4E00
KANJI_END = 0x9FAF
PROLONGED_SOUND_MARK = 0x30FC  # ー
KANA_SLASH_DOT = 0x30FB  # ・

MAX_CODEPOINT = 0x10FFFF
SURROGATE_START = 0xD800
SURROGATE_END = 0xDFFF

RANGE_SETS: Mapping[str, Ranges] = MappingProxyType({
    "romaji": ROMAJI_RANGES,
    "kana": KANA_RANGES,
    "japanese": JAPANESE_RANGES,
    "ja_punctuation": JA_PUNCTUATION_RANGES,
    "en_punctuation": EN_PUNCTUATION_RANGES,
    "hiragana": (CodepointRange(HIRAGANA_START, HIRAGANA_END),),
    "katakana": (CodepointRange(KATAKANA_START, KATAKANA_END),),
    "kanji": (CodepointRange(KANJI_START, KANJI_END),),
})
