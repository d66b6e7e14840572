from pydantic import BaseModel, ConfigDict

from kanascript.detect import (
    is_hiragana,
    is_japanese,
    is_kana,
    is_kanji,
    is_katakana,
    is_mixed,
    is_romaji,
)


class ScriptReport(BaseModel):
    text: str
    romaji: bool
    japanese: bool
    kana: bool
    hiragana: bool
    katakana: bool
    kanji: bool
    mixed: bool
    model_config = ConfigDict(extra="forbid", frozen=True)


def analyze(text: str, pass_kanji: bool = True) -> ScriptReport:
    """Run every script classifier over *text* and collect the answers.

    Args:
        text: Text to classify
        pass_kanji: Forwarded to ``is_mixed``

    Returns:
        ScriptReport with one flag per classifier
    """
    return ScriptReport(
        text=text,
        romaji=is_romaji(text),
        japanese=is_japanese(text),
        kana=is_kana(text),
        hiragana=is_hiragana(text),
        katakana=is_katakana(text),
        kanji=is_kanji(text),
        mixed=is_mixed(text, pass_kanji),
    )
