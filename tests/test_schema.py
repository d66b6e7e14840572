"""Tests for the script report model."""
import pytest
from pydantic import ValidationError

from kanascript.schema import ScriptReport, analyze


class TestAnalyze:
    """Test analyze() and ScriptReport."""

    def test_hiragana_report(self):
        report = analyze("ひらがな")
        assert report.text == "ひらがな"
        assert report.hiragana
        assert report.kana
        assert report.japanese
        assert not report.katakana
        assert not report.romaji
        assert not report.mixed

    def test_mixed_report_respects_pass_kanji(self):
        assert analyze("お腹A").mixed
        assert not analyze("お腹A", pass_kanji=False).mixed

    def test_model_dump(self):
        data = analyze("A").model_dump()
        assert data == {
            "text": "A",
            "romaji": True,
            "japanese": False,
            "kana": False,
            "hiragana": False,
            "katakana": False,
            "kanji": False,
            "mixed": False,
        }

    def test_report_is_frozen(self):
        report = analyze("A")
        with pytest.raises(ValidationError):
            report.romaji = False

    def test_extra_fields_rejected(self):
        data = analyze("A").model_dump()
        data["hangul"] = False
        with pytest.raises(ValidationError):
            ScriptReport(**data)
