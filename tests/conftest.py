"""Test configuration and fixtures."""
import pytest
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

@pytest.fixture
def basic_hiragana():
    """Every hiragana from ぁ to ゖ, without ー or ・."""
    return "".join(chr(code) for code in range(0x3041, 0x3097))

@pytest.fixture
def basic_katakana():
    """Katakana from ァ to ン."""
    return "".join(chr(code) for code in range(0x30A1, 0x30F4))

@pytest.fixture
def mixed_sentence():
    """Katakana followed by a Latin suffix."""
    return "カタカナ is a type of kana"
