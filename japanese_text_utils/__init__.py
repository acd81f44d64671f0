"""日本語テキストの文字種判定・変換・集計"""

from .analyzer import get_character_stats, get_display_width
from .classifier import (
    classify_script,
    classify_width,
    is_all_hiragana,
    is_all_kanji,
    is_all_katakana,
    is_full_width,
    is_half_width,
    is_hiragana,
    is_kanji,
    is_katakana,
)
from .converter import (
    full_to_half_alphanumeric,
    half_to_full_alphanumeric,
    half_to_full_katakana,
    hiragana_to_katakana,
    katakana_to_hiragana,
)
from .extractor import extract_hiragana, extract_kanji, extract_katakana
from .model import CharacterStats, ScriptCategory, WidthCategory
from .whitespace import normalize_whitespace, remove_all_whitespace, trim_japanese

__all__ = [
    "CharacterStats",
    "ScriptCategory",
    "WidthCategory",
    "classify_script",
    "classify_width",
    "extract_hiragana",
    "extract_kanji",
    "extract_katakana",
    "full_to_half_alphanumeric",
    "get_character_stats",
    "get_display_width",
    "half_to_full_alphanumeric",
    "half_to_full_katakana",
    "hiragana_to_katakana",
    "is_all_hiragana",
    "is_all_kanji",
    "is_all_katakana",
    "is_full_width",
    "is_half_width",
    "is_hiragana",
    "is_kanji",
    "is_katakana",
    "katakana_to_hiragana",
    "normalize_whitespace",
    "remove_all_whitespace",
    "trim_japanese",
]
