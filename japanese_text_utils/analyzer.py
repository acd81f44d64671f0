"""文字列の表示幅・文字種統計"""

from .classifier import is_full_width, is_hiragana, is_kanji, is_katakana
from .model import CharacterStats


def get_display_width(text: str) -> int:
    """全角を 2、半角を 1 として文字列の表示幅を計算する。"""
    return sum(2 if is_full_width(char) else 1 for char in text)


def get_character_stats(text: str) -> CharacterStats:
    """文字列の文字種ごとの文字数と表示幅を集計する。"""
    hiragana = katakana = kanji = full_width = 0
    for char in text:
        if is_hiragana(char):
            hiragana += 1
        elif is_katakana(char):
            katakana += 1
        elif is_kanji(char):
            kanji += 1

        if is_full_width(char):
            full_width += 1

    total = len(text)
    half_width = total - full_width
    return CharacterStats(
        total=total,
        hiragana=hiragana,
        katakana=katakana,
        kanji=kanji,
        full_width=full_width,
        half_width=half_width,
        display_width=full_width * 2 + half_width,
    )
