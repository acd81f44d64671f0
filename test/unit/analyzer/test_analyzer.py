"""表示幅・文字種統計のテスト"""

import pytest
from pydantic import ValidationError

from japanese_text_utils.analyzer import get_character_stats, get_display_width
from japanese_text_utils.model import CharacterStats


@pytest.mark.parametrize(
    ("text", "true_width"),
    [
        ("", 0),
        ("abc", 3),
        ("あいう", 6),
        ("あアA漢", 7),
        ("ｱｲｳ", 6),  # 半角カタカナも 0xFF を超えるため幅 2
    ],
)
def test_get_display_width(text: str, true_width: int) -> None:
    """`get_display_width()` は全角を 2、半角を 1 として表示幅を数える。"""
    assert true_width == get_display_width(text)


def test_get_character_stats() -> None:
    """`get_character_stats()` は文字種ごとの文字数と表示幅を集計する。"""
    # Expects
    true_stats = CharacterStats(
        total=4,
        hiragana=1,
        katakana=1,
        kanji=1,
        full_width=3,
        half_width=1,
        display_width=7,
    )
    # Outputs
    stats = get_character_stats("あアA漢")
    # Tests
    assert true_stats == stats


def test_get_character_stats_empty() -> None:
    """`get_character_stats()` は空文字列に対して全て 0 の統計を返す。"""
    # Expects
    true_stats = CharacterStats(
        total=0,
        hiragana=0,
        katakana=0,
        kanji=0,
        full_width=0,
        half_width=0,
        display_width=0,
    )
    # Tests
    assert true_stats == get_character_stats("")


@pytest.mark.parametrize(
    "text",
    ["", "こんにちは、世界！", "Hello ワールド 123", "𠀋😀ｱﾞ　\t", "漢字とカナとかな"],
)
def test_get_character_stats_invariants(text: str) -> None:
    """`get_character_stats()` の集計値は互いに整合する。"""
    # Outputs
    stats = get_character_stats(text)
    # Tests
    assert stats.full_width + stats.half_width == stats.total == len(text)
    assert stats.hiragana + stats.katakana + stats.kanji <= stats.total
    assert stats.display_width == get_display_width(text)


def test_character_stats_is_frozen() -> None:
    """`CharacterStats` は生成後に変更できない。"""
    stats = get_character_stats("あ")
    with pytest.raises(ValidationError):
        stats.total = 10  # type: ignore[misc]
