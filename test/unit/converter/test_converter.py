"""文字種・文字幅の変換のテスト"""

import pytest

from japanese_text_utils.converter import (
    full_to_half_alphanumeric,
    half_to_full_alphanumeric,
    half_to_full_katakana,
    hiragana_to_katakana,
    katakana_to_hiragana,
)


@pytest.mark.parametrize(
    ("text", "true_converted"),
    [
        ("にほんご", "ニホンゴ"),
        ("ぁゔゕゖ", "ァヴヵヶ"),
        ("ひらがなとカタカナと漢字", "ヒラガナトカタカナト漢字"),
        ("abc", "abc"),
        ("ゝゞ", "ゝゞ"),  # 踊り字は変換範囲外
        ("", ""),
    ],
)
def test_hiragana_to_katakana(text: str, true_converted: str) -> None:
    """`hiragana_to_katakana()` は ぁ〜ゖ のみをカタカナに置き換える。"""
    assert true_converted == hiragana_to_katakana(text)


@pytest.mark.parametrize(
    ("text", "true_converted"),
    [
        ("ニホンゴ", "にほんご"),
        ("カタカナとひらがな", "かたかなとひらがな"),
        ("ヷヸ", "ヷヸ"),  # ヶ より後ろは変換範囲外
        ("ー", "ー"),
        ("", ""),
    ],
)
def test_katakana_to_hiragana(text: str, true_converted: str) -> None:
    """`katakana_to_hiragana()` は ァ〜ヶ のみをひらがなに置き換える。"""
    assert true_converted == katakana_to_hiragana(text)


def test_kana_round_trip() -> None:
    """ぁ〜ゖ の範囲の文字列はカタカナを経由して元に戻る。"""
    # Inputs
    text = "".join(chr(code) for code in range(0x3041, 0x3096 + 1))
    # Outputs
    restored = katakana_to_hiragana(hiragana_to_katakana(text))
    # Tests
    assert text == restored


@pytest.mark.parametrize(
    ("text", "true_converted"),
    [
        ("ＡＢＣａｂｃ１２３", "ABCabc123"),
        ("ＡＢＣ！？", "ABC！？"),  # 全角記号は変換しない
        ("あいうＺ", "あいうZ"),
        ("", ""),
    ],
)
def test_full_to_half_alphanumeric(text: str, true_converted: str) -> None:
    """`full_to_half_alphanumeric()` は全角英数字のみを半角に置き換える。"""
    assert true_converted == full_to_half_alphanumeric(text)


@pytest.mark.parametrize(
    ("text", "true_converted"),
    [
        ("ABCabc123", "ＡＢＣａｂｃ１２３"),
        ("A-B C!", "Ａ-Ｂ Ｃ!"),  # 半角記号・空白は変換しない
        ("あいうz", "あいうｚ"),
        ("", ""),
    ],
)
def test_half_to_full_alphanumeric(text: str, true_converted: str) -> None:
    """`half_to_full_alphanumeric()` は半角英数字のみを全角に置き換える。"""
    assert true_converted == half_to_full_alphanumeric(text)


def test_alphanumeric_round_trip() -> None:
    """半角英数字の文字列は全角を経由して元に戻る。"""
    # Inputs
    text = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
    # Outputs
    restored = full_to_half_alphanumeric(half_to_full_alphanumeric(text))
    # Tests
    assert text == restored


@pytest.mark.parametrize(
    ("text", "true_converted"),
    [
        ("ｱｲｳｴｵ", "アイウエオ"),
        ("ﾃｽﾄ", "テスト"),
        ("ｧｨｩｪｫｬｭｮｯ", "ァィゥェォャュョッ"),
        ("ｰ｡｢｣､･", "ー。「」、・"),
        ("ﾜｦﾝ", "ワヲン"),
        ("abcｱ123", "abcア123"),
        ("", ""),
    ],
)
def test_half_to_full_katakana(text: str, true_converted: str) -> None:
    """`half_to_full_katakana()` は半角カタカナと半角句読点を全角に置き換える。"""
    assert true_converted == half_to_full_katakana(text)


@pytest.mark.parametrize(
    ("text", "true_converted"),
    [
        ("ｶﾞｷﾞｸﾞ", "ガギグ"),
        ("ｻﾞｼﾞｽﾞｾﾞｿﾞ", "ザジズゼゾ"),
        ("ﾀﾞﾁﾞﾂﾞﾃﾞﾄﾞ", "ダヂヅデド"),
        ("ﾊﾞﾋﾞﾌﾞﾍﾞﾎﾞ", "バビブベボ"),
        ("ﾊﾟﾋﾟﾌﾟ", "パピプ"),
        ("ﾍﾟﾎﾟ", "ペポ"),
        ("ﾃﾞｰﾀﾍﾞｰｽ", "データベース"),
    ],
)
def test_half_to_full_katakana_combining(text: str, true_converted: str) -> None:
    """`half_to_full_katakana()` は後続する濁点・半濁点を合成して1文字にする。"""
    assert true_converted == half_to_full_katakana(text)


@pytest.mark.parametrize(
    ("text", "true_converted"),
    [
        ("ｱﾞ", "ア"),  # 濁音が無い文字の濁点は取り除かれる
        ("ｶﾟ", "カ"),  # 半濁音が無い文字の半濁点は取り除かれる
        ("ｳﾞ", "ウ"),  # ヴ は合成の対象外
        ("Aﾞ", "A"),  # 半角カタカナ以外に付いた濁点も取り除かれる
        ("ﾞﾞ", "゛"),
    ],
)
def test_half_to_full_katakana_absorbs_unmatched_mark(
    text: str, true_converted: str
) -> None:
    """`half_to_full_katakana()` は合成できない濁点・半濁点を読み飛ばす。"""
    assert true_converted == half_to_full_katakana(text)


@pytest.mark.parametrize(
    ("text", "true_converted"),
    [
        ("ﾞ", "゛"),
        ("ﾟ", "゜"),
        ("ｶﾞﾟ", "ガ゜"),
    ],
)
def test_half_to_full_katakana_standalone_mark(
    text: str, true_converted: str
) -> None:
    """`half_to_full_katakana()` は単独の濁点・半濁点を全角の記号にする。"""
    assert true_converted == half_to_full_katakana(text)
