"""文字種・文字幅の変換"""

import string
from typing import Final

from .kana_mapping import (
    HALF_WIDTH_DAKUTEN,
    add_dakuten,
    add_handakuten,
    half_kana_to_full,
    is_combining_mark,
)

# ひらがなブロックとカタカナブロックのオフセット
_KANA_OFFSET: Final = 0x60
# 半角 ASCII と全角英数字のオフセット
_ALPHANUMERIC_OFFSET: Final = 0xFEE0

_HIRAGANA_CHARS: Final = "".join(chr(code) for code in range(0x3041, 0x3096 + 1))
_KATAKANA_CHARS: Final = "".join(
    chr(ord(char) + _KANA_OFFSET) for char in _HIRAGANA_CHARS
)

_HANKAKU_ALPHANUMERIC_CHARS: Final = string.ascii_letters + string.digits
_ZENKAKU_ALPHANUMERIC_CHARS: Final = "".join(
    chr(ord(char) + _ALPHANUMERIC_OFFSET) for char in _HANKAKU_ALPHANUMERIC_CHARS
)

_HIRAGANA_TO_KATAKANA_TABLE: Final = str.maketrans(_HIRAGANA_CHARS, _KATAKANA_CHARS)
_KATAKANA_TO_HIRAGANA_TABLE: Final = str.maketrans(_KATAKANA_CHARS, _HIRAGANA_CHARS)
_HANKAKU_TO_ZENKAKU_TABLE: Final = str.maketrans(
    _HANKAKU_ALPHANUMERIC_CHARS, _ZENKAKU_ALPHANUMERIC_CHARS
)
_ZENKAKU_TO_HANKAKU_TABLE: Final = str.maketrans(
    _ZENKAKU_ALPHANUMERIC_CHARS, _HANKAKU_ALPHANUMERIC_CHARS
)


def hiragana_to_katakana(text: str) -> str:
    """文字列に含まれるひらがな（ぁ〜ゖ）をカタカナで置き換える。"""
    return text.translate(_HIRAGANA_TO_KATAKANA_TABLE)


def katakana_to_hiragana(text: str) -> str:
    """文字列に含まれるカタカナ（ァ〜ヶ）をひらがなで置き換える。"""
    return text.translate(_KATAKANA_TO_HIRAGANA_TABLE)


def full_to_half_alphanumeric(text: str) -> str:
    """文字列に含まれる全角英数字を半角英数字で置き換える。記号と空白は置き換えない。"""
    return text.translate(_ZENKAKU_TO_HANKAKU_TABLE)


def half_to_full_alphanumeric(text: str) -> str:
    """文字列に含まれる半角英数字を全角英数字で置き換える。記号と空白は置き換えない。"""
    return text.translate(_HANKAKU_TO_ZENKAKU_TABLE)


def half_to_full_katakana(text: str) -> str:
    """
    文字列に含まれる半角カタカナを全角カタカナで置き換える。

    直後に半角の濁点・半濁点が続く場合は2文字を合成して1文字にする。
    濁音・半濁音が存在しない文字に付いた濁点・半濁点は取り除かれる。

    Parameters
    ----------
    text : str
        変換対象の文字列

    Returns
    -------
    converted : str
        変換後の文字列

    Examples
    --------
    >>> half_to_full_katakana("ｶﾞｷﾞｸﾞ")
    "ガギグ"
    >>> half_to_full_katakana("ｱﾞ")
    "ア"
    """
    converted: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        next_char = text[i + 1] if i + 1 < len(text) else ""

        if is_combining_mark(next_char):
            base = half_kana_to_full(char)
            if next_char == HALF_WIDTH_DAKUTEN:
                converted.append(add_dakuten(base))
            else:
                converted.append(add_handakuten(base))
            # 濁点・半濁点を読み飛ばす
            i += 2
        else:
            converted.append(half_kana_to_full(char))
            i += 1

    return "".join(converted)
