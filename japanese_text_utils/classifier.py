"""文字種・文字幅の判定"""

from typing import Final

from .model import ScriptCategory, WidthCategory

_HIRAGANA_RANGE: Final = (0x3040, 0x309F)
_KATAKANA_RANGE: Final = (0x30A0, 0x30FF)
# CJK統合漢字・拡張A・拡張B。拡張C以降は対象外。
_KANJI_RANGES: Final = (
    (0x4E00, 0x9FAF),
    (0x3400, 0x4DBF),
    (0x20000, 0x2A6DF),
)
# これを超えるコードポイントを全角とみなす
_HALF_WIDTH_MAX: Final = 0xFF


def _first_code(char: str) -> int | None:
    """先頭文字のコードポイントを取得する。空文字列の場合は None を返す。"""
    if not char:
        return None
    return ord(char[0])


def is_hiragana(char: str) -> bool:
    """文字がひらがなであるかを判定する。複数文字の場合は先頭の文字のみを判定する。"""
    code = _first_code(char)
    if code is None:
        return False
    return _HIRAGANA_RANGE[0] <= code <= _HIRAGANA_RANGE[1]


def is_katakana(char: str) -> bool:
    """文字がカタカナであるかを判定する。複数文字の場合は先頭の文字のみを判定する。"""
    code = _first_code(char)
    if code is None:
        return False
    return _KATAKANA_RANGE[0] <= code <= _KATAKANA_RANGE[1]


def is_kanji(char: str) -> bool:
    """文字が漢字であるかを判定する。複数文字の場合は先頭の文字のみを判定する。"""
    code = _first_code(char)
    if code is None:
        return False
    return any(start <= code <= end for start, end in _KANJI_RANGES)


def is_full_width(char: str) -> bool:
    """
    文字が全角であるかを判定する。

    コードポイントが 0xFF を超える文字を全角とみなす簡易判定であり、
    ラテン拡張・記号・絵文字なども全角として扱う。
    """
    code = _first_code(char)
    if code is None:
        return False
    return code > _HALF_WIDTH_MAX


def is_half_width(char: str) -> bool:
    """文字が半角であるかを判定する。空文字列は全角でも半角でもない。"""
    if not char:
        return False
    return not is_full_width(char)


def is_all_hiragana(text: str) -> bool:
    """文字列が1文字以上のひらがなのみで構成されているかを判定する。"""
    return len(text) > 0 and all(map(is_hiragana, text))


def is_all_katakana(text: str) -> bool:
    """文字列が1文字以上のカタカナのみで構成されているかを判定する。"""
    return len(text) > 0 and all(map(is_katakana, text))


def is_all_kanji(text: str) -> bool:
    """文字列が1文字以上の漢字のみで構成されているかを判定する。"""
    return len(text) > 0 and all(map(is_kanji, text))


def classify_script(char: str) -> ScriptCategory:
    """先頭文字の文字種を取得する。空文字列は `ScriptCategory.other` になる。"""
    if is_hiragana(char):
        return ScriptCategory.hiragana
    if is_katakana(char):
        return ScriptCategory.katakana
    if is_kanji(char):
        return ScriptCategory.kanji
    return ScriptCategory.other


def classify_width(char: str) -> WidthCategory | None:
    """先頭文字の文字幅を取得する。空文字列の場合は None を返す。"""
    if not char:
        return None
    if is_full_width(char):
        return WidthCategory.full_width
    return WidthCategory.half_width
