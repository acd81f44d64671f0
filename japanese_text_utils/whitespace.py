"""全角スペースを含む空白の処理"""

from typing import Final

IDEOGRAPHIC_SPACE: Final = "　"
# ASCII の空白文字と全角スペース
WHITESPACE_CHARS: Final = " \t\n\r\f\v" + IDEOGRAPHIC_SPACE

_REMOVE_WHITESPACE_TABLE: Final = str.maketrans("", "", WHITESPACE_CHARS)


def remove_all_whitespace(text: str) -> str:
    """全角スペースを含む全ての空白を取り除く。"""
    return text.translate(_REMOVE_WHITESPACE_TABLE)


def normalize_whitespace(text: str) -> str:
    """全角スペースを半角スペースで置き換える。"""
    return text.replace(IDEOGRAPHIC_SPACE, " ")


def trim_japanese(text: str) -> str:
    """全角スペースを含む前後の空白を取り除く。"""
    return text.strip(WHITESPACE_CHARS)
