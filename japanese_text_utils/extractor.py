"""文字種ごとの文字の抽出"""

from .classifier import is_hiragana, is_kanji, is_katakana


def extract_hiragana(text: str) -> str:
    """文字列からひらがなのみを順序を保って抜き出す。"""
    return "".join(filter(is_hiragana, text))


def extract_katakana(text: str) -> str:
    """文字列からカタカナのみを順序を保って抜き出す。"""
    return "".join(filter(is_katakana, text))


def extract_kanji(text: str) -> str:
    """文字列から漢字のみを順序を保って抜き出す。"""
    return "".join(filter(is_kanji, text))
