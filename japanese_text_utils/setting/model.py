"""
設定機能に関して検証・整形処理が共有するモデル（データ構造）
"""

from enum import Enum


class FuriganaFormat(str, Enum):
    """
    ふりがなの表記形式
    """

    html = "html"  # <ruby>漢字<rt>かんじ</rt></ruby>
    parentheses = "parentheses"  # 漢字（かんじ）
    ruby = "ruby"  # 漢字《かんじ》


class NameOrder(str, Enum):
    """
    氏名の表示順
    """

    full = "full"  # 姓 名
    family_first = "family_first"  # 姓 名
    given_first = "given_first"  # 名 姓
