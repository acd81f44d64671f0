"""
文字種の判定・集計に関して共有するモデル（データ構造）

このモジュールで定義されるモデルは呼び出しごとに生成・破棄される値であり、状態を持たない。
- `CharacterStats` は不変（frozen）であり、生成後に変更できない。
- 全角・半角の区別はコードポイント 0xFF を閾値とする簡易判定であり、East Asian Width とは一致しない。
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ScriptCategory(str, Enum):
    """
    文字の文字種
    """

    hiragana = "hiragana"  # ひらがな
    katakana = "katakana"  # カタカナ
    kanji = "kanji"  # 漢字
    other = "other"  # 上記以外


class WidthCategory(str, Enum):
    """
    文字の表示幅
    """

    full_width = "full_width"  # 全角（表示幅 2）
    half_width = "half_width"  # 半角（表示幅 1）


class CharacterStats(BaseModel):
    """
    文字列の文字種ごとの統計

    `hiragana + katakana + kanji <= total` かつ `full_width + half_width == total` を満たす。
    """

    model_config = ConfigDict(frozen=True)

    total: int = Field(description="文字数（Unicode スカラー値の数）")
    hiragana: int = Field(description="ひらがなの文字数")
    katakana: int = Field(description="カタカナの文字数")
    kanji: int = Field(description="漢字の文字数")
    full_width: int = Field(description="全角文字の文字数")
    half_width: int = Field(description="半角文字の文字数")
    display_width: int = Field(description="表示幅（全角 2、半角 1 として合計）")
