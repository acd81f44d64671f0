"""半角カタカナと全角カタカナの対応表、および濁点・半濁点の合成表"""

from types import MappingProxyType
from typing import Final, Mapping

HALF_WIDTH_DAKUTEN: Final = "\uFF9E"  # ﾞ
HALF_WIDTH_HANDAKUTEN: Final = "\uFF9F"  # ﾟ

# 半角カタカナ（句読点・濁点記号を含む）→ 全角
_half_to_full_kana: Final[Mapping[str, str]] = MappingProxyType(
    {
        # 清音
        "ｱ": "ア", "ｲ": "イ", "ｳ": "ウ", "ｴ": "エ", "ｵ": "オ",
        "ｶ": "カ", "ｷ": "キ", "ｸ": "ク", "ｹ": "ケ", "ｺ": "コ",
        "ｻ": "サ", "ｼ": "シ", "ｽ": "ス", "ｾ": "セ", "ｿ": "ソ",
        "ﾀ": "タ", "ﾁ": "チ", "ﾂ": "ツ", "ﾃ": "テ", "ﾄ": "ト",
        "ﾅ": "ナ", "ﾆ": "ニ", "ﾇ": "ヌ", "ﾈ": "ネ", "ﾉ": "ノ",
        "ﾊ": "ハ", "ﾋ": "ヒ", "ﾌ": "フ", "ﾍ": "ヘ", "ﾎ": "ホ",
        "ﾏ": "マ", "ﾐ": "ミ", "ﾑ": "ム", "ﾒ": "メ", "ﾓ": "モ",
        "ﾔ": "ヤ", "ﾕ": "ユ", "ﾖ": "ヨ",
        "ﾗ": "ラ", "ﾘ": "リ", "ﾙ": "ル", "ﾚ": "レ", "ﾛ": "ロ",
        "ﾜ": "ワ", "ｦ": "ヲ", "ﾝ": "ン",
        # 小書き
        "ｧ": "ァ", "ｨ": "ィ", "ｩ": "ゥ", "ｪ": "ェ", "ｫ": "ォ",
        "ｬ": "ャ", "ｭ": "ュ", "ｮ": "ョ", "ｯ": "ッ",
        # 長音・句読点
        "ｰ": "ー", "｡": "。", "｢": "「", "｣": "」", "､": "、", "･": "・",
        # 単独の濁点・半濁点
        HALF_WIDTH_DAKUTEN: "゛", HALF_WIDTH_HANDAKUTEN: "゜",
    }
)  # fmt: skip

# 全角カタカナ → 濁点付き（カ行・サ行・タ行・ハ行）
_dakuten_kana: Final[Mapping[str, str]] = MappingProxyType(
    {
        "カ": "ガ", "キ": "ギ", "ク": "グ", "ケ": "ゲ", "コ": "ゴ",
        "サ": "ザ", "シ": "ジ", "ス": "ズ", "セ": "ゼ", "ソ": "ゾ",
        "タ": "ダ", "チ": "ヂ", "ツ": "ヅ", "テ": "デ", "ト": "ド",
        "ハ": "バ", "ヒ": "ビ", "フ": "ブ", "ヘ": "ベ", "ホ": "ボ",
    }
)  # fmt: skip

# 全角カタカナ → 半濁点付き（ハ行のみ）
_handakuten_kana: Final[Mapping[str, str]] = MappingProxyType(
    {"ハ": "パ", "ヒ": "ピ", "フ": "プ", "ヘ": "ペ", "ホ": "ポ"}
)


def half_kana_to_full(char: str) -> str:
    """半角カタカナ1文字を全角へ変換する。対応が無い文字はそのまま返す。"""
    return _half_to_full_kana.get(char, char)


def add_dakuten(kana: str) -> str:
    """全角カタカナ1文字に濁点を付ける。濁音が存在しない文字はそのまま返す。"""
    return _dakuten_kana.get(kana, kana)


def add_handakuten(kana: str) -> str:
    """全角カタカナ1文字に半濁点を付ける。半濁音が存在しない文字はそのまま返す。"""
    return _handakuten_kana.get(kana, kana)


def is_combining_mark(char: str) -> bool:
    """文字が半角の濁点または半濁点であるかを判定する。"""
    return char == HALF_WIDTH_DAKUTEN or char == HALF_WIDTH_HANDAKUTEN
