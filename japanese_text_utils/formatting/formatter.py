"""表示・出力用の日本語テキスト整形"""

import re
from datetime import date
from typing import Final

from ..converter import full_to_half_alphanumeric, katakana_to_hiragana
from ..setting import FuriganaFormat, NameOrder, Setting
from ..validation.validator import format_landline_number, format_mobile_number
from ..whitespace import normalize_whitespace, remove_all_whitespace, trim_japanese
from .model import Address, Counter, PhoneNumberFormatType

_POSTAL_CODE_SEPARATOR_PATTERN: Final = re.compile(r"[-\s]")
_PHONE_NUMBER_SEPARATOR_PATTERN: Final = re.compile(r"[-\s()]")
_ASCII_WHITESPACE_RUN_PATTERN: Final = re.compile("[ \t\n\r\f\v]+")

# 元号と開始年。新しい順に並べる。
_ERAS: Final = (
    ("令和", 2019),
    ("平成", 1989),
    ("昭和", 1926),
)

_KANJI_DIGITS: Final = "〇一二三四五六七八九"
_KANJI_UNITS: Final = ("", "十", "百", "千")
_KANJI_BIG_UNITS: Final = ("", "万", "億", "兆")
_NUMERALS_LIMIT: Final = 10**16


def format_japanese_name(
    family_name: str,
    given_name: str,
    name_order: NameOrder | None = None,
    setting: Setting | None = None,
) -> str:
    """姓と名を半角スペース区切りで表示用に結合する。"""
    order = NameOrder(name_order or (setting or Setting()).name_order)
    if order == NameOrder.given_first:
        return f"{given_name} {family_name}"
    return f"{family_name} {given_name}"


def format_postal_code(postal_code: str) -> str:
    """郵便番号を `XXX-XXXX` 形式に整形する。7桁でない場合はそのまま返す。"""
    cleaned = _POSTAL_CODE_SEPARATOR_PATTERN.sub("", postal_code)
    if len(cleaned) == 7:
        return f"{cleaned[:3]}-{cleaned[3:]}"
    return postal_code


def format_phone_number(
    phone_number: str, phone_type: PhoneNumberFormatType = "auto"
) -> str:
    """
    電話番号をハイフン区切りに整形する。整形できない場合はそのまま返す。

    `auto` の場合、070/080/090 で始まる11桁を携帯電話、0 で始まる10桁を固定電話とみなす。
    """
    cleaned = _PHONE_NUMBER_SEPARATOR_PATTERN.sub("", phone_number)

    if phone_type == "mobile" or (phone_type == "auto" and re.match("0[789]0", cleaned)):
        if len(cleaned) == 11:
            return format_mobile_number(cleaned)

    if phone_type == "landline" or (phone_type == "auto" and re.match("0[0-9]", cleaned)):
        if len(cleaned) == 10:
            return format_landline_number(cleaned)

    return phone_number


def format_currency(amount: int | float, use_symbol: bool = True) -> str:
    """金額を3桁区切りにする。小数は最大3桁まで表示する。"""
    if isinstance(amount, int):
        formatted = f"{amount:,}"
    else:
        formatted = f"{amount:,.3f}".rstrip("0").rstrip(".")
    return f"¥{formatted}" if use_symbol else formatted


def format_japanese_date(target: date) -> str:
    """日付を `YYYY年M月D日` 形式にする。"""
    return f"{target.year}年{target.month}月{target.day}日"


def format_era_date(target: date) -> str:
    """
    日付の年を和暦で表す。

    元号は年のみで判定する（改元日は考慮しない）。昭和より前は西暦で表す。
    """
    for era_name, first_year in _ERAS:
        if target.year >= first_year:
            return f"{era_name}{target.year - first_year + 1}年"
    return f"{target.year}年"


def normalize_for_search(text: str) -> str:
    """検索・比較用に、カタカナをひらがな、全角英数字を半角にし、空白を除いて小文字化する。"""
    normalized = katakana_to_hiragana(text)
    normalized = full_to_half_alphanumeric(normalized)
    normalized = remove_all_whitespace(normalized)
    return normalized.lower()


def normalize_for_storage(text: str) -> str:
    """
    保存用に前後の空白を除き、全角スペースを半角にして連続する空白を1つにまとめる。

    空白として扱うのは ASCII の空白文字と全角スペースのみで、
    ノーブレークスペースなどその他の Unicode 空白はそのまま残す。
    """
    normalized = trim_japanese(text)
    normalized = normalize_whitespace(normalized)
    return _ASCII_WHITESPACE_RUN_PATTERN.sub(" ", normalized)


def format_address(address: Address) -> str:
    """住所を表示用に半角スペース区切りで結合する。空の要素は省く。"""
    parts: list[str] = []
    if address.postal_code:
        parts.append(f"〒{format_postal_code(address.postal_code)}")
    for part in (address.prefecture, address.city, address.town, address.building):
        if part:
            parts.append(part)
    return " ".join(parts)


def truncate_text(
    text: str,
    max_length: int,
    ellipsis: str | None = None,
    setting: Setting | None = None,
) -> str:
    """文字数が上限を超える場合に末尾を省略記号で置き換え、上限の文字数に収める。"""
    if ellipsis is None:
        ellipsis = (setting or Setting()).truncate_ellipsis
    if len(text) <= max_length:
        return text
    # 上限が省略記号より短い場合は省略記号のみを返す
    return text[: max(max_length - len(ellipsis), 0)] + ellipsis


def format_furigana(
    kanji: str,
    reading: str,
    furigana_format: FuriganaFormat | None = None,
    setting: Setting | None = None,
) -> str:
    """漢字にふりがなを付けた表示用文字列を生成する。"""
    style = FuriganaFormat(furigana_format or (setting or Setting()).furigana_format)
    if style == FuriganaFormat.html:
        return f"<ruby>{kanji}<rt>{reading}</rt></ruby>"
    if style == FuriganaFormat.ruby:
        return f"{kanji}《{reading}》"
    return f"{kanji}（{reading}）"


def format_with_counter(count: int, counter: Counter) -> str:
    """数値に助数詞を付ける。"""
    return f"{count}{counter}"


def _to_kanji_segment(segment: int) -> str:
    """1〜9999 の数を漢数字にする。十・百・千の前の「一」は省く。"""
    kanji = ""
    unit_index = 0
    while segment > 0:
        digit = segment % 10
        if digit > 0:
            if digit == 1 and unit_index > 0:
                kanji = _KANJI_UNITS[unit_index] + kanji
            else:
                kanji = _KANJI_DIGITS[digit] + _KANJI_UNITS[unit_index] + kanji
        segment //= 10
        unit_index += 1
    return kanji


def to_japanese_numerals(num: int) -> str:
    """
    整数を漢数字に変換する。

    Examples
    --------
    >>> to_japanese_numerals(2024)
    "二千二十四"
    >>> to_japanese_numerals(10001)
    "一万一"
    """
    if isinstance(num, bool) or not isinstance(num, int):
        raise TypeError(f"整数ではない値は漢数字に変換できません: {num!r}")
    if num == 0:
        return _KANJI_DIGITS[0]
    if num < 0:
        return "-" + to_japanese_numerals(-num)
    if num < 10:
        return _KANJI_DIGITS[num]
    # TODO: 京以上の単位に対応する
    if num >= _NUMERALS_LIMIT:
        raise ValueError(f"兆の桁を超える数は漢数字に変換できません: {num}")

    numerals = ""
    big_unit_index = 0
    while num > 0:
        segment = num % 10000
        if segment > 0:
            numerals = (
                _to_kanji_segment(segment) + _KANJI_BIG_UNITS[big_unit_index] + numerals
            )
        num //= 10000
        big_unit_index += 1
    return numerals
