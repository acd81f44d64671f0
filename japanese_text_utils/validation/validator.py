"""フォーム入力などに用いる日本語テキストの検証"""

import re
from logging import getLogger
from typing import Final

from ..analyzer import get_character_stats, get_display_width
from ..classifier import is_all_hiragana
from ..model import CharacterStats
from ..setting import Setting
from ..whitespace import normalize_whitespace
from .model import (
    CountMethod,
    FormattedValidationResult,
    NameValidationResult,
    PhoneNumberValidationResult,
    TextLengthValidationResult,
    ValidationErrorCode,
    ValidationResult,
)

logger = getLogger(__name__)

_KATAKANA_NAME_PATTERN: Final = re.compile("[ァ-ヴー・]+")
_POSTAL_CODE_SEPARATOR_PATTERN: Final = re.compile(r"[-\s]")
_PHONE_NUMBER_SEPARATOR_PATTERN: Final = re.compile(r"[-\s()]")
# 改行・タブ以外の制御文字
_CONTROL_CHAR_PATTERN: Final = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

_MOBILE_PATTERN: Final = re.compile("0[789]0[0-9]{8}")
_LANDLINE_PATTERN: Final = re.compile("0[0-9]{9}")
# 市外局番が2桁の地域（東京・大阪など）
_TWO_DIGIT_AREA_CODES: Final = ("03", "04", "06")


def _is_japanese_only(stats: CharacterStats) -> bool:
    return stats.hiragana + stats.katakana + stats.kanji == stats.total


def format_landline_number(digits: str) -> str:
    """10桁の固定電話番号を市外局番に応じてハイフン区切りにする。"""
    if digits[:2] in _TWO_DIGIT_AREA_CODES:
        return f"{digits[:2]}-{digits[2:6]}-{digits[6:]}"
    return f"{digits[:3]}-{digits[3:6]}-{digits[6:]}"


def format_mobile_number(digits: str) -> str:
    """11桁の携帯電話番号をハイフン区切りにする。"""
    return f"{digits[:3]}-{digits[3:7]}-{digits[7:]}"


def validate_japanese_name(
    family_name: str, given_name: str, setting: Setting | None = None
) -> NameValidationResult:
    """
    姓と名を検証する。

    必須であること、ひらがな・カタカナ・漢字のみで構成されること、表示幅が上限以下であることを検証し、
    見つかった全てのエラーを返す。

    Parameters
    ----------
    family_name : str
        姓
    given_name : str
        名
    setting : Setting | None
        表示幅の上限の設定。None の場合はデフォルト値。

    Returns
    -------
    result : NameValidationResult
        検証結果
    """
    setting = setting or Setting()
    errors: list[str] = []

    if family_name.strip() == "":
        errors.append(ValidationErrorCode.FAMILY_NAME_REQUIRED.value)
    if given_name.strip() == "":
        errors.append(ValidationErrorCode.GIVEN_NAME_REQUIRED.value)

    if not _is_japanese_only(get_character_stats(family_name)):
        errors.append(ValidationErrorCode.FAMILY_NAME_NOT_JAPANESE.value)
    if not _is_japanese_only(get_character_stats(given_name)):
        errors.append(ValidationErrorCode.GIVEN_NAME_NOT_JAPANESE.value)

    # 全角換算の文字数で案内する
    max_chars = setting.name_max_display_width // 2
    if get_display_width(family_name) > setting.name_max_display_width:
        errors.append(
            ValidationErrorCode.FAMILY_NAME_TOO_LONG.format(max_chars=max_chars)
        )
    if get_display_width(given_name) > setting.name_max_display_width:
        errors.append(
            ValidationErrorCode.GIVEN_NAME_TOO_LONG.format(max_chars=max_chars)
        )

    if errors:
        logger.debug("氏名の検証に失敗しました: %s", errors)
    return NameValidationResult(valid=len(errors) == 0, errors=errors)


def validate_furigana(kanji_text: str, furigana: str) -> ValidationResult:
    """ふりがながひらがなのみで構成され、漢字の文字数以上の長さを持つかを検証する。"""
    if not is_all_hiragana(furigana):
        logger.debug("ふりがながひらがなではありません: %s", furigana)
        return ValidationResult(
            valid=False, error=ValidationErrorCode.FURIGANA_NOT_HIRAGANA.value
        )

    # 通常ふりがなは漢字よりも長い
    if len(furigana) < get_character_stats(kanji_text).kanji:
        logger.debug("ふりがなが短すぎます: %s (%s)", furigana, kanji_text)
        return ValidationResult(
            valid=False, error=ValidationErrorCode.FURIGANA_TOO_SHORT.value
        )

    return ValidationResult(valid=True)


def validate_katakana_name(
    name: str, setting: Setting | None = None
) -> ValidationResult:
    """カタカナ表記の氏名（外国人名など）を検証する。長音符と中黒を許可する。"""
    setting = setting or Setting()

    if name.strip() == "":
        return ValidationResult(
            valid=False, error=ValidationErrorCode.NAME_REQUIRED.value
        )

    if not _KATAKANA_NAME_PATTERN.fullmatch(name):
        logger.debug("カタカナ以外の文字を含む氏名です: %s", name)
        return ValidationResult(
            valid=False, error=ValidationErrorCode.NAME_NOT_KATAKANA.value
        )

    if get_display_width(name) > setting.katakana_name_max_display_width:
        max_chars = setting.katakana_name_max_display_width // 2
        return ValidationResult(
            valid=False,
            error=ValidationErrorCode.NAME_TOO_LONG.format(max_chars=max_chars),
        )

    return ValidationResult(valid=True)


def validate_postal_code(postal_code: str) -> FormattedValidationResult:
    """郵便番号が7桁の数字であるかを検証し、`XXX-XXXX` 形式に整形する。"""
    cleaned = _POSTAL_CODE_SEPARATOR_PATTERN.sub("", postal_code)

    if not re.fullmatch("[0-9]{7}", cleaned):
        logger.debug("郵便番号の形式が不正です: %s", postal_code)
        return FormattedValidationResult(
            valid=False, error=ValidationErrorCode.POSTAL_CODE_INVALID.value
        )

    return FormattedValidationResult(
        valid=True, formatted=f"{cleaned[:3]}-{cleaned[3:]}"
    )


def validate_phone_number(phone_number: str) -> PhoneNumberValidationResult:
    """
    日本の電話番号を検証し、種類を判別してハイフン区切りに整形する。

    - 携帯電話: 090/080/070 + 8桁 -> `XXX-XXXX-XXXX`
    - 固定電話: 0 + 9桁 -> `0X-XXXX-XXXX`（03/04/06）または `0XX-XXX-XXXX`
    """
    cleaned = _PHONE_NUMBER_SEPARATOR_PATTERN.sub("", phone_number)

    if not re.fullmatch("[0-9]+", cleaned):
        logger.debug("電話番号に数字以外が含まれています: %s", phone_number)
        return PhoneNumberValidationResult(
            valid=False, error=ValidationErrorCode.PHONE_NUMBER_NOT_DIGITS.value
        )

    if _MOBILE_PATTERN.fullmatch(cleaned):
        return PhoneNumberValidationResult(
            valid=True, formatted=format_mobile_number(cleaned), type="mobile"
        )

    if _LANDLINE_PATTERN.fullmatch(cleaned):
        return PhoneNumberValidationResult(
            valid=True, formatted=format_landline_number(cleaned), type="landline"
        )

    logger.debug("電話番号の形式が不正です: %s", phone_number)
    return PhoneNumberValidationResult(
        valid=False, error=ValidationErrorCode.PHONE_NUMBER_INVALID.value
    )


def validate_text_length(
    text: str,
    min_length: int,
    max_length: int,
    count_method: CountMethod = "chars",
) -> TextLengthValidationResult:
    """
    文字列の長さが範囲内かを検証する。

    Parameters
    ----------
    text : str
        検証対象の文字列
    min_length : int
        最小の長さ
    max_length : int
        最大の長さ
    count_method : CountMethod
        `chars` は文字数、`displayWidth` は全角を 2 とする表示幅で数える。

    Returns
    -------
    result : TextLengthValidationResult
        検証結果と計測した長さ
    """
    length = get_display_width(text) if count_method == "displayWidth" else len(text)

    if length < min_length:
        return TextLengthValidationResult(
            valid=False,
            length=length,
            error=ValidationErrorCode.TEXT_TOO_SHORT.format(
                minimum=min_length, actual=length
            ),
        )

    if length > max_length:
        return TextLengthValidationResult(
            valid=False,
            length=length,
            error=ValidationErrorCode.TEXT_TOO_LONG.format(
                maximum=max_length, actual=length
            ),
        )

    return TextLengthValidationResult(valid=True, length=length)


def sanitize_input(text: str) -> str:
    """改行・タブ以外の制御文字を取り除き、全角スペースを半角にして前後の空白を取り除く。"""
    sanitized = _CONTROL_CHAR_PATTERN.sub("", text)
    sanitized = normalize_whitespace(sanitized)
    return sanitized.strip()
