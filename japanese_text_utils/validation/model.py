"""
入力値の検証機能に関するモデル（データ構造）

検証の失敗は例外ではなく、`valid=False` の結果として返す。
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class ValidationErrorCode(Enum):
    FAMILY_NAME_REQUIRED = "Family name is required"
    GIVEN_NAME_REQUIRED = "Given name is required"
    FAMILY_NAME_NOT_JAPANESE = "Family name must contain only Japanese characters"
    GIVEN_NAME_NOT_JAPANESE = "Given name must contain only Japanese characters"
    FAMILY_NAME_TOO_LONG = "Family name is too long (max {max_chars} characters)"
    GIVEN_NAME_TOO_LONG = "Given name is too long (max {max_chars} characters)"
    FURIGANA_NOT_HIRAGANA = "Furigana must be hiragana only"
    FURIGANA_TOO_SHORT = "Furigana seems too short for the kanji text"
    NAME_REQUIRED = "Name is required"
    NAME_NOT_KATAKANA = "Name must contain only katakana characters"
    NAME_TOO_LONG = "Name is too long (max {max_chars} characters)"
    POSTAL_CODE_INVALID = "Postal code must be 7 digits"
    PHONE_NUMBER_NOT_DIGITS = "Phone number must contain only digits"
    PHONE_NUMBER_INVALID = "Invalid phone number format"
    TEXT_TOO_SHORT = "Text is too short (minimum: {minimum}, actual: {actual})"
    TEXT_TOO_LONG = "Text is too long (maximum: {maximum}, actual: {actual})"

    def format(self, **kwargs: object) -> str:
        """エラーメッセージを生成する。"""
        return self.value.format(**kwargs)


PhoneNumberType = Literal["mobile", "landline", "unknown"]
CountMethod = Literal["chars", "displayWidth"]


class NameValidationResult(BaseModel):
    """
    氏名の検証結果
    """

    valid: bool = Field(description="検証に成功したか")
    errors: list[str] = Field(default_factory=list, description="エラーメッセージのリスト")


class ValidationResult(BaseModel):
    """
    入力値の検証結果
    """

    valid: bool = Field(description="検証に成功したか")
    error: str | None = Field(default=None, description="エラーメッセージ")


class FormattedValidationResult(ValidationResult):
    """
    整形済みの値を伴う検証結果
    """

    formatted: str | None = Field(default=None, description="整形済みの値")


class PhoneNumberValidationResult(FormattedValidationResult):
    """
    電話番号の検証結果
    """

    type: PhoneNumberType | None = Field(default=None, description="電話番号の種類")


class TextLengthValidationResult(ValidationResult):
    """
    文字列長の検証結果
    """

    length: int = Field(description="計測した長さ")
