from .model import (
    FormattedValidationResult,
    NameValidationResult,
    PhoneNumberValidationResult,
    TextLengthValidationResult,
    ValidationErrorCode,
    ValidationResult,
)
from .validator import (
    sanitize_input,
    validate_furigana,
    validate_japanese_name,
    validate_katakana_name,
    validate_phone_number,
    validate_postal_code,
    validate_text_length,
)

__all__ = [
    "FormattedValidationResult",
    "NameValidationResult",
    "PhoneNumberValidationResult",
    "TextLengthValidationResult",
    "ValidationErrorCode",
    "ValidationResult",
    "sanitize_input",
    "validate_furigana",
    "validate_japanese_name",
    "validate_katakana_name",
    "validate_phone_number",
    "validate_postal_code",
    "validate_text_length",
]
