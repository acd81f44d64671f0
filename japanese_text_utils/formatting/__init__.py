from .formatter import (
    format_address,
    format_currency,
    format_era_date,
    format_furigana,
    format_japanese_date,
    format_japanese_name,
    format_phone_number,
    format_postal_code,
    format_with_counter,
    normalize_for_search,
    normalize_for_storage,
    to_japanese_numerals,
    truncate_text,
)
from .model import Address

__all__ = [
    "Address",
    "format_address",
    "format_currency",
    "format_era_date",
    "format_furigana",
    "format_japanese_date",
    "format_japanese_name",
    "format_phone_number",
    "format_postal_code",
    "format_with_counter",
    "normalize_for_search",
    "normalize_for_storage",
    "to_japanese_numerals",
    "truncate_text",
]
