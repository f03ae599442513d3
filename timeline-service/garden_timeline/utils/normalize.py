from typing import Optional

# Persian (U+06F0..U+06F9) and Arabic-Indic (U+0660..U+0669) digits → ASCII.
# One code point maps to one code point, so offsets stay aligned with the
# original text.
_DIGIT_MAP = str.maketrans("۰۱۲۳۴۵۶۷۸۹٠١٢٣٤٥٦٧٨٩", "01234567890123456789")


def to_ascii_digits(text: Optional[str]) -> str:
    """
    Rewrite Persian/Arabic numeral glyphs as ASCII digits.

    All other characters pass through unchanged. Idempotent.
    None or empty input returns "".
    """
    if not text:
        return ""
    return str(text).translate(_DIGIT_MAP)


def lower_for_matching(text: Optional[str]) -> str:
    """Lowercase text for keyword/marker matching. Digits are left as written."""
    if not text:
        return ""
    return str(text).lower()
