"""
test_normalize.py - Unit tests for digit normalization utilities

Tests Persian/Arabic digit folding, passthrough and idempotency.
"""
import pytest
from hypothesis import given, strategies as st

from garden_timeline.utils.normalize import lower_for_matching, to_ascii_digits

PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
ARABIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"

_text_with_digits = st.text(
    alphabet=st.one_of(
        st.characters(),
        st.sampled_from(list(PERSIAN_DIGITS + ARABIC_DIGITS)),
    )
)


@pytest.mark.parametrize("raw, expected", [
    ("۱۳۵۰", "1350"),
    ("٢٠٠٠", "2000"),
    ("سال ۱۳۵۰ ه.ش", "سال 1350 ه.ش"),
    ("۱٤۰۰", "1400"),          # mixed Persian and Arabic-Indic glyphs
    (PERSIAN_DIGITS, "0123456789"),
    (ARABIC_DIGITS, "0123456789"),
])
def test_to_ascii_digits_folds_glyphs(raw, expected):
    assert to_ascii_digits(raw) == expected


def test_to_ascii_digits_leaves_other_text_alone():
    raw = "Bagh-e Eram, Shiraz (1350), باغ ارم"
    assert to_ascii_digits(raw) == raw


@pytest.mark.parametrize("raw", [None, ""])
def test_to_ascii_digits_empty(raw):
    assert to_ascii_digits(raw) == ""


def test_lower_for_matching():
    assert lower_for_matching("Chahar BAGH") == "chahar bagh"
    assert lower_for_matching(None) == ""


@given(_text_with_digits)
def test_normalization_is_idempotent(text):
    once = to_ascii_digits(text)
    assert to_ascii_digits(once) == once


@given(_text_with_digits)
def test_normalization_preserves_offsets(text):
    assert len(to_ascii_digits(text)) == len(text)
