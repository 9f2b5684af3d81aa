"""
services/digits.py
─────────────────────────────────────────────────────────────────────
تبدیل ارقام فارسی/عربی به لاتین و برعکس.
"""

from __future__ import annotations

import unicodedata

_PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
_ARABIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"

_TO_ASCII = str.maketrans(_PERSIAN_DIGITS + _ARABIC_DIGITS, "0123456789" * 2)
_TO_PERSIAN = str.maketrans("0123456789", _PERSIAN_DIGITS)


def _ascii_digit(ch: str) -> str:
    # any other Unicode decimal digit (fullwidth, Devanagari, …)
    if not ch.isascii() and unicodedata.category(ch) == "Nd":
        return str(unicodedata.digit(ch))
    return ch


def to_ascii_digits(text) -> str:
    """'۱۴۰۳/۰۹/۲۰' → '1403/09/20'. Non-digit characters are kept as-is."""
    if text is None:
        return ""
    text = str(text).translate(_TO_ASCII)
    if text.isascii():
        return text
    return "".join(_ascii_digit(ch) for ch in text)


def to_persian_digits(text) -> str:
    if text is None:
        return ""
    return str(text).translate(_TO_PERSIAN)
