"""
services/jalali_format.py
─────────────────────────────────────────────────────────────────────
تجزیه ورودی کاربر و قالب‌بندی تاریخ شمسی
Parses user-typed Jalali text into ISO Gregorian dates and renders ISO
dates back into the canonical ``YYYY/MM/DD`` display string.

Supported input formats (any digit script):
    "1403/09/20"   standard slash
    "1403-9-20"    dash, unpadded
    "14030920"     compact
    "۱۴۰۳/۰۹/۲۰"  Persian digits
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from typing import Optional

from .calendar_math import JalaliDate, iso_to_jalali, jalali_to_iso
from .digits import to_ascii_digits, to_persian_digits
from .validators import is_supported_year, is_valid_jalali_date

logger = logging.getLogger(__name__)


SEPARATORS = "/-"
DISPLAY_SEPARATOR = "/"
FULL_DIGIT_COUNT = 8

_SEPARATED_RE = re.compile(r"^(\d{4})[/\-](\d{1,2})[/\-](\d{1,2})$")
_COMPACT_RE = re.compile(r"^(\d{4})(\d{2})(\d{2})$")


class DateInputError(enum.Enum):
    MALFORMED_INPUT = "malformed_input"
    INVALID_CALENDAR_DATE = "invalid_calendar_date"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class ParseOutcome:
    iso: Optional[str] = None
    error: Optional[DateInputError] = None
    jalali: Optional[JalaliDate] = None

    @property
    def ok(self) -> bool:
        return self.iso is not None


# ════════════════════════════════════════════════════════════════════
#  Parsing
# ════════════════════════════════════════════════════════════════════

def _split(text: str):
    match = _SEPARATED_RE.match(text) or _COMPACT_RE.match(text)
    if not match:
        return None
    return tuple(int(p) for p in match.groups())


def parse_jalali_input(text) -> ParseOutcome:
    """
    Parse user text into a ParseOutcome. Never raises.

    The error tells the caller why parsing failed:
    MALFORMED_INPUT (not three numeric parts), INVALID_CALENDAR_DATE
    (e.g. month 13 or Azar 31), OUT_OF_RANGE (year outside the
    supported conversion span).
    """
    normalized = to_ascii_digits(text).strip()
    parts = _split(normalized)
    if parts is None:
        logger.debug("Malformed Jalali input: %r", text)
        return ParseOutcome(error=DateInputError.MALFORMED_INPUT)

    jy, jm, jd = parts
    if not is_supported_year(jy):
        logger.warning("Jalali year outside supported range: %d", jy)
        return ParseOutcome(error=DateInputError.OUT_OF_RANGE)

    if not is_valid_jalali_date(jy, jm, jd):
        logger.debug("Impossible Jalali date: %d/%d/%d", jy, jm, jd)
        return ParseOutcome(error=DateInputError.INVALID_CALENDAR_DATE)

    iso = jalali_to_iso(jy, jm, jd)
    if iso is None:
        return ParseOutcome(error=DateInputError.OUT_OF_RANGE)
    return ParseOutcome(iso=iso, jalali=JalaliDate(jy, jm, jd))


def parse_jalali_input_to_iso(text) -> Optional[str]:
    return parse_jalali_input(text).iso


# ════════════════════════════════════════════════════════════════════
#  Formatting
# ════════════════════════════════════════════════════════════════════

def format_jalali_triple(jalali: JalaliDate) -> str:
    return f"{jalali.year:04d}/{jalali.month:02d}/{jalali.day:02d}"


def format_iso_to_jalali_display(iso) -> str:
    """'2024-12-10' → '1403/09/20'; empty string for empty/invalid input."""
    jalali = iso_to_jalali(iso)
    if jalali is None:
        return ""
    return format_jalali_triple(jalali)


def format_jalali_date(iso, persian_digits: bool = True, empty: str = "-") -> str:
    """نمایش فقط‌خواندنی تاریخ؛ مثال: ۱۴۰۳/۰۹/۲۰"""
    display = format_iso_to_jalali_display(iso)
    if not display:
        return empty
    return to_persian_digits(display) if persian_digits else display


# ════════════════════════════════════════════════════════════════════
#  As-you-type formatting
# ════════════════════════════════════════════════════════════════════

def auto_insert_separators(text: str) -> str:
    """
    Progressively shape typed text like ``1403/09/20``.

    '1403'     → '1403/'
    '1403/09'  → '1403/09/'
    '14030920' → '1403/09/20'   (pasted digits)
    Separators the user already typed are left alone.
    """
    if not any(sep in text for sep in SEPARATORS):
        if len(text) == 4:
            return text + DISPLAY_SEPARATOR
        if len(text) > 4 and text.isdigit():
            text = f"{text[:4]}/{text[4:6]}" + (f"/{text[6:]}" if len(text) > 6 else "")

    if len(text) == 7 and text[4] in SEPARATORS and sum(text.count(s) for s in SEPARATORS) == 1:
        return text + text[4]
    return text
