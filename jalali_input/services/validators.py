"""
services/validators.py
─────────────────────────────────────────────────────────────────────
اعتبارسنجی تاریخ شمسی؛ هیچ‌وقت exception پرتاب نمی‌کند.
"""

from __future__ import annotations

from typing import Optional

from .calendar_math import MAX_JALALI_YEAR, MIN_JALALI_YEAR, month_length


def is_supported_year(jy) -> bool:
    return isinstance(jy, int) and MIN_JALALI_YEAR <= jy <= MAX_JALALI_YEAR


def is_valid_jalali_date(jy, jm, jd) -> bool:
    """True iff month is 1–12 and day fits that month of that year."""
    if not (is_supported_year(jy) and isinstance(jm, int) and isinstance(jd, int)):
        return False
    if not (1 <= jm <= 12):
        return False
    return 1 <= jd <= month_length(jy, jm)


def is_within_bounds(
    iso: str,
    min_date: Optional[str] = None,
    max_date: Optional[str] = None,
) -> bool:
    """
    Inclusive bound check on ``YYYY-MM-DD`` strings.
    Zero-padded ISO dates order lexicographically like the dates themselves.
    """
    if min_date and iso < min_date:
        return False
    if max_date and iso > max_date:
        return False
    return True
