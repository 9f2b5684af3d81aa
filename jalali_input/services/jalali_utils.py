"""
services/jalali_utils.py
─────────────────────────────────────────────────────────────────────
ابزارهای ماه و روز شمسی برای تقویم انتخاب تاریخ
Month cursor, month/weekday names and "today" helpers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import jdatetime

from .calendar_math import (
    MAX_JALALI_YEAR,
    MIN_JALALI_YEAR,
    InvalidDate,
    JalaliDate,
    first_weekday_of_month,
    month_length,
)
from .validators import is_supported_year


JALALI_MONTH_NAMES = (
    "فروردین", "اردیبهشت", "خرداد",
    "تیر", "مرداد", "شهریور",
    "مهر", "آبان", "آذر",
    "دی", "بهمن", "اسفند",
)

# Persian week: Saturday = 0 … Friday = 6
WEEKDAY_SHORT_NAMES = ("ش", "ی", "د", "س", "چ", "پ", "ج")


def jalali_month_name(month: int) -> str:
    return JALALI_MONTH_NAMES[month - 1]


@dataclass(frozen=True)
class ViewCursor:
    """ماه شمسی در حال نمایش در تقویم (مستقل از تاریخ انتخاب‌شده)."""

    year: int
    month: int

    def __post_init__(self):
        if not is_supported_year(self.year) or not (1 <= self.month <= 12):
            raise InvalidDate(f"Cannot display Jalali month {self.year}/{self.month}")

    @property
    def days_in_month(self) -> int:
        return month_length(self.year, self.month)

    @property
    def first_weekday(self) -> int:
        return first_weekday_of_month(self.year, self.month)

    @property
    def month_name(self) -> str:
        return jalali_month_name(self.month)

    def shifted(self, months: int) -> "ViewCursor":
        """
        Move the cursor by ``months`` (negative goes back), wrapping the
        month into the year. Stops at the first or last supported month.
        """
        index = self.year * 12 + (self.month - 1) + months
        first = MIN_JALALI_YEAR * 12
        last = MAX_JALALI_YEAR * 12 + 11
        year, month0 = divmod(min(max(index, first), last), 12)
        return ViewCursor(year, month0 + 1)

    @classmethod
    def current(cls) -> "ViewCursor":
        return cls.from_jalali(today_jalali())

    @classmethod
    def from_jalali(cls, d: JalaliDate) -> "ViewCursor":
        return cls(d.year, d.month)


# ─── Standalone helpers ─────────────────────────────────────────────

def today_jalali() -> JalaliDate:
    today = jdatetime.date.today()
    return JalaliDate(today.year, today.month, today.day)


def today_iso() -> str:
    return date.today().isoformat()
