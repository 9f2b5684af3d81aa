"""
services/calendar_math.py
─────────────────────────────────────────────────────────────────────
محاسبات تقویم جلالی ↔ میلادی
Jalali <-> Gregorian conversion on top of jdatetime, pinned to the
span where both directions round-trip: Jalali years 1 to 3176.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import NamedTuple, Optional

import jdatetime

logger = logging.getLogger(__name__)


MIN_JALALI_YEAR = 1
MAX_JALALI_YEAR = 3176

_ISO_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})(?:[T ].*)?$")


class InvalidDate(ValueError):
    """A triple that is impossible or outside the supported span."""


class JalaliDate(NamedTuple):
    year: int
    month: int
    day: int


class GregorianDate(NamedTuple):
    year: int
    month: int
    day: int


def _check_year(jy: int):
    if not (MIN_JALALI_YEAR <= jy <= MAX_JALALI_YEAR):
        raise InvalidDate(f"Jalali year out of supported range: {jy}")


# ════════════════════════════════════════════════════════════════════
#  Public API
# ════════════════════════════════════════════════════════════════════

def is_leap_jalali_year(jy: int) -> bool:
    _check_year(jy)
    return jdatetime.date(jy, 1, 1).isleap()


def month_length(jy: int, jm: int) -> int:
    """تعداد روزهای ماه شمسی (۲۹، ۳۰ یا ۳۱)."""
    if not (1 <= jm <= 12):
        raise InvalidDate(f"Jalali month must be 1-12, got {jm}")
    if jm < 12:
        _check_year(jy)
        return jdatetime.j_days_in_month[jm - 1]
    # اسفند: در سال کبیسه ۳۰ روز
    return 30 if is_leap_jalali_year(jy) else 29


def jalali_to_gregorian(jy: int, jm: int, jd: int) -> GregorianDate:
    """
    Convert a Jalali triple to its Gregorian equivalent.

    Raises ``InvalidDate`` when the year is unsupported or the day does
    not exist in that month.
    """
    if not (1 <= jd <= month_length(jy, jm)):
        raise InvalidDate(f"Invalid Jalali date: {jy}/{jm}/{jd}")
    g = jdatetime.date(jy, jm, jd).togregorian()
    return GregorianDate(g.year, g.month, g.day)


def gregorian_to_jalali(gy: int, gm: int, gd: int) -> JalaliDate:
    """Convert a proleptic Gregorian triple to Jalali."""
    try:
        j = jdatetime.date.fromgregorian(date=date(gy, gm, gd))
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidDate(f"Invalid or unsupported Gregorian date: {gy}-{gm}-{gd}") from e
    _check_year(j.year)
    return JalaliDate(j.year, j.month, j.day)


def first_weekday_of_month(jy: int, jm: int) -> int:
    """Weekday of day 1 in the Persian week: Saturday = 0 … Friday = 6."""
    month_length(jy, jm)
    return jdatetime.date(jy, jm, 1).weekday()


# ── Non-raising helpers used by the parser and the controller ─────

def jalali_to_iso(jy: int, jm: int, jd: int) -> Optional[str]:
    """Jalali triple → ``YYYY-MM-DD``; None if the triple is unusable."""
    try:
        gy, gm, gd = jalali_to_gregorian(jy, jm, jd)
        return date(gy, gm, gd).isoformat()
    except (InvalidDate, ValueError, TypeError) as e:
        logger.debug("Jalali → ISO failed for %s/%s/%s: %s", jy, jm, jd, e)
        return None


def iso_to_jalali(iso: Optional[str]) -> Optional[JalaliDate]:
    """``YYYY-MM-DD`` (a trailing time part is ignored) → JalaliDate."""
    if not iso:
        return None
    match = _ISO_RE.match(str(iso).strip())
    if not match:
        logger.debug("Not an ISO date: %r", iso)
        return None
    try:
        return gregorian_to_jalali(*(int(p) for p in match.groups()))
    except InvalidDate as e:
        logger.debug("ISO → Jalali failed for %r: %s", iso, e)
        return None
