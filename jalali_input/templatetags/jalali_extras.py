"""
jalali_input/templatetags/jalali_extras.py
─────────────────────────────────────────────────────────────────────
فیلترهای نمایش تاریخ شمسی در templates.

{% load jalali_extras %}
{{ request.created_at|jalali_date }}          → ۱۴۰۳/۰۹/۲۰
{{ request.created_at|jalali_date:"latin" }}  → 1403/09/20
"""
import datetime

import jdatetime
from django import template

from ..conf import jalali_settings
from ..services.digits import to_persian_digits as _to_persian_digits
from ..services.jalali_format import format_jalali_date
from ..services.jalali_utils import jalali_month_name as _jalali_month_name

register = template.Library()


def _as_iso(value):
    # jdatetime values (django_jalali fields) go back through Gregorian
    if isinstance(value, jdatetime.date):
        value = value.togregorian()
    if isinstance(value, datetime.datetime):
        value = value.date()
    if isinstance(value, datetime.date):
        return value.isoformat()
    return value


@register.filter
def jalali_date(value, digits=None):
    """
    تاریخ میلادی (رشته ISO، date، datetime یا jdatetime) → تاریخ شمسی.
    مقدار خالی یا نامعتبر → EMPTY_DISPLAY
    """
    use_persian = jalali_settings.PERSIAN_DIGITS if digits is None else digits != "latin"
    return format_jalali_date(
        _as_iso(value),
        persian_digits=use_persian,
        empty=jalali_settings.EMPTY_DISPLAY,
    )


@register.filter
def persian_digits(value):
    """تبدیل همه ارقام لاتین به فارسی."""
    return _to_persian_digits(value)


@register.filter
def jalali_month_name(month):
    """{{ 9|jalali_month_name }} → آذر"""
    try:
        month = int(month)
    except (TypeError, ValueError):
        return ""
    if not 1 <= month <= 12:
        return ""
    return _jalali_month_name(month)
