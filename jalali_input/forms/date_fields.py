"""
forms/date_fields.py
─────────────────────────────────────────────────────────────────────
فیلد فرم تاریخ شمسی
Accepts Jalali text in any digit script and cleans it to datetime.date.
"""
from __future__ import annotations

import datetime

from django import forms
from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

from ..conf import jalali_settings
from ..services.jalali_format import (
    DateInputError,
    format_iso_to_jalali_display,
    parse_jalali_input,
)
from ..services.validators import is_within_bounds


_ERROR_CODES = {
    DateInputError.MALFORMED_INPUT:       "invalid",
    DateInputError.INVALID_CALENDAR_DATE: "invalid_date",
    DateInputError.OUT_OF_RANGE:          "out_of_range",
}


class JalaliDateFormField(forms.Field):
    """
    فیلد تاریخ شمسی با محدوده اختیاری.

    dob = JalaliDateFormField(label="تاریخ تولد", max_date="2020-12-31")
    """

    default_error_messages = {
        "invalid":      _("فرمت تاریخ نامعتبر است (مثال: 1403/09/20)"),
        "invalid_date": _("این تاریخ در تقویم شمسی وجود ندارد."),
        "out_of_range": _("سال وارد شده خارج از محدوده پشتیبانی‌شده است."),
        "min_date":     _("تاریخ نباید قبل از %(limit)s باشد."),
        "max_date":     _("تاریخ نباید بعد از %(limit)s باشد."),
    }

    def __init__(self, *, min_date=None, max_date=None, **kwargs):
        self.min_date = _as_iso(min_date)
        self.max_date = _as_iso(max_date)
        super().__init__(**kwargs)

    def widget_attrs(self, widget):
        attrs = super().widget_attrs(widget)
        attrs.update({
            "dir":          "rtl",
            "inputmode":    "numeric",
            "autocomplete": "off",
            "placeholder":  jalali_settings.INPUT_PLACEHOLDER,
        })
        return attrs

    def to_python(self, value):
        if value in self.empty_values:
            return None
        if isinstance(value, datetime.datetime):
            return value.date()
        if isinstance(value, datetime.date):
            return value

        outcome = parse_jalali_input(value)
        if not outcome.ok:
            code = _ERROR_CODES[outcome.error]
            raise ValidationError(self.error_messages[code], code=code)
        return datetime.date.fromisoformat(outcome.iso)

    def validate(self, value):
        super().validate(value)
        if value is None:
            return
        iso = value.isoformat()
        if not is_within_bounds(iso, min_date=self.min_date):
            raise ValidationError(
                self.error_messages["min_date"], code="min_date",
                params={"limit": format_iso_to_jalali_display(self.min_date)},
            )
        if not is_within_bounds(iso, max_date=self.max_date):
            raise ValidationError(
                self.error_messages["max_date"], code="max_date",
                params={"limit": format_iso_to_jalali_display(self.max_date)},
            )

    def prepare_value(self, value):
        """date → '1403/09/20'; typed text is echoed back unchanged."""
        if isinstance(value, datetime.datetime):
            value = value.date()
        if isinstance(value, datetime.date):
            return format_iso_to_jalali_display(value.isoformat())
        return value


def _as_iso(value):
    if isinstance(value, datetime.datetime):
        value = value.date()
    if isinstance(value, datetime.date):
        return value.isoformat()
    return value or None
