"""
conf.py
─────────────────────────────────────────────────────────────────────
تنظیمات ماژول تاریخ شمسی

Reads the optional ``JALALI_INPUT`` dict from Django settings:

    JALALI_INPUT = {
        "CLEAR_ON_INVALID_FULL_INPUT": True,
        "PERSIAN_DIGITS": True,
        "EMPTY_DISPLAY": "-",
        "INPUT_PLACEHOLDER": "1403/09/20",
    }

Outside a configured Django project the defaults below apply.
"""
import os

from django.conf import settings

DEFAULTS = {
    "CLEAR_ON_INVALID_FULL_INPUT": True,
    "PERSIAN_DIGITS": True,
    "EMPTY_DISPLAY": "-",
    "INPUT_PLACEHOLDER": "1403/09/20",
}


class JalaliInputSettings:
    """Attribute access over DEFAULTS, overridden by settings.JALALI_INPUT."""

    def _user_settings(self) -> dict:
        if not settings.configured:
            return {}
        return getattr(settings, "JALALI_INPUT", None) or {}

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid JALALI_INPUT setting: {name!r}")

        if name == "CLEAR_ON_INVALID_FULL_INPUT" and "JALALI_INPUT_CLEAR_ON_INVALID" in os.environ:
            return os.environ["JALALI_INPUT_CLEAR_ON_INVALID"] == "True"

        return self._user_settings().get(name, DEFAULTS[name])


jalali_settings = JalaliInputSettings()
