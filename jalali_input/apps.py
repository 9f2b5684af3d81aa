"""
apps.py: app configuration
"""
from django.apps import AppConfig


class JalaliInputConfig(AppConfig):
    name         = "jalali_input"
    verbose_name = "ورود تاریخ شمسی"
