"""
tests/conftest.py
─────────────────────────────────────────────────────────────────────
Django setup + shared fixtures for the Jalali input tests.
"""
from __future__ import annotations

import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "tests.settings")
django.setup()

from jalali_input.services.calendar_math import JalaliDate


class FakeObserver:
    """Stands in for the page-level click listener."""

    def __init__(self):
        self.callbacks = []
        self.released = 0

    def subscribe(self, callback):
        self.callbacks.append(callback)

        def release():
            self.callbacks.remove(callback)
            self.released += 1

        return release

    def click_outside(self):
        for callback in list(self.callbacks):
            callback()


@pytest.fixture
def observer():
    return FakeObserver()


@pytest.fixture
def fixed_today():
    # 1403/09/20 == 2024-12-10
    return lambda: JalaliDate(1403, 9, 20)


@pytest.fixture
def changes():
    """Collects every value passed to on_change."""
    return []
