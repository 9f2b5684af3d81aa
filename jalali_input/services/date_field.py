"""
services/date_field.py
─────────────────────────────────────────────────────────────────────
کنترلر فیلد تاریخ شمسی
Event-driven state machine behind a Jalali date input with a calendar
picker. The host feeds it discrete events (value changes, keystrokes,
blur, day clicks, navigation, outside clicks) and receives committed
ISO dates through ``on_change``.

Text/commit state:   EMPTY ─ keystroke ─> TYPING ─ parse ok ─> COMMITTED
Picker overlay:      open / closed, independent of the text state.

``on_change`` only ever receives a canonical ``YYYY-MM-DD`` or ``""``
and is called only when the externally observed value changes because
of a user action, never in response to ``on_value_changed``.
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol

from ..conf import jalali_settings
from .calendar_math import JalaliDate, iso_to_jalali, jalali_to_iso
from .digits import to_ascii_digits
from .jalali_format import (
    FULL_DIGIT_COUNT,
    DateInputError,
    ParseOutcome,
    auto_insert_separators,
    format_jalali_triple,
    parse_jalali_input,
)
from .jalali_utils import ViewCursor, today_jalali
from .validators import is_supported_year, is_valid_jalali_date, is_within_bounds

logger = logging.getLogger(__name__)

_DISALLOWED_RE = re.compile(r"[^0-9/\-]")


# ────────────────────────────────────────────────────────────────────
#  Types
# ────────────────────────────────────────────────────────────────────

class FieldState(enum.Enum):
    EMPTY = "empty"
    TYPING = "typing"
    COMMITTED = "committed"


class NavigateAction(enum.Enum):
    PREV_MONTH = "prev_month"
    NEXT_MONTH = "next_month"
    PREV_YEAR = "prev_year"
    NEXT_YEAR = "next_year"
    TODAY = "today"


@dataclass(frozen=True)
class DateBounds:
    """Inclusive ``YYYY-MM-DD`` bounds; None means unbounded."""
    min: Optional[str] = None
    max: Optional[str] = None

    def contains(self, iso: str) -> bool:
        return is_within_bounds(iso, self.min, self.max)


@dataclass(frozen=True)
class CalendarDay:
    """یک خانه از جدول روزهای ماه."""
    day: int
    iso: Optional[str]
    disabled: bool
    selected: bool
    today: bool


class ClickOutsideObserver(Protocol):
    """
    Reports clicks that land outside the field/picker.
    ``subscribe`` returns the function that releases the subscription.
    """

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        ...


# ────────────────────────────────────────────────────────────────────
#  Controller
# ────────────────────────────────────────────────────────────────────

class DateFieldController:

    def __init__(
        self,
        value: Optional[str] = None,
        on_change: Optional[Callable[[str], None]] = None,
        min_date: Optional[str] = None,
        max_date: Optional[str] = None,
        observer: Optional[ClickOutsideObserver] = None,
        today: Callable[[], JalaliDate] = today_jalali,
        clear_on_invalid: Optional[bool] = None,
        disabled: bool = False,
    ):
        self._on_change = on_change
        self._observer = observer
        self._today = today
        self._release: Optional[Callable[[], None]] = None
        self.bounds = DateBounds(min_date or None, max_date or None)
        self.clear_on_invalid = (
            jalali_settings.CLEAR_ON_INVALID_FULL_INPUT
            if clear_on_invalid is None else clear_on_invalid
        )
        self.disabled = disabled

        self.state = FieldState.EMPTY
        self.value = ""
        self.text = ""
        self.is_valid = True
        self.error: Optional[DateInputError] = None
        self.selected: Optional[JalaliDate] = None
        self.picker_open = False
        self.cursor = ViewCursor.from_jalali(self._today())

        self.on_value_changed(value)

    # ── Context manager: release the outside-click listener on exit ──
    def __enter__(self) -> "DateFieldController":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.teardown()
        return False

    # ── Internal transitions ────────────────────────────────────────

    def _notify(self, value: str):
        """Every user-driven commit or clear reaches the host, repeats included."""
        self.value = value
        logger.debug("Date field value → %r", value)
        if self._on_change is not None:
            self._on_change(value)

    def _reset(self):
        self.state = FieldState.EMPTY
        self.text = ""
        self.is_valid = True
        self.error = None
        self.selected = None

    def _commit(self, outcome: ParseOutcome, text: str):
        self.state = FieldState.COMMITTED
        self.text = text
        self.is_valid = True
        self.error = None
        self.selected = outcome.jalali
        self.cursor = ViewCursor.from_jalali(outcome.jalali)
        self._notify(outcome.iso)

    def _parse_in_bounds(self, text: str) -> ParseOutcome:
        outcome = parse_jalali_input(text)
        if outcome.ok and not self.bounds.contains(outcome.iso):
            logger.debug("Typed date %s outside bounds %s", outcome.iso, self.bounds)
            return ParseOutcome(error=DateInputError.OUT_OF_RANGE)
        return outcome

    def _mark_invalid(self, error: Optional[DateInputError]):
        self.state = FieldState.TYPING
        self.is_valid = False
        self.error = error

    # ── Events ──────────────────────────────────────────────────────

    def on_value_changed(self, value: Optional[str]):
        """The host set a new value. Never calls ``on_change``."""
        jalali = iso_to_jalali(value) if value else None
        if jalali is None:
            if value:
                logger.warning("Ignoring unparsable external date value: %r", value)
            self._reset()
            self.value = ""
            return

        self.value = jalali_to_iso(*jalali)
        self.state = FieldState.COMMITTED
        self.text = format_jalali_triple(jalali)
        self.is_valid = True
        self.error = None
        self.selected = jalali
        self.cursor = ViewCursor.from_jalali(jalali)

    def set_bounds(self, min_date: Optional[str] = None, max_date: Optional[str] = None):
        self.bounds = DateBounds(min_date or None, max_date or None)

    def on_keystroke(self, raw_text: str):
        """``raw_text`` is the full new content of the input."""
        text = _DISALLOWED_RE.sub("", to_ascii_digits(raw_text))
        deleting = len(text) < len(self.text) and self.text.startswith(text)
        if not deleting:
            text = auto_insert_separators(text)

        if not text:
            self._reset()
            self._notify("")
            return

        self.text = text
        if sum(ch.isdigit() for ch in text) < FULL_DIGIT_COUNT:
            self.state = FieldState.TYPING
            self.is_valid = True
            self.error = None
            return

        outcome = self._parse_in_bounds(text)
        if outcome.ok:
            self._commit(outcome, text)
            return

        self._mark_invalid(outcome.error)
        if self.clear_on_invalid:
            self.selected = None
            self._notify("")

    def on_blur(self):
        if self.state is not FieldState.TYPING:
            return
        outcome = self._parse_in_bounds(self.text)
        if outcome.ok:
            self._commit(outcome, format_jalali_triple(outcome.jalali))
        else:
            self._mark_invalid(outcome.error)

    def is_date_disabled(self, jy: int, jm: int, jd: int) -> bool:
        if not is_valid_jalali_date(jy, jm, jd):
            return True
        iso = jalali_to_iso(jy, jm, jd)
        return iso is None or not self.bounds.contains(iso)

    def on_day_clicked(self, day: int):
        jy, jm = self.cursor.year, self.cursor.month
        if self.is_date_disabled(jy, jm, day):
            return
        outcome = ParseOutcome(iso=jalali_to_iso(jy, jm, day), jalali=JalaliDate(jy, jm, day))
        self._commit(outcome, format_jalali_triple(outcome.jalali))
        self.close_picker()

    def on_navigate(self, action: NavigateAction):
        if action is NavigateAction.TODAY:
            self.cursor = ViewCursor.from_jalali(self._today())
        elif action is NavigateAction.NEXT_MONTH:
            self.cursor = self.cursor.shifted(1)
        elif action is NavigateAction.PREV_MONTH:
            self.cursor = self.cursor.shifted(-1)
        elif action is NavigateAction.NEXT_YEAR:
            self.cursor = self.cursor.shifted(12)
        elif action is NavigateAction.PREV_YEAR:
            self.cursor = self.cursor.shifted(-12)

    def on_clear(self):
        self._reset()
        self._notify("")

    # ── Picker overlay ──────────────────────────────────────────────

    def open_picker(self):
        if self.disabled or self.picker_open:
            return
        self.picker_open = True
        if self._observer is not None and self._release is None:
            self._release = self._observer.subscribe(self.on_outside_click)
            logger.debug("Outside-click listener acquired")

    on_focus = open_picker

    def close_picker(self):
        self.picker_open = False
        if self._release is not None:
            release, self._release = self._release, None
            release()
            logger.debug("Outside-click listener released")

    def toggle_picker(self):
        if self.picker_open:
            self.close_picker()
        else:
            self.open_picker()

    def on_outside_click(self):
        self.close_picker()

    def teardown(self):
        self.close_picker()

    # ── Grid model ──────────────────────────────────────────────────

    def is_day_selected(self, day: int) -> bool:
        return self.selected == (self.cursor.year, self.cursor.month, day)

    def calendar_days(self) -> List[Optional[CalendarDay]]:
        """
        Cells of the current month grid, Saturday first.
        Leading ``None`` entries pad up to the first weekday.
        """
        cursor = self.cursor
        if not is_supported_year(cursor.year):
            return []

        today = self._today()
        cells: List[Optional[CalendarDay]] = [None] * cursor.first_weekday
        for day in range(1, cursor.days_in_month + 1):
            cells.append(CalendarDay(
                day=day,
                iso=jalali_to_iso(cursor.year, cursor.month, day),
                disabled=self.is_date_disabled(cursor.year, cursor.month, day),
                selected=self.is_day_selected(day),
                today=today == (cursor.year, cursor.month, day),
            ))
        return cells
