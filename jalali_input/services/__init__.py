from .calendar_math import (
    InvalidDate,
    JalaliDate,
    GregorianDate,
    first_weekday_of_month,
    gregorian_to_jalali,
    is_leap_jalali_year,
    iso_to_jalali,
    jalali_to_gregorian,
    jalali_to_iso,
    month_length,
)
from .date_field import (
    CalendarDay,
    ClickOutsideObserver,
    DateBounds,
    DateFieldController,
    FieldState,
    NavigateAction,
)
from .digits import to_ascii_digits, to_persian_digits
from .jalali_format import (
    DateInputError,
    ParseOutcome,
    auto_insert_separators,
    format_iso_to_jalali_display,
    format_jalali_date,
    parse_jalali_input,
    parse_jalali_input_to_iso,
)
from .jalali_utils import (
    JALALI_MONTH_NAMES,
    WEEKDAY_SHORT_NAMES,
    ViewCursor,
    jalali_month_name,
    today_iso,
    today_jalali,
)
from .validators import is_valid_jalali_date, is_within_bounds

__all__ = [
    "InvalidDate", "JalaliDate", "GregorianDate",
    "first_weekday_of_month", "gregorian_to_jalali", "is_leap_jalali_year",
    "iso_to_jalali", "jalali_to_gregorian", "jalali_to_iso", "month_length",
    "CalendarDay", "ClickOutsideObserver", "DateBounds", "DateFieldController",
    "FieldState", "NavigateAction",
    "to_ascii_digits", "to_persian_digits",
    "DateInputError", "ParseOutcome", "auto_insert_separators",
    "format_iso_to_jalali_display", "format_jalali_date",
    "parse_jalali_input", "parse_jalali_input_to_iso",
    "JALALI_MONTH_NAMES", "WEEKDAY_SHORT_NAMES", "ViewCursor",
    "jalali_month_name", "today_iso", "today_jalali",
    "is_valid_jalali_date", "is_within_bounds",
]
