"""
jalali_input
─────────────────────────────────────────────────────────────────────
تقویم جلالی و فیلد ورود تاریخ شمسی
Jalali calendar conversion and the localized date-input engine.
"""
