"""Date formatting helpers."""

from __future__ import annotations

from datetime import date, datetime

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DISPLAY_FORMAT = "%B %d, %Y"


def format_date(value: date | None) -> str:
    """Format for display, e.g. ``October 19, 2026``."""
    return value.strftime(DISPLAY_FORMAT) if value is not None else ""


def format_datetime(value: datetime | None) -> str:
    return value.strftime(DATETIME_FORMAT) if value is not None else ""


def parse_date(text: str | None) -> date | None:
    """Parse ``YYYY-MM-DD``; returns None when the text is not a valid date."""
    if not text:
        return None
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except ValueError:
        return None


def calculate_age(date_of_birth: date | None, today: date | None = None) -> int:
    if date_of_birth is None:
        return 0
    today = today or date.today()
    years = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        years -= 1
    return years


def semester_for(value: date) -> str:
    """Spring (Jan-May), Summer (Jun-Aug) or Fall (Sep-Dec) of the date's year."""
    if value.month <= 5:
        return f"Spring {value.year}"
    if value.month <= 8:
        return f"Summer {value.year}"
    return f"Fall {value.year}"


def is_eligible_age(date_of_birth: date | None, minimum_age: int, today: date | None = None) -> bool:
    return calculate_age(date_of_birth, today) >= minimum_age
