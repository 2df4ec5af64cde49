"""Derived academic metrics shared by every record that carries grades or enrollment data."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from registrar.records.exceptions import RecordValidationError
from registrar.records.models import Grade

HONOR_ROLL_GPA = 3.5
PASSING_GPA = 2.0

# Highest band first; first match wins.
STANDING_BANDS: tuple[tuple[float, str], ...] = (
    (3.8, "DEAN'S LIST"),
    (HONOR_ROLL_GPA, "HONOR ROLL"),
    (3.0, "GOOD STANDING"),
    (PASSING_GPA, "SATISFACTORY"),
)
PROBATION = "ACADEMIC PROBATION"

_ENROLLMENT_ID_PATTERN = re.compile(r"^[A-Z0-9]{5,10}$")
_TWO_PLACES = Decimal("0.01")


def round_half_up(value: Decimal | float) -> float:
    """Round to two decimal places, halves away from zero."""
    return float(Decimal(str(value)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def total_grade_points(grades: Iterable[Grade]) -> float:
    return float(sum((Decimal(str(g.grade_point)) for g in grades), Decimal(0)))


def calculate_gpa(grades: Iterable[Grade] | None) -> float:
    """Mean grade point of the whole history, rounded half up to 2 places.

    An empty or missing history has a GPA of 0.0.
    """
    points = [Decimal(str(g.grade_point)) for g in grades or ()]
    if not points:
        return 0.0
    return round_half_up(sum(points, Decimal(0)) / len(points))


def academic_standing(gpa: float) -> str:
    for threshold, label in STANDING_BANDS:
        if gpa >= threshold:
            return label
    return PROBATION


def is_honor_roll(gpa: float) -> bool:
    return gpa >= HONOR_ROLL_GPA


def is_passing_gpa(gpa: float) -> bool:
    return gpa >= PASSING_GPA


def enrollment_status(active: bool) -> str:
    return "ACTIVE" if active else "INACTIVE"


def format_enrollment_info(enrollment_id: str, enrolled_on: date, active: bool) -> str:
    return (
        f"Enrollment[ID={enrollment_id}, Date={enrolled_on.isoformat()}, "
        f"Status={enrollment_status(active)}]"
    )


def days_since_enrollment(enrolled_on: date, today: date | None = None) -> int:
    today = today or date.today()
    return (today - enrolled_on).days


def is_valid_enrollment_id(enrollment_id: str | None) -> bool:
    return enrollment_id is not None and bool(_ENROLLMENT_ID_PATTERN.match(enrollment_id))


def generate_enrollment_id(prefix: str, number: int) -> str:
    """Build an identifier such as ``STU00042``.

    Raises:
        RecordValidationError: If the prefix is empty.
    """
    if not prefix:
        raise RecordValidationError("Prefix cannot be empty")
    return f"{prefix}{number:05d}"
