"""Presentation helpers for letter grades."""

from __future__ import annotations

from registrar.records.exceptions import InvalidGradeError
from registrar.records.models import Grade
from registrar.records.standing import calculate_gpa

_DESCRIPTIONS = {
    Grade.A_PLUS: "Excellent",
    Grade.A: "Excellent",
    Grade.A_MINUS: "Very Good",
    Grade.B_PLUS: "Very Good",
    Grade.B: "Good",
    Grade.B_MINUS: "Good",
    Grade.C_PLUS: "Satisfactory",
    Grade.C: "Satisfactory",
    Grade.C_MINUS: "Minimum Pass",
    Grade.D: "Conditional Pass",
    Grade.F: "Fail",
}

_ADVICE = {
    Grade.A_PLUS: "Outstanding performance! Keep up the excellent work.",
    Grade.A: "Outstanding performance! Keep up the excellent work.",
    Grade.A_MINUS: "Great job! You're doing very well.",
    Grade.B_PLUS: "Great job! You're doing very well.",
    Grade.B: "Good work. Continue to apply yourself.",
    Grade.B_MINUS: "Good work. Continue to apply yourself.",
    Grade.C_PLUS: "Satisfactory. Consider seeking additional help.",
    Grade.C: "Satisfactory. Consider seeking additional help.",
    Grade.C_MINUS: "You're passing, but there's room for improvement.",
    Grade.D: "You're passing, but there's room for improvement.",
    Grade.F: "Please meet with your instructor and consider tutoring.",
}

_STATUS_TAGS = {
    Grade.A_PLUS: "[HONORS]",
    Grade.A: "[HONORS]",
    Grade.A_MINUS: "[HONORS]",
    Grade.B_PLUS: "[GOOD]",
    Grade.B: "[GOOD]",
    Grade.B_MINUS: "[GOOD]",
    Grade.C_PLUS: "[PASS]",
    Grade.C: "[PASS]",
    Grade.C_MINUS: "[PASS]",
    Grade.D: "[CONDITIONAL]",
    Grade.F: "[FAIL]",
}


def grade_description(grade: Grade) -> str:
    return _DESCRIPTIONS[grade]


def grade_advice(grade: Grade) -> str:
    return _ADVICE[grade]


def format_grade_with_status(grade: Grade) -> str:
    """Format as ``A- [HONORS] (3.7)``."""
    return f"{grade.label} {_STATUS_TAGS[grade]} ({grade.grade_point:.1f})"


def average_gpa(*grades: Grade) -> float:
    """Average grade points of the given grades.

    Raises:
        InvalidGradeError: If any grade is None.
    """
    if any(g is None for g in grades):
        raise InvalidGradeError("Cannot calculate average with an empty grade")
    return calculate_gpa(grades)


def grade_from_percentage(percentage: int) -> Grade:
    """Like ``Grade.from_percentage`` but reports out-of-range scores as grade errors."""
    if percentage < 0 or percentage > 100:
        raise InvalidGradeError("Percentage must be between 0 and 100")
    return Grade.from_percentage(percentage)
