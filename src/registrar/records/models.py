"""Value types for student records: grades, departments, schedules, enrollments."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime, time
from enum import Enum

from registrar.records.exceptions import InvalidRangeError, RecordValidationError

PERCENTAGE_MIN = 0
PERCENTAGE_MAX = 100


class Grade(Enum):
    """Letter grade with grade points and an inclusive percentage band.

    Declaration order matters: ``from_percentage`` returns the first band
    containing the percentage.
    """

    A_PLUS = (4.0, 95, 100)
    A = (4.0, 90, 94)
    A_MINUS = (3.7, 85, 89)
    B_PLUS = (3.3, 80, 84)
    B = (3.0, 75, 79)
    B_MINUS = (2.7, 70, 74)
    C_PLUS = (2.3, 65, 69)
    C = (2.0, 60, 64)
    C_MINUS = (1.7, 55, 59)
    D = (1.0, 50, 54)
    F = (0.0, 0, 49)

    def __init__(self, grade_point: float, min_percentage: int, max_percentage: int) -> None:
        self.grade_point = grade_point
        self.min_percentage = min_percentage
        self.max_percentage = max_percentage

    @property
    def label(self) -> str:
        """Letter label, e.g. ``A+`` or ``B-``."""
        return self.name.replace("_PLUS", "+").replace("_MINUS", "-")

    def is_passing(self) -> bool:
        """Every grade except F passes."""
        return self is not Grade.F

    def contains(self, percentage: int) -> bool:
        """Check whether a percentage falls in this grade's band."""
        return self.min_percentage <= percentage <= self.max_percentage

    @classmethod
    def from_percentage(cls, percentage: int) -> Grade:
        """Map a percentage score to its letter grade.

        Args:
            percentage: Score between 0 and 100 inclusive.

        Returns:
            The first grade (in declaration order) whose band contains the score.

        Raises:
            InvalidRangeError: If the score is outside 0-100 or matches no band.
        """
        if percentage < PERCENTAGE_MIN or percentage > PERCENTAGE_MAX:
            raise InvalidRangeError(f"Invalid percentage: {percentage}")
        for grade in cls:
            if grade.contains(percentage):
                return grade
        raise InvalidRangeError(f"Invalid percentage: {percentage}")

    @classmethod
    def from_label(cls, label: str) -> Grade:
        """Parse a letter label (``A+``) or member name (``A_PLUS``)."""
        text = label.strip().upper()
        for grade in cls:
            if text in (grade.label, grade.name):
                return grade
        raise RecordValidationError(f"Unknown grade: {label!r}")

    def __str__(self) -> str:
        return self.label


def _verify_grade_bands() -> None:
    """Grade bands must tile 0-100 with no gaps and no overlaps."""
    covered = sorted((g.min_percentage, g.max_percentage) for g in Grade)
    expected = PERCENTAGE_MIN
    for low, high in covered:
        if low != expected or high < low:
            raise RuntimeError(f"Grade bands are not contiguous at {expected}%")
        expected = high + 1
    if expected != PERCENTAGE_MAX + 1:
        raise RuntimeError(f"Grade bands stop at {expected - 1}%, expected {PERCENTAGE_MAX}%")


_verify_grade_bands()


class DepartmentType(Enum):
    """Academic departments."""

    COMPUTER_SCIENCE = ("Computer Science", "CS")
    MATHEMATICS = ("Mathematics", "MATH")
    ENGINEERING = ("Engineering", "ENG")
    BUSINESS = ("Business Administration", "BUS")
    ARTS = ("Arts and Humanities", "ARTS")

    def __init__(self, full_name: str, code: str) -> None:
        self.full_name = full_name
        self.code = code

    @property
    def description(self) -> str:
        return f"{self.full_name} ({self.code})"

    @classmethod
    def from_code(cls, value: str) -> DepartmentType:
        """Look up a department by code (``CS``) or member name."""
        text = value.strip().upper()
        for department in cls:
            if text in (department.code, department.name):
                return department
        raise RecordValidationError(f"Unknown department: {value!r}")

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class CourseSchedule:
    """Weekly meeting slot for a course."""

    day_of_week: str
    start_time: time
    end_time: time
    room: str

    def __post_init__(self) -> None:
        if not self.day_of_week:
            raise RecordValidationError("Day of week cannot be empty")
        if self.start_time is None or self.end_time is None:
            raise RecordValidationError("Times cannot be empty")
        if self.start_time > self.end_time:
            raise RecordValidationError("Start time must be before end time")
        if not self.room:
            raise RecordValidationError("Room cannot be empty")

    @property
    def duration_minutes(self) -> int:
        start = datetime.combine(date.min, self.start_time)
        end = datetime.combine(date.min, self.end_time)
        return int((end - start).total_seconds() // 60)

    @property
    def formatted(self) -> str:
        return (
            f"{self.day_of_week} {self.start_time:%H:%M}-{self.end_time:%H:%M} in {self.room}"
        )


@dataclass(frozen=True)
class Enrollment:
    """Immutable fact that a student is (or was) registered for a course.

    A missing ``final_grade`` means the course is still in progress. Grading
    never mutates a fact; ``with_grade`` returns its replacement.
    """

    student_id: str
    course_code: str
    enrollment_date: date
    final_grade: Grade | None = None

    def __post_init__(self) -> None:
        if not self.student_id:
            raise RecordValidationError("Student ID cannot be empty")
        if not self.course_code:
            raise RecordValidationError("Course code cannot be empty")
        if self.enrollment_date is None:
            raise RecordValidationError("Enrollment date cannot be empty")

    @property
    def is_graded(self) -> bool:
        return self.final_grade is not None

    @property
    def status(self) -> str:
        if self.final_grade is None:
            return "IN_PROGRESS"
        return "PASSED" if self.final_grade.is_passing() else "FAILED"

    def with_grade(self, grade: Grade) -> Enrollment:
        """Return the graded replacement for this fact."""
        return replace(self, final_grade=grade)
