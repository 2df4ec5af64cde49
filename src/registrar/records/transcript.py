"""Point-in-time transcript snapshots."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from registrar.records.exceptions import RecordValidationError
from registrar.records.models import DepartmentType, Enrollment
from registrar.records.people import Student

CREDITS_PER_ENROLLMENT = 3
REPORT_WIDTH = 50


@dataclass(frozen=True, eq=False)
class Transcript:
    """Immutable academic record.

    Two transcripts are equal when they belong to the same student and were
    generated on the same date, whatever their contents.
    """

    student_id: str
    student_name: str
    major: DepartmentType
    gpa: float
    total_credits: int
    enrollments: tuple[Enrollment, ...] = ()
    generated_date: date = field(default_factory=date.today)

    def __post_init__(self) -> None:
        if not self.student_id:
            raise RecordValidationError("Student ID cannot be empty")
        if not self.student_name:
            raise RecordValidationError("Student name cannot be empty")
        if self.major is None:
            raise RecordValidationError("Major cannot be empty")
        object.__setattr__(self, "enrollments", tuple(self.enrollments))

    @classmethod
    def create_from_student(
        cls,
        student: Student,
        enrollments: Iterable[Enrollment] | None,
        today: date | None = None,
    ) -> Transcript:
        """Snapshot a student's record.

        Credits are a flat three per enrollment; per-course credit values are
        not consulted.
        """
        snapshot = tuple(enrollments or ())
        return cls(
            student_id=student.student_id,
            student_name=student.full_name,
            major=student.major,
            gpa=student.gpa,
            total_credits=len(snapshot) * CREDITS_PER_ENROLLMENT,
            enrollments=snapshot,
            generated_date=today or date.today(),
        )

    def generate_report(self) -> str:
        heavy = "=" * REPORT_WIDTH
        light = "-" * REPORT_WIDTH
        lines = [
            heavy,
            "OFFICIAL TRANSCRIPT",
            heavy,
            "",
            f"Student ID: {self.student_id}",
            f"Name: {self.student_name}",
            f"Major: {self.major.full_name}",
            f"GPA: {self.gpa:.2f}",
            f"Total Credits: {self.total_credits}",
            f"Generated: {self.generated_date.isoformat()}",
            "",
            "COURSE HISTORY:",
            light,
        ]
        for enrollment in self.enrollments:
            grade = enrollment.final_grade.label if enrollment.final_grade else "In Progress"
            lines.append(
                f"{enrollment.course_code:<10}  {enrollment.enrollment_date.isoformat():<30}  {grade}"
            )
        lines.append(heavy)
        return "\n".join(lines) + "\n"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transcript):
            return NotImplemented
        return (self.student_id, self.generated_date) == (other.student_id, other.generated_date)

    def __hash__(self) -> int:
        return hash((self.student_id, self.generated_date))

    def __str__(self) -> str:
        return (
            f"Transcript{{student='{self.student_name}', gpa={self.gpa:.2f}, "
            f"credits={self.total_credits}, date={self.generated_date.isoformat()}}}"
        )
