"""StudentService - the student registry."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from statistics import fmean

from registrar.logging import get_logger, mask_contact_details
from registrar.records import DepartmentType, IdGenerator, Student, student_ids
from registrar.records.standing import HONOR_ROLL_GPA
from registrar.students.exceptions import StudentExistsError, StudentNotFoundError

logger = get_logger("students")

StudentPredicate = Callable[[Student], bool]


# Predicate factories


def has_min_gpa(min_gpa: float) -> StudentPredicate:
    return lambda student: student.gpa >= min_gpa


def in_department(department: DepartmentType) -> StudentPredicate:
    return lambda student: student.major is department


def is_active(student: Student) -> bool:
    return student.active


class StudentService:
    """Registry of students.

    Every query is a predicate over ``filter_students`` and returns a new list
    in registration order.
    """

    def __init__(self, ids: IdGenerator | None = None) -> None:
        """Initialize an empty registry.

        Args:
            ids: Generator for new student IDs. Defaults to the process-wide one.
        """
        self._ids = ids or student_ids
        self._students: list[Student] = []

    # --- Registry ---

    def create_student(
        self,
        first_name: str,
        last_name: str,
        email: str | None,
        major: DepartmentType,
        phone: str | None = None,
        date_of_birth: date | None = None,
    ) -> Student:
        """Create a student with the next ID from this registry and register it.

        Returns:
            The registered Student
        """
        student = Student(
            first_name,
            last_name,
            email,
            major,
            phone=phone,
            date_of_birth=date_of_birth,
            ids=self._ids,
        )
        self.add_student(student)
        return student

    def add_student(self, student: Student | None) -> None:
        """Register a student. Missing students are ignored.

        Raises:
            StudentExistsError: If a student with the same ID is already registered
        """
        if student is None:
            return
        if any(s.student_id == student.student_id for s in self._students):
            raise StudentExistsError(f"Student with id '{student.student_id}' already exists")
        self._students.append(student)
        logger.info(
            "Registered %s (%s)",
            student.student_id,
            mask_contact_details(f"{student.full_name} <{student.email}>"),
        )

    def get_all_students(self) -> list[Student]:
        return list(self._students)

    def get_student(self, student_id: str) -> Student:
        """Get student by ID.

        Raises:
            StudentNotFoundError: If student doesn't exist
        """
        matches = self.filter_students(lambda s: s.student_id == student_id)
        if not matches:
            raise StudentNotFoundError(f"Student with id '{student_id}' not found")
        return matches[0]

    # --- Queries ---

    def filter_students(self, predicate: StudentPredicate) -> list[Student]:
        return [student for student in self._students if predicate(student)]

    def find_by_major(self, major: DepartmentType) -> list[Student]:
        return self.filter_students(in_department(major))

    def find_by_min_gpa(self, min_gpa: float) -> list[Student]:
        return self.filter_students(has_min_gpa(min_gpa))

    def find_honor_roll_students(self) -> list[Student]:
        return self.filter_students(lambda s: s.is_honor_roll)

    def find_by_major_and_gpa(self, major: DepartmentType, min_gpa: float) -> list[Student]:
        by_major = in_department(major)
        by_gpa = has_min_gpa(min_gpa)
        return self.filter_students(lambda s: by_major(s) and by_gpa(s))

    def find_active_students(self) -> list[Student]:
        return self.filter_students(is_active)

    def find_inactive_students(self) -> list[Student]:
        return self.filter_students(lambda s: not is_active(s))

    def find_students_in_departments(self, *departments: DepartmentType) -> list[Student]:
        return self.filter_students(lambda s: s.major in departments)

    def find_by_criteria(
        self,
        department: DepartmentType,
        min_gpa: float,
        active_only: bool,
    ) -> list[Student]:
        """Students in a department at or above a GPA, optionally active only."""

        def matches(student: Student) -> bool:
            return (
                student.major is department
                and student.gpa >= min_gpa
                and (not active_only or student.active)
            )

        return self.filter_students(matches)

    def search_by_name(self, text: str) -> list[Student]:
        """Case-insensitive substring match on first or last name."""
        needle = text.strip().lower()
        return self.filter_students(
            lambda s: needle in s.first_name.lower() or needle in s.last_name.lower()
        )

    def find_top_performers(self, top_n: int) -> list[Student]:
        """Honor-roll students by GPA, highest first, at most ``top_n``.

        Equal GPAs keep their registration order.
        """
        if top_n <= 0:
            return []
        honor_roll = self.filter_students(has_min_gpa(HONOR_ROLL_GPA))
        return sorted(honor_roll, key=lambda s: s.gpa, reverse=True)[:top_n]

    # --- Aggregates ---

    def count_students(self, predicate: StudentPredicate) -> int:
        return len(self.filter_students(predicate))

    @property
    def student_count(self) -> int:
        return len(self._students)

    def student_names(self) -> list[str]:
        return [student.full_name for student in self._students]

    def average_gpa(self) -> float:
        if not self._students:
            return 0.0
        return fmean(student.gpa for student in self._students)
