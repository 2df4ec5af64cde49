"""Course entity with its live roster."""

from __future__ import annotations

from registrar.records.exceptions import CourseFullError, RecordValidationError
from registrar.records.models import CourseSchedule, DepartmentType
from registrar.records.people import Instructor, Student

DEFAULT_CAPACITY = 30


class Course:
    """A course offering.

    The roster is the single source of truth for seat usage:
    ``enrolled == len(roster) <= capacity`` and a student appears at most once.
    The instructor is a shared reference the course does not own.
    """

    def __init__(
        self,
        course_code: str,
        course_name: str,
        department: DepartmentType,
        credits: int,
        capacity: int = DEFAULT_CAPACITY,
        instructor: Instructor | None = None,
        schedule: CourseSchedule | None = None,
        prerequisites: tuple[str, ...] = (),
    ) -> None:
        if capacity < 0:
            raise RecordValidationError(f"Capacity cannot be negative: {capacity}")
        self.course_code = course_code
        self.course_name = course_name
        self.department = department
        self.credits = credits
        self._capacity = capacity
        self.instructor = instructor
        self.schedule = schedule
        self._prerequisites = tuple(prerequisites)
        self._roster: list[Student] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @capacity.setter
    def capacity(self, value: int) -> None:
        if value < len(self._roster):
            raise RecordValidationError(
                f"Capacity {value} is below current enrollment {len(self._roster)}"
            )
        self._capacity = value

    @property
    def enrolled(self) -> int:
        return len(self._roster)

    @property
    def is_full(self) -> bool:
        return len(self._roster) >= self._capacity

    @property
    def available_seats(self) -> int:
        return self._capacity - len(self._roster)

    @property
    def students(self) -> list[Student]:
        return list(self._roster)

    @property
    def prerequisites(self) -> tuple[str, ...]:
        return self._prerequisites

    def set_prerequisites(self, *course_codes: str) -> None:
        """Record prerequisite course codes. They are informational only."""
        self._prerequisites = tuple(course_codes)

    def has_student(self, student: Student) -> bool:
        return any(s.student_id == student.student_id for s in self._roster)

    def add_student(self, student: Student) -> bool:
        """Give the student a seat.

        Returns:
            True if added, False if the student already holds a seat.

        Raises:
            CourseFullError: If no seats remain.
        """
        if self.is_full:
            raise CourseFullError(self.course_code, self._capacity)
        if self.has_student(student):
            return False
        self._roster.append(student)
        return True

    def add_students(self, *students: Student) -> int:
        """Seat students in order, stopping at the first one that does not fit.

        Returns:
            Number of students newly seated.
        """
        count = 0
        for student in students:
            try:
                if self.add_student(student):
                    count += 1
            except CourseFullError:
                break
        return count

    def remove_student(self, student: Student) -> bool:
        for index, seated in enumerate(self._roster):
            if seated.student_id == student.student_id:
                del self._roster[index]
                return True
        return False

    def course_info(self) -> str:
        lines = [
            f"Course: {self.course_code}",
            f"Name: {self.course_name}",
            f"Department: {self.department.full_name}",
            f"Credits: {self.credits}",
            f"Enrollment: {self.enrolled}/{self._capacity}",
        ]
        if self.instructor is not None:
            lines.append(f"Instructor: {self.instructor.full_name}")
        if self.schedule is not None:
            lines.append(f"Schedule: {self.schedule.formatted}")
        if self._prerequisites:
            lines.append(f"Prerequisites: {' '.join(self._prerequisites)}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return (
            f"Course{{code='{self.course_code}', name='{self.course_name}', "
            f"enrolled={self.enrolled}/{self._capacity}}}"
        )

    def __repr__(self) -> str:
        return f"<Course(code={self.course_code!r}, enrolled={self.enrolled}/{self._capacity})>"
