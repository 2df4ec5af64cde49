"""People on record: students and instructors.

``Person`` is a closed hierarchy. Exactly two concrete kinds exist,
``Student`` and ``Instructor``; the base cannot be instantiated and no further
subclass can be declared once both are defined.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import Any, ClassVar

from registrar.records import standing
from registrar.records.exceptions import InvalidGradeError
from registrar.records.models import DepartmentType, Grade

STUDENT_PREFIX = "STU"
INSTRUCTOR_PREFIX = "INS"


class IdGenerator:
    """Monotonic identifier source: ``<prefix>`` + 5-digit zero-padded counter.

    Generators with the same prefix draw from one counter, so an ID is never
    issued twice within a process. Counters live only in memory and restart
    with the process. ``reset`` is provided for tests.
    """

    _counters: ClassVar[dict[str, int]] = {}

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        self._counters.setdefault(prefix, 0)

    @property
    def last_issued(self) -> int:
        return self._counters[self.prefix]

    def next_id(self) -> str:
        self._counters[self.prefix] += 1
        return standing.generate_enrollment_id(self.prefix, self._counters[self.prefix])

    def reset(self, start: int = 0) -> None:
        self._counters[self.prefix] = start

    def __repr__(self) -> str:
        return f"<IdGenerator(prefix={self.prefix!r}, last_issued={self.last_issued})>"


# Process-wide defaults
student_ids = IdGenerator(STUDENT_PREFIX)
instructor_ids = IdGenerator(INSTRUCTOR_PREFIX)


class Person:
    """Contact details shared by students and instructors."""

    _permitted: ClassVar[frozenset[str]] = frozenset({"Student", "Instructor"})
    _declared: ClassVar[set[str]] = set()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__name__ not in Person._permitted or cls.__name__ in Person._declared:
            raise TypeError(f"Person is closed; cannot declare subclass {cls.__name__!r}")
        Person._declared.add(cls.__name__)

    def __new__(cls, *args: Any, **kwargs: Any) -> Person:
        if cls is Person:
            raise TypeError("Person cannot be instantiated directly")
        return super().__new__(cls)

    def __init__(
        self,
        first_name: str,
        last_name: str,
        email: str | None = None,
        phone: str | None = None,
        date_of_birth: date | None = None,
    ) -> None:
        self.first_name = first_name
        self.last_name = last_name
        self.email = email
        self.phone = phone
        self.date_of_birth = date_of_birth

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def role(self) -> str:
        raise NotImplementedError

    def age(self, today: date | None = None) -> int:
        """Whole years since birth, or 0 when the birth date is unknown."""
        if self.date_of_birth is None:
            return 0
        today = today or date.today()
        years = today.year - self.date_of_birth.year
        if (today.month, today.day) < (self.date_of_birth.month, self.date_of_birth.day):
            years -= 1
        return years

    def __str__(self) -> str:
        return f"Person{{name='{self.full_name}', email='{self.email}'}}"


class Student(Person):
    """A student with a grade history and a derived GPA.

    ``gpa`` is recomputed from the full history on every grade change and
    cannot be assigned. ``grades`` always returns a copy.
    """

    def __init__(
        self,
        first_name: str,
        last_name: str,
        email: str | None,
        major: DepartmentType,
        phone: str | None = None,
        date_of_birth: date | None = None,
        ids: IdGenerator | None = None,
        enrollment_date: date | None = None,
    ) -> None:
        super().__init__(first_name, last_name, email, phone, date_of_birth)
        self._student_id = (ids or student_ids).next_id()
        self.major = major
        self._grades: list[Grade] = []
        self._enrollment_date = enrollment_date or date.today()
        self._gpa = 0.0
        self.active = True

    @property
    def student_id(self) -> str:
        return self._student_id

    @property
    def enrollment_date(self) -> date:
        return self._enrollment_date

    @property
    def gpa(self) -> float:
        return self._gpa

    @property
    def grades(self) -> list[Grade]:
        return list(self._grades)

    @property
    def role(self) -> str:
        return "Student"

    def add_grade(self, grade: Grade) -> None:
        """Record one grade and recompute the GPA.

        Raises:
            InvalidGradeError: If grade is None.
        """
        if grade is None:
            raise InvalidGradeError("Grade cannot be empty")
        self._grades.append(grade)
        self._recalculate_gpa()

    def add_grades(self, *grades: Grade | None) -> None:
        """Record several grades at once; missing entries are skipped."""
        self._grades.extend(g for g in grades if g is not None)
        self._recalculate_gpa()

    def extend_grades(self, grades: Iterable[Grade] | None) -> None:
        if grades is None:
            return
        self._grades.extend(grades)
        self._recalculate_gpa()

    def _recalculate_gpa(self) -> None:
        self._gpa = standing.calculate_gpa(self._grades)

    # Derived metrics

    @property
    def total_grade_points(self) -> float:
        return standing.total_grade_points(self._grades)

    @property
    def academic_standing(self) -> str:
        return standing.academic_standing(self._gpa)

    @property
    def is_honor_roll(self) -> bool:
        return standing.is_honor_roll(self._gpa)

    @property
    def enrollment_status(self) -> str:
        return standing.enrollment_status(self.active)

    @property
    def formatted_enrollment_info(self) -> str:
        return standing.format_enrollment_info(
            self._student_id, self._enrollment_date, self.active
        )

    def days_since_enrollment(self, today: date | None = None) -> int:
        return standing.days_since_enrollment(self._enrollment_date, today)

    @property
    def detailed_info(self) -> str:
        return (
            f"{Person.__str__(self)}, Student ID: {self._student_id}, "
            f"Major: {self.major}, GPA: {self._gpa:.2f}"
        )

    def __str__(self) -> str:
        return (
            f"Student{{id='{self._student_id}', name='{self.full_name}', "
            f"major={self.major}, gpa={self._gpa:.2f}}}"
        )

    def __repr__(self) -> str:
        return f"<Student(id={self._student_id!r}, name={self.full_name!r})>"


class Instructor(Person):
    """A member of teaching staff."""

    def __init__(
        self,
        first_name: str,
        last_name: str,
        email: str | None,
        department: DepartmentType,
        salary: float,
        phone: str | None = None,
        date_of_birth: date | None = None,
        ids: IdGenerator | None = None,
    ) -> None:
        super().__init__(first_name, last_name, email, phone, date_of_birth)
        self._instructor_id = (ids or instructor_ids).next_id()
        self.department = department
        self.salary = salary
        self._office_hours: tuple[str, ...] = ()
        self._courses_taught: list[str] = []

    @property
    def instructor_id(self) -> str:
        return self._instructor_id

    @property
    def role(self) -> str:
        return f"Instructor - {self.department.full_name}"

    @property
    def profile(self) -> str:
        return f"{self.full_name} - {self.department.code} Department"

    @property
    def office_hours(self) -> tuple[str, ...]:
        return self._office_hours

    def set_office_hours(self, *hours: str) -> None:
        self._office_hours = tuple(hours)

    def add_course(self, course_code: str) -> None:
        if course_code not in self._courses_taught:
            self._courses_taught.append(course_code)

    @property
    def courses_taught(self) -> list[str]:
        return list(self._courses_taught)

    def __str__(self) -> str:
        return (
            f"Instructor{{id='{self._instructor_id}', name='{self.full_name}', "
            f"department={self.department}}}"
        )

    def __repr__(self) -> str:
        return f"<Instructor(id={self._instructor_id!r}, name={self.full_name!r})>"
