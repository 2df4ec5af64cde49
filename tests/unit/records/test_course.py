"""Unit tests for Course."""

from collections.abc import Callable
from datetime import time

import pytest

from registrar.records import (
    Course,
    CourseFullError,
    CourseSchedule,
    DepartmentType,
    IdGenerator,
    Instructor,
    RecordValidationError,
    Student,
)


@pytest.mark.unit
class TestCourseCapacity:
    """Tests for seats and the roster."""

    def test_defaults(self) -> None:
        """A course defaults to 30 seats and no roster."""
        course = Course("CS101", "Intro", DepartmentType.COMPUTER_SCIENCE, 3)
        assert course.capacity == 30
        assert course.enrolled == 0
        assert course.available_seats == 30
        assert not course.is_full

    def test_negative_capacity_rejected(self) -> None:
        """Capacity cannot be negative."""
        with pytest.raises(RecordValidationError):
            Course("CS101", "Intro", DepartmentType.COMPUTER_SCIENCE, 3, capacity=-1)

    def test_zero_capacity_is_full(self, make_course: Callable[..., Course]) -> None:
        """A course with no seats is full from the start."""
        assert make_course(capacity=0).is_full

    def test_add_student_until_full(
        self, make_course: Callable[..., Course], make_student: Callable[..., Student]
    ) -> None:
        """Seats are taken until the course is full."""
        course = make_course(capacity=2)
        assert course.add_student(make_student())
        assert course.add_student(make_student("Bob", "Jones"))

        assert course.is_full
        with pytest.raises(CourseFullError, match=r"Course CS101 is full \(capacity: 2\)"):
            course.add_student(make_student("Carol", "White"))
        assert course.enrolled == 2

    def test_course_full_error_fields(self) -> None:
        """CourseFullError carries the course and its capacity."""
        error = CourseFullError("CS101", 2)
        assert error.course_code == "CS101"
        assert error.capacity == 2

    def test_add_same_student_twice(
        self, make_course: Callable[..., Course], make_student: Callable[..., Student]
    ) -> None:
        """A student holds at most one seat."""
        course = make_course()
        student = make_student()
        assert course.add_student(student)
        assert not course.add_student(student)
        assert course.enrolled == 1

    def test_add_students_stops_when_full(
        self, make_course: Callable[..., Course], make_student: Callable[..., Student]
    ) -> None:
        """Bulk seating stops at the first student that does not fit."""
        course = make_course(capacity=2)
        added = course.add_students(make_student(), make_student("Bob"), make_student("Carol"))
        assert added == 2
        assert course.enrolled == 2

    def test_remove_student(
        self, make_course: Callable[..., Course], make_student: Callable[..., Student]
    ) -> None:
        """Removing frees the seat."""
        course = make_course(capacity=1)
        student = make_student()
        course.add_student(student)

        assert course.remove_student(student)
        assert not course.remove_student(student)
        assert course.available_seats == 1

    def test_students_returns_copy(
        self, make_course: Callable[..., Course], make_student: Callable[..., Student]
    ) -> None:
        """The roster cannot be changed through the returned list."""
        course = make_course()
        course.add_student(make_student())
        course.students.clear()
        assert course.enrolled == 1

    def test_capacity_cannot_drop_below_enrolled(
        self, make_course: Callable[..., Course], make_student: Callable[..., Student]
    ) -> None:
        """Shrinking capacity below the roster size is rejected."""
        course = make_course(capacity=3)
        course.add_students(make_student(), make_student("Bob"))

        with pytest.raises(RecordValidationError):
            course.capacity = 1
        course.capacity = 2
        assert course.is_full


@pytest.mark.unit
class TestCourseInfo:
    """Tests for course details and prerequisites."""

    def test_prerequisites_informational(self, make_course: Callable[..., Course]) -> None:
        """Prerequisites are stored as given."""
        course = make_course("CS201")
        course.set_prerequisites("CS101")
        assert course.prerequisites == ("CS101",)

    def test_course_info(self) -> None:
        """Info lists the course details."""
        instructor = Instructor(
            "Sarah", "Johnson", None, DepartmentType.COMPUTER_SCIENCE, 75000,
            ids=IdGenerator("INS"),
        )  # fmt: skip
        course = Course(
            "CS201",
            "Data Structures",
            DepartmentType.COMPUTER_SCIENCE,
            4,
            capacity=25,
            instructor=instructor,
            schedule=CourseSchedule("Wednesday", time(11, 0), time(12, 30), "Room 102"),
            prerequisites=("CS101",),
        )

        info = course.course_info()
        assert "Course: CS201" in info
        assert "Department: Computer Science" in info
        assert "Enrollment: 0/25" in info
        assert "Instructor: Sarah Johnson" in info
        assert "Schedule: Wednesday 11:00-12:30 in Room 102" in info
        assert "Prerequisites: CS101" in info
