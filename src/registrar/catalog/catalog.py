"""Catalog - the course and instructor registry callers look records up in."""

from __future__ import annotations

from registrar.catalog.exceptions import (
    CourseExistsError,
    CourseNotFoundError,
    InstructorNotFoundError,
)
from registrar.logging import get_logger
from registrar.records import Course, Instructor

logger = get_logger("catalog")


class Catalog:
    """Courses by code and instructors by ID, in insertion order.

    Course lookups ignore case; the enrollment and student services compare
    course codes exactly, so callers resolve codes here first.
    """

    def __init__(self) -> None:
        self._courses: dict[str, Course] = {}
        self._instructors: dict[str, Instructor] = {}

    # --- Courses ---

    def add_course(self, course: Course) -> Course:
        """Add a course.

        Raises:
            CourseExistsError: If a course with the same code (any case) exists
        """
        key = course.course_code.upper()
        if key in self._courses:
            raise CourseExistsError(f"Course '{course.course_code}' already exists")
        self._courses[key] = course
        logger.debug("Catalogued course %s", course.course_code)
        return course

    def get_course(self, course_code: str) -> Course:
        """Get course by code, ignoring case.

        Raises:
            CourseNotFoundError: If course doesn't exist
        """
        course = self._courses.get(course_code.strip().upper())
        if course is None:
            raise CourseNotFoundError(f"Course with code '{course_code}' not found")
        return course

    def list_courses(self) -> list[Course]:
        return list(self._courses.values())

    # --- Instructors ---

    def add_instructor(self, instructor: Instructor) -> Instructor:
        self._instructors[instructor.instructor_id] = instructor
        logger.debug("Catalogued instructor %s", instructor.instructor_id)
        return instructor

    def get_instructor(self, instructor_id: str) -> Instructor:
        """Get instructor by ID.

        Raises:
            InstructorNotFoundError: If instructor doesn't exist
        """
        instructor = self._instructors.get(instructor_id)
        if instructor is None:
            raise InstructorNotFoundError(f"Instructor with id '{instructor_id}' not found")
        return instructor

    def list_instructors(self) -> list[Instructor]:
        return list(self._instructors.values())

    def assign_instructor(self, course_code: str, instructor_id: str) -> Course:
        """Make an instructor the lecturer for a course."""
        course = self.get_course(course_code)
        instructor = self.get_instructor(instructor_id)
        course.instructor = instructor
        instructor.add_course(course.course_code)
        return course
