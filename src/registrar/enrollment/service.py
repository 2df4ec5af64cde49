"""EnrollmentService - owns enrollment facts and course seat bookkeeping."""

from __future__ import annotations

from datetime import date

from registrar.logging import get_logger
from registrar.records import (
    AlreadyGradedError,
    Course,
    CourseFullError,
    DuplicateEnrollmentError,
    Enrollment,
    EnrollmentNotFoundError,
    Grade,
    GradeRequiredError,
    InvalidEnrollmentError,
    Student,
    StudentInactiveError,
)

logger = get_logger("enrollment")


class EnrollmentService:
    """Main API for enrollment operations.

    Owns the enrollment facts exclusively; every query returns a new list.
    Courses are shared with the catalog, and the course roster decides
    whether a course is full.
    """

    def __init__(self) -> None:
        self._enrollments: list[Enrollment] = []
        # The course each enrollment holds a seat in, so a drop frees that seat.
        self._seats: dict[tuple[str, str], Course] = {}

    # --- Enrollment lifecycle ---

    def enroll(self, student: Student | None, course: Course | None) -> Enrollment:
        """Enroll a student in a course.

        Capacity is checked before duplication, so a student re-enrolling in
        a full course sees CourseFullError.

        Args:
            student: The student to enroll
            course: The course to take a seat in

        Returns:
            The new, ungraded enrollment

        Raises:
            InvalidEnrollmentError: If student or course is missing
            StudentInactiveError: If the student is not active
            CourseFullError: If the course has no free seats
            DuplicateEnrollmentError: If the student already has an enrollment for the course
        """
        if student is None:
            raise InvalidEnrollmentError("Student cannot be empty")
        if course is None:
            raise InvalidEnrollmentError("Course cannot be empty")
        if not student.active:
            raise StudentInactiveError(f"Student {student.student_id} is not active")
        if course.is_full:
            raise CourseFullError(course.course_code, course.capacity)
        if self.is_enrolled(student.student_id, course.course_code):
            raise DuplicateEnrollmentError(
                f"Student {student.student_id} already enrolled in {course.course_code}"
            )

        course.add_student(student)
        enrollment = Enrollment(
            student_id=student.student_id,
            course_code=course.course_code,
            enrollment_date=date.today(),
        )
        self._enrollments.append(enrollment)
        self._seats[(student.student_id, course.course_code)] = course
        logger.info(
            "Enrolled %s in %s (%d/%d)",
            student.student_id,
            course.course_code,
            course.enrolled,
            course.capacity,
        )
        return enrollment

    def enroll_batch(self, student: Student | None, *courses: Course) -> list[Enrollment]:
        """Enroll a student in several courses, in order.

        Full courses are skipped. Any other failure stops the batch; enrollments
        already made in the batch are kept.

        Returns:
            Enrollments created by this batch
        """
        created: list[Enrollment] = []
        for course in courses:
            try:
                created.append(self.enroll(student, course))
            except CourseFullError as e:
                logger.warning("Skipping full course: %s", e)
        return created

    def assign_grade(self, student_id: str, course_code: str, grade: Grade | None) -> None:
        """Grade an enrollment by replacing its fact with a graded one.

        The student's own grade history is not touched; see ``record_grade``.

        Raises:
            GradeRequiredError: If grade is missing
            EnrollmentNotFoundError: If no enrollment matches
        """
        if grade is None:
            raise GradeRequiredError("Grade cannot be empty")

        existing = self._find(student_id, course_code)
        if existing is None:
            raise EnrollmentNotFoundError(
                f"Enrollment for student '{student_id}' in '{course_code}' not found"
            )

        self._enrollments.remove(existing)
        self._enrollments.append(existing.with_grade(grade))
        logger.info("Graded %s in %s: %s", student_id, course_code, grade.label)

    def record_grade(self, student: Student, course_code: str, grade: Grade | None) -> None:
        """Grade the enrollment and add the grade to the student's history.

        Each graded enrollment contributes exactly one grade to the history, so
        a recorded result cannot be replaced here.

        Raises:
            GradeRequiredError: If grade is missing
            EnrollmentNotFoundError: If no enrollment matches; the student is left unchanged
            AlreadyGradedError: If the enrollment is already graded; nothing is changed
        """
        if grade is None:
            raise GradeRequiredError("Grade cannot be empty")
        if self.get_enrollment(student.student_id, course_code).is_graded:
            raise AlreadyGradedError(
                f"Enrollment for student '{student.student_id}' in '{course_code}' is already graded"
            )

        self.assign_grade(student.student_id, course_code, grade)
        student.add_grade(grade)

    def drop_course(self, student_id: str, course_code: str) -> bool:
        """Drop an ungraded enrollment.

        Graded enrollments are locked. The student also gives up the seat in
        the course they were enrolled through.

        Returns:
            True if dropped, False if no enrollment exists or it is graded
        """
        enrollment = self._find(student_id, course_code)
        if enrollment is None or enrollment.is_graded:
            logger.debug("Drop refused for %s in %s", student_id, course_code)
            return False

        self._enrollments.remove(enrollment)
        course = self._seats.pop((student_id, course_code), None)
        if course is not None:
            for seated in course.students:
                if seated.student_id == student_id:
                    course.remove_student(seated)
                    break
        logger.info("Dropped %s from %s", student_id, course_code)
        return True

    # --- Queries ---

    def student_enrollments(self, student_id: str) -> list[Enrollment]:
        return [e for e in self._enrollments if e.student_id == student_id]

    def course_enrollments(self, course_code: str) -> list[Enrollment]:
        return [e for e in self._enrollments if e.course_code == course_code]

    def all_enrollments(self) -> list[Enrollment]:
        return list(self._enrollments)

    def get_enrollment(self, student_id: str, course_code: str) -> Enrollment:
        """Get the enrollment for a student and course.

        Raises:
            EnrollmentNotFoundError: If no enrollment matches
        """
        enrollment = self._find(student_id, course_code)
        if enrollment is None:
            raise EnrollmentNotFoundError(
                f"Enrollment for student '{student_id}' in '{course_code}' not found"
            )
        return enrollment

    def is_enrolled(self, student_id: str, course_code: str) -> bool:
        return self._find(student_id, course_code) is not None

    @property
    def enrollment_count(self) -> int:
        return len(self._enrollments)

    def _find(self, student_id: str, course_code: str) -> Enrollment | None:
        for enrollment in self._enrollments:
            if enrollment.student_id == student_id and enrollment.course_code == course_code:
                return enrollment
        return None
