"""Custom exceptions for student records and enrollment."""


class RecordsError(Exception):
    """Base exception for all records errors."""


class RecordValidationError(RecordsError, ValueError):
    """An argument was absent or invalid."""


class InvalidRangeError(RecordValidationError):
    """Percentage falls outside every grade band."""


class InvalidGradeError(RecordValidationError):
    """Grade value is missing or unusable."""


class EnrollmentError(RecordsError):
    """Base exception for enrollment failures."""


class InvalidEnrollmentError(EnrollmentError, RecordValidationError):
    """Student or course missing from an enrollment request."""


class GradeRequiredError(EnrollmentError, RecordValidationError):
    """A grade must be supplied to grade an enrollment."""


class EnrollmentRuleError(EnrollmentError):
    """An enrollment business rule was violated."""


class StudentInactiveError(EnrollmentRuleError):
    """Inactive students cannot enroll."""


class CourseFullError(EnrollmentRuleError):
    """Course has no free seats."""

    def __init__(self, course_code: str, capacity: int) -> None:
        super().__init__(f"Course {course_code} is full (capacity: {capacity})")
        self.course_code = course_code
        self.capacity = capacity


class DuplicateEnrollmentError(EnrollmentRuleError):
    """Student already has an enrollment for this course."""


class EnrollmentNotFoundError(EnrollmentRuleError):
    """No enrollment exists for the student and course."""


class AlreadyGradedError(EnrollmentRuleError):
    """The enrollment already carries a recorded grade."""
