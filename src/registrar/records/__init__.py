"""Records - students, instructors, courses, grades and transcripts."""

from registrar.records.course import DEFAULT_CAPACITY, Course
from registrar.records.exceptions import (
    AlreadyGradedError,
    CourseFullError,
    DuplicateEnrollmentError,
    EnrollmentError,
    EnrollmentNotFoundError,
    EnrollmentRuleError,
    GradeRequiredError,
    InvalidEnrollmentError,
    InvalidGradeError,
    InvalidRangeError,
    RecordsError,
    RecordValidationError,
    StudentInactiveError,
)
from registrar.records.models import CourseSchedule, DepartmentType, Enrollment, Grade
from registrar.records.people import (
    IdGenerator,
    Instructor,
    Person,
    Student,
    instructor_ids,
    student_ids,
)
from registrar.records.transcript import Transcript

__all__ = [
    "DEFAULT_CAPACITY",
    "AlreadyGradedError",
    "Course",
    "CourseFullError",
    "CourseSchedule",
    "DepartmentType",
    "DuplicateEnrollmentError",
    "Enrollment",
    "EnrollmentError",
    "EnrollmentNotFoundError",
    "EnrollmentRuleError",
    "Grade",
    "GradeRequiredError",
    "IdGenerator",
    "Instructor",
    "InvalidEnrollmentError",
    "InvalidGradeError",
    "InvalidRangeError",
    "Person",
    "RecordValidationError",
    "RecordsError",
    "Student",
    "StudentInactiveError",
    "Transcript",
    "instructor_ids",
    "student_ids",
]
