"""Pydantic models for REST API."""

from datetime import date
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, field_validator

from registrar import validation
from registrar.records import DepartmentType, Grade, RecordValidationError

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None


def _department(value: str) -> str:
    try:
        return DepartmentType.from_code(value).name
    except RecordValidationError as e:
        raise ValueError(str(e)) from e


# Student models


class StudentCreate(BaseModel):
    """Request model for registering a student."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=255)
    major: str = Field(..., description="Department code (CS) or name (COMPUTER_SCIENCE)")
    phone: str | None = None
    date_of_birth: date | None = None

    @field_validator("first_name", "last_name")
    @classmethod
    def clean_name(cls, value: str) -> str:
        cleaned = validation.sanitize(value)
        if not cleaned:
            raise ValueError("must not be blank")
        return cleaned

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        if not validation.is_valid_email(value):
            raise ValueError("invalid email format")
        return value

    @field_validator("phone")
    @classmethod
    def check_phone(cls, value: str | None) -> str | None:
        if value is not None and not validation.is_valid_phone(value):
            raise ValueError("invalid phone number")
        return value

    @field_validator("major")
    @classmethod
    def check_major(cls, value: str) -> str:
        return _department(value)


class StudentUpdate(BaseModel):
    """Request model for updating a student (partial update)."""

    active: bool | None = None
    major: str | None = None

    @field_validator("major")
    @classmethod
    def check_major(cls, value: str | None) -> str | None:
        return None if value is None else _department(value)


class StudentResponse(BaseModel):
    """Response model for a student."""

    student_id: str
    first_name: str
    last_name: str
    full_name: str
    email: str | None
    phone: str | None
    major: str
    gpa: float
    active: bool
    enrollment_date: date
    academic_standing: str
    honor_roll: bool
    grades: list[str]


def student_to_response(student: Any) -> StudentResponse:
    """Convert a Student to StudentResponse."""
    return StudentResponse(
        student_id=student.student_id,
        first_name=student.first_name,
        last_name=student.last_name,
        full_name=student.full_name,
        email=student.email,
        phone=student.phone,
        major=student.major.code,
        gpa=student.gpa,
        active=student.active,
        enrollment_date=student.enrollment_date,
        academic_standing=student.academic_standing,
        honor_roll=student.is_honor_roll,
        grades=[g.label for g in student.grades],
    )


# Course models


class CourseResponse(BaseModel):
    """Response model for a course."""

    course_code: str
    course_name: str
    department: str
    credits: int
    capacity: int
    enrolled: int
    available_seats: int
    instructor: str | None
    schedule: str | None
    prerequisites: list[str]


def course_to_response(course: Any) -> CourseResponse:
    """Convert a Course to CourseResponse."""
    return CourseResponse(
        course_code=course.course_code,
        course_name=course.course_name,
        department=course.department.code,
        credits=course.credits,
        capacity=course.capacity,
        enrolled=course.enrolled,
        available_seats=course.available_seats,
        instructor=course.instructor.full_name if course.instructor else None,
        schedule=course.schedule.formatted if course.schedule else None,
        prerequisites=list(course.prerequisites),
    )


class InstructorResponse(BaseModel):
    """Response model for an instructor."""

    instructor_id: str
    full_name: str
    email: str | None
    department: str
    office_hours: list[str]
    courses_taught: list[str]


def instructor_to_response(instructor: Any) -> InstructorResponse:
    """Convert an Instructor to InstructorResponse."""
    return InstructorResponse(
        instructor_id=instructor.instructor_id,
        full_name=instructor.full_name,
        email=instructor.email,
        department=instructor.department.code,
        office_hours=list(instructor.office_hours),
        courses_taught=instructor.courses_taught,
    )


# Enrollment models


class EnrollmentCreate(BaseModel):
    """Request model for enrolling a student in a course."""

    student_id: str = Field(..., min_length=1)
    course_code: str = Field(..., min_length=1)


class BatchEnrollmentCreate(BaseModel):
    """Request model for enrolling a student in several courses."""

    student_id: str = Field(..., min_length=1)
    course_codes: list[str] = Field(..., min_length=1)


class GradeAssign(BaseModel):
    """Request model for grading an enrollment."""

    grade: str = Field(..., description="Letter label such as A+ or B-")

    @field_validator("grade")
    @classmethod
    def check_grade(cls, value: str) -> str:
        try:
            return Grade.from_label(value).name
        except RecordValidationError as e:
            raise ValueError(str(e)) from e


class EnrollmentResponse(BaseModel):
    """Response model for an enrollment."""

    student_id: str
    course_code: str
    enrollment_date: date
    final_grade: str | None
    status: str


def enrollment_to_response(enrollment: Any) -> EnrollmentResponse:
    """Convert an Enrollment to EnrollmentResponse."""
    return EnrollmentResponse(
        student_id=enrollment.student_id,
        course_code=enrollment.course_code,
        enrollment_date=enrollment.enrollment_date,
        final_grade=enrollment.final_grade.label if enrollment.final_grade else None,
        status=enrollment.status,
    )


class DropResponse(BaseModel):
    """Response model for a drop request."""

    dropped: bool


# Transcript and report models


class TranscriptResponse(BaseModel):
    """Response model for a transcript."""

    student_id: str
    student_name: str
    major: str
    gpa: float
    total_credits: int
    generated_date: date
    enrollments: list[EnrollmentResponse]
    report: str


def transcript_to_response(transcript: Any) -> TranscriptResponse:
    """Convert a Transcript to TranscriptResponse."""
    return TranscriptResponse(
        student_id=transcript.student_id,
        student_name=transcript.student_name,
        major=transcript.major.code,
        gpa=transcript.gpa,
        total_credits=transcript.total_credits,
        generated_date=transcript.generated_date,
        enrollments=[enrollment_to_response(e) for e in transcript.enrollments],
        report=transcript.generate_report(),
    )


class MajorCountResponse(BaseModel):
    """Number of students in one major."""

    major: str
    name: str
    students: int
