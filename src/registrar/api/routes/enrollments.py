"""Enrollment endpoints: enroll, grade and drop."""

from fastapi import APIRouter, status

from registrar.api.dependencies import CatalogDep, EnrollmentServiceDep, StudentServiceDep
from registrar.api.models import (
    APIResponse,
    BatchEnrollmentCreate,
    DropResponse,
    EnrollmentCreate,
    EnrollmentResponse,
    GradeAssign,
    enrollment_to_response,
)
from registrar.records import Grade

router = APIRouter(prefix="/enrollments", tags=["enrollments"])


@router.get("", response_model=APIResponse[list[EnrollmentResponse]])
def list_enrollments(
    service: EnrollmentServiceDep,
    student_id: str | None = None,
    course_code: str | None = None,
) -> APIResponse[list[EnrollmentResponse]]:
    """List enrollments with optional filters."""
    if student_id is not None:
        enrollments = service.student_enrollments(student_id)
    else:
        enrollments = service.all_enrollments()
    if course_code is not None:
        enrollments = [e for e in enrollments if e.course_code == course_code]
    return APIResponse(data=[enrollment_to_response(e) for e in enrollments])


@router.post(
    "",
    response_model=APIResponse[EnrollmentResponse],
    status_code=status.HTTP_201_CREATED,
)
def enroll(
    request: EnrollmentCreate,
    service: EnrollmentServiceDep,
    students: StudentServiceDep,
    catalog: CatalogDep,
) -> APIResponse[EnrollmentResponse]:
    """Enroll a student in a course."""
    student = students.get_student(request.student_id)
    course = catalog.get_course(request.course_code)
    enrollment = service.enroll(student, course)
    return APIResponse(data=enrollment_to_response(enrollment))


@router.post(
    "/batch",
    response_model=APIResponse[list[EnrollmentResponse]],
    status_code=status.HTTP_201_CREATED,
)
def enroll_batch(
    request: BatchEnrollmentCreate,
    service: EnrollmentServiceDep,
    students: StudentServiceDep,
    catalog: CatalogDep,
) -> APIResponse[list[EnrollmentResponse]]:
    """Enroll a student in several courses; full courses are skipped."""
    student = students.get_student(request.student_id)
    courses = [catalog.get_course(code) for code in request.course_codes]
    created = service.enroll_batch(student, *courses)
    return APIResponse(data=[enrollment_to_response(e) for e in created])


@router.put(
    "/{student_id}/{course_code}/grade",
    response_model=APIResponse[EnrollmentResponse],
)
def assign_grade(
    student_id: str,
    course_code: str,
    request: GradeAssign,
    service: EnrollmentServiceDep,
    students: StudentServiceDep,
    catalog: CatalogDep,
) -> APIResponse[EnrollmentResponse]:
    """Grade an enrollment and add the grade to the student's GPA."""
    student = students.get_student(student_id)
    course = catalog.get_course(course_code)
    service.record_grade(student, course.course_code, Grade[request.grade])
    enrollment = service.get_enrollment(student.student_id, course.course_code)
    return APIResponse(data=enrollment_to_response(enrollment))


@router.delete("/{student_id}/{course_code}", response_model=APIResponse[DropResponse])
def drop_course(
    student_id: str,
    course_code: str,
    service: EnrollmentServiceDep,
    catalog: CatalogDep,
) -> APIResponse[DropResponse]:
    """Drop an ungraded enrollment."""
    course = catalog.get_course(course_code)
    dropped = service.drop_course(student_id, course.course_code)
    return APIResponse(data=DropResponse(dropped=dropped))
