"""Course catalog endpoints."""

from fastapi import APIRouter

from registrar.api.dependencies import CatalogDep, EnrollmentServiceDep
from registrar.api.models import (
    APIResponse,
    CourseResponse,
    EnrollmentResponse,
    course_to_response,
    enrollment_to_response,
)

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=APIResponse[list[CourseResponse]])
def list_courses(catalog: CatalogDep) -> APIResponse[list[CourseResponse]]:
    """List all courses."""
    return APIResponse(data=[course_to_response(c) for c in catalog.list_courses()])


@router.get("/{course_code}", response_model=APIResponse[CourseResponse])
def get_course(course_code: str, catalog: CatalogDep) -> APIResponse[CourseResponse]:
    """Get a course by code (case-insensitive)."""
    return APIResponse(data=course_to_response(catalog.get_course(course_code)))


@router.get("/{course_code}/enrollments", response_model=APIResponse[list[EnrollmentResponse]])
def list_course_enrollments(
    course_code: str, catalog: CatalogDep, service: EnrollmentServiceDep
) -> APIResponse[list[EnrollmentResponse]]:
    """List enrollments for a course."""
    course = catalog.get_course(course_code)
    enrollments = service.course_enrollments(course.course_code)
    return APIResponse(data=[enrollment_to_response(e) for e in enrollments])
