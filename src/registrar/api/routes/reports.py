"""Reporting endpoints."""

from fastapi import APIRouter

from registrar.api.dependencies import CatalogDep, StudentServiceDep
from registrar.api.models import (
    APIResponse,
    InstructorResponse,
    MajorCountResponse,
    StudentResponse,
    instructor_to_response,
    student_to_response,
)
from registrar.records import DepartmentType

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/honor-roll", response_model=APIResponse[list[StudentResponse]])
def honor_roll(service: StudentServiceDep) -> APIResponse[list[StudentResponse]]:
    """Students with GPA of 3.5 or above."""
    students = service.find_honor_roll_students()
    return APIResponse(data=[student_to_response(s) for s in students])


@router.get("/majors", response_model=APIResponse[list[MajorCountResponse]])
def students_by_major(service: StudentServiceDep) -> APIResponse[list[MajorCountResponse]]:
    """Number of students in each major."""
    counts = [
        MajorCountResponse(
            major=department.code,
            name=department.full_name,
            students=len(service.find_by_major(department)),
        )
        for department in DepartmentType
    ]
    return APIResponse(data=counts)


@router.get("/instructors", response_model=APIResponse[list[InstructorResponse]])
def instructors(catalog: CatalogDep) -> APIResponse[list[InstructorResponse]]:
    """All instructors."""
    return APIResponse(data=[instructor_to_response(i) for i in catalog.list_instructors()])
