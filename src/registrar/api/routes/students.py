"""Student registry endpoints."""

from fastapi import APIRouter, Query, status

from registrar.api.dependencies import StudentServiceDep
from registrar.api.models import (
    APIResponse,
    GradeAssign,
    StudentCreate,
    StudentResponse,
    StudentUpdate,
    student_to_response,
)
from registrar.records import DepartmentType, Grade, Student

router = APIRouter(prefix="/students", tags=["students"])


@router.get("", response_model=APIResponse[list[StudentResponse]])
def list_students(
    service: StudentServiceDep,
    major: str | None = None,
    min_gpa: float | None = Query(default=None, ge=0.0, le=4.0),
    active: bool | None = None,
    honor_roll: bool = False,
) -> APIResponse[list[StudentResponse]]:
    """List students, optionally filtered by major, GPA, status or honor roll."""
    department = DepartmentType.from_code(major) if major is not None else None

    def matches(student: Student) -> bool:
        if department is not None and student.major is not department:
            return False
        if min_gpa is not None and student.gpa < min_gpa:
            return False
        if active is not None and student.active is not active:
            return False
        return not honor_roll or student.is_honor_roll

    students = service.filter_students(matches)
    return APIResponse(data=[student_to_response(s) for s in students])


@router.post(
    "",
    response_model=APIResponse[StudentResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_student(student: StudentCreate, service: StudentServiceDep) -> APIResponse[StudentResponse]:
    """Register a new student."""
    created = service.create_student(
        first_name=student.first_name,
        last_name=student.last_name,
        email=student.email,
        major=DepartmentType[student.major],
        phone=student.phone,
        date_of_birth=student.date_of_birth,
    )
    return APIResponse(data=student_to_response(created))


@router.get("/top", response_model=APIResponse[list[StudentResponse]])
def top_performers(
    service: StudentServiceDep, n: int = Query(default=5, ge=1, le=100)
) -> APIResponse[list[StudentResponse]]:
    """Honor-roll students ranked by GPA."""
    return APIResponse(data=[student_to_response(s) for s in service.find_top_performers(n)])


@router.get("/{student_id}", response_model=APIResponse[StudentResponse])
def get_student(student_id: str, service: StudentServiceDep) -> APIResponse[StudentResponse]:
    """Get a student by ID."""
    return APIResponse(data=student_to_response(service.get_student(student_id)))


@router.patch("/{student_id}", response_model=APIResponse[StudentResponse])
def update_student(
    student_id: str, update: StudentUpdate, service: StudentServiceDep
) -> APIResponse[StudentResponse]:
    """Update a student's status or major (partial update)."""
    student = service.get_student(student_id)
    if update.active is not None:
        student.active = update.active
    if update.major is not None:
        student.major = DepartmentType[update.major]
    return APIResponse(data=student_to_response(student))


@router.post("/{student_id}/grades", response_model=APIResponse[StudentResponse])
def add_grade(
    student_id: str, request: GradeAssign, service: StudentServiceDep
) -> APIResponse[StudentResponse]:
    """Record a grade directly against a student's GPA."""
    student = service.get_student(student_id)
    student.add_grade(Grade[request.grade])
    return APIResponse(data=student_to_response(student))
