"""Students - the student registry and its queries."""

from registrar.students.exceptions import (
    StudentExistsError,
    StudentNotFoundError,
    StudentRegistryError,
)
from registrar.students.service import (
    StudentPredicate,
    StudentService,
    has_min_gpa,
    in_department,
    is_active,
)

__all__ = [
    "StudentExistsError",
    "StudentNotFoundError",
    "StudentPredicate",
    "StudentRegistryError",
    "StudentService",
    "has_min_gpa",
    "in_department",
    "is_active",
]
