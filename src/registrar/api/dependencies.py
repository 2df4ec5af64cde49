"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Generator  # noqa: TC003
from typing import Annotated

from fastapi import Depends

from registrar.catalog import Catalog
from registrar.enrollment import EnrollmentService
from registrar.students import StudentService

# Global service instances (initialized on app startup)
_student_service: StudentService | None = None
_enrollment_service: EnrollmentService | None = None
_catalog: Catalog | None = None


def init_services(
    catalog: Catalog,
    student_service: StudentService | None = None,
    enrollment_service: EnrollmentService | None = None,
) -> None:
    """Initialize the global service instances."""
    global _student_service, _enrollment_service, _catalog  # noqa: PLW0603
    _catalog = catalog
    _student_service = student_service or StudentService()
    _enrollment_service = enrollment_service or EnrollmentService()


def close_services() -> None:
    """Drop the global service instances."""
    global _student_service, _enrollment_service, _catalog  # noqa: PLW0603
    _student_service = None
    _enrollment_service = None
    _catalog = None


def get_student_service() -> Generator[StudentService, None, None]:
    """Dependency that provides the StudentService instance."""
    if _student_service is None:
        raise RuntimeError("StudentService not initialized. Call init_services() first.")
    yield _student_service


def get_enrollment_service() -> Generator[EnrollmentService, None, None]:
    """Dependency that provides the EnrollmentService instance."""
    if _enrollment_service is None:
        raise RuntimeError("EnrollmentService not initialized. Call init_services() first.")
    yield _enrollment_service


def get_catalog() -> Generator[Catalog, None, None]:
    """Dependency that provides the Catalog instance."""
    if _catalog is None:
        raise RuntimeError("Catalog not initialized. Call init_services() first.")
    yield _catalog


# Type aliases for dependency injection
StudentServiceDep = Annotated[StudentService, Depends(get_student_service)]
EnrollmentServiceDep = Annotated[EnrollmentService, Depends(get_enrollment_service)]
CatalogDep = Annotated[Catalog, Depends(get_catalog)]
