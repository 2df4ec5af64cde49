"""Fixtures for API route tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from registrar.api.app import register_exception_handlers
from registrar.api.dependencies import get_catalog, get_enrollment_service, get_student_service
from registrar.api.routes import courses, enrollments, reports, students, transcripts
from registrar.catalog import Catalog, load_catalog
from registrar.enrollment import EnrollmentService
from registrar.records import IdGenerator
from registrar.students import StudentService


@pytest.fixture
def student_service(student_ids: IdGenerator) -> StudentService:
    """A fresh student registry issuing STU00001 onwards."""
    return StudentService(ids=student_ids)


@pytest.fixture
def enrollment_service() -> EnrollmentService:
    return EnrollmentService()


@pytest.fixture
def catalog() -> Catalog:
    """The bundled sample catalog with INS00001 onwards."""
    return load_catalog(instructor_ids=IdGenerator("INS"))


@pytest.fixture
def app(
    student_service: StudentService,
    enrollment_service: EnrollmentService,
    catalog: Catalog,
) -> FastAPI:
    """Create a test FastAPI app with overridden dependencies."""
    app = FastAPI()

    def override_get_student_service():
        yield student_service

    def override_get_enrollment_service():
        yield enrollment_service

    def override_get_catalog():
        yield catalog

    app.dependency_overrides[get_student_service] = override_get_student_service
    app.dependency_overrides[get_enrollment_service] = override_get_enrollment_service
    app.dependency_overrides[get_catalog] = override_get_catalog

    register_exception_handlers(app)

    for module in (students, transcripts, courses, enrollments, reports):
        app.include_router(module.router, prefix="/api/v1")

    return app


@pytest.fixture
def client(app: FastAPI):
    """Create a test client."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
