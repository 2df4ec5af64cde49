"""FastAPI application setup."""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from registrar.api.dependencies import close_services, init_services
from registrar.api.models import APIResponse
from registrar.api.routes import courses, enrollments, reports, students, transcripts
from registrar.catalog import (
    CourseExistsError,
    CourseNotFoundError,
    InstructorNotFoundError,
    load_catalog,
)
from registrar.logging import get_logger
from registrar.records import (
    EnrollmentNotFoundError,
    EnrollmentRuleError,
    RecordsError,
    RecordValidationError,
)
from registrar.students import StudentExistsError, StudentNotFoundError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = get_logger("api")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse[None](data=None, error=message).model_dump(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    catalog_path = app.state.catalog_path if hasattr(app.state, "catalog_path") else None
    catalog = load_catalog(catalog_path)
    init_services(catalog)

    yield
    # Shutdown
    close_services()


def register_exception_handlers(app: FastAPI) -> None:
    """Map records errors onto HTTP statuses in the APIResponse envelope."""

    @app.exception_handler(StudentNotFoundError)
    async def student_not_found_handler(_request: Request, exc: StudentNotFoundError) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, str(exc) or "Student not found")

    @app.exception_handler(CourseNotFoundError)
    async def course_not_found_handler(_request: Request, exc: CourseNotFoundError) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, str(exc) or "Course not found")

    @app.exception_handler(InstructorNotFoundError)
    async def instructor_not_found_handler(
        _request: Request, exc: InstructorNotFoundError
    ) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, str(exc) or "Instructor not found")

    @app.exception_handler(EnrollmentNotFoundError)
    async def enrollment_not_found_handler(
        _request: Request, exc: EnrollmentNotFoundError
    ) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, str(exc) or "Enrollment not found")

    @app.exception_handler(EnrollmentRuleError)
    async def enrollment_rule_handler(_request: Request, exc: EnrollmentRuleError) -> JSONResponse:
        return _error(status.HTTP_409_CONFLICT, str(exc))

    @app.exception_handler(CourseExistsError)
    async def course_exists_handler(_request: Request, exc: CourseExistsError) -> JSONResponse:
        return _error(status.HTTP_409_CONFLICT, str(exc))

    @app.exception_handler(StudentExistsError)
    async def student_exists_handler(_request: Request, exc: StudentExistsError) -> JSONResponse:
        return _error(status.HTTP_409_CONFLICT, str(exc))

    @app.exception_handler(RecordValidationError)
    async def validation_error_handler(
        _request: Request, exc: RecordValidationError
    ) -> JSONResponse:
        return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc))

    @app.exception_handler(RecordsError)
    async def records_error_handler(_request: Request, exc: RecordsError) -> JSONResponse:
        logger.error("Unhandled records error: %s", exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app(catalog_path: str | Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        catalog_path: Course catalog YAML file. None loads the bundled sample catalog.
    """
    app = FastAPI(
        title="Registrar API",
        description="REST API for Registrar - student enrollment and grading",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.catalog_path = catalog_path

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(students.router, prefix="/api/v1")
    app.include_router(transcripts.router, prefix="/api/v1")
    app.include_router(courses.router, prefix="/api/v1")
    app.include_router(enrollments.router, prefix="/api/v1")
    app.include_router(reports.router, prefix="/api/v1")

    return app


# Default app instance
app = create_app()
