"""REST API for Registrar."""

from registrar.api.app import app, create_app
from registrar.api.models import (
    APIResponse,
    EnrollmentResponse,
    StudentCreate,
    StudentResponse,
)

__all__ = [
    "APIResponse",
    "EnrollmentResponse",
    "StudentCreate",
    "StudentResponse",
    "app",
    "create_app",
]
