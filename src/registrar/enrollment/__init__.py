"""Enrollment - course registration, grading and drops."""

from registrar.enrollment.service import EnrollmentService

__all__ = ["EnrollmentService"]
