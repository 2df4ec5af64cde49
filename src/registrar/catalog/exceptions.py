"""Custom exceptions for the course catalog."""

from registrar.records.exceptions import RecordsError


class CatalogError(RecordsError):
    """Base exception for catalog errors."""


class CourseNotFoundError(CatalogError):
    """Course with given code does not exist."""


class InstructorNotFoundError(CatalogError):
    """Instructor with given ID does not exist."""


class CourseExistsError(CatalogError):
    """Course with given code already exists."""
