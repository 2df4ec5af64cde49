"""Custom exceptions for the student registry."""

from registrar.records.exceptions import RecordsError


class StudentRegistryError(RecordsError):
    """Base exception for student registry errors."""


class StudentNotFoundError(StudentRegistryError):
    """Student with given ID does not exist."""


class StudentExistsError(StudentRegistryError):
    """A student with the same ID is already registered."""
