"""Catalog - courses and instructors available for enrollment."""

from registrar.catalog.catalog import Catalog
from registrar.catalog.exceptions import (
    CatalogError,
    CourseExistsError,
    CourseNotFoundError,
    InstructorNotFoundError,
)
from registrar.catalog.loader import build_catalog, load_catalog

__all__ = [
    "Catalog",
    "CatalogError",
    "CourseExistsError",
    "CourseNotFoundError",
    "InstructorNotFoundError",
    "build_catalog",
    "load_catalog",
]
