"""Load a course catalog from YAML."""

from __future__ import annotations

from datetime import time
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from registrar.catalog.catalog import Catalog
from registrar.catalog.exceptions import CatalogError
from registrar.logging import get_logger
from registrar.records import (
    Course,
    CourseSchedule,
    DepartmentType,
    IdGenerator,
    Instructor,
    RecordValidationError,
)

logger = get_logger("catalog.loader")

SAMPLE_CATALOG = "sample_catalog.yaml"


def _parse_time(value: Any, field_name: str) -> time:
    try:
        return time.fromisoformat(str(value))
    except ValueError as e:
        raise CatalogError(f"Invalid {field_name} time: {value!r}") from e


def _build_schedule(data: dict[str, Any]) -> CourseSchedule:
    return CourseSchedule(
        day_of_week=data.get("day", ""),
        start_time=_parse_time(data.get("start"), "start"),
        end_time=_parse_time(data.get("end"), "end"),
        room=data.get("room", ""),
    )


def build_catalog(data: dict[str, Any], instructor_ids: IdGenerator | None = None) -> Catalog:
    """Build a catalog from parsed YAML data.

    Instructors are declared with a ``key`` that courses refer to; their
    registry IDs are issued as they are loaded.

    Raises:
        CatalogError: If an entry is missing fields or refers to an unknown key.
    """
    catalog = Catalog()
    by_key: dict[str, Instructor] = {}

    try:
        for entry in data.get("instructors") or []:
            instructor = Instructor(
                entry["first_name"],
                entry["last_name"],
                entry.get("email"),
                DepartmentType.from_code(entry["department"]),
                float(entry.get("salary", 0)),
                phone=entry.get("phone"),
                ids=instructor_ids,
            )
            instructor.set_office_hours(*entry.get("office_hours", []))
            by_key[entry.get("key", instructor.instructor_id)] = instructor
            catalog.add_instructor(instructor)

        for entry in data.get("courses") or []:
            course = Course(
                entry["code"],
                entry["name"],
                DepartmentType.from_code(entry["department"]),
                int(entry["credits"]),
                capacity=int(entry.get("capacity", 30)),
                prerequisites=tuple(entry.get("prerequisites", ())),
            )
            if "schedule" in entry:
                course.schedule = _build_schedule(entry["schedule"])
            catalog.add_course(course)

            instructor_key = entry.get("instructor")
            if instructor_key is not None:
                if instructor_key not in by_key:
                    raise CatalogError(
                        f"Course {course.course_code} refers to unknown instructor "
                        f"'{instructor_key}'"
                    )
                catalog.assign_instructor(course.course_code, by_key[instructor_key].instructor_id)
    except KeyError as e:
        raise CatalogError(f"Catalog entry missing field {e}") from e
    except RecordValidationError as e:
        raise CatalogError(f"Invalid catalog entry: {e}") from e

    return catalog


def load_catalog(path: Path | str | None = None, instructor_ids: IdGenerator | None = None) -> Catalog:
    """Load a catalog YAML file, or the bundled sample catalog when path is None.

    Raises:
        CatalogError: If the file is missing or invalid.
    """
    if path is None:
        text = resources.files("registrar.catalog").joinpath(SAMPLE_CATALOG).read_text()
        source = SAMPLE_CATALOG
    else:
        path = Path(path)
        if not path.exists():
            raise CatalogError(f"Catalog file not found: {path}")
        text = path.read_text()
        source = str(path)

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in {source}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise CatalogError(f"Catalog must be a YAML mapping, got {type(data).__name__}")

    catalog = build_catalog(data, instructor_ids=instructor_ids)
    logger.info(
        "Loaded catalog from %s (%d courses, %d instructors)",
        source,
        len(catalog.list_courses()),
        len(catalog.list_instructors()),
    )
    return catalog
