"""Shared pytest fixtures and configuration."""

from collections.abc import Callable

import pytest

from registrar.records import Course, DepartmentType, IdGenerator, Student, people


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture(autouse=True)
def _log_dir(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep log files written by the CLI and app out of the working tree."""
    monkeypatch.setenv("REGISTRAR_LOG_DIR", str(tmp_path_factory.mktemp("logs")))


@pytest.fixture(autouse=True)
def _fresh_ids() -> None:
    """Restart the process-wide ID sequences at STU00001 and INS00001."""
    people.student_ids.reset()
    people.instructor_ids.reset()


@pytest.fixture
def student_ids() -> IdGenerator:
    """The student ID sequence, restarted at STU00001."""
    return people.student_ids


@pytest.fixture
def make_student(student_ids: IdGenerator) -> Callable[..., Student]:
    """Factory for students with sequential IDs."""

    def _make(
        first_name: str = "Alice",
        last_name: str = "Smith",
        major: DepartmentType = DepartmentType.COMPUTER_SCIENCE,
        email: str | None = "alice.smith@example.com",
    ) -> Student:
        return Student(first_name, last_name, email, major, ids=student_ids)

    return _make


@pytest.fixture
def make_course() -> Callable[..., Course]:
    """Factory for courses."""

    def _make(
        code: str = "CS101",
        capacity: int = 30,
        department: DepartmentType = DepartmentType.COMPUTER_SCIENCE,
    ) -> Course:
        return Course(code, f"Course {code}", department, 3, capacity=capacity)

    return _make
