"""Command line entry point for Registrar.

Provides the REST server, a catalog listing and an interactive menu shell
that drives the student and enrollment services in-process.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

import click

from registrar.catalog import Catalog, CatalogError, load_catalog
from registrar.config import ConfigError, RegistrarConfig, default_config, find_config, load_config
from registrar.dates import parse_date
from registrar.enrollment import EnrollmentService
from registrar.logging import get_logger, setup_logging
from registrar.records import DepartmentType, Grade, RecordsError, Transcript
from registrar.records.grading import format_grade_with_status
from registrar.students import StudentService

logger = get_logger("cli")

MENU = """
=== Registrar ===
1. Add student
2. List students
3. Search students
4. Enroll student in course
5. Assign grade
6. View transcript
7. List courses
8. Reports
0. Exit"""


def _resolve_config(config_path: Path | None) -> RegistrarConfig:
    """Load the given config file, else a discovered registrar.yaml, else defaults."""
    if config_path is not None:
        return load_config(config_path)
    try:
        return load_config(find_config())
    except ConfigError:
        return default_config()


@click.group()
@click.version_option(package_name="registrar")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    help="Path to registrar.yaml (auto-detected if not specified)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """Registrar - student enrollment and grading."""
    try:
        config = _resolve_config(config_path)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    setup_logging(
        log_dir=config.get_log_dir(),
        level="DEBUG" if verbose else config.logging.level,
        console=config.logging.console,
    )
    ctx.obj = config


def _load_catalog(config: RegistrarConfig) -> Catalog:
    try:
        return load_catalog(config.get_catalog_path())
    except CatalogError as e:
        click.echo(f"Catalog error: {e}", err=True)
        sys.exit(1)


@main.command()
@click.option("--host", default=None, help="Bind address (default: from config)")
@click.option("--port", type=int, default=None, help="Port (default: from config)")
@click.pass_obj
def serve(config: RegistrarConfig, host: str | None, port: int | None) -> None:
    """Run the REST API server."""
    import uvicorn  # noqa: PLC0415

    from registrar.api import create_app  # noqa: PLC0415

    app = create_app(config.get_catalog_path())
    uvicorn.run(app, host=host or config.api.host, port=port or config.api.port)


@main.command()
@click.pass_obj
def courses(config: RegistrarConfig) -> None:
    """List the courses in the catalog."""
    catalog = _load_catalog(config)
    for course in catalog.list_courses():
        click.echo(course.course_info())


@main.command()
@click.pass_obj
def shell(config: RegistrarConfig) -> None:
    """Interactive menu over the student registry and enrollments."""
    session = ShellSession(catalog=_load_catalog(config))
    session.run()


@dataclass
class ShellSession:
    """State and menu actions for one interactive shell."""

    catalog: Catalog
    students: StudentService = field(default_factory=StudentService)
    enrollments: EnrollmentService = field(default_factory=EnrollmentService)

    def run(self) -> None:
        actions = {
            1: self.add_student,
            2: self.list_students,
            3: self.search_students,
            4: self.enroll_student,
            5: self.assign_grade,
            6: self.view_transcript,
            7: self.list_courses,
            8: self.reports,
        }
        while True:
            click.echo(MENU)
            choice = click.prompt("Choose an option", type=click.IntRange(0, len(actions)))
            if choice == 0:
                click.echo("Goodbye!")
                return
            try:
                actions[choice]()
            except RecordsError as e:
                logger.debug("Shell action %d failed: %s", choice, e)
                click.echo(f"Error: {e}")

    # --- Students ---

    def add_student(self) -> None:
        first_name = click.prompt("First name")
        last_name = click.prompt("Last name")
        email = click.prompt("Email")
        codes = ", ".join(d.code for d in DepartmentType)
        major = DepartmentType.from_code(click.prompt(f"Major ({codes})"))
        dob_text = click.prompt(
            "Date of birth (YYYY-MM-DD, blank to skip)", default="", show_default=False
        )
        student = self.students.create_student(
            first_name, last_name, email, major, date_of_birth=parse_date(dob_text)
        )
        click.echo(f"Student added: {student.student_id}")

    def list_students(self) -> None:
        all_students = self.students.get_all_students()
        if not all_students:
            click.echo("No students registered.")
            return
        for student in all_students:
            click.echo(str(student))

    def search_students(self) -> None:
        text = click.prompt("Name contains")
        matches = self.students.search_by_name(text)
        if not matches:
            click.echo("No matching students.")
        for student in matches:
            click.echo(str(student))

    # --- Enrollment ---

    def enroll_student(self) -> None:
        student = self.students.get_student(click.prompt("Student ID"))
        course = self.catalog.get_course(click.prompt("Course code"))
        self.enrollments.enroll(student, course)
        click.echo(f"Enrolled {student.full_name} in {course.course_code}")

    def assign_grade(self) -> None:
        student = self.students.get_student(click.prompt("Student ID"))
        course = self.catalog.get_course(click.prompt("Course code"))
        grade = Grade.from_label(click.prompt("Grade (e.g. A+, B-, F)"))
        self.enrollments.record_grade(student, course.course_code, grade)
        click.echo(f"Recorded {format_grade_with_status(grade)} for {course.course_code}")

    def view_transcript(self) -> None:
        student = self.students.get_student(click.prompt("Student ID"))
        transcript = Transcript.create_from_student(
            student, self.enrollments.student_enrollments(student.student_id)
        )
        click.echo(transcript.generate_report())

    # --- Catalog and reports ---

    def list_courses(self) -> None:
        for course in self.catalog.list_courses():
            click.echo(course.course_info())

    def reports(self) -> None:
        click.echo("Honor roll:")
        for student in self.students.find_honor_roll_students():
            click.echo(f"  {student.full_name} ({student.gpa:.2f})")

        click.echo("Students by major:")
        for department in DepartmentType:
            count = len(self.students.find_by_major(department))
            click.echo(f"  {department.full_name}: {count}")

        click.echo("Instructors:")
        for instructor in self.catalog.list_instructors():
            click.echo(f"  {instructor.profile}")


if __name__ == "__main__":
    main()
