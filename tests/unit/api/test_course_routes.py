"""Unit tests for course routes."""

import pytest
from fastapi.testclient import TestClient

from registrar.catalog import Catalog
from registrar.enrollment import EnrollmentService
from registrar.records import DepartmentType
from registrar.students import StudentService


@pytest.mark.unit
class TestCourseRoutes:
    """Tests for GET /courses."""

    def test_list_courses(self, client: TestClient) -> None:
        """Lists catalog courses."""
        response = client.get("/api/v1/courses")

        assert response.status_code == 200
        codes = [c["course_code"] for c in response.json()["data"]]
        assert codes == ["CS101", "CS201", "MATH101"]

    def test_get_course(self, client: TestClient) -> None:
        """Course details include instructor, schedule and seats."""
        response = client.get("/api/v1/courses/cs201")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["course_code"] == "CS201"
        assert data["department"] == "CS"
        assert data["capacity"] == 25
        assert data["available_seats"] == 25
        assert data["instructor"] == "Dr. Sarah Johnson"
        assert data["schedule"] == "Wednesday 11:00-12:30 in Room 102"
        assert data["prerequisites"] == ["CS101"]

    def test_get_course_not_found(self, client: TestClient) -> None:
        """Unknown codes give 404."""
        response = client.get("/api/v1/courses/XX999")

        assert response.status_code == 404
        assert response.json()["data"] is None

    def test_course_enrollments(
        self,
        client: TestClient,
        student_service: StudentService,
        enrollment_service: EnrollmentService,
        catalog: Catalog,
    ) -> None:
        """Lists enrollments for one course."""
        student = student_service.create_student(
            "Alice", "Smith", None, DepartmentType.COMPUTER_SCIENCE
        )
        enrollment_service.enroll(student, catalog.get_course("CS101"))

        response = client.get("/api/v1/courses/cs101/enrollments")

        assert response.status_code == 200
        data = response.json()["data"]
        assert [e["student_id"] for e in data] == ["STU00001"]
        assert data[0]["status"] == "IN_PROGRESS"

        seats = client.get("/api/v1/courses/CS101").json()["data"]
        assert seats["enrolled"] == 1
        assert seats["available_seats"] == 29
