"""Unit tests for student routes."""

import pytest
from fastapi.testclient import TestClient

from registrar.records import DepartmentType, Grade
from registrar.students import StudentService

CS = DepartmentType.COMPUTER_SCIENCE
MATH = DepartmentType.MATHEMATICS


def _payload(**overrides) -> dict:
    payload = {
        "first_name": "Alice",
        "last_name": "Smith",
        "email": "alice@example.com",
        "major": "CS",
    }
    payload.update(overrides)
    return payload


@pytest.mark.unit
class TestCreateStudent:
    """Tests for POST /students."""

    def test_create_student(self, client: TestClient, student_service: StudentService) -> None:
        """Creates a student and returns it."""
        response = client.post("/api/v1/students", json=_payload(phone="555-123-4567"))

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["student_id"] == "STU00001"
        assert data["full_name"] == "Alice Smith"
        assert data["major"] == "CS"
        assert data["gpa"] == 0.0
        assert data["active"] is True
        assert data["grades"] == []
        assert data["academic_standing"] == "ACADEMIC PROBATION"
        assert student_service.student_count == 1

    def test_major_by_name(self, client: TestClient) -> None:
        """Major can be given as a department name."""
        response = client.post("/api/v1/students", json=_payload(major="mathematics"))

        assert response.status_code == 201
        assert response.json()["data"]["major"] == "MATH"

    def test_name_is_sanitized(self, client: TestClient) -> None:
        """Names are trimmed and whitespace collapsed."""
        response = client.post("/api/v1/students", json=_payload(first_name="  Mary   Ann "))
        assert response.json()["data"]["first_name"] == "Mary Ann"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"email": "not-an-email"},
            {"major": "PHYS"},
            {"phone": "123"},
            {"first_name": "   "},
            {"last_name": ""},
        ],
    )
    def test_invalid_payload(self, client: TestClient, overrides: dict) -> None:
        """Invalid fields are rejected with 422."""
        response = client.post("/api/v1/students", json=_payload(**overrides))
        assert response.status_code == 422


@pytest.mark.unit
class TestListStudents:
    """Tests for GET /students."""

    @pytest.fixture(autouse=True)
    def _students(self, student_service: StudentService) -> None:
        alice = student_service.create_student("Alice", "Smith", None, CS)
        bob = student_service.create_student("Bob", "Jones", None, MATH)
        carol = student_service.create_student("Carol", "White", None, CS)
        alice.add_grades(Grade.A, Grade.B_PLUS)
        bob.add_grade(Grade.C)
        carol.add_grade(Grade.A_PLUS)
        carol.active = False

    def _names(self, client: TestClient, **params) -> list[str]:
        response = client.get("/api/v1/students", params=params)
        assert response.status_code == 200
        return [s["first_name"] for s in response.json()["data"]]

    def test_list_all(self, client: TestClient) -> None:
        """Lists students in registration order."""
        assert self._names(client) == ["Alice", "Bob", "Carol"]

    def test_filter_major(self, client: TestClient) -> None:
        """Filters by major code."""
        assert self._names(client, major="cs") == ["Alice", "Carol"]

    def test_filter_min_gpa(self, client: TestClient) -> None:
        """Filters by minimum GPA."""
        assert self._names(client, min_gpa=3.65) == ["Alice", "Carol"]

    def test_filter_active(self, client: TestClient) -> None:
        """Filters by active flag."""
        assert self._names(client, active=False) == ["Carol"]
        assert self._names(client, active=True) == ["Alice", "Bob"]

    def test_filter_honor_roll(self, client: TestClient) -> None:
        """Honor roll filter keeps GPA 3.5 and above."""
        assert self._names(client, honor_roll=True, major="CS", active=True) == ["Alice"]

    def test_unknown_major(self, client: TestClient) -> None:
        """An unknown major filter is a validation error."""
        response = client.get("/api/v1/students", params={"major": "XX"})

        assert response.status_code == 422
        assert "Unknown department" in response.json()["error"]

    def test_top_performers(self, client: TestClient) -> None:
        """Top performers are ranked by GPA."""
        response = client.get("/api/v1/students/top", params={"n": 5})

        assert response.status_code == 200
        assert [s["first_name"] for s in response.json()["data"]] == ["Carol", "Alice"]


@pytest.mark.unit
class TestGetAndUpdateStudent:
    """Tests for GET and PATCH /students/{student_id}."""

    @pytest.fixture(autouse=True)
    def _student(self, student_service: StudentService) -> None:
        student_service.create_student("Alice", "Smith", None, CS)

    def test_get_student(self, client: TestClient) -> None:
        """Returns the student."""
        response = client.get("/api/v1/students/STU00001")

        assert response.status_code == 200
        assert response.json()["data"]["last_name"] == "Smith"

    def test_get_student_not_found(self, client: TestClient) -> None:
        """Unknown IDs give 404 with an error message."""
        response = client.get("/api/v1/students/STU09999")

        assert response.status_code == 404
        data = response.json()
        assert data["data"] is None
        assert "STU09999" in data["error"]

    def test_deactivate(self, client: TestClient, student_service: StudentService) -> None:
        """Students can be deactivated."""
        response = client.patch("/api/v1/students/STU00001", json={"active": False})

        assert response.status_code == 200
        assert response.json()["data"]["active"] is False
        assert not student_service.get_student("STU00001").active

    def test_change_major(self, client: TestClient) -> None:
        """Major can be changed; unset fields are kept."""
        response = client.patch("/api/v1/students/STU00001", json={"major": "BUS"})

        data = response.json()["data"]
        assert data["major"] == "BUS"
        assert data["active"] is True

    def test_add_grade(self, client: TestClient) -> None:
        """Grades posted directly update the GPA."""
        client.post("/api/v1/students/STU00001/grades", json={"grade": "A"})
        response = client.post("/api/v1/students/STU00001/grades", json={"grade": "B+"})

        data = response.json()["data"]
        assert data["grades"] == ["A", "B+"]
        assert data["gpa"] == 3.65
        assert data["honor_roll"] is True

    def test_add_invalid_grade(self, client: TestClient) -> None:
        """Unknown grade labels are rejected."""
        response = client.post("/api/v1/students/STU00001/grades", json={"grade": "E"})
        assert response.status_code == 422
