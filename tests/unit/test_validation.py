"""Unit tests for input validation helpers."""

import pytest

from registrar.validation import (
    is_blank,
    is_valid_course_code,
    is_valid_email,
    is_valid_phone,
    is_valid_student_id,
    sanitize,
)


@pytest.mark.unit
class TestEmail:
    """Tests for is_valid_email."""

    @pytest.mark.parametrize("email", ["alice@example.com", "a.b+c@tus.ie"])
    def test_valid(self, email: str) -> None:
        """Well-formed addresses pass."""
        assert is_valid_email(email)

    @pytest.mark.parametrize(
        "email", [None, "", "alice", "@example.com", "alice@example", "a@b@c.com", "alice.smith@com"]
    )
    def test_invalid(self, email: str | None) -> None:
        """Malformed addresses fail."""
        assert not is_valid_email(email)


@pytest.mark.unit
class TestPhone:
    """Tests for is_valid_phone."""

    @pytest.mark.parametrize("phone", ["5551234567", "(555) 123-4567", "353 87 123 4567"])
    def test_valid(self, phone: str) -> None:
        """10-15 digits with common separators pass."""
        assert is_valid_phone(phone)

    @pytest.mark.parametrize("phone", [None, "12345", "555-CALL-NOW", "1234567890123456"])
    def test_invalid(self, phone: str | None) -> None:
        """Too short, too long or non-numeric numbers fail."""
        assert not is_valid_phone(phone)


@pytest.mark.unit
class TestIdentifiers:
    """Tests for student ID and course code checks."""

    def test_student_id(self) -> None:
        """Student IDs are STU plus five digits."""
        assert is_valid_student_id("STU00001")
        assert not is_valid_student_id("STU1")
        assert not is_valid_student_id("stu00001")
        assert not is_valid_student_id(None)

    def test_student_id_custom_pattern(self) -> None:
        """A custom pattern can be supplied."""
        assert is_valid_student_id("X-1", pattern=r"X-\d")

    @pytest.mark.parametrize(
        ("code", "valid"),
        [("CS101", True), ("math1010", True), ("C101", False), ("CS10", False), ("", False)],
    )
    def test_course_code(self, code: str, valid: bool) -> None:
        """Course codes are 2-4 letters then 3-4 digits."""
        assert is_valid_course_code(code) is valid


@pytest.mark.unit
class TestText:
    """Tests for sanitize and is_blank."""

    def test_sanitize(self) -> None:
        """Whitespace is trimmed and collapsed."""
        assert sanitize("  Alice   Mary \t Smith ") == "Alice Mary Smith"
        assert sanitize(None) == ""

    def test_is_blank(self) -> None:
        """None and whitespace-only strings are blank."""
        assert is_blank(None)
        assert is_blank("   ")
        assert not is_blank(" a ")
