"""Input validation helpers for caller-supplied student and course data."""

from __future__ import annotations

import re

_STUDENT_ID = re.compile(r"STU\d{5}")
_COURSE_CODE = re.compile(r"[A-Z]{2,4}\d{3,4}")
_PHONE_SEPARATORS = re.compile(r"[\s\-()]")
_PHONE_DIGITS = re.compile(r"\d{10,15}")
_WHITESPACE = re.compile(r"\s+")


def is_valid_email(email: str | None) -> bool:
    """Exactly one '@', not leading, with a '.' somewhere after it."""
    if not email:
        return False
    at = email.find("@")
    return at > 0 and at == email.rfind("@") and at < email.rfind(".")


def is_valid_phone(phone: str | None) -> bool:
    if phone is None:
        return False
    cleaned = _PHONE_SEPARATORS.sub("", phone)
    return bool(_PHONE_DIGITS.fullmatch(cleaned))


def is_valid_student_id(student_id: str | None, pattern: str | None = None) -> bool:
    if student_id is None:
        return False
    regex = re.compile(pattern) if pattern else _STUDENT_ID
    return bool(regex.fullmatch(student_id))


def is_valid_course_code(code: str | None) -> bool:
    if not code:
        return False
    return 5 <= len(code) <= 10 and bool(_COURSE_CODE.fullmatch(code.upper()))


def sanitize(text: str | None) -> str:
    """Trim and collapse internal whitespace."""
    if text is None:
        return ""
    return _WHITESPACE.sub(" ", text.strip())


def is_blank(text: str | None) -> bool:
    return text is None or not text.strip()
