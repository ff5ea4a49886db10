"""Write-time rules for stored records.

Shared by the request schemas and the ORM model so that a post is checked the
same way whether it arrives over HTTP or is built directly in a session.
"""
import re

TITLE_MIN_LENGTH = 10
TITLE_MAX_LENGTH = 50
CONTENT_MIN_LENGTH = 20

EMAIL_PATTERN = re.compile(r"\A[^@\s]+@[^@\s]+\Z")


class RecordValidationError(ValueError):
    """Raised when a record attribute breaks a write-time rule."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field.capitalize()} {message}")


def _check_presence(field: str, value) -> str:
    if value is None or not str(value).strip():
        raise RecordValidationError(field, "can't be blank")
    return value


def _check_length(field: str, value: str, minimum: int = None, maximum: int = None) -> str:
    if minimum is not None and len(value) < minimum:
        raise RecordValidationError(field, f"is too short (minimum is {minimum} characters)")
    if maximum is not None and len(value) > maximum:
        raise RecordValidationError(field, f"is too long (maximum is {maximum} characters)")
    return value


def validate_title(value: str) -> str:
    _check_presence("title", value)
    return _check_length("title", value, minimum=TITLE_MIN_LENGTH, maximum=TITLE_MAX_LENGTH)


def validate_content(value: str) -> str:
    _check_presence("content", value)
    return _check_length("content", value, minimum=CONTENT_MIN_LENGTH)


def validate_email(value: str) -> str:
    _check_presence("email", value)
    if not EMAIL_PATTERN.match(value):
        raise RecordValidationError("email", "is invalid")
    return value
