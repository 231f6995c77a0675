from __future__ import annotations

import re

# Structural check only: something@something.something with no whitespace or
# extra "@". Addresses without a real top-level domain are accepted on purpose.
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

NAME_MIN_LENGTH = 2
MESSAGE_MIN_LENGTH = 10

NAME_ERROR = f"Name must be at least {NAME_MIN_LENGTH} characters"
EMAIL_ERROR = "Enter a valid email"
MESSAGE_ERROR = f"Message must be at least {MESSAGE_MIN_LENGTH} characters"


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def text_length(value: str) -> int:
    """Length in UTF-16 code units, as a browser counts it ("😀" is 2)."""
    # surrogatepass keeps lone surrogates from a JSON "\ud83d" escape countable
    return len(value.encode("utf-16-le", "surrogatepass")) // 2


def validate_fields(name: str, email: str, message: str) -> dict[str, str]:
    """Return every failing field mapped to its error text.

    An empty dict means the submission is valid. Callers decide whether to trim
    ``email`` beforehand; name and message are always measured trimmed.
    """
    errors: dict[str, str] = {}
    if text_length(name.strip()) < NAME_MIN_LENGTH:
        errors["name"] = NAME_ERROR
    if not is_valid_email(email):
        errors["email"] = EMAIL_ERROR
    if text_length(message.strip()) < MESSAGE_MIN_LENGTH:
        errors["message"] = MESSAGE_ERROR
    return errors


def is_valid_submission(name: str, email: str, message: str) -> bool:
    return not validate_fields(name, email, message)
