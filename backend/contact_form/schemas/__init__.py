from __future__ import annotations

from contact_form.schemas.contact import (
    ContactAccepted,
    ContactError,
    ContactSubmission,
    ContactValidationError,
)

__all__ = [
    "ContactSubmission",
    "ContactAccepted",
    "ContactError",
    "ContactValidationError",
]
