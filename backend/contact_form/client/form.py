from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import httpx

from contact_form.core.logging import get_logger
from contact_form.services.validation import is_valid_submission

logger = get_logger("client")

DEFAULT_ENDPOINT = "/api/contact"

SUCCESS_FALLBACK = "Thanks for reaching out!"
FAILURE_FALLBACK = "Failed to submit. Please try again."
GENERIC_ERROR = "Something went wrong."


class SubmitStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class SubmitState:
    status: SubmitStatus
    message: Optional[str] = None

    @classmethod
    def idle(cls) -> SubmitState:
        return cls(SubmitStatus.IDLE)

    @classmethod
    def submitting(cls) -> SubmitState:
        return cls(SubmitStatus.SUBMITTING)

    @classmethod
    def success(cls, message: str) -> SubmitState:
        return cls(SubmitStatus.SUCCESS, message)

    @classmethod
    def error(cls, message: str) -> SubmitState:
        return cls(SubmitStatus.ERROR, message)


def _json_object(response: httpx.Response) -> dict[str, Any] | None:
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def _text(data: dict[str, Any] | None, key: str) -> str | None:
    value = (data or {}).get(key)
    return value if isinstance(value, str) else None


class ContactForm:
    """Scriptable counterpart of the contact page.

    Holds the raw field values and the submission state, and talks to the
    endpoint through any ``httpx.Client`` (FastAPI's ``TestClient`` included).
    """

    def __init__(self, http: httpx.Client, endpoint: str = DEFAULT_ENDPOINT) -> None:
        self.http = http
        self.endpoint = endpoint
        self.name = ""
        self.email = ""
        self.message = ""
        self.state = SubmitState.idle()

    @property
    def is_valid(self) -> bool:
        return is_valid_submission(self.name, self.email, self.message)

    @property
    def can_submit(self) -> bool:
        return self.is_valid and self.state.status is not SubmitStatus.SUBMITTING

    def clear(self) -> None:
        self.name = ""
        self.email = ""
        self.message = ""

    def submit(self) -> SubmitState:
        if not self.can_submit:
            return self.state

        self.state = SubmitState.submitting()
        payload = {"name": self.name, "email": self.email, "message": self.message}

        try:
            response = self.http.post(self.endpoint, json=payload)
        except Exception as e:
            # Any transport or client failure must release the submitting state.
            logger.warning("Contact submission failed: %s", e)
            self.state = SubmitState.error(GENERIC_ERROR)
            return self.state

        data = _json_object(response)
        if not response.is_success:
            self.state = SubmitState.error(_text(data, "error") or FAILURE_FALLBACK)
        elif data is None:
            self.state = SubmitState.error(GENERIC_ERROR)
        else:
            self.state = SubmitState.success(_text(data, "message") or SUCCESS_FALLBACK)
            self.clear()
        return self.state
