from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from contact_form.core.logging import format_event, get_logger
from contact_form.schemas.contact import (
    ContactAccepted,
    ContactError,
    ContactSubmission,
    ContactValidationError,
)
from contact_form.services.validation import validate_fields

router = APIRouter(prefix="/contact", tags=["contact"])

logger = get_logger()
submission_logger = get_logger("submissions")

SUBMISSION_EVENT = "CONTACT_FORM_SUBMISSION"
RECEIVED_MESSAGE = "Your message has been received."


def _json(model, status_code: int) -> JSONResponse:
    return JSONResponse(content=model.model_dump(), status_code=status_code)


def _submission_record(submission: ContactSubmission, request: Request) -> dict[str, Any]:
    record: dict[str, Any] = {
        "at": datetime.now(timezone.utc).isoformat(),
        "name": submission.name,
        "email": submission.email,
        "message": submission.message,
    }
    user_agent = request.headers.get("user-agent")
    if user_agent is not None:
        record["userAgent"] = user_agent
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for is not None:
        record["ip"] = forwarded_for
    return record


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


async def _read_json_object(request: Request) -> dict[str, Any] | None:
    # json.loads on its own accepts NaN and Infinity; strict JSON does not.
    try:
        body = json.loads(await request.body(), parse_constant=_reject_constant)
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


@router.post(
    "",
    response_model=ContactAccepted,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ContactValidationError},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ContactError},
    },
)
async def submit_contact(request: Request) -> JSONResponse:
    try:
        body = await _read_json_object(request)
        if body is None:
            return _json(ContactError(error="Invalid JSON body"), status.HTTP_400_BAD_REQUEST)

        submission = ContactSubmission.model_validate(
            {key: body.get(key) for key in ("name", "email", "message")}
        )

        errors = validate_fields(submission.name, submission.email, submission.message)
        if errors:
            return _json(
                ContactValidationError(error="Validation failed", errors=errors),
                status.HTTP_400_BAD_REQUEST,
            )

        submission_logger.info(format_event(SUBMISSION_EVENT, _submission_record(submission, request)))

        return _json(ContactAccepted(message=RECEIVED_MESSAGE), status.HTTP_200_OK)
    except Exception:
        logger.exception("Unhandled error while processing contact submission")
        return _json(ContactError(error="Unexpected server error"), status.HTTP_500_INTERNAL_SERVER_ERROR)
