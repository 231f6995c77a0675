import pytest

from contact_form.schemas.contact import ContactSubmission, coerce_text


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ""),
        ("text", "text"),
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (1.0, "1"),
        (2.5, "2.5"),
        ([1, "a", None], "1,a,"),
        ({"nested": 1}, "[object Object]"),
    ],
)
def test_coerce_text(value, expected):
    assert coerce_text(value) == expected


def test_submission_trims_and_defaults_missing_fields():
    submission = ContactSubmission.model_validate({"name": "  Jo  ", "email": None})
    assert submission.name == "Jo"
    assert submission.email == ""
    assert submission.message == ""
