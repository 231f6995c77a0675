"""
Pytest configuration and fixtures for all tests.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from contact_form.main import create_app


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    """In-process HTTP client bound to a fresh app."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def valid_payload():
    return {"name": "Jo", "email": "jo@x.com", "message": "Hello there!"}


@pytest.fixture
def submission_logs(caplog):
    caplog.set_level(logging.INFO, logger="contact_form")
    return caplog
