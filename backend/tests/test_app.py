import logging

from contact_form.core.config import settings
from contact_form.core.logging import HANDLER_NAME, LOGGER_NAME, configure_logging, format_event


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_contact_page_is_served(client):
    response = client.get("/contact")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    for field in ('id="name"', 'id="email"', 'id="message"', 'id="submit"'):
        assert field in response.text
    assert "/api/contact" in response.text


def test_cors_preflight_echoes_origin(client):
    response = client.options(
        "/api/contact",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Headers": "content-type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert response.headers["access-control-allow-headers"] == "content-type"


def test_cors_respects_configured_origins(client, monkeypatch):
    monkeypatch.setattr(settings, "CORS_ORIGINS", ["https://example.com"])

    allowed = client.get("/health", headers={"Origin": "https://example.com"})
    denied = client.get("/health", headers={"Origin": "https://evil.test"})

    assert allowed.headers["access-control-allow-origin"] == "https://example.com"
    assert "access-control-allow-origin" not in denied.headers


def test_configure_logging_does_not_stack_handlers():
    configure_logging("INFO")
    configure_logging("DEBUG")

    logger = logging.getLogger(LOGGER_NAME)
    ours = [h for h in logger.handlers if h.get_name() == HANDLER_NAME]
    assert len(ours) == 1
    assert logger.level == logging.DEBUG
    configure_logging(settings.LOG_LEVEL)


def test_format_event_is_label_then_json():
    assert format_event("EVT", {"a": 1, "b": "é"}) == 'EVT {"a":1,"b":"é"}'
