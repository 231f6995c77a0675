from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, Response

from contact_form.api.api_v1 import api_router
from contact_form.core.config import settings
from contact_form.core.logging import configure_logging

STATIC_DIR = Path(__file__).resolve().parent / "static"


def _allowed_origin(origin: str | None) -> str | None:
    if "*" in settings.CORS_ORIGINS:
        return origin or "*"
    if origin and origin in settings.CORS_ORIGINS:
        return origin
    return None


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.PROJECT_NAME)

    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)

        allowed = _allowed_origin(request.headers.get("origin"))
        if allowed is None:
            return response

        response.headers["Access-Control-Allow-Origin"] = allowed
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        request_headers = request.headers.get("Access-Control-Request-Headers")
        if request_headers:
            response.headers["Access-Control-Allow-Headers"] = request_headers
        else:
            response.headers["Access-Control-Allow-Headers"] = "*"

        response.headers["Access-Control-Allow-Credentials"] = "false"
        return response

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/contact", include_in_schema=False)
    def contact_page() -> FileResponse:
        return FileResponse(STATIC_DIR / "contact.html", media_type="text/html")

    app.include_router(api_router, prefix=settings.API_V1_STR)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("contact_form.main:app", host="0.0.0.0", port=8000, log_level=settings.LOG_LEVEL.lower())
