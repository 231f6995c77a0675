from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


# Load backend/.env if it exists so local overrides (e.g. LOG_LEVEL, CORS_ORIGINS)
# are picked up without exporting them in the shell.
BASE_DIR = Path(__file__).resolve().parents[2]
env_path = BASE_DIR / ".env"
if env_path.exists():
    load_dotenv(env_path)


def _list_env(key: str, default: str) -> list[str]:
    raw = os.getenv(key, default)
    # A wildcard anywhere means allow-all for local development
    if "*" in raw:
        return ["*"]
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings:
    PROJECT_NAME = "Contact Form API"
    API_V1_STR = "/api"

    CORS_ORIGINS = _list_env("CORS_ORIGINS", "*")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
