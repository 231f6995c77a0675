from __future__ import annotations

import json
import logging
import sys
from typing import Any

LOGGER_NAME = "contact_form"

HANDLER_NAME = "contact_form.stderr"

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Safe to call more than once (app factory, tests): the handler is only
    installed the first time, later calls just adjust the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def format_event(label: str, fields: dict[str, Any]) -> str:
    # Label first, then compact JSON, so log shippers can split on the first space.
    return f"{label} {json.dumps(fields, ensure_ascii=False, separators=(',', ':'))}"
