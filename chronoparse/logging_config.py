from __future__ import annotations

import logging
import os
from typing import Any

import orjson

# attributes every LogRecord carries; anything else arrived through ``extra=``
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({})).keys()) | {"message", "asctime"}


class JsonOrJsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "time": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RECORD_ATTRS:
                continue
            if key in payload:
                continue
            try:
                orjson.dumps(value)
                payload[key] = value
            except orjson.JSONEncodeError:
                payload[key] = repr(value)
        return orjson.dumps(payload).decode()


def configure_logging(level: str = "INFO", json: bool = True) -> None:
    logging.captureWarnings(True)
    root = logging.getLogger()
    root.setLevel(level.upper())
    handler = logging.StreamHandler()
    if json:
        handler.setFormatter(JsonOrJsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
    root.handlers.clear()
    root.addHandler(handler)

    tz = os.getenv("TZ")
    if tz:
        try:
            import time

            os.environ["TZ"] = tz
            time.tzset()
        except AttributeError:  # pragma: no cover - Windows
            logging.getLogger(__name__).warning("Failed to set timezone", extra={"tz": tz})
