"""Log Output — one JSON object per line, or plain text for local runs.

Invariants:
    - Each JSON line carries ts, level, logger and message
    - ts is the record's creation time in UTC, not the time it was formatted
    - Post request fields (operation, post_id, error_code, path, status_code)
      appear only when the call site passed them and they are not None
    - A logged exception adds exc_type and the formatted traceback

Design Decisions:
    - Handlers are attached to the root logger so uvicorn and SQLAlchemy
      records share the same output format
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("operation", "post_id", "error_code", "path", "status_code")
TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def _request_fields(record: logging.LogRecord) -> dict:
    return {
        key: getattr(record, key)
        for key in EXTRA_FIELDS
        if getattr(record, key, None) is not None
    }


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_request_fields(record),
        }
        if record.exc_info and record.exc_info[0] is not None:
            payload["exc_type"] = record.exc_info[0].__name__
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Attach a stream handler to the root logger; called once from lifespan."""
    root = logging.getLogger()
    handler = logging.StreamHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
