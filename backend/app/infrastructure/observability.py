"""Structured Logging — one JSON object per line for relay requests and model calls.

Invariants:
    - Every line carries timestamp (taken from the record), level, logger, message
    - Relay extras (route, prompt_chars, model, tokens, provider_detail) appear
      only when set on the record; values JSON can't encode are stringified
    - setup_logging owns exactly one root handler, however often it runs

Design Decisions:
    - Stdlib logging only: the relay's log volume is one line per call
    - Chatty HTTP client loggers pinned to WARNING unless level is DEBUG, so
      each relay call logs its own lines and not the SDK's transport chatter
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "route", "path", "model", "error_code", "prompt_chars",
    "max_output_tokens", "input_tokens", "output_tokens", "provider_detail",
)

QUIET_LOGGERS = ("httpx", "httpcore", "google_genai")

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Render a record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key] for key in EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class _RelayHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the relay's root handler, replacing any earlier one."""
    root = logging.root
    for old in [h for h in root.handlers if isinstance(h, _RelayHandler)]:
        root.removeHandler(old)
        old.close()

    handler = _RelayHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root.addHandler(handler)

    resolved = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(resolved)
    quiet = logging.NOTSET if resolved <= logging.DEBUG else logging.WARNING
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet)
    return handler
