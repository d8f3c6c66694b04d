"""Request Logging — JSON or text log lines carrying document and principal context.

Invariants:
    - Every line has timestamp (taken from the record), level, logger, message
    - Document context (resource, resource_id, principal_id) and error_code/path
      are emitted only when the caller passed them via extra=
    - setup_logging is idempotent: calling it again replaces the handler it
      installed before instead of stacking a second one

Design Decisions:
    - stdlib logging with a small formatter; call sites use extra= so the same
      statement reads well in both formats
    - Text format appends the context as key=value so local runs stay greppable
"""

import logging
import json
from datetime import datetime, timezone

CONTEXT_KEYS = (
    "resource", "resource_id", "principal_id", "error_code", "path",
)

_HANDLER_NAME = "pairwork"


def _context(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in CONTEXT_KEYS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        line = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            line["exception"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False, default=str)


class ContextTextFormatter(logging.Formatter):
    """Human-readable line followed by the document context, if any."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        context = _context(record)
        if context:
            text += " " + " ".join(f"{k}={v}" for k, v in context.items())
        return text


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the pairwork handler on the root logger."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else ContextTextFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
