"""Structured logging for the fars package and its CLI."""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict, Optional, TextIO

# Attributes every LogRecord carries; anything else came in through extra=.
_RESERVED_ATTRS = frozenset({
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName",
})

_TEXT_FORMAT = "%(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Fields passed through ``extra=`` (``year``, ``state``, ``path`` …) are
    merged into the payload at the top level.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created).isoformat() + "Z",
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                payload[key] = value

        # numpy scalars and Paths are not JSON-native
        return json.dumps(payload, default=str)


def configure_logging(
    verbose: bool = False,
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Attach a single stream handler to the ``fars`` logger.

    Calling this repeatedly replaces the previous handler rather than
    stacking a new one, so the CLI can be invoked many times in-process.

    Args:
        verbose: Log at DEBUG instead of INFO.
        json_format: Use :class:`JsonFormatter` instead of plain text.
        stream: Target stream.  Defaults to ``sys.stderr``.

    Returns:
        The configured ``fars`` logger.
    """
    logger = logging.getLogger("fars")
    for handler in list(logger.handlers):
        if getattr(handler, "_fars_cli", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        JsonFormatter() if json_format else logging.Formatter(_TEXT_FORMAT)
    )
    handler._fars_cli = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
