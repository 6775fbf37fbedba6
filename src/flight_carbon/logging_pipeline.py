"""JSON logging for the estimate client, with credential redaction."""

from __future__ import annotations

import json
import logging
import logging.handlers
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from queue import Full, Queue
from typing import Final, override

LOGGER = logging.getLogger(__name__)

REDACTED: Final[str] = "[REDACTED]"
SENSITIVE_KEYS: Final[frozenset[str]] = frozenset(
    {"authorization", "api_key", "credential", "token"}
)

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RECORD_ATTRIBUTES: Final[frozenset[str]] = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


def redact(value: object) -> object:
    """Return ``value`` with sensitive mapping keys masked, recursively."""

    if isinstance(value, Mapping):
        return {
            str(key): REDACTED if str(key).lower() in SENSITIVE_KEYS else redact(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [redact(item) for item in value]
    return value


class JsonLogFormatter(logging.Formatter):
    """Render a record as one JSON object with its ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - inherited
        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRIBUTES
        }
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "context": redact(extra),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        elif record.exc_text:
            payload["exception"] = record.exc_text
        return json.dumps(payload, default=str)


class BoundedQueueHandler(logging.handlers.QueueHandler):
    """Queue handler that drops records when the queue is full."""

    @override
    def enqueue(self, record: logging.LogRecord) -> None:
        try:
            self.queue.put_nowait(record)
        except Full:
            return


def configure_logging(
    logger: logging.Logger, *, level: int = logging.WARNING
) -> logging.handlers.QueueListener:
    """Send ``logger`` records as JSON lines to stderr through a bounded queue.

    Records stop propagating to the root logger so they are not printed twice.

    Returns:
        The started listener; pass it to :func:`shutdown_listeners` when done.
    """
    logger.setLevel(level)
    logger.propagate = False

    record_queue: Queue[logging.LogRecord] = Queue(maxsize=256)
    logger.addHandler(BoundedQueueHandler(record_queue))

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(JsonLogFormatter())

    listener = logging.handlers.QueueListener(record_queue, stream_handler)
    listener.start()
    return listener


def shutdown_listeners(listeners: Iterable[logging.handlers.QueueListener]) -> None:
    """Stop all queue listeners while suppressing shutdown errors."""
    for listener in listeners:
        try:
            listener.stop()
        except Exception as exc:  # pragma: no cover - defensive logging cleanup
            LOGGER.warning("Failed to stop logging listener", exc_info=exc)
