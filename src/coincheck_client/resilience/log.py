"""Logging utilities for exchange calls."""

import atexit
import json
import logging
import os
import queue
import threading
from datetime import datetime, timezone
from logging.handlers import QueueHandler, QueueListener
from typing import Any, Dict, Tuple

from coincheck_client.core.logger import logger, scrub_secrets

# JSONL path -> (logger, listener). File writes happen on the listener thread,
# so log_event never touches the disk from the event loop.
_JSONL_SINKS: Dict[str, Tuple[logging.Logger, QueueListener]] = {}
_SINKS_LOCK = threading.Lock()


def _jsonl_sink(path: str) -> logging.Logger:
    with _SINKS_LOCK:
        if path not in _JSONL_SINKS:
            file_handler = logging.FileHandler(path, encoding="utf-8")
            file_handler.setFormatter(logging.Formatter("%(message)s"))
            q: "queue.SimpleQueue[logging.LogRecord]" = queue.SimpleQueue()
            listener = QueueListener(q, file_handler)
            listener.start()

            sink = logging.getLogger(f"coincheck_client.jsonl.{len(_JSONL_SINKS)}")
            sink.setLevel(logging.INFO)
            sink.propagate = False
            sink.addHandler(QueueHandler(q))
            _JSONL_SINKS[path] = (sink, listener)
        return _JSONL_SINKS[path][0]


def close_event_sinks() -> None:
    """Flush and close every JSONL sink. Safe to call more than once."""
    with _SINKS_LOCK:
        for sink, listener in _JSONL_SINKS.values():
            listener.stop()
            for handler in listener.handlers:
                handler.close()
            for handler in list(sink.handlers):
                sink.removeHandler(handler)
        _JSONL_SINKS.clear()


atexit.register(close_event_sinks)


def log_event(
    event_type: str,
    data: Dict[str, Any],
    context: str = "exchange_call",
    level: int = logging.DEBUG,
) -> None:
    """Log structured events."""
    log_entry = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "type": event_type,
        "context": context,
        **data,
    }

    logger.log(level, f"[RESILIENCE] {event_type}: {json.dumps(data, separators=(',', ':'))}")

    # Log to JSONL if enabled
    log_path = os.environ.get("COINCHECK_LOG_JSONL")
    if log_path:
        _jsonl_sink(log_path).info(scrub_secrets(json.dumps(log_entry)))


def log_provider_error(
    exchange_name: str, operation: str, error_type: str, details: str
) -> None:
    """Log provider-specific errors."""
    log_event(
        "provider_error",
        {
            "exchange": exchange_name,
            "operation": operation,
            "error_type": error_type,
            "details": details,
        },
    )
