"""
Logging for the codec.

Events go to the ``lldptlv`` logger and propagate, so whatever handlers the
host application configured see them. A bounded ring of recent events is kept
on the logger as well, for inspection without any logging setup.
"""
from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Any, Union

LOGGER_NAME = "lldptlv"

_setup_lock = threading.Lock()


class RingBufferHandler(logging.Handler):
    """Holds the most recent ``capacity`` log records as event dicts."""

    def __init__(self, capacity: int = 200):
        super().__init__()
        self.capacity = capacity
        self._events: deque[dict[str, Any]] = deque(maxlen=capacity)

    def emit(self, record: logging.LogRecord) -> None:
        # Handler.handle() already holds self.lock here.
        self._events.append({
            "event": record.getMessage(),
            "logger": record.name,
            "level": record.levelname,
            "ts": record.created,
            "details": getattr(record, "details", {}),
        })

    def get_events(self) -> list[dict[str, Any]]:
        with self.lock:
            return list(self._events)

    def clear(self) -> None:
        with self.lock:
            self._events.clear()


def ring_buffer(logger: logging.Logger) -> RingBufferHandler | None:
    return next((h for h in logger.handlers if isinstance(h, RingBufferHandler)), None)


def create_logger(name: str, ring_size: int, level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """
    Return the logger ``name`` with a ring buffer attached.

    Safe to call from several threads; the level and ring buffer are only set
    by the first call for a given logger. Propagation is left on.
    """
    logger = logging.getLogger(name)
    with _setup_lock:
        if ring_buffer(logger) is None:
            logger.setLevel(level)
            logger.addHandler(RingBufferHandler(capacity=ring_size))
    return logger


def preview(data: bytes, limit: int) -> str:
    """Hex dump of ``data`` cut to ``limit`` octets, with a marker when cut."""
    raw = bytes(data)
    if len(raw) <= limit:
        return raw.hex()
    return f"{raw[:limit].hex()}...(+{len(raw) - limit})"
