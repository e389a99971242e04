"""Structured events for the chunk service.

Events are ordinary ``logging`` records on the ``chunkworld.events`` logger,
so they land in the console and ``instance/app.log`` handlers installed by
``server._configure_logging``. The message is one parseable line, e.g.
``event=chunk_served x=1 y=-2 cache=hit ms=0.41``, or a JSON object when
``CHUNKWORLD_LOG_JSON`` is set. The raw fields also ride on the record as
``record.event`` / ``record.fields``.

Usage:
    from chunkworld.logging_utils import chunk_served
    chunk_served(1, -2, cache_hit=True, ms=0.41)

``None`` fields are dropped.
"""

from __future__ import annotations

import json
import logging
import os

EVENT_LOGGER = "chunkworld.events"
LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}
JSON_MODE = os.getenv("CHUNKWORLD_LOG_JSON", "0").lower() in ("1", "true", "yes", "on")

events = logging.getLogger(EVENT_LOGGER)
events.setLevel(LEVELS.get(os.getenv("CHUNKWORLD_LOG_LEVEL", "info").lower(), logging.INFO))


def format_event(name: str, **fields) -> str:
    fields = {k: v for k, v in fields.items() if v is not None}
    if JSON_MODE:
        return json.dumps({"event": name, **fields}, separators=(",", ":"), default=str)
    parts = [f"event={name}"]
    for k, v in fields.items():
        text = v if isinstance(v, (int, float)) else str(v).replace(" ", "_")
        parts.append(f"{k}={text}")
    return " ".join(parts)


def emit(name: str, level: int = logging.INFO, **fields) -> None:
    if not events.isEnabledFor(level):
        return
    events.log(level, format_event(name, **fields), extra={"event": name, "fields": fields})


def chunk_served(chunk_x: int, chunk_y: int, cache_hit: bool, ms: float) -> None:
    emit("chunk_served", logging.DEBUG, x=chunk_x, y=chunk_y, cache="hit" if cache_hit else "miss", ms=ms)


def chunk_rejected(raw_x: str, raw_y: str, reason: str) -> None:
    """Path values are logged as received; they failed validation."""
    emit("chunk_rejected", logging.WARNING, x=raw_x, y=raw_y, reason=reason)


def chunk_repaired(seed: str, chunk_x: int, chunk_y: int, bridges: int, stranded: int) -> None:
    emit("chunk_repaired", logging.INFO, seed=seed, x=chunk_x, y=chunk_y, bridges=bridges, stranded=stranded)


def server_started(host: str, port: int, debug: bool) -> None:
    emit("startup", logging.INFO, host=host, port=port, debug=debug)


__all__ = [
    "EVENT_LOGGER",
    "format_event",
    "emit",
    "chunk_served",
    "chunk_rejected",
    "chunk_repaired",
    "server_started",
]
