import json
import logging
import os
from logging.handlers import RotatingFileHandler

from chunkworld import app, logging_utils
from chunkworld.logging_utils import EVENT_LOGGER, chunk_rejected, chunk_served, format_event
from chunkworld.server import _configure_logging


def test_configure_logging_writes_rotating_file(monkeypatch, tmp_path):
    monkeypatch.setattr(app, "instance_path", str(tmp_path))
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        _configure_logging()
        _configure_logging()  # reconfiguring must not stack handlers
        file_handlers = [h for h in root.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert len(root.handlers) == 2
        logging.getLogger("chunkworld.test").info("hello from test")
        file_handlers[0].flush()
        with open(os.path.join(tmp_path, "app.log"), encoding="utf-8") as fh:
            assert "hello from test" in fh.read()
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)


def test_format_event_key_value(monkeypatch):
    monkeypatch.setattr(logging_utils, "JSON_MODE", False)
    line = format_event("chunk_served", x=1, cache="hit", note="two words", skip=None)
    assert line == "event=chunk_served x=1 cache=hit note=two_words"


def test_format_event_json(monkeypatch):
    monkeypatch.setattr(logging_utils, "JSON_MODE", True)
    rec = json.loads(format_event("chunk_rejected", reason="bad x", x="abc"))
    assert rec == {"event": "chunk_rejected", "reason": "bad x", "x": "abc"}


def test_chunk_events_are_logging_records(monkeypatch, caplog):
    monkeypatch.setattr(logging_utils, "JSON_MODE", False)
    with caplog.at_level(logging.DEBUG, logger=EVENT_LOGGER):
        chunk_served(1, -2, cache_hit=True, ms=0.5)
        chunk_rejected("abc", "0", "x must be a signed decimal integer")
    records = [r for r in caplog.records if r.name == EVENT_LOGGER]
    assert [r.event for r in records] == ["chunk_served", "chunk_rejected"]
    assert [r.levelno for r in records] == [logging.DEBUG, logging.WARNING]
    assert records[0].fields == {"x": 1, "y": -2, "cache": "hit", "ms": 0.5}
    assert records[0].getMessage() == "event=chunk_served x=1 y=-2 cache=hit ms=0.5"


def test_debug_events_filtered_at_info(caplog):
    with caplog.at_level(logging.INFO, logger=EVENT_LOGGER):
        chunk_served(0, 0, cache_hit=False, ms=1.0)
    assert not [r for r in caplog.records if r.name == EVENT_LOGGER]
