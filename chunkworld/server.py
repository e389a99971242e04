"""
project: Chunk World
module: server.py
License: MIT

Server bootstrap: logging configuration and the development HTTP server.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from chunkworld import app
from chunkworld.chunks import GeneratorConfig
from chunkworld.logging_utils import server_started

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def start_server(host="0.0.0.0", port=5000, debug: bool = False):  # pragma: no cover (runtime only)
    """Validate generator settings, configure logging and run the Flask server."""
    with app.app_context():
        _configure_logging()
        cfg = GeneratorConfig.from_mapping(app.config)
    logging.getLogger(__name__).info(
        "Serving chunks: size=%s world_extent=%s decoration_chance=%s",
        cfg.size,
        cfg.world_extent,
        cfg.decoration_chance,
    )
    server_started(host, port, debug)
    try:
        print(f"[INFO] Starting chunk server on {host}:{port}")
        app.run(host=host, port=port, debug=debug, threaded=True)
    except KeyboardInterrupt:
        print("\n[INFO] Server stopped by user (Ctrl+C)")
        sys.exit(0)


def _configure_logging():
    """Configure logging to both console and a rotating file in instance/.

    The file path will be instance/app.log. Retains a few backups to avoid growth.
    """
    log_dir = app.instance_path
    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError:
        pass
    log_path = os.path.join(log_dir, "app.log")

    root = logging.getLogger()
    root.setLevel(logging.INFO)

    file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter(LOG_FORMAT))

    # Avoid duplicate handlers if reconfigured
    for h in list(root.handlers):
        root.removeHandler(h)
        if isinstance(h, RotatingFileHandler):
            h.close()

    root.addHandler(file_handler)
    root.addHandler(console)
