"""
project: Chunk World
module: __init__.py
License: MIT

Flask application setup for the chunk generation service.

Configuration is sourced from environment variables with defaults suited to
development. A local `instance/` directory holds runtime files such as the
rotating log.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

# Load .env if present so WORLD_EXTENT, CHUNK_* etc. can be supplied
# without exporting shell variables during development.
load_dotenv()

app = Flask(__name__, instance_relative_config=True)

try:
    os.makedirs(app.instance_path, exist_ok=True)
except OSError:
    # Read-only deployments still serve chunks; only file logging is lost
    pass

app.config.update(
    # World / generator settings shared with clients through /api/world
    CHUNK_SIZE=int(os.getenv("CHUNK_SIZE", "10")),
    WORLD_EXTENT=int(os.getenv("WORLD_EXTENT", "4")),
    CHUNK_DECORATION_CHANCE=float(os.getenv("CHUNK_DECORATION_CHANCE", "0.1")),
    CHUNK_DECORATION_PALETTE=os.getenv("CHUNK_DECORATION_PALETTE", "2,3,4,5"),
    CHUNK_ENABLE_GENERATION_METRICS=bool(os.getenv("CHUNK_ENABLE_GENERATION_METRICS", "1") == "1"),
    # Response cache for generated chunks
    CHUNK_CACHE_MAX=int(os.getenv("CHUNK_CACHE_MAX", "256")),
    CHUNK_DISABLE_CACHE=bool(os.getenv("CHUNK_DISABLE_CACHE", "0") == "1"),
    CHUNK_SEED_MAX_LENGTH=int(os.getenv("CHUNK_SEED_MAX_LENGTH", "128")),
)

# Register HTTP blueprints after app config is in place
from chunkworld.routes.chunk_api import bp_chunk  # noqa: E402

app.register_blueprint(bp_chunk)


def create_app():
    """Return the Flask app instance.

    Kept as a factory-style entry point so tests and the CLI share one
    import path.
    """
    return app


@app.errorhandler(HTTPException)
def http_error(e):
    return jsonify({"error": (e.name or "error").lower().replace(" ", "_"), "message": e.description}), e.code


# Error handling: in non-debug mode, return a short JSON body and log details
@app.errorhandler(500)
def internal_error(e):
    error_id = uuid.uuid4().hex[:8]
    logging.exception("Unhandled exception (id=%s)", error_id)
    return jsonify({"error": "internal_error", "error_id": error_id}), 500
