"""
project: Chunk World
module: chunk_api.py
License: MIT

Chunk generation API routes.

`GET /chunk/<x>/<y>/<seed>` returns `{"chunk": [N*N ints]}` (row-major).
Path values are validated here because the generator itself accepts any
input; malformed requests get a 400 with a short diagnostic.
"""

import re
import threading
import time

from flask import Blueprint, current_app, jsonify

from chunkworld.chunks import ChunkGenerator, GeneratorConfig
from chunkworld.chunks.tiles import TILE_NAMES
from chunkworld.logging_utils import chunk_rejected, chunk_repaired, chunk_served

bp_chunk = Blueprint("chunk_api", __name__)

_COORD_RE = re.compile(r"-?[0-9]{1,12}", re.ASCII)

# Simple in-process cache (seed,x,y,config)->tiles tuple. Guarded by a lock since
# the threaded dev server and WSGI workers may serve requests concurrently.
_chunk_cache = {}
_chunk_cache_lock = threading.Lock()


class ChunkRequestError(ValueError):
    """Raised when path parameters cannot be turned into a chunk request."""


def _parse_coord(name: str, raw: str) -> int:
    if not _COORD_RE.fullmatch(raw):
        raise ChunkRequestError(f"{name} must be a signed decimal integer (got {raw!r})")
    return int(raw)


def _parse_seed(raw: str, max_length: int) -> str:
    if not raw.strip():
        raise ChunkRequestError("seed must not be blank")
    if len(raw) > max_length:
        raise ChunkRequestError(f"seed must be at most {max_length} characters")
    return raw


def generator_config() -> GeneratorConfig:
    return GeneratorConfig.from_mapping(current_app.config)


def clear_chunk_cache() -> None:
    with _chunk_cache_lock:
        _chunk_cache.clear()


def get_cached_chunk(seed: str, chunk_x: int, chunk_y: int, config: GeneratorConfig):
    """Return ``(tiles, cache_hit)`` for the chunk, generating on a miss.

    Tiles are stored as tuples so cached entries cannot be mutated by callers.
    When the cache grows past ``CHUNK_CACHE_MAX`` the oldest entry is dropped.
    """
    if current_app.config.get("CHUNK_DISABLE_CACHE"):
        return tuple(ChunkGenerator(seed, chunk_x, chunk_y, config).run().tiles), False
    key = (seed, chunk_x, chunk_y, config)
    with _chunk_cache_lock:
        tiles = _chunk_cache.get(key)
    if tiles is not None:
        return tiles, True
    outputs = ChunkGenerator(seed, chunk_x, chunk_y, config).run()
    tiles = tuple(outputs.tiles)
    if outputs.metrics.get("bridges_opened") or outputs.metrics.get("cells_stranded"):
        chunk_repaired(
            seed,
            chunk_x,
            chunk_y,
            outputs.metrics.get("bridges_opened", 0),
            outputs.metrics.get("cells_stranded", 0),
        )
    cache_max = int(current_app.config.get("CHUNK_CACHE_MAX", 256))
    with _chunk_cache_lock:
        _chunk_cache[key] = tiles
        while len(_chunk_cache) > max(cache_max, 0):
            first_key = next(iter(_chunk_cache.keys()))
            _chunk_cache.pop(first_key, None)
    return tiles, False


@bp_chunk.route("/chunk/<x>/<y>/<seed>")
def get_chunk(x, y, seed):
    """
    Return the generated chunk at (x, y) for world `seed`.
    Response: { 'chunk': [<N*N ints>] }
    """
    try:
        chunk_x = _parse_coord("x", x)
        chunk_y = _parse_coord("y", y)
        seed = _parse_seed(seed, int(current_app.config.get("CHUNK_SEED_MAX_LENGTH", 128)))
    except ChunkRequestError as exc:
        chunk_rejected(x, y, str(exc))
        return jsonify({"error": "bad_request", "message": str(exc)}), 400

    started = time.perf_counter()
    tiles, hit = get_cached_chunk(seed, chunk_x, chunk_y, generator_config())
    chunk_served(chunk_x, chunk_y, hit, round((time.perf_counter() - started) * 1000, 3))
    return jsonify({"chunk": list(tiles)})


@bp_chunk.route("/api/world")
def world_info():
    """Return the world constants clients need to page through chunks."""
    cfg = generator_config()
    return jsonify(
        {
            "chunk_size": cfg.size,
            "world_extent": cfg.world_extent,
            "decoration_chance": cfg.decoration_chance,
            "tiles": dict(TILE_NAMES),
        }
    )


@bp_chunk.route("/healthz")
def healthz():
    return jsonify({"status": "ok"})
