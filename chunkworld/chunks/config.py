from dataclasses import dataclass
from typing import Any, Mapping, Tuple

from .tiles import DECORATIONS


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in {"0", "false", "no", "off", ""}
    return bool(value)


def _as_palette(value: Any) -> Tuple[int, ...]:
    if isinstance(value, str):
        return tuple(int(part) for part in value.split(",") if part.strip())
    return tuple(int(v) for v in value)


@dataclass(frozen=True)
class GeneratorConfig:
    size: int = 10
    world_extent: int = 4
    decoration_chance: float = 0.1
    decoration_palette: Tuple[int, ...] = DECORATIONS
    enable_metrics: bool = True

    def __post_init__(self):
        if self.size < 3:
            raise ValueError(f"chunk size must be at least 3 (got {self.size})")
        if self.world_extent < 0:
            raise ValueError(f"world extent must be non-negative (got {self.world_extent})")
        if not 0.0 <= self.decoration_chance <= 1.0:
            raise ValueError(f"decoration chance must be within [0, 1] (got {self.decoration_chance})")
        if not self.decoration_palette:
            raise ValueError("decoration palette must not be empty")
        bad = [v for v in self.decoration_palette if v not in DECORATIONS]
        if bad:
            raise ValueError(f"decoration palette values must be walkable decorations {DECORATIONS} (got {bad})")

    @property
    def midpoint(self) -> int:
        return self.size // 2

    @classmethod
    def from_mapping(cls, cfg: Mapping[str, Any]) -> "GeneratorConfig":
        """Build a config from a Flask-style mapping (``CHUNK_*`` / ``WORLD_EXTENT`` keys).

        Missing keys fall back to the dataclass defaults.
        """
        kwargs = {}
        if cfg.get("CHUNK_SIZE") is not None:
            kwargs["size"] = int(cfg["CHUNK_SIZE"])
        if cfg.get("WORLD_EXTENT") is not None:
            kwargs["world_extent"] = int(cfg["WORLD_EXTENT"])
        if cfg.get("CHUNK_DECORATION_CHANCE") is not None:
            kwargs["decoration_chance"] = float(cfg["CHUNK_DECORATION_CHANCE"])
        if cfg.get("CHUNK_DECORATION_PALETTE") is not None:
            kwargs["decoration_palette"] = _as_palette(cfg["CHUNK_DECORATION_PALETTE"])
        if cfg.get("CHUNK_ENABLE_GENERATION_METRICS") is not None:
            kwargs["enable_metrics"] = _as_bool(cfg["CHUNK_ENABLE_GENERATION_METRICS"])
        return cls(**kwargs)


__all__ = ["GeneratorConfig"]
