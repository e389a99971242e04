# Tile constants centralized for modular imports
FLOOR = 0
WALL = 1
DOOR = 2
HAZARD = 3
TREASURE = 4
FOLIAGE = 5

# Decoration values share the door value (2); the client renders both the same way
DECORATIONS = (DOOR, HAZARD, TREASURE, FOLIAGE)
WALKABLE = frozenset({FLOOR, DOOR, HAZARD, TREASURE, FOLIAGE})
TILE_NAMES = {
    "floor": FLOOR,
    "wall": WALL,
    "door": DOOR,
    "hazard": HAZARD,
    "treasure": TREASURE,
    "foliage": FOLIAGE,
}

__all__ = ["FLOOR", "WALL", "DOOR", "HAZARD", "TREASURE", "FOLIAGE", "DECORATIONS", "WALKABLE", "TILE_NAMES"]
