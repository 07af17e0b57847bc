"""Records describing a raycast scene: map, player, rays and minimap."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional

__all__ = [
    "Direction",
    "Scene",
    "Player",
    "Ray",
    "Minimap",
    "MINIMAP_SQUARE",
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
]

MINIMAP_SQUARE = 8

BLACK = 0x000000
WHITE = 0xFFFFFF
RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF


class Direction(IntEnum):
    """Texture slots, usable as list indices."""

    NORTH = 0
    SOUTH = 1
    WEST = 2
    EAST = 3
    DOOR = 4


@dataclass
class Scene:
    """Textures, colours and map of a level.

    Colours are RGB triples. A map width or height left at zero is taken
    from the map itself.
    """

    north_texture: Optional[str] = None
    south_texture: Optional[str] = None
    west_texture: Optional[str] = None
    east_texture: Optional[str] = None
    door_texture: Optional[str] = None
    floor_color: tuple[int, int, int] = (0, 0, 0)
    ceiling_color: tuple[int, int, int] = (0, 0, 0)
    map: list[str] = field(default_factory=list)
    map_width: int = 0
    map_height: int = 0

    def __post_init__(self) -> None:
        for name in ("floor_color", "ceiling_color"):
            color = tuple(getattr(self, name))
            if len(color) != 3:
                raise ValueError(f"{name} needs three components, got {len(color)}")
            setattr(self, name, color)
        self.map = list(self.map)
        if not self.map_height:
            self.map_height = len(self.map)
        if not self.map_width:
            self.map_width = max((len(row) for row in self.map), default=0)


@dataclass
class Player:
    """Position, facing, camera plane and pending movement of the player."""

    x: float = 0.0
    y: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    move_x: float = 0.0
    move_y: float = 0.0
    rotate: float = 0.0


@dataclass
class Ray:
    """State of one ray cast through the map."""

    camera_x: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    map_x: int = 0
    map_y: int = 0
    side_dist_x: float = 0.0
    side_dist_y: float = 0.0
    delta_dist_x: float = 0.0
    delta_dist_y: float = 0.0
    step_x: int = 0
    step_y: int = 0
    hit: bool = False
    side: int = 0
    perp_wall_dist: float = 0.0
    line_height: int = 0
    draw_start: int = 0
    draw_end: int = 0
    texture: Optional[Any] = None
    tex_x: int = 0


@dataclass
class Minimap:
    """Placement and size of the minimap on screen."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0