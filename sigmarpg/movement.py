"""Tile-based movement with smooth interpolation between tiles."""

from __future__ import annotations

import math
from enum import Enum


class MoveDirection(Enum):
    """Direction of a single step on the tile grid."""

    STILL = 0
    LEFT = 1
    RIGHT = 2
    DOWN = 3
    UP = 4


_OFFSETS = {
    MoveDirection.UP: (0, -1),
    MoveDirection.DOWN: (0, 1),
    MoveDirection.LEFT: (-1, 0),
    MoveDirection.RIGHT: (1, 0),
}


class Movement:
    """Moves one tile at a time towards a target, gliding in pixel space."""

    def __init__(self, tile_size: float = 64.0, speed: float = 100.0) -> None:
        self._tile_size = float(tile_size)
        self._speed = float(speed)
        self._grid_position: tuple[int, int] = (0, 0)
        self._current_position: tuple[float, float] = (0.0, 0.0)
        self._target_position: tuple[float, float] = self._current_position
        self._is_moving = False

    @property
    def tile_size(self) -> float:
        return self._tile_size

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def grid_position(self) -> tuple[int, int]:
        return self._grid_position

    @property
    def current_position(self) -> tuple[float, float]:
        return self._current_position

    @property
    def target_position(self) -> tuple[float, float]:
        return self._target_position

    @property
    def is_moving(self) -> bool:
        return self._is_moving

    def _to_pixels(self, grid: tuple[int, int]) -> tuple[float, float]:
        return (grid[0] * self._tile_size, grid[1] * self._tile_size)

    def move(self, direction: MoveDirection) -> None:
        """Start a step towards ``direction`` unless already moving."""
        if self._is_moving or direction is MoveDirection.STILL:
            return
        offset = _OFFSETS.get(direction)
        if offset is None:
            return
        gx, gy = self._grid_position
        self._grid_position = (gx + offset[0], gy + offset[1])
        self._target_position = self._to_pixels(self._grid_position)
        self._is_moving = True

    def update(self, dt: float) -> None:
        """Advance towards the target; snap once within half a pixel."""
        if not self._is_moving:
            return
        dx = self._target_position[0] - self._current_position[0]
        dy = self._target_position[1] - self._current_position[1]
        distance = math.hypot(dx, dy)
        if distance > 0.5:
            nx, ny = dx / distance, dy / distance
            step_x = nx * self._speed * dt
            step_y = ny * self._speed * dt
            # Never step more than one unit per axis in a single update.
            if abs(step_x) > abs(nx):
                step_x = nx
            if abs(step_y) > abs(ny):
                step_y = ny
            cx, cy = self._current_position
            self._current_position = (cx + step_x, cy + step_y)
        else:
            self._current_position = self._target_position
            self._is_moving = False

    def set_position(self, grid_pos: tuple[int, int]) -> None:
        """Place the mover on ``grid_pos`` immediately and stop it."""
        self._grid_position = (int(grid_pos[0]), int(grid_pos[1]))
        self._current_position = self._to_pixels(self._grid_position)
        self._target_position = self._current_position
        self._is_moving = False

    def distance_to_target(self) -> float:
        """Pixel distance from the current position to the target."""
        dx = self._target_position[0] - self._current_position[0]
        dy = self._target_position[1] - self._current_position[1]
        return math.hypot(dx, dy)