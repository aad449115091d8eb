"""The player character: grid movement plus a walking animation."""

from __future__ import annotations

from sigmarpg.animation import Animation
from sigmarpg.game_data import GameData
from sigmarpg.movement import MoveDirection, Movement

_TEXTURE_NAME = "BODY_male"
_FRAME_SIZE = (64, 64)


class Player:
    """Walks one tile at a time and draws itself from a sprite sheet."""

    def __init__(self, data: GameData) -> None:
        self._data = data
        self._texture = data.assets.get_texture(_TEXTURE_NAME)
        self._movement = Movement()
        self._animation = Animation(0.1, 9, _FRAME_SIZE)
        self._move = MoveDirection.STILL
        self._texture_rect = (0, 0, *_FRAME_SIZE)
        self._position = self._movement.current_position

    @property
    def grid_position(self) -> tuple[int, int]:
        return self._movement.grid_position

    @property
    def is_moving(self) -> bool:
        return self._movement.is_moving

    @property
    def position(self) -> tuple[float, float]:
        """Pixel position the sprite is drawn at."""
        return self._position

    @property
    def texture_rect(self) -> tuple[int, int, int, int]:
        """Area of the sprite sheet currently shown."""
        return self._texture_rect

    def move(self, which_way: MoveDirection) -> None:
        """Request a step; ignored while a step is under way."""
        if not self._movement.is_moving:
            self._move = which_way

    def update(self, dt: float) -> None:
        """Start any requested step, then advance movement and animation."""
        if not self._movement.is_moving and self._move is not MoveDirection.STILL:
            direction = self._move
            self._movement.move(direction)
            self._move = MoveDirection.STILL
            self._animation.last_direction = direction

        self._movement.update(dt)

        if self._movement.is_moving:
            self._animation.play()
        else:
            self._animation.stop()
        self._animation.update(dt)

        self._texture_rect = self._animation.current_sprite_rect(
            self._animation.last_direction
        )
        self._position = self._movement.current_position

    def render(self, dt: float) -> None:
        """Draw the current frame onto the window."""
        x, y = self._position
        self._data.window.blit(self._texture, (int(x), int(y)), self._texture_rect)