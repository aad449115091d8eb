"""Sprite-sheet animation driven by a restartable clock."""

from __future__ import annotations

import time
from typing import Callable

from sigmarpg.movement import MoveDirection

_DIRECTION_ROWS = {
    MoveDirection.UP: 0,
    MoveDirection.LEFT: 1,
    MoveDirection.DOWN: 2,
    MoveDirection.RIGHT: 3,
}
_DEFAULT_ROW = 2


class Clock:
    """Measures seconds elapsed since creation or the last restart."""

    def __init__(self, time_source: Callable[[], float] = time.monotonic) -> None:
        self._time_source = time_source
        self._start = time_source()

    def elapsed(self) -> float:
        """Seconds since the clock was started."""
        return self._time_source() - self._start

    def restart(self) -> float:
        """Reset to zero and return the time that had elapsed."""
        now = self._time_source()
        elapsed = now - self._start
        self._start = now
        return elapsed


class Animation:
    """Cycles frames of a sprite sheet laid out one row per direction."""

    def __init__(
        self,
        animation_speed: float = 0.1,
        total_frames: int = 9,
        sprite_size: tuple[int, int] = (64, 64),
        clock: Clock | None = None,
    ) -> None:
        self.animation_speed = animation_speed
        self.total_frames = total_frames
        self.sprite_size = sprite_size
        self.last_direction = MoveDirection.STILL
        self._clock = clock if clock is not None else Clock()
        self._current_frame = 0
        self._is_playing = False

    @property
    def is_playing(self) -> bool:
        return self._is_playing

    @property
    def current_frame(self) -> int:
        return self._current_frame

    def play(self) -> None:
        self._is_playing = True

    def pause(self) -> None:
        self._is_playing = False

    def stop(self) -> None:
        """Stop playing and rewind to the first frame."""
        self._is_playing = False
        self._current_frame = 0

    def update(self, dt: float) -> None:
        """Advance one frame once the frame duration has elapsed."""
        if not self._is_playing:
            return
        if self._clock.elapsed() >= self.animation_speed:
            self._current_frame = (self._current_frame + 1) % self.total_frames
            self._clock.restart()

    def _direction_row(self, direction: MoveDirection) -> int:
        if direction is MoveDirection.STILL:
            if self.last_direction is MoveDirection.STILL:
                return _DEFAULT_ROW
            return self._direction_row(self.last_direction)
        return _DIRECTION_ROWS.get(direction, _DEFAULT_ROW)

    def current_sprite_rect(self, direction: MoveDirection) -> tuple[int, int, int, int]:
        """Return ``(left, top, width, height)`` of the frame to draw."""
        width, height = self.sprite_size
        row = self._direction_row(direction)
        return (self._current_frame * width, row * height, width, height)