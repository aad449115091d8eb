"""Mouse queries used by the game screens."""

from __future__ import annotations

from typing import Callable, Sequence

import pygame

ButtonSource = Callable[[], Sequence[bool]]
PositionSource = Callable[[], Sequence[int]]


class InputManager:
    """Answers whether the mouse is pressing on a rectangle."""

    def __init__(
        self,
        pressed_buttons: ButtonSource | None = None,
        mouse_pos: PositionSource | None = None,
    ) -> None:
        self._pressed_buttons = pressed_buttons or pygame.mouse.get_pressed
        self._mouse_pos = mouse_pos or pygame.mouse.get_pos

    def is_sprite_clicked(self, rect, button: int = pygame.BUTTON_LEFT) -> bool:
        """True if ``button`` is held while the pointer is inside ``rect``."""
        pressed = self._pressed_buttons()
        index = button - 1
        if not 0 <= index < len(pressed) or not pressed[index]:
            return False
        return bool(pygame.Rect(rect).collidepoint(self.mouse_position()))

    def mouse_position(self) -> tuple[int, int]:
        """Pointer position relative to the window."""
        x, y = self._mouse_pos()
        return (int(x), int(y))