"""Window set-up and the fixed-timestep main loop."""

from __future__ import annotations

import time
from typing import Sequence

import pygame

from sigmarpg.game_data import GameData
from sigmarpg.states import SplashState

_MAX_FRAME_TIME = 0.25


class Game:
    """Opens the window and drives the active state at a fixed rate."""

    DT = 1.0 / 60.0

    def __init__(self, width: int, height: int, title: str) -> None:
        pygame.init()
        window = pygame.display.set_mode((width, height), pygame.FULLSCREEN)
        pygame.display.set_caption(title)
        self.data = GameData.create(window)
        self.data.machine.add_state(SplashState(self.data))

    def run(self) -> None:
        """Loop until the window is closed, updating at ``DT`` intervals."""
        machine = self.data.machine
        current_time = time.perf_counter()
        accumulator = 0.0
        while self.data.is_open:
            machine.process_state_changes()
            new_time = time.perf_counter()
            frame_time = min(new_time - current_time, _MAX_FRAME_TIME)
            current_time = new_time
            accumulator += frame_time
            while accumulator >= self.DT:
                machine.active_state().handle_input()
                machine.active_state().update(self.DT)
                accumulator -= self.DT
            machine.active_state().render(accumulator / self.DT)

    def close(self) -> None:
        """Release the log file and the window."""
        if self.data.logger is not None:
            self.data.logger.close()
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game in a full-screen window."""
    game = Game(1920, 1080, "SIGMA")
    try:
        game.run()
    finally:
        game.close()
    return 0