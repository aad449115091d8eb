"""Shared context handed to every game screen."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Sequence

import pygame

from sigmarpg.assets import AssetsManager
from sigmarpg.definitions import LOG_FILEPATH
from sigmarpg.input_manager import InputManager
from sigmarpg.logger import Logger
from sigmarpg.state_machine import StateMachine


@dataclass
class GameData:
    """State machine, window, assets and input shared by all states."""

    machine: StateMachine
    window: Any
    assets: AssetsManager
    input: InputManager
    logger: Logger | None = None
    events: Callable[[], Iterable[Any]] = field(default=pygame.event.get)
    keys: Callable[[], Sequence[bool]] = field(default=pygame.key.get_pressed)
    present: Callable[[], None] = field(default=pygame.display.flip)
    is_open: bool = True

    @classmethod
    def create(
        cls, window: Any, log_path: str | os.PathLike[str] = LOG_FILEPATH
    ) -> GameData:
        """Build the context with one logger shared by its parts."""
        logger = Logger(log_path)
        return cls(
            machine=StateMachine(logger),
            window=window,
            assets=AssetsManager(logger),
            input=InputManager(),
            logger=logger,
        )

    def close_window(self) -> None:
        """Mark the window closed so the main loop ends."""
        self.is_open = False