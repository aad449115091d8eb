"""The game's screens: splash, main menu and the playing field."""

from __future__ import annotations

import pygame

from sigmarpg.animation import Clock
from sigmarpg.definitions import (
    BODY_MALE_TEXTURE_PATH,
    GAMESTATE_BACKGROUND_PATH,
    MAINMENU_BACKGROUND_PATH,
    MAINMENU_PLAYBUTTON_PATH,
    MAINMENU_TITLE_PATH,
    SPLASHSTATE_BACKGROUND_PATH,
    SPLASHSTATE_SHOWTIME,
)
from sigmarpg.game_data import GameData
from sigmarpg.movement import MoveDirection
from sigmarpg.player import Player
from sigmarpg.state import State

_SPLASH_SCALE = 12
_KEY_DIRECTIONS = (
    (pygame.K_a, MoveDirection.LEFT),
    (pygame.K_d, MoveDirection.RIGHT),
    (pygame.K_w, MoveDirection.UP),
    (pygame.K_s, MoveDirection.DOWN),
)


def _close_on_quit(data: GameData, event) -> None:
    if event.type == pygame.QUIT:
        data.close_window()


class SplashState(State):
    """Shows a background for a few seconds, then opens the main menu."""

    def __init__(self, data: GameData) -> None:
        self._data = data
        self._clock = Clock()
        self._background: pygame.Surface | None = None

    @property
    def background(self) -> pygame.Surface | None:
        return self._background

    def init(self) -> None:
        assets = self._data.assets
        assets.load_texture("SplashState Background", SPLASHSTATE_BACKGROUND_PATH)
        texture = assets.get_texture("SplashState Background")
        width, height = texture.get_size()
        self._background = pygame.transform.scale(
            texture, (width * _SPLASH_SCALE, height * _SPLASH_SCALE)
        )

    def handle_input(self) -> None:
        for event in self._data.events():
            _close_on_quit(self._data, event)

    def update(self, dt: float) -> None:
        if self._clock.elapsed() > SPLASHSTATE_SHOWTIME:
            self._data.machine.add_state(MainMenuState(self._data), True)

    def render(self, dt: float) -> None:
        window = self._data.window
        window.fill((0, 0, 0))
        window.blit(self._background, (0, 0))
        self._data.present()


class MainMenuState(State):
    """Background, title and a play button that starts the game."""

    def __init__(self, data: GameData) -> None:
        self._data = data
        self._background: pygame.Surface | None = None
        self._title: pygame.Surface | None = None
        self._play_button: pygame.Surface | None = None
        self._play_button_rect = pygame.Rect(0, 0, 0, 0)

    @property
    def play_button_rect(self) -> pygame.Rect:
        return self._play_button_rect

    def init(self) -> None:
        assets = self._data.assets
        assets.load_texture("MainMenu Background", MAINMENU_BACKGROUND_PATH)
        assets.load_texture("MainMenu Title", MAINMENU_TITLE_PATH)
        assets.load_texture("MainMenu PlayButton", MAINMENU_PLAYBUTTON_PATH)

        self._background = assets.get_texture("MainMenu Background")
        self._title = assets.get_texture("MainMenu Title")
        self._play_button = assets.get_texture("MainMenu PlayButton")
        self._play_button_rect = self._play_button.get_rect()

    def handle_input(self) -> None:
        for event in self._data.events():
            _close_on_quit(self._data, event)
            if self._data.input.is_sprite_clicked(
                self._play_button_rect, pygame.BUTTON_LEFT
            ):
                self._data.machine.add_state(GameState(self._data), True)

    def update(self, dt: float) -> None:
        pass

    def render(self, dt: float) -> None:
        window = self._data.window
        window.fill((0, 0, 0))
        window.blit(self._background, (0, 0))
        window.blit(self._title, (0, 0))
        window.blit(self._play_button, self._play_button_rect)
        self._data.present()


class GameState(State):
    """The playing field: a background and a player steered with WASD."""

    def __init__(self, data: GameData) -> None:
        self._data = data
        self._background: pygame.Surface | None = None
        self._player: Player | None = None

    @property
    def player(self) -> Player | None:
        return self._player

    def init(self) -> None:
        assets = self._data.assets
        assets.load_texture("GameState Background", GAMESTATE_BACKGROUND_PATH)
        self._background = assets.get_texture("GameState Background")
        assets.load_texture("BODY_male", BODY_MALE_TEXTURE_PATH)
        self._player = Player(self._data)

    def handle_input(self) -> None:
        for event in self._data.events():
            _close_on_quit(self._data, event)
        pressed = self._data.keys()
        for key, direction in _KEY_DIRECTIONS:
            if pressed[key]:
                self._player.move(direction)

    def update(self, dt: float) -> None:
        self._player.update(dt)

    def render(self, dt: float) -> None:
        window = self._data.window
        window.fill((0, 0, 0))
        window.blit(self._background, (0, 0))
        self._player.render(dt)
        self._data.present()