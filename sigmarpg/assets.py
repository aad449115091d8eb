"""Named storage for textures and fonts loaded from disk."""

from __future__ import annotations

import os

import pygame

from sigmarpg.logger import Level, Logger

_LOAD_ERRORS = (OSError, pygame.error)


class AssetsManager:
    """Loads images and fonts once and hands them out by name."""

    def __init__(self, logger: Logger | None = None) -> None:
        self._textures: dict[str, pygame.Surface] = {}
        self._fonts: dict[str, pygame.font.Font] = {}
        self._logger = logger

    def _log(self, level: Level, message: str) -> None:
        if self._logger is not None:
            self._logger.log(level, message)

    def load_texture(self, name: str, filename: str | os.PathLike[str]) -> None:
        """Load an image under ``name``; a failure is logged and ignored."""
        try:
            texture = pygame.image.load(os.fspath(filename))
        except _LOAD_ERRORS:
            self._log(Level.ERROR, f'AssetManager: Texture "{name}" not loaded')
            return
        self._textures[name] = texture
        self._log(Level.DEBUG, f'AssetManager: Texture "{name}" successfully loaded')

    def load_font(
        self, name: str, filename: str | os.PathLike[str] | None, size: int = 24
    ) -> None:
        """Load a font under ``name``; ``None`` selects the built-in font."""
        if not pygame.font.get_init():
            pygame.font.init()
        path = None if filename is None else os.fspath(filename)
        try:
            font = pygame.font.Font(path, size)
        except _LOAD_ERRORS:
            self._log(Level.ERROR, f'AssetManager: Font "{name}" not loaded')
            return
        self._fonts[name] = font

    def get_texture(self, name: str) -> pygame.Surface:
        """Return the texture called ``name``; raise KeyError if absent."""
        try:
            return self._textures[name]
        except KeyError:
            self._log(Level.ERROR, f'AssetManager: Texture "{name}" not found')
            raise KeyError(f"Texture not found: {name}") from None

    def get_font(self, name: str) -> pygame.font.Font | None:
        """Return the font called ``name``, or None if it was never loaded."""
        return self._fonts.get(name)