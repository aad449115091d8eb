import pygame
import pytest

from sigmarpg.assets import AssetsManager
from sigmarpg.logger import Logger


def _write_image(path, size=(4, 4), color=(255, 0, 0)):
    surface = pygame.Surface(size)
    surface.fill(color)
    pygame.image.save(surface, str(path))
    return path


@pytest.fixture
def logger(tmp_path):
    log = Logger(tmp_path / "log.txt")
    yield log
    log.close()


def test_loaded_texture_is_returned(tmp_path):
    assets = AssetsManager()
    assets.load_texture("hero", _write_image(tmp_path / "hero.bmp", size=(5, 7)))
    assert assets.get_texture("hero").get_size() == (5, 7)


def test_missing_texture_raises_key_error():
    assets = AssetsManager()
    with pytest.raises(KeyError, match="Texture not found: ghost"):
        assets.get_texture("ghost")


def test_missing_texture_lookup_is_logged(tmp_path, logger):
    assets = AssetsManager(logger)
    with pytest.raises(KeyError):
        assets.get_texture("ghost")
    text = (tmp_path / "log.txt").read_text(encoding="utf-8")
    assert '[ERROR] AssetManager: Texture "ghost" not found' in text


def test_successful_load_is_logged(tmp_path, logger):
    assets = AssetsManager(logger)
    assets.load_texture("hero", _write_image(tmp_path / "hero.bmp"))
    text = (tmp_path / "log.txt").read_text(encoding="utf-8")
    assert '[DEBUG] AssetManager: Texture "hero" successfully loaded' in text


def test_failed_load_is_logged_and_not_stored(tmp_path, logger):
    assets = AssetsManager(logger)
    assets.load_texture("hero", tmp_path / "missing.png")
    text = (tmp_path / "log.txt").read_text(encoding="utf-8")
    assert '[ERROR] AssetManager: Texture "hero" not loaded' in text
    with pytest.raises(KeyError):
        assets.get_texture("hero")


def test_failed_load_keeps_previous_texture(tmp_path):
    assets = AssetsManager()
    assets.load_texture("hero", _write_image(tmp_path / "hero.bmp", size=(3, 3)))
    assets.load_texture("hero", tmp_path / "missing.png")
    assert assets.get_texture("hero").get_size() == (3, 3)


def test_default_font_loads():
    assets = AssetsManager()
    assets.load_font("ui", None, 16)
    font = assets.get_font("ui")
    assert font.get_height() > 0


def test_missing_font_file_is_logged(tmp_path, logger):
    assets = AssetsManager(logger)
    assets.load_font("ui", tmp_path / "nothing.ttf", 16)
    assert assets.get_font("ui") is None
    text = (tmp_path / "log.txt").read_text(encoding="utf-8")
    assert 'AssetManager: Font "ui" not loaded' in text