"""
Tests for the renderer and game wiring (headless)
"""

import json
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest
from maze_escape.core.game import apply_overrides, main, parse_args
from maze_escape.core.session import GameSession
from maze_escape.core.settings_manager import SettingsManager
from maze_escape.graphics.renderer import Renderer
from maze_escape.ui.ui_components import Button

@pytest.fixture(scope="module", autouse=True)
def pygame_init():
    pygame.init()
    yield
    pygame.quit()

def test_tile_rect_puts_row_zero_at_bottom():
    renderer = Renderer(32, 21, 21)
    assert renderer.size == (672, 672)
    assert renderer.tile_rect((0, 0)).topleft == (0, 640)
    assert renderer.tile_rect((1, 20)).topleft == (32, 0)

def test_maze_layer_rebuilt_on_new_generation():
    """Test the tile layer is cached until the maze is replaced."""
    session = GameSession(seed=3)
    renderer = Renderer(8, session.width, session.height)
    screen = pygame.Surface(renderer.size)

    renderer.render(screen, session.snapshot())
    layer = renderer.maze_surface
    renderer.render(screen, session.snapshot())
    assert renderer.maze_surface is layer

    session.restart()
    renderer.render(screen, session.snapshot())
    assert renderer.maze_surface is not layer

def test_button_click_on_release():
    """Test a click fires when the mouse is released over the button."""
    clicks = []
    button = Button(10, 10, 100, 40, "Restart", pygame.font.Font(None, 24),
                    action=lambda: clicks.append(True))

    assert not button.update((20, 20), True)
    assert button.update((20, 20), False)
    assert clicks == [True]

    button.update((20, 20), True)
    assert not button.update((500, 500), False)
    assert clicks == [True]

def test_command_line_overrides(tmp_path):
    args = parse_args(["--seed", "9", "--width", "31", "--settings", str(tmp_path / "s.json")])
    settings = SettingsManager(args.settings)
    apply_overrides(settings, args)

    assert settings.get("maze", "seed") == 9
    assert settings.get("maze", "width") == 31
    assert settings.get("maze", "height") == 21
    assert not (tmp_path / "s.json").exists()

@pytest.mark.parametrize("gameplay", [{"move_interval": "fast"}, {"move_interval": 0}])
def test_bad_settings_exit_cleanly(tmp_path, gameplay):
    """Test unusable settings end the program with status 2, not a traceback."""
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"gameplay": gameplay}))

    with pytest.raises(SystemExit) as exc:
        main(["--settings", str(path)])
    assert exc.value.code == 2
