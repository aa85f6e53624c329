"""
Maze Escape - Main Game Loop
Wires pygame input and rendering around a GameSession
"""

import argparse
import sys
from typing import List, Optional

import pygame

from maze_escape.core.constants import SHOW_FPS, WINDOW_TITLE
from maze_escape.core.input_manager import InputAction, InputManager
from maze_escape.core.logger import get_logger, init_logger
from maze_escape.core.session import GameSession, SessionState
from maze_escape.core.settings_manager import SettingsManager
from maze_escape.graphics.renderer import Renderer
from maze_escape.ui.ui_components import Button


class Game:
    """
    Frame-driven shell around a GameSession.
    Each frame: poll input, tick the session, draw the snapshot.
    """

    def __init__(self, settings: Optional[SettingsManager] = None):
        pygame.init()

        self.settings = settings or SettingsManager()
        width = self.settings.get("maze", "width")
        height = self.settings.get("maze", "height")
        tile_size = self.settings.get("display", "tile_size")

        self.session = GameSession(
            width=width,
            height=height,
            move_interval=self.settings.get("gameplay", "move_interval"),
            seed=self.settings.get("maze", "seed"),
        )

        self.renderer = Renderer(tile_size, width, height)
        self.screen = pygame.display.set_mode(self.renderer.size)
        pygame.display.set_caption(WINDOW_TITLE)

        # Timing
        self.clock = pygame.time.Clock()
        self.target_fps = self.settings.get("display", "fps")
        self.show_fps = SHOW_FPS

        self.input_manager = InputManager()
        self.running = True
        self.restart_clicked = False

        screen_w, screen_h = self.renderer.size
        self.restart_button = Button(
            int(screen_w * 0.37), int(screen_h * 0.6), 150, 65,
            "Restart", pygame.font.Font(None, 40),
            action=self._request_restart,
        )

    def _request_restart(self):
        self.restart_clicked = True

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

    def run(self):
        """Main game loop."""
        get_logger().info("Game loop started")
        while self.running:
            dt = self.clock.tick(self.target_fps) / 1000.0

            self._handle_events()
            self.input_manager.poll()
            if self.input_manager.is_action_just_pressed(InputAction.QUIT):
                self.running = False

            won = self.session.state == SessionState.WON
            if won:
                self.restart_button.update(self.input_manager.mouse_pos, self.input_manager.mouse_down)

            restart = self.restart_clicked or self.input_manager.restart_requested()
            self.restart_clicked = False

            snapshot = self.session.tick(dt, self.input_manager.get_intents(), restart)

            self.renderer.render(self.screen, snapshot)
            if snapshot.state == SessionState.WON:
                self.restart_button.draw(self.screen)
            if self.show_fps:
                pygame.display.set_caption(f"{WINDOW_TITLE} | FPS: {self.clock.get_fps():.1f}")

            pygame.display.flip()

        self._cleanup()

    def _cleanup(self):
        """Clean up resources."""
        get_logger().info("Shutting down")
        pygame.quit()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Maze Escape")
    parser.add_argument("--width", type=int, help="Maze width (odd, >= 5)")
    parser.add_argument("--height", type=int, help="Maze height (odd, >= 5)")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible mazes")
    parser.add_argument("--settings", type=str, default="settings.json",
                        help="Settings file path")
    return parser.parse_args(argv)


def apply_overrides(settings: SettingsManager, args: argparse.Namespace):
    """Copy command line values over loaded settings without saving them."""
    for key in ("width", "height", "seed"):
        value = getattr(args, key)
        if value is not None:
            settings.settings["maze"][key] = value


def main(argv: Optional[List[str]] = None):
    """Entry point for the game."""
    args = parse_args(argv)
    init_logger()

    settings = SettingsManager(args.settings)
    apply_overrides(settings, args)

    try:
        game = Game(settings)
    except (TypeError, ValueError) as e:
        get_logger().error(f"Invalid maze settings: {e}")
        sys.exit(2)
    game.run()


if __name__ == "__main__":
    main()
