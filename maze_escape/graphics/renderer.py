"""
Maze Escape - Renderer
Draws session snapshots: maze tiles, goal, player, and the win screen
"""

import pygame
from typing import Optional, Tuple

from maze_escape.core.constants import COLORS, PLAYER_SCALE, WIN_TEXT, WIN_TIME_FORMAT
from maze_escape.core.session import SessionSnapshot, SessionState
from maze_escape.utils.grid import Coordinate, Tile


class Renderer:
    """
    Draws whatever the session reports; holds no game state of its own.
    The tile layer is cached and only rebuilt when the snapshot's
    generation changes.
    """

    def __init__(self, tile_size: int, grid_width: int, grid_height: int):
        self.tile_size = tile_size
        self.grid_width = grid_width
        self.grid_height = grid_height

        self.maze_surface: Optional[pygame.Surface] = None
        self._cached_generation = 0

        self.font_large = pygame.font.Font(None, 48)

    @property
    def size(self) -> Tuple[int, int]:
        return (self.grid_width * self.tile_size, self.grid_height * self.tile_size)

    def tile_rect(self, pos: Coordinate) -> pygame.Rect:
        """Screen rect of a grid cell. Row 0 sits at the bottom of the window."""
        x, y = pos
        screen_y = (self.grid_height - 1 - y) * self.tile_size
        return pygame.Rect(x * self.tile_size, screen_y, self.tile_size, self.tile_size)

    def _build_maze_surface(self, snapshot: SessionSnapshot):
        surface = pygame.Surface(self.size)
        grid = snapshot.grid
        for y in range(grid.height):
            for x in range(grid.width):
                color = COLORS.PATH if grid.get(x, y) == Tile.PATH else COLORS.WALL
                pygame.draw.rect(surface, color, self.tile_rect((x, y)))
        self.maze_surface = surface
        self._cached_generation = snapshot.generation

    def render(self, screen: pygame.Surface, snapshot: SessionSnapshot):
        """Main render function."""
        screen.fill(COLORS.BACKGROUND)

        if snapshot.state == SessionState.WON:
            self._render_win(screen, snapshot)
            return

        if self.maze_surface is None or snapshot.generation != self._cached_generation:
            self._build_maze_surface(snapshot)
        screen.blit(self.maze_surface, (0, 0))

        pygame.draw.rect(screen, COLORS.GOAL, self.tile_rect(snapshot.goal))

        player_rect = self.tile_rect(snapshot.player)
        inner = int(self.tile_size * PLAYER_SCALE)
        pygame.draw.rect(screen, COLORS.PLAYER, pygame.Rect(0, 0, inner, inner).move(
            player_rect.centerx - inner // 2, player_rect.centery - inner // 2))

    def _render_win(self, screen: pygame.Surface, snapshot: SessionSnapshot):
        width, height = self.size
        lines = [WIN_TEXT, WIN_TIME_FORMAT.format(time=snapshot.win_time)]
        for i, line in enumerate(lines):
            text = self.font_large.render(line, True, COLORS.UI_GOLD)
            rect = text.get_rect(center=(width // 2, int(height * 0.35) + i * 48))
            screen.blit(text, rect)
