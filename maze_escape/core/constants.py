"""
Maze Escape - Game Constants and Configuration
"""

from dataclasses import dataclass

import pygame

# =============================================================================
# DISPLAY SETTINGS
# =============================================================================
WINDOW_TITLE = "Maze Escape"
TARGET_FPS = 60

# Tile/Grid Settings
TILE_SIZE = 32
PLAYER_SCALE = 0.8  # Player sprite relative to tile

# =============================================================================
# COLOR PALETTE
# =============================================================================
@dataclass(frozen=True)
class Colors:
    BACKGROUND = (0, 0, 0)

    # Maze
    WALL = (64, 64, 64)
    PATH = (255, 255, 255)
    GOAL = (0, 255, 0)
    PLAYER = (255, 0, 0)

    # UI Colors
    UI_BG = (64, 64, 64)
    UI_HOVER = (96, 96, 96)
    UI_BORDER = (140, 140, 140)
    UI_TEXT = (255, 255, 255)
    UI_GOLD = (255, 215, 0)

COLORS = Colors()

# =============================================================================
# MAZE SETTINGS
# =============================================================================
MAZE_WIDTH = 21
MAZE_HEIGHT = 21
MIN_MAZE_SIZE = 5

# Carving always begins here; the player respawns here on restart
START_POS = (1, 1)

# =============================================================================
# GAMEPLAY SETTINGS
# =============================================================================
MOVE_INTERVAL = 0.12  # Seconds between admitted steps

WIN_TEXT = "You win!"
WIN_TIME_FORMAT = "Time: {time}"

# =============================================================================
# INPUT MAPPINGS
# =============================================================================
CONTROLS = {
    "move_up": [pygame.K_UP, pygame.K_w],
    "move_down": [pygame.K_DOWN, pygame.K_s],
    "move_left": [pygame.K_LEFT, pygame.K_a],
    "move_right": [pygame.K_RIGHT, pygame.K_d],
    "restart": [pygame.K_RETURN, pygame.K_r],
    "quit": [pygame.K_ESCAPE],
}

# =============================================================================
# DEBUG SETTINGS
# =============================================================================
SHOW_FPS = False
