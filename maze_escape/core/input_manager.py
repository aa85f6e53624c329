"""
Input Manager for Maze Escape
Turns keyboard and mouse state into directional intents and a restart signal
"""

import pygame
from typing import Dict, List, Sequence
from enum import Enum, auto

from maze_escape.core.constants import CONTROLS
from maze_escape.utils.grid import Direction

class InputAction(Enum):
    """Game input actions that can be rebound."""
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    RESTART = auto()
    QUIT = auto()

ACTION_DIRECTIONS: Dict[InputAction, Direction] = {
    InputAction.MOVE_UP: Direction.UP,
    InputAction.MOVE_DOWN: Direction.DOWN,
    InputAction.MOVE_LEFT: Direction.LEFT,
    InputAction.MOVE_RIGHT: Direction.RIGHT,
}

class InputManager:
    """Manages keyboard and mouse input with rebindable keys."""

    def __init__(self):
        self.key_bindings: Dict[InputAction, List[int]] = {
            InputAction.MOVE_UP: list(CONTROLS["move_up"]),
            InputAction.MOVE_DOWN: list(CONTROLS["move_down"]),
            InputAction.MOVE_LEFT: list(CONTROLS["move_left"]),
            InputAction.MOVE_RIGHT: list(CONTROLS["move_right"]),
            InputAction.RESTART: list(CONTROLS["restart"]),
            InputAction.QUIT: list(CONTROLS["quit"]),
        }

        self.pressed_actions: Dict[InputAction, bool] = {action: False for action in InputAction}
        self.just_pressed: Dict[InputAction, bool] = {action: False for action in InputAction}

        self.mouse_pos = (0, 0)
        self.mouse_down = False

    def update(self, keys: Sequence[bool], mouse_pos=(0, 0), mouse_down: bool = False):
        """Update input state from a pygame.key.get_pressed() style sequence."""
        self.just_pressed = {action: False for action in InputAction}

        for action, bound_keys in self.key_bindings.items():
            was_pressed = self.pressed_actions[action]
            is_pressed = any(keys[key] for key in bound_keys)

            self.pressed_actions[action] = is_pressed
            if is_pressed and not was_pressed:
                self.just_pressed[action] = True

        self.mouse_pos = mouse_pos
        self.mouse_down = mouse_down

    def poll(self):
        """Read the live keyboard and mouse state from pygame."""
        self.update(
            pygame.key.get_pressed(),
            pygame.mouse.get_pos(),
            pygame.mouse.get_pressed()[0],
        )

    def is_action_pressed(self, action: InputAction) -> bool:
        """Check if action is currently held down."""
        return self.pressed_actions.get(action, False)

    def is_action_just_pressed(self, action: InputAction) -> bool:
        """Check if action was just pressed this frame."""
        return self.just_pressed.get(action, False)

    def rebind_key(self, action: InputAction, new_key: int):
        """Rebind an action to a single new key."""
        self.key_bindings[action] = [new_key]

    def get_binding(self, action: InputAction) -> int:
        """Get the primary key binding for an action."""
        keys = self.key_bindings.get(action)
        return keys[0] if keys else -1

    def get_intents(self) -> List[Direction]:
        """Directions currently held, in no particular priority."""
        return [direction for action, direction in ACTION_DIRECTIONS.items()
                if self.is_action_pressed(action)]

    def restart_requested(self) -> bool:
        return self.is_action_just_pressed(InputAction.RESTART)
