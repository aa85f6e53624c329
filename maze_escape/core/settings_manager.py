import copy
import json
import os
from typing import Dict, Any
from maze_escape.core.constants import MAZE_HEIGHT, MAZE_WIDTH, MOVE_INTERVAL, TARGET_FPS, TILE_SIZE
from maze_escape.core.logger import get_logger

SETTINGS_FILE = "settings.json"

DEFAULT_SETTINGS = {
    "maze": {
        "width": MAZE_WIDTH,
        "height": MAZE_HEIGHT,
        "seed": None  # None = new random maze every run
    },
    "gameplay": {
        "move_interval": MOVE_INTERVAL
    },
    "display": {
        "tile_size": TILE_SIZE,
        "fps": TARGET_FPS
    }
}

class SettingsManager:
    def __init__(self, path: str = SETTINGS_FILE):
        self.path = path
        self.settings = copy.deepcopy(DEFAULT_SETTINGS)
        self.load()

    def load(self):
        """Load settings from file."""
        if not os.path.exists(self.path):
            return

        try:
            with open(self.path, 'r') as f:
                saved = json.load(f)
            if not isinstance(saved, dict):
                raise ValueError("top-level value must be an object")
            # Merge with defaults to ensure all keys exist
            self._recursive_update(self.settings, saved)
            get_logger().info(f"Settings loaded from {self.path}")
        except (OSError, ValueError) as e:
            get_logger().error(f"Failed to load settings: {e}")

    def save(self):
        """Save settings to file."""
        try:
            with open(self.path, 'w') as f:
                json.dump(self.settings, f, indent=4)
            get_logger().info("Settings saved")
        except OSError as e:
            get_logger().error(f"Failed to save settings: {e}")

    def _recursive_update(self, base: Dict, update: Dict):
        """Update dictionary recursively, preserving structure."""
        for k, v in update.items():
            if k in base and isinstance(base[k], dict) and isinstance(v, dict):
                self._recursive_update(base[k], v)
            else:
                base[k] = v

    def get(self, category: str, key: str) -> Any:
        return self.settings.get(category, {}).get(key)

    def set(self, category: str, key: str, value: Any):
        if category not in self.settings:
            self.settings[category] = {}
        self.settings[category][key] = value
        self.save()
