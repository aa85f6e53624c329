"""
Maze Escape - Main Entry Point
"""

import sys
import os
os.environ['SDL_VIDEO_CENTERED'] = '1'

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from maze_escape.core.game import main


if __name__ == "__main__":
    main()
