"""
Maze Escape - A procedurally generated maze game
"""

__version__ = "0.1.0"
