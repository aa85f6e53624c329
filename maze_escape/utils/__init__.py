"""
Maze Escape - Grid utilities
"""
