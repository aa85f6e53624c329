"""
Maze Escape - Rendering
"""
