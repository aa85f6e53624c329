"""
Maze Escape - Maze generation and goal placement
"""
