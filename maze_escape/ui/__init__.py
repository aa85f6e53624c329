"""
Maze Escape - UI widgets
"""
