"""
Maze Escape - Core systems (session, timing, input, configuration)
"""
