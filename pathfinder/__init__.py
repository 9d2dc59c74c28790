"""Pathfinder - maze generation and grid search simulation.

This package generates perfect mazes and simulates breadth-first, depth-first
and A* searches over walkability grids, served over HTTP or shown in a
desktop viewer.
"""

__version__ = "1.0.0"
__author__ = "Pathfinder"
