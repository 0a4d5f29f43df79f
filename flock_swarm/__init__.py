"""
Flock-Swarm: Pointer-Seeking Flocking on a 2D Plane

A small framework for watching a flock of point units separate, align and
cohere while chasing a moving target.
"""

__version__ = "0.1.0"
