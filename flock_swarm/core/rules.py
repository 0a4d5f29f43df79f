"""
core/rules.py

Three local rules and one pull toward the world.

Keep your distance. Match your neighbors. Stay together.
Then go where you are called.

Inspired by:
- Reynolds, "Flocks, Herds, and Schools" (1987)
- Seek steering behaviors
"""

from __future__ import annotations
from typing import Sequence
import numpy as np

from .unit import Unit, distance, normalize, neighbors_within


def separation(unit: Unit, others: Sequence[Unit], radius: float) -> np.ndarray:
    """
    Push away from close neighbors.

    Each neighbor contributes the unit vector pointing away from it,
    divided by its distance: the closer, the stronger. The raw sum
    is returned, not an average.
    """
    force = np.zeros(2)
    for other in neighbors_within(unit, others, radius):
        d = distance(unit.position, other.position)
        force += normalize(unit.position - other.position) / d
    return force


def alignment(unit: Unit, others: Sequence[Unit], radius: float) -> np.ndarray:
    """Average velocity of neighbors within radius; zero when alone."""
    velocities = [other.velocity for other in neighbors_within(unit, others, radius)]
    if not velocities:
        return np.zeros(2)
    return np.mean(velocities, axis=0)


def cohesion(unit: Unit, others: Sequence[Unit], radius: float) -> np.ndarray:
    """
    Head for the center of nearby neighbors.

    Returns a unit vector toward their mean position, or zero when
    there is nobody within radius.
    """
    positions = [other.position for other in neighbors_within(unit, others, radius)]
    if not positions:
        return np.zeros(2)
    center = np.mean(positions, axis=0)
    return normalize(center - unit.position)


def steer(unit: Unit, target: np.ndarray) -> np.ndarray:
    """
    Seek: desired heading toward the target minus current velocity.

    A unit sitting exactly on the target has no desired heading, so the
    force reduces to braking against its own velocity.
    """
    target = np.asarray(target, dtype=np.float64)
    desired = normalize(target - unit.position)
    return desired - unit.velocity
