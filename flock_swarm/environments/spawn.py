"""
environments/spawn.py

Every flock starts as a ring.
"""

from __future__ import annotations
from typing import Any, Optional
import numpy as np

from flock_swarm.core.unit import Unit, Flock, DEFAULT_COLOR


def generate_units_in_circle(
    center: np.ndarray,
    radius: float,
    count: int,
    rng: Optional[np.random.Generator] = None,
    color: Any = DEFAULT_COLOR
) -> Flock:
    """
    Place `count` units evenly around a circle.

    Unit i sits at angle 2*pi*i/count. Each velocity component is drawn
    uniformly from [-1, 1) using `rng`; pass a seeded generator for
    reproducible starts.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if radius <= 0:
        raise ValueError(f"radius must be positive, got {radius}")

    rng = rng if rng is not None else np.random.default_rng()
    center = np.asarray(center, dtype=np.float64)

    units = []
    for i in range(count):
        angle = 2 * np.pi * i / count
        position = center + radius * np.array([np.cos(angle), np.sin(angle)])
        velocity = rng.uniform(-1.0, 1.0, size=2)
        units.append(Unit(position=position, velocity=velocity, color=color))
    return units
