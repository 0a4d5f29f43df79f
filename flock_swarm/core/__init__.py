"""
Core components of the flock-swarm system.

- unit: The Unit - position, velocity, color
- rules: Separation, alignment, cohesion and seek steering
- integrator: Force blending and the per-tick update
"""

from .unit import Unit, Flock, distance, normalize, neighbors_within
from .rules import separation, alignment, cohesion, steer
from .integrator import (
    FlockConfig,
    Forces,
    WeightProfile,
    apply_forces,
    compute_forces,
    integrate_unit,
    tick,
)

__all__ = [
    "Unit",
    "Flock",
    "distance",
    "normalize",
    "neighbors_within",
    "separation",
    "alignment",
    "cohesion",
    "steer",
    "FlockConfig",
    "Forces",
    "WeightProfile",
    "apply_forces",
    "compute_forces",
    "integrate_unit",
    "tick",
]
