"""
core/unit.py

A unit is a point with a heading and a color.
Nothing more is needed for a flock to form.

Inspired by:
- Reynolds boids
- Starling murmurations
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List
import numpy as np

# raylib RED (230, 41, 55)
DEFAULT_COLOR = "#e62937"


@dataclass(eq=False)
class Unit:
    """
    One agent of the flock.

    Position and velocity change once per tick.
    Color is for whoever draws us; the simulation never reads it.
    """
    position: np.ndarray          # Where on the plane
    velocity: np.ndarray          # Heading and speed
    color: Any = field(default=DEFAULT_COLOR)

    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=np.float64)
        self.velocity = np.asarray(self.velocity, dtype=np.float64)

    def copy(self) -> Unit:
        """Independent copy; arrays are not shared."""
        return Unit(
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            color=self.color,
        )

    def __repr__(self) -> str:
        return (
            f"Unit(pos=[{self.position[0]:.2f}, {self.position[1]:.2f}], "
            f"vel=[{self.velocity[0]:.2f}, {self.velocity[1]:.2f}])"
        )


# Ordered, fixed size for a run
Flock = List[Unit]


def distance(a: np.ndarray, b: np.ndarray) -> float:
    """Euclidean distance between two points."""
    return float(np.linalg.norm(np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64)))


def normalize(vector: np.ndarray) -> np.ndarray:
    """
    Unit vector in the direction of `vector`.

    A zero-length vector has no direction; it normalizes to the zero vector.
    """
    vector = np.asarray(vector, dtype=np.float64)
    length = np.linalg.norm(vector)
    if length > 0:
        return vector / length
    return np.zeros_like(vector)


def neighbors_within(unit: Unit, others: Iterable[Unit], radius: float) -> Iterator[Unit]:
    """
    Yield the units of `others` strictly closer than `radius`.

    A unit sharing our exact position counts as ourselves and is skipped,
    so coincident units never see each other.
    """
    for other in others:
        if np.array_equal(other.position, unit.position):
            continue
        if distance(unit.position, other.position) < radius:
            yield other
