"""
environments/pointer_field.py

An open plane and a target that never sits still.

The field owns the flock. The host loop owns time and the pointer.
The field only asks: how long was that frame, and where should we go?

Inspired by:
- Reynolds boids simulation
- Mouse-follow demos
"""

from __future__ import annotations
import logging
import math
from typing import Any, List, Optional, Sequence
import numpy as np

from flock_swarm.core.unit import Unit, Flock, DEFAULT_COLOR
from flock_swarm.core.integrator import FlockConfig, tick
from flock_swarm.environments.spawn import generate_units_in_circle

logger = logging.getLogger(__name__)


class PointerField:
    """
    2D environment holding one flock that chases a target.

    Features:
    - Fixed-size flock, replaced wholesale each tick (double buffer)
    - Host-supplied elapsed time and target
    - Read-only views for renderers and metrics
    """

    def __init__(
        self,
        units: Optional[Sequence[Unit]] = None,
        config: Optional[FlockConfig] = None
    ):
        self.config = config or FlockConfig()
        self._units: Flock = [u.copy() for u in units] if units else []
        self.time = 0.0
        self.ticks = 0

    @property
    def units(self) -> Flock:
        """Current flock. Treat as read-only between ticks."""
        return self._units

    def populate(
        self,
        center: np.ndarray,
        radius: float,
        count: int,
        rng: Optional[np.random.Generator] = None,
        color: Any = DEFAULT_COLOR
    ) -> Flock:
        """Replace the flock with `count` units placed on a circle."""
        self._units = generate_units_in_circle(center, radius, count, rng, color)
        logger.info(f"Populated field with {count} units on a circle of radius {radius}")
        return self._units

    def step(self, elapsed_time: float, target: np.ndarray) -> Flock:
        """
        Advance the flock by one frame toward `target`.

        The new flock is computed entirely from the old one,
        then swapped in.
        """
        if not math.isfinite(elapsed_time) or elapsed_time < 0:
            raise ValueError(f"elapsed_time must be finite and non-negative, got {elapsed_time}")

        self._units = tick(self._units, target, elapsed_time, self.config)
        self.time += elapsed_time
        self.ticks += 1

        logger.debug(f"Tick {self.ticks}: dt={elapsed_time:.4f}, target={np.asarray(target).tolist()}")
        return self._units

    def get_state_snapshot(self) -> List[Unit]:
        """Deep copy of every unit."""
        return [u.copy() for u in self._units]

    def get_positions(self) -> np.ndarray:
        """Positions of all units as an (n, 2) array."""
        return np.array([u.position for u in self._units]).reshape(-1, 2)

    def get_velocities(self) -> np.ndarray:
        """Velocities of all units as an (n, 2) array."""
        return np.array([u.velocity for u in self._units]).reshape(-1, 2)

    def get_colors(self) -> list:
        """Colors of all units, in flock order."""
        return [u.color for u in self._units]

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self) -> str:
        return (
            f"PointerField(units={len(self._units)}, "
            f"ticks={self.ticks}, "
            f"time={self.time:.2f})"
        )
