"""
core/integrator.py

One tick: look, weigh, turn, move.

Every unit looks at the same frozen picture of the flock.
Nobody sees a neighbor halfway through its move.

Inspired by:
- Double-buffered game loops
- Explicit Euler integration
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Sequence
import numpy as np

from .unit import Unit, Flock, distance, normalize
from .rules import separation, alignment, cohesion, steer

SEPARATION_RADIUS = 100.0
ALIGNMENT_RADIUS = 50.0
COHESION_RADIUS = 40.0
THRESHOLD_DISTANCE = 100.0
MAX_SPEED = 2.0
POSITION_SCALE = 50.0


@dataclass(frozen=True)
class WeightProfile:
    """How much each force counts in one proximity state."""
    separation: float
    alignment: float
    cohesion: float
    steer: float


# Far from the target: travel as a flock
FAR_WEIGHTS = WeightProfile(separation=1.5, alignment=1.0, cohesion=0.5, steer=1.0)
# Near the target: spread out around it, no cohesion
NEAR_WEIGHTS = WeightProfile(separation=5.5, alignment=0.8, cohesion=0.0, steer=0.9)


@dataclass
class FlockConfig:
    """
    The fixed laws of the flock.

    The weight switch is a hard threshold, not a blend:
    at `threshold_distance` or beyond, `far` applies; closer, `near`.
    """
    separation_radius: float = SEPARATION_RADIUS
    alignment_radius: float = ALIGNMENT_RADIUS
    cohesion_radius: float = COHESION_RADIUS
    threshold_distance: float = THRESHOLD_DISTANCE
    max_speed: float = MAX_SPEED
    position_scale: float = POSITION_SCALE
    far: WeightProfile = field(default_factory=lambda: FAR_WEIGHTS)
    near: WeightProfile = field(default_factory=lambda: NEAR_WEIGHTS)

    def weights_for(self, distance_to_target: float) -> WeightProfile:
        """Pick the weight profile for a unit this far from the target."""
        if distance_to_target >= self.threshold_distance:
            return self.far
        return self.near


class Forces(NamedTuple):
    """The four forces acting on one unit during one tick."""
    separation: np.ndarray
    alignment: np.ndarray
    cohesion: np.ndarray
    steer: np.ndarray


def compute_forces(
    unit: Unit,
    snapshot: Sequence[Unit],
    target: np.ndarray,
    config: Optional[FlockConfig] = None
) -> Forces:
    """Evaluate all rules for `unit` against the pre-tick snapshot."""
    config = config or FlockConfig()
    return Forces(
        separation=separation(unit, snapshot, config.separation_radius),
        alignment=alignment(unit, snapshot, config.alignment_radius),
        cohesion=cohesion(unit, snapshot, config.cohesion_radius),
        steer=steer(unit, target),
    )


def apply_forces(
    unit: Unit,
    forces: Forces,
    weights: WeightProfile,
    elapsed_time: float,
    config: Optional[FlockConfig] = None
) -> Unit:
    """
    Blend forces into velocity, clamp speed, move.

    Returns a new Unit; `unit` itself is left untouched.
    """
    config = config or FlockConfig()

    velocity = unit.velocity + (
        weights.separation * forces.separation
        + weights.alignment * forces.alignment
        + weights.cohesion * forces.cohesion
        + weights.steer * forces.steer
    )

    # Speed limit keeps direction
    if np.linalg.norm(velocity) > config.max_speed:
        velocity = normalize(velocity) * config.max_speed

    position = unit.position + velocity * elapsed_time * config.position_scale

    return Unit(position=position, velocity=velocity, color=unit.color)


def integrate_unit(
    unit: Unit,
    snapshot: Sequence[Unit],
    target: np.ndarray,
    elapsed_time: float,
    config: Optional[FlockConfig] = None
) -> Unit:
    """Advance a single unit by one tick, reading neighbors from `snapshot`."""
    config = config or FlockConfig()
    target = np.asarray(target, dtype=np.float64)

    forces = compute_forces(unit, snapshot, target, config)
    weights = config.weights_for(distance(unit.position, target))
    return apply_forces(unit, forces, weights, elapsed_time, config)


def tick(
    flock: Sequence[Unit],
    target: np.ndarray,
    elapsed_time: float,
    config: Optional[FlockConfig] = None
) -> Flock:
    """
    Advance the whole flock by one tick.

    All units read the same snapshot taken before the pass; results
    land in a fresh list, so unit order never changes the outcome.
    """
    config = config or FlockConfig()
    target = np.asarray(target, dtype=np.float64)

    snapshot = [unit.copy() for unit in flock]
    return [
        integrate_unit(unit, snapshot, target, elapsed_time, config)
        for unit in snapshot
    ]
