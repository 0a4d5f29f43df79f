"""
observations/metrics.py

Numbers that tell you whether the flock is a flock.
"""

from __future__ import annotations
import numpy as np


def spread(positions: np.ndarray) -> float:
    """Mean distance of units from their centroid. 0 for an empty flock."""
    positions = np.asarray(positions, dtype=np.float64).reshape(-1, 2)
    if len(positions) == 0:
        return 0.0
    centroid = positions.mean(axis=0)
    return float(np.linalg.norm(positions - centroid, axis=1).mean())


def polarization(velocities: np.ndarray) -> float:
    """
    Norm of the mean heading, in [0, 1].

    1 means everyone flies the same way; 0 means no shared direction.
    Stationary units contribute no heading.
    """
    velocities = np.asarray(velocities, dtype=np.float64).reshape(-1, 2)
    if len(velocities) == 0:
        return 0.0
    speeds = np.linalg.norm(velocities, axis=1, keepdims=True)
    headings = np.divide(
        velocities, speeds,
        out=np.zeros_like(velocities),
        where=speeds > 0
    )
    return float(np.linalg.norm(headings.mean(axis=0)))


def mean_speed(velocities: np.ndarray) -> float:
    velocities = np.asarray(velocities, dtype=np.float64).reshape(-1, 2)
    if len(velocities) == 0:
        return 0.0
    return float(np.linalg.norm(velocities, axis=1).mean())


def mean_distance_to(positions: np.ndarray, target: np.ndarray) -> float:
    """Mean distance of units from the target."""
    positions = np.asarray(positions, dtype=np.float64).reshape(-1, 2)
    if len(positions) == 0:
        return 0.0
    target = np.asarray(target, dtype=np.float64)
    return float(np.linalg.norm(positions - target, axis=1).mean())
