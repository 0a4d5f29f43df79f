"""
flock_swarm/config.py

Settings for a run, kept in YAML and read into dataclasses.

Sections:
    flock:  radii, threshold, speed limit, position scale, far/near weights
    spawn:  circle center, radius, unit count, seed
    viewer: window size, title, unit radius, colors
"""

from __future__ import annotations
import logging
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from flock_swarm.core.integrator import FlockConfig, WeightProfile
from flock_swarm.core.unit import DEFAULT_COLOR

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "configs" / "default.yaml"

# raylib RAYWHITE (245, 245, 245)
DEFAULT_BACKGROUND = "#f5f5f5"


@dataclass
class SpawnConfig:
    """Where and how many units start."""
    center: Tuple[float, float] = (400.0, 400.0)
    radius: float = 200.0
    count: int = 30
    seed: Optional[int] = None


@dataclass
class ViewerConfig:
    """How the flock is drawn."""
    width: int = 800
    height: int = 800
    title: str = "boids"
    unit_radius: float = 10.0
    background: Any = DEFAULT_BACKGROUND
    unit_color: Any = DEFAULT_COLOR


@dataclass
class SimulationConfig:
    """Everything needed to start a run."""
    flock: FlockConfig = field(default_factory=FlockConfig)
    spawn: SpawnConfig = field(default_factory=SpawnConfig)
    viewer: ViewerConfig = field(default_factory=ViewerConfig)


def _apply(section: str, base: Any, values: Optional[Dict[str, Any]]) -> Any:
    """Return a copy of dataclass `base` with `values` applied; reject unknown keys."""
    if values is None:
        return base
    if not isinstance(values, dict):
        raise ValueError(f"Section '{section}' must be a mapping, got {type(values).__name__}")

    known = {f.name for f in fields(base)}
    unknown = set(values) - known
    if unknown:
        raise ValueError(f"Unknown keys in section '{section}': {sorted(unknown)}")

    return replace(base, **values)


def _tuple_or_value(value: Any) -> Any:
    return tuple(value) if isinstance(value, list) else value


def config_from_dict(data: Optional[Dict[str, Any]]) -> SimulationConfig:
    """Build a SimulationConfig from a parsed YAML document."""
    if data is None:
        return SimulationConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Config document must be a mapping, got {type(data).__name__}")

    unknown = set(data) - {"flock", "spawn", "viewer"}
    if unknown:
        raise ValueError(f"Unknown config sections: {sorted(unknown)}")

    defaults = SimulationConfig()

    flock_values = data.get("flock")
    if flock_values is None:
        flock_values = {}
    elif not isinstance(flock_values, dict):
        raise ValueError(f"Section 'flock' must be a mapping, got {type(flock_values).__name__}")
    flock_values = dict(flock_values)
    for profile in ("far", "near"):
        if profile in flock_values:
            base = getattr(defaults.flock, profile)
            flock_values[profile] = _apply(f"flock.{profile}", base, flock_values[profile])
    flock = _apply("flock", defaults.flock, flock_values)

    spawn_values = data.get("spawn")
    if isinstance(spawn_values, dict):
        spawn_values = {k: _tuple_or_value(v) for k, v in spawn_values.items()}
    spawn = _apply("spawn", defaults.spawn, spawn_values)

    viewer_values = data.get("viewer")
    if isinstance(viewer_values, dict):
        viewer_values = {k: _tuple_or_value(v) for k, v in viewer_values.items()}
    viewer = _apply("viewer", defaults.viewer, viewer_values)

    return SimulationConfig(flock=flock, spawn=spawn, viewer=viewer)


def load_config(config_path: Optional[Union[str, Path]] = None) -> SimulationConfig:
    """Load a run configuration; no path means the packaged default.yaml."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    logger.info(f"Loading config from {config_path}")
    with open(config_path) as f:
        data = yaml.safe_load(f)

    return config_from_dict(data)


def config_to_dict(config: SimulationConfig) -> Dict[str, Any]:
    """Plain-dict form, suitable for logging or yaml.safe_dump."""
    def plain(value: Any) -> Any:
        if isinstance(value, dict):
            return {k: plain(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [plain(v) for v in value]
        return value

    return plain(asdict(config))
