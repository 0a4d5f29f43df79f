"""
Study: Pointer Chase

Run: python -m flock_swarm.studies.pointer_chase.observe

Release the ring. Move the mouse. Watch.
"""

import argparse
import logging
from typing import Dict, List, Optional, Sequence

import numpy as np

from flock_swarm.config import SimulationConfig, config_to_dict, load_config
from flock_swarm.environments.pointer_field import PointerField
from flock_swarm.observations.metrics import (
    mean_distance_to,
    mean_speed,
    polarization,
    spread,
)

logger = logging.getLogger(__name__)

DEFAULT_HEADLESS_STEPS = 1000


def build_field(config: SimulationConfig) -> PointerField:
    """Create a field and place the starting ring."""
    field = PointerField(config=config.flock)
    rng = np.random.default_rng(config.spawn.seed)
    field.populate(
        center=config.spawn.center,
        radius=config.spawn.radius,
        count=config.spawn.count,
        rng=rng,
        color=config.viewer.unit_color,
    )
    return field


def run_headless(
    field: PointerField,
    target: Sequence[float],
    steps: int,
    dt: float,
    log_every: int = 100
) -> List[Dict[str, float]]:
    """
    Step toward a fixed target with a fixed frame time.

    Returns one metrics record per step.
    """
    target = np.asarray(target, dtype=np.float64)
    history = []

    for step in range(steps):
        field.step(dt, target)

        positions = field.get_positions()
        velocities = field.get_velocities()
        record = {
            "step": step,
            "spread": spread(positions),
            "polarization": polarization(velocities),
            "mean_speed": mean_speed(velocities),
            "distance_to_target": mean_distance_to(positions, target),
        }
        history.append(record)

        if log_every and step % log_every == 0:
            logger.info(
                f"Step {step}: spread={record['spread']:.2f}, "
                f"polarization={record['polarization']:.2f}, "
                f"distance_to_target={record['distance_to_target']:.2f}"
            )

    return history


def run_study(
    config: SimulationConfig,
    steps: Optional[int] = 1000,
    dt: float = 1 / 60,
    animate: bool = True,
    target: Optional[Sequence[float]] = None,
    save_path: Optional[str] = None
) -> PointerField:
    """Observe a flock chasing a target, in a window or headless."""
    logger.info(f"Config: {config_to_dict(config)}")
    field = build_field(config)

    if animate:
        from flock_swarm.observations.visualize import run_interactive

        frames = run_interactive(
            field,
            config.viewer,
            max_frames=steps,
            save_path=save_path,
        )
        logger.info(f"Window closed after {frames} frames")
        return field

    if target is None:
        target = (config.viewer.width / 2, config.viewer.height / 2)

    if steps is None:
        steps = DEFAULT_HEADLESS_STEPS

    history = run_headless(field, target, steps, dt)
    if history:
        logger.info(
            f"Final: spread={history[-1]['spread']:.2f}, "
            f"polarization={history[-1]['polarization']:.2f}, "
            f"mean_speed={history[-1]['mean_speed']:.2f}"
        )

    if save_path:
        from flock_swarm.observations.visualize import PointerVisualizer

        viz = PointerVisualizer(field, config.viewer)
        try:
            viz.render()
            viz.save_frame(save_path)
        finally:
            viz.close()
        logger.info(f"Saved final frame to {save_path}")

    return field


def main(argv: Optional[Sequence[str]] = None):
    parser = argparse.ArgumentParser(description="Pointer Chase Study")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--units", type=int, default=None, help="Override unit count")
    parser.add_argument("--seed", type=int, default=None, help="Override spawn seed")
    parser.add_argument("--steps", type=int, default=None, help="Frames to run (default: until window closes)")
    parser.add_argument("--dt", type=float, default=1 / 60, help="Headless frame time in seconds")
    parser.add_argument("--no-animate", action="store_true")
    parser.add_argument("--target", type=float, nargs=2, default=None, metavar=("X", "Y"))
    parser.add_argument("--save", type=str, default=None, help="Save the final frame to this path")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    config = load_config(args.config)
    if args.units is not None:
        config.spawn.count = args.units
    if args.seed is not None:
        config.spawn.seed = args.seed

    run_study(
        config,
        steps=args.steps,
        dt=args.dt,
        animate=not args.no_animate,
        target=args.target,
        save_path=args.save,
    )


if __name__ == "__main__":
    main()
