"""
observations/visualize.py

Watch the flock follow your hand.

A window, a pointer, thirty red dots.
Move the mouse and see what they decide.

Inspired by:
- raylib's immediate-mode demos
- Scientific visualization
"""

from __future__ import annotations
import logging
import time
from typing import Callable, List, Optional, TYPE_CHECKING
import numpy as np

from flock_swarm.config import ViewerConfig

if TYPE_CHECKING:
    from flock_swarm.environments.pointer_field import PointerField

logger = logging.getLogger(__name__)

NON_INTERACTIVE_BACKENDS = {"agg", "pdf", "svg", "ps", "cairo", "template"}


class PointerVisualizer:
    """
    Draws the field in screen coordinates and reports the pointer.

    The y axis points down, like a window. Until the pointer first
    moves over the canvas, the target is the window centre.
    """

    def __init__(
        self,
        field: PointerField,
        viewer_config: Optional[ViewerConfig] = None
    ):
        self.field = field
        self.config = viewer_config or ViewerConfig()
        self.target = np.array([self.config.width / 2, self.config.height / 2], dtype=np.float64)
        self.closed = False

        # Lazy import matplotlib
        self._plt = None
        self._fig = None
        self._ax = None
        self._patches: List = []
        self._interactive = False

    def _setup_plot(self):
        """Initialize matplotlib figure and pointer callbacks."""
        import matplotlib.pyplot as plt
        self._plt = plt

        dpi = 100
        self._fig, self._ax = plt.subplots(
            figsize=(self.config.width / dpi, self.config.height / dpi),
            dpi=dpi
        )
        self._fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
        self._ax.set_xlim(0, self.config.width)
        self._ax.set_ylim(self.config.height, 0)
        self._ax.set_aspect('equal')
        self._ax.set_axis_off()
        self._ax.set_facecolor(self.config.background)
        self._fig.patch.set_facecolor(self.config.background)

        manager = self._fig.canvas.manager
        if manager is not None:
            manager.set_window_title(self.config.title)

        self._fig.canvas.mpl_connect('motion_notify_event', self._on_motion)
        self._fig.canvas.mpl_connect('close_event', self._on_close)

        self._interactive = plt.get_backend().lower() not in NON_INTERACTIVE_BACKENDS
        if self._interactive:
            plt.ion()
            plt.show(block=False)

    def _on_motion(self, event) -> None:
        if event.inaxes is not self._ax or event.xdata is None or event.ydata is None:
            return
        self.target = np.array([event.xdata, event.ydata], dtype=np.float64)

    def _on_close(self, event) -> None:
        self.closed = True

    def _sync_patches(self) -> None:
        """One filled circle per unit; rebuilt only if the flock size changes."""
        from matplotlib.patches import Circle

        units = self.field.units
        if len(self._patches) != len(units):
            for patch in self._patches:
                patch.remove()
            self._patches = []
            for unit in units:
                patch = Circle(
                    tuple(unit.position),
                    self.config.unit_radius,
                    facecolor=unit.color,
                    edgecolor='none'
                )
                self._ax.add_patch(patch)
                self._patches.append(patch)
            return

        for patch, unit in zip(self._patches, units):
            patch.center = tuple(unit.position)
            patch.set_facecolor(unit.color)

    def render(self) -> None:
        """Draw the current flock."""
        if self._plt is None:
            self._setup_plot()

        self._sync_patches()

        if self._interactive:
            self._plt.pause(0.001)
        else:
            self._fig.canvas.draw_idle()

    @property
    def is_interactive(self) -> bool:
        """Whether the backend can deliver pointer and close events."""
        return self._interactive

    @property
    def patches(self) -> List:
        """The circle patches currently drawn, in flock order."""
        return list(self._patches)

    def save_frame(self, path: str) -> None:
        """Save current frame to file."""
        if self._fig is not None:
            self._fig.savefig(path, dpi=100, facecolor=self._fig.get_facecolor())

    def close(self) -> None:
        """Close the visualization."""
        if self._plt is not None:
            self._plt.close(self._fig)
        self.closed = True


def run_interactive(
    field: PointerField,
    viewer_config: Optional[ViewerConfig] = None,
    max_frames: Optional[int] = None,
    save_path: Optional[str] = None,
    clock: Callable[[], float] = time.perf_counter
) -> int:
    """
    Host loop: measure the frame, chase the pointer, draw.

    Runs until the window closes or `max_frames` frames have been drawn.
    On a non-interactive backend without `max_frames`, runs one frame.
    Returns the number of frames simulated.
    """
    viz = PointerVisualizer(field, viewer_config)
    frames = 0

    try:
        viz.render()
        last = clock()

        # No window means no close event; draw a single frame
        if not viz.is_interactive and max_frames is None:
            logger.warning("Non-interactive matplotlib backend and no frame limit; running a single frame")
            max_frames = 1

        while not viz.closed and (max_frames is None or frames < max_frames):
            now = clock()
            elapsed = max(now - last, 0.0)
            last = now

            field.step(elapsed, viz.target)
            viz.render()
            frames += 1

        if save_path:
            viz.save_frame(save_path)
            logger.info(f"Saved final frame to {save_path}")

    finally:
        viz.close()

    return frames
