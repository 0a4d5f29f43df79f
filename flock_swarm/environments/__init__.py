"""
Environments: where the flock lives between ticks.

- spawn: placing units on a circle
- pointer_field: a flat plane with one moving target
"""

from .spawn import generate_units_in_circle
from .pointer_field import PointerField

__all__ = ["generate_units_in_circle", "PointerField"]
