# MIT License (see LICENSE)
"""
Numerical constants shared by the force laws and the host simulation.

All quantities are in simulation units; with the default G = 1 a unit mass
on a circular orbit of radius 1 has an orbital period of 2π.
"""
from __future__ import annotations

import math

# Default gravitational constant (simulation units, G = 1).
DEFAULT_G: float = 1.0

# Volume prefactor of a sphere, V = (4/3)·π·R³.
FOUR_THIRDS_PI: float = 4.0 / 3.0 * math.pi

# Name of the per-particle parameter that opts a particle into external forces.
EXT_ENABLE: str = "ext_enable"
