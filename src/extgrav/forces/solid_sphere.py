# MIT License (see LICENSE)
"""
External force from a stationary constant-density sphere.

Outside the sphere the field is that of a point mass M at the center. Inside,
only the mass enclosed within r pulls (M_enc ∝ r³), which cancels the 1/r²
falloff and leaves a field linear in r:

    r ≥ R:  a = -G·M·d / |d|³
    r < R:  a = -G·M·d / R³

with d = r - r_cen and M = ρ·(4/3)·π·R³. Both branches give -G·M/R³ at r = R.

Force parameters:

    ============== ========================
    rad            Radius of the sphere
    rho            Density of the sphere
    x_cen          x-position of the center
    y_cen          y-position of the center
    z_cen          z-position of the center
    ============== ========================

If any of the five is unset the force does nothing. Radius and density are
not validated.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from ..constants import FOUR_THIRDS_PI
from ..params import ParamSet
from ..types import Particle
from ..util import norm2
from .base import Force


@dataclass(frozen=True)
class SphereConfig:
    """Resolved solid_sphere parameters."""
    radius: float
    density: float
    x: float
    y: float
    z: float

    @classmethod
    def from_params(cls, params: ParamSet) -> SphereConfig | None:
        """Build the config, or return None if any parameter is absent."""
        rad = params.get_double("rad")
        rho = params.get_double("rho")
        x_cen = params.get_double("x_cen")
        y_cen = params.get_double("y_cen")
        z_cen = params.get_double("z_cen")
        if rad is None or rho is None or x_cen is None or y_cen is None or z_cen is None:
            return None
        return cls(radius=rad, density=rho, x=x_cen, y=y_cen, z=z_cen)

    @property
    def center(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @property
    def mass(self) -> float:
        """Total mass, ρ·(4/3)·π·R³."""
        return self.density * FOUR_THIRDS_PI * self.radius ** 3


def solid_sphere_force(sim: Any, force: Force, particles: Sequence[Particle]) -> None:
    """
    Accumulate the solid-sphere acceleration into every enabled particle.

    The interior/exterior branch is chosen per particle, so particles on both
    sides of the surface can be handled in one call.

    Args:
        sim: Provides the gravitational constant as sim.G.
        force: The solid_sphere Force holding rad, rho, x_cen, y_cen, z_cen.
        particles: Particles to act on (modified in-place).
    """
    cfg = SphereConfig.from_params(force.params)
    if cfg is None:
        return

    G = sim.G
    rad = cfg.radius
    R3 = rad * rad * rad
    M = cfg.density * FOUR_THIRDS_PI * R3
    cen = cfg.center

    for p in particles:
        if not p.ext_enabled:
            continue
        d = p.position - cen
        r2 = norm2(d)
        if r2 < rad * rad:
            prefac = -G * M / R3
        else:
            prefac = -G * M * r2 ** -1.5
        p.acceleration += prefac * d


def solid_sphere_potential(sim: Any, force: Force, particles: Sequence[Particle]) -> float:
    """
    Potential energy of the enabled particles in the sphere's field.

        r ≥ R:  U = -G·M·m / r
        r < R:  U = -G·M·m·(3R² - r²) / (2R³)

    Returns 0 when the force is not fully configured.
    """
    cfg = SphereConfig.from_params(force.params)
    if cfg is None:
        return 0.0

    rad = cfg.radius
    M = cfg.mass
    cen = cfg.center
    u = 0.0
    for p in particles:
        if not p.ext_enabled:
            continue
        r2 = norm2(p.position - cen)
        if r2 < rad * rad:
            u += -sim.G * M * p.m * (3.0 * rad * rad - r2) / (2.0 * rad ** 3)
        else:
            u += -sim.G * M * p.m / np.sqrt(r2)
    return float(u)
