# MIT License (see LICENSE)
"""
External force from a stationary point mass.

The source is a "ghost" mass that is not one of the simulated particles. It
sits at a fixed location and pulls every particle carrying the ext_enable
parameter with the Newtonian law

    a = -G·M·(r - r_src) / |r - r_src|³

Force parameters:

    ============== ========================
    ext_M          Mass of the source
    ext_x          x-position of the source
    ext_y          y-position of the source
    ext_z          z-position of the source
    ============== ========================

If any of the four is unset the force does nothing.

A particle exactly on the source (r = 0) is not guarded against: its
acceleration becomes non-finite (inf/nan) and numpy may emit a
RuntimeWarning.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from ..params import ParamSet
from ..types import Particle
from ..util import norm2
from .base import Force


@dataclass(frozen=True)
class PointMassConfig:
    """Resolved ext_point_mass parameters."""
    mass: float
    x: float
    y: float
    z: float

    @classmethod
    def from_params(cls, params: ParamSet) -> PointMassConfig | None:
        """Build the config, or return None if any parameter is absent."""
        mass = params.get_double("ext_M")
        x = params.get_double("ext_x")
        y = params.get_double("ext_y")
        z = params.get_double("ext_z")
        if mass is None or x is None or y is None or z is None:
            return None
        return cls(mass=mass, x=x, y=y, z=z)

    @property
    def position(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)


def external_point_mass_force(sim: Any, force: Force, particles: Sequence[Particle]) -> None:
    """
    Accumulate the point-mass acceleration into every enabled particle.

    Args:
        sim: Provides the gravitational constant as sim.G.
        force: The ext_point_mass Force holding ext_M, ext_x, ext_y, ext_z.
        particles: Particles to act on (modified in-place).
    """
    cfg = PointMassConfig.from_params(force.params)
    if cfg is None:
        return

    G = sim.G
    src = cfg.position
    for p in particles:
        if not p.ext_enabled:
            continue
        d = p.position - src
        r2 = norm2(d)
        prefac = -G * cfg.mass * r2 ** -1.5
        p.acceleration += prefac * d


def point_mass_potential(sim: Any, force: Force, particles: Sequence[Particle]) -> float:
    """
    Potential energy of the enabled particles, U = Σ -G·M·m / r.

    Returns 0 when the force is not fully configured.
    """
    cfg = PointMassConfig.from_params(force.params)
    if cfg is None:
        return 0.0

    src = cfg.position
    u = 0.0
    for p in particles:
        if not p.ext_enabled:
            continue
        r = np.sqrt(norm2(p.position - src))
        u += -sim.G * cfg.mass * p.m / r
    return float(u)
