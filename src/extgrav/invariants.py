# MIT License (see LICENSE)
"""
Conserved quantities for checking integration accuracy.

External sources are fixed, so linear momentum is not conserved once an
external force acts, but total energy (kinetic + self-gravity + external
potential) is, up to integration error.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Sequence

import numpy as np

from .types import Particle
from .util import norm2

if TYPE_CHECKING:
    from .simulation import Simulation


def kinetic_energy(particles: Sequence[Particle]) -> float:
    """T = Σ ½·m·v²"""
    ke = 0.0
    for p in particles:
        ke += 0.5 * p.m * float(np.dot(p.velocity, p.velocity))
    return ke


def gravitational_potential_energy(sim: "Simulation") -> float:
    """
    Self-gravity potential energy, U = -Σ_{i<j} G·m_i·m_j / sqrt(r² + ε²).

    Zero when the simulation runs with gravity="none".
    """
    if sim.gravity == "none":
        return 0.0

    eps2 = sim.softening * sim.softening
    ps = sim.particles
    u = 0.0
    for i in range(len(ps)):
        for j in range(i + 1, len(ps)):
            if ps[i].m == 0.0 or ps[j].m == 0.0:
                continue
            r = float(np.sqrt(norm2(ps[j].position - ps[i].position) + eps2))
            u -= sim.G * ps[i].m * ps[j].m / r
    return u


def external_potential_energy(sim: "Simulation") -> float:
    """Potential energy of the particles in all registered external forces."""
    return sum(f.potential_energy(sim, sim.particles) for f in sim.forces)


def total_energy(sim: "Simulation") -> float:
    """Kinetic + self-gravity + external potential energy."""
    return (
        kinetic_energy(sim.particles)
        + gravitational_potential_energy(sim)
        + external_potential_energy(sim)
    )


def linear_momentum(particles: Sequence[Particle]) -> np.ndarray:
    """P = Σ m·v"""
    p = np.zeros(3, dtype=np.float64)
    for b in particles:
        p += b.m * b.velocity
    return p
