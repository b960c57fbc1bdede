# MIT License (see LICENSE)
"""
Direct-summation self-gravity between simulated particles.

This is the host's own gravity pass, run before the external forces. It is
O(N²) and uses Newton's third law to visit each pair once. Particles with
m = 0 are test particles: they feel gravity but exert none.
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

from .types import Particle
from .util import norm2


def apply_gravity_pairwise(particles: Sequence[Particle], G: float, softening: float = 0.0) -> None:
    """
    Add the mutual Newtonian attraction of all particle pairs.

    Implements a_i += G·m_j·(r_j - r_i) / (|r_j - r_i|² + ε²)^(3/2).

    Args:
        particles: Particles to act on (accelerations modified in-place).
        G: Gravitational constant.
        softening: Plummer softening length ε. Zero means exact Newtonian
            gravity, which is singular for coincident particles.
    """
    eps2 = softening * softening
    n = len(particles)
    for i in range(n):
        pi = particles[i]
        for j in range(i + 1, n):
            pj = particles[j]
            if pi.m == 0.0 and pj.m == 0.0:
                continue

            d = pj.position - pi.position
            r2 = norm2(d) + eps2
            g = (G / (r2 * np.sqrt(r2))) * d

            pi.acceleration += pj.m * g
            pj.acceleration -= pi.m * g
