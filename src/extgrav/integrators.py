# MIT License (see LICENSE)
"""
Symplectic time-steppers for the N-body host simulation.

Both integrators advance the whole particle list at once and take a callback
that recomputes accelerations (gravity + external forces) for the current
positions:

- leapfrog_step: drift-kick-drift, one acceleration update per step.
- verlet_step: kick-drift-kick (velocity Verlet), two updates per step.

Reference:
    https://en.wikipedia.org/wiki/Leapfrog_integration
"""
from __future__ import annotations
from typing import Callable, Sequence

from .types import Particle


def _drift(particles: Sequence[Particle], dt: float) -> None:
    for p in particles:
        p.position += p.velocity * dt


def _kick(particles: Sequence[Particle], dt: float) -> None:
    for p in particles:
        p.velocity += p.acceleration * dt


def leapfrog_step(
    particles: Sequence[Particle],
    dt: float,
    update_acceleration: Callable[[], None],
) -> None:
    """
    Advance particles by dt with drift-kick-drift leapfrog.

        x(t+dt/2) = x(t) + v(t)·dt/2
        v(t+dt)   = v(t) + a(x(t+dt/2))·dt
        x(t+dt)   = x(t+dt/2) + v(t+dt)·dt/2
    """
    _drift(particles, 0.5 * dt)
    update_acceleration()
    _kick(particles, dt)
    _drift(particles, 0.5 * dt)


def verlet_step(
    particles: Sequence[Particle],
    dt: float,
    update_acceleration: Callable[[], None],
) -> None:
    """
    Advance particles by dt with kick-drift-kick velocity Verlet.

    Accelerations are left evaluated at the end-of-step positions.
    """
    update_acceleration()
    _kick(particles, 0.5 * dt)
    _drift(particles, dt)
    update_acceleration()
    _kick(particles, 0.5 * dt)
