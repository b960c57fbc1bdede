# MIT License (see LICENSE)
"""
The N-body host simulation.

The Simulation owns the particle list, the gravitational constant and the
registered external forces. Each acceleration update runs, in order:
    1. Clear every particle's acceleration.
    2. Self-gravity between particles (optional).
    3. Every registered external force, in registration order.
Forces only add into accelerations, so their order does not matter.

Structure:
    - User creates a Simulation.
    - User adds particles via add().
    - User loads and configures forces, then registers them with add_force().
    - User calls step() or integrate(tmax).
"""
from __future__ import annotations
import logging
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import ContextManager

from .constants import DEFAULT_G
from .forces import Force, load_force, is_configured
from .gravity import apply_gravity_pairwise
from .integrators import leapfrog_step, verlet_step
from .profiler import Profiler
from .types import Particle

logger = logging.getLogger(__name__)

INTEGRATORS = {
    "leapfrog": leapfrog_step,
    "verlet": verlet_step,
}
GRAVITY_MODES = ("basic", "none")


@dataclass
class Simulation:
    """
    N-body simulation world.

    Attributes:
        G: Gravitational constant (default 1).
        dt: Timestep.
        integrator: "leapfrog" (drift-kick-drift) or "verlet" (kick-drift-kick).
        gravity: "basic" for direct-summation self-gravity, "none" to skip it.
        softening: Plummer softening length for self-gravity.
        profiler: Optional Profiler timing the gravity, forces and integrate phases.
    """
    G: float = DEFAULT_G
    dt: float = 1e-3
    integrator: str = "leapfrog"
    gravity: str = "basic"
    softening: float = 0.0
    profiler: Profiler | None = None

    # Internal state
    particles: list[Particle] = field(default_factory=list)
    forces: list[Force] = field(default_factory=list)
    t: float = 0.0

    def __post_init__(self) -> None:
        if self.integrator not in INTEGRATORS:
            raise ValueError(f"Unknown integrator: {self.integrator}")
        if self.gravity not in GRAVITY_MODES:
            raise ValueError(f"Unknown gravity mode: {self.gravity}")
        if not self.dt > 0:
            raise ValueError(f"Timestep must be positive, got {self.dt}")

    @property
    def N(self) -> int:
        """Number of particles."""
        return len(self.particles)

    def add(self, particle: Particle) -> int:
        """
        Append a particle.

        Returns:
            The particle's index in self.particles.
        """
        self.particles.append(particle)
        return len(self.particles) - 1

    def load_force(self, name: str) -> Force:
        """Create an unconfigured force by name. It is not registered yet."""
        return load_force(name)

    def add_force(self, force: Force) -> None:
        """
        Register a force so it runs on every acceleration update.

        Parameters may still be set after registration; they are read on
        every evaluation.
        """
        self.forces.append(force)
        logger.debug("Registered force '%s' (%d active)", force.name, len(self.forces))

    def remove_force(self, force: Force) -> bool:
        """Unregister a force. Returns True if it was registered."""
        if force in self.forces:
            self.forces.remove(force)
            return True
        return False

    def _section(self, name: str) -> ContextManager:
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

    def update_acceleration(self) -> None:
        """Recompute every particle's acceleration at the current positions."""
        for p in self.particles:
            p.clear_acceleration()

        if self.gravity == "basic":
            with self._section("gravity"):
                apply_gravity_pairwise(self.particles, self.G, self.softening)

        with self._section("forces"):
            for force in self.forces:
                force.evaluate(self, self.particles)

    def step(self, dt: float | None = None) -> None:
        """Advance the simulation by one timestep (self.dt unless given)."""
        dt = float(self.dt if dt is None else dt)
        if not dt > 0:
            raise ValueError(f"Timestep must be positive, got {dt}")
        stepper = INTEGRATORS.get(self.integrator)
        if stepper is None:
            raise ValueError(f"Unknown integrator: {self.integrator}")

        with self._section("integrate"):
            stepper(self.particles, dt, self.update_acceleration)
        self.t += dt

    def integrate(self, tmax: float) -> None:
        """
        Step until t reaches tmax.

        The final step is shortened so the simulation finishes exactly at tmax.
        """
        if not self.dt > 0:
            raise ValueError(f"Timestep must be positive, got {self.dt}")
        for force in self.forces:
            if not is_configured(force):
                logger.warning(
                    "Force '%s' is missing parameters and will have no effect", force.name
                )

        while self.t < tmax - 1e-15:
            self.step(min(self.dt, tmax - self.t))
