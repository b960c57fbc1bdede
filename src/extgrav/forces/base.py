# MIT License (see LICENSE)
"""
The Force object: one configured instance of an external force law.

A Force pairs an evaluator (the law) with a ParamSet (its configuration).
Evaluators share one signature:

    evaluator(sim, force, particles) -> None

where `sim` is anything with a float attribute `G`. An evaluator reads
force.params, reads particle positions and adds into particle accelerations.
It never mutates force.params.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

from ..params import ParamSet
from ..types import Particle

Evaluator = Callable[[Any, "Force", Sequence[Particle]], None]
Potential = Callable[[Any, "Force", Sequence[Particle]], float]


@dataclass(eq=False)
class Force:
    """
    A named external force law instance.

    Attributes:
        name: Registry name of the law ("ext_point_mass", "solid_sphere").
        evaluator: Accumulates this force's acceleration into particles.
        potential: Optional potential energy of the enabled particles in this
            force's field. Used for energy bookkeeping only.
        params: Configuration parameters of this instance.
    """
    name: str
    evaluator: Evaluator
    potential: Potential | None = None
    params: ParamSet = field(default_factory=ParamSet)

    def evaluate(self, sim: Any, particles: Sequence[Particle]) -> None:
        """Add this force's contribution into every enabled particle."""
        self.evaluator(sim, self, particles)

    def potential_energy(self, sim: Any, particles: Sequence[Particle]) -> float:
        """Potential energy of the enabled particles, 0 if the law has none."""
        if self.potential is None:
            return 0.0
        return self.potential(sim, self, particles)
