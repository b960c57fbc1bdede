# MIT License (see LICENSE)
"""
Particle state for the N-body host simulation.

A Particle is a point mass in 3D. The host integrator owns the particle list;
force evaluators only read positions and add into accelerations:

  dx/dt = v
  dv/dt = a   (a accumulated from gravity and external forces each step)
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from .constants import EXT_ENABLE
from .params import ParamSet
from .util import vec3


@dataclass
class Particle:
    """
    A point particle with kinematic state and attached parameters.

    Attributes:
        m: Mass in simulation units. Use m = 0 for test particles, which feel
           gravity but exert none.
        position: Position [x, y, z].
        velocity: Velocity [vx, vy, vz].
        acceleration: Accumulated acceleration [ax, ay, az]. Cleared by the
            simulation at the start of every acceleration update, then added
            to by gravity and by every external force.
        params: Named scalars attached to this particle (e.g. ext_enable).

    Note:
        Position, velocity and acceleration are converted to float64 numpy
        arrays on init.
    """
    m: float = 0.0
    position: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    velocity: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    acceleration: np.ndarray = field(default_factory=lambda: np.zeros(3, dtype=np.float64))
    params: ParamSet = field(default_factory=ParamSet)

    def __post_init__(self) -> None:
        self.position = vec3(self.position)
        self.velocity = vec3(self.velocity)
        self.acceleration = vec3(self.acceleration)
        if not isinstance(self.params, ParamSet):
            self.params = ParamSet(self.params)

    @property
    def ext_enabled(self) -> bool:
        """True if this particle opted into external forces (flag presence only)."""
        return self.params.get_int(EXT_ENABLE) is not None

    def enable_external(self) -> None:
        """Opt this particle into external forces."""
        self.params.set_int(EXT_ENABLE, 1)

    def disable_external(self) -> None:
        """Opt this particle out of external forces."""
        self.params.remove(EXT_ENABLE)

    def clear_acceleration(self) -> None:
        """Reset the accumulated acceleration to zero."""
        self.acceleration[:] = 0.0
