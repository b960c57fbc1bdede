# MIT License (see LICENSE)
"""
External force laws.

This subpackage provides:
    - Force: a configured force law instance (evaluator + parameters).
    - ext_point_mass: a stationary point mass.
    - solid_sphere: a stationary constant-density sphere.
    - load_force: create a Force by registry name.

Typical usage:
    from extgrav.forces import load_force

    sphere = load_force("solid_sphere")
    sphere.params.set_double("rad", 0.1)
    ...
    sim.add_force(sphere)
"""
from __future__ import annotations
import logging
from typing import Callable

from ..params import ParamSet
from .base import Force, Evaluator, Potential
from .point_mass import PointMassConfig, external_point_mass_force, point_mass_potential
from .solid_sphere import SphereConfig, solid_sphere_force, solid_sphere_potential

logger = logging.getLogger(__name__)

# name -> (evaluator, potential)
FORCES: dict[str, tuple[Evaluator, Potential | None]] = {
    "ext_point_mass": (external_point_mass_force, point_mass_potential),
    "solid_sphere": (solid_sphere_force, solid_sphere_potential),
}

# name -> resolver returning a typed config or None
CONFIGS: dict[str, Callable[[ParamSet], PointMassConfig | SphereConfig | None]] = {
    "ext_point_mass": PointMassConfig.from_params,
    "solid_sphere": SphereConfig.from_params,
}


def load_force(name: str) -> Force:
    """
    Create a new, unconfigured Force for a registered law.

    Raises:
        ValueError: If no law is registered under `name`.
    """
    try:
        evaluator, potential = FORCES[name]
    except KeyError:
        raise ValueError(
            f"Unknown force: '{name}' (available: {', '.join(sorted(FORCES))})"
        ) from None
    logger.debug("Loaded force '%s'", name)
    return Force(name=name, evaluator=evaluator, potential=potential)


def is_configured(force: Force) -> bool:
    """
    True if the force has every parameter its law requires.

    Forces not in the registry are assumed to be configured.
    """
    resolve = CONFIGS.get(force.name)
    return resolve is None or resolve(force.params) is not None


__all__ = [
    "Force",
    "FORCES",
    "load_force",
    "is_configured",
    "PointMassConfig",
    "SphereConfig",
    "external_point_mass_force",
    "point_mass_potential",
    "solid_sphere_force",
    "solid_sphere_potential",
]
