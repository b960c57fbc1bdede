# MIT License (see LICENSE)
"""
JSON serialization and deserialization for simulations.

Particles keep their attached parameters (e.g. ext_enable) and forces are
stored by registry name together with their parameters, so a scene written
with save_simulation() loads back with the same external forces.

JSON Schema Overview:
---------------------
{
  "G": float,                      # Default: 1.0
  "dt": float,                     # Default: 1e-3
  "t": float,                      # Default: 0.0
  "integrator": string,            # "leapfrog" or "verlet"
  "gravity": string,               # "basic" or "none"
  "softening": float,              # Default: 0.0
  "particles": [
    {
      "m": float,                  # Required (0 for test particles)
      "position": [x, y, z],       # Default: [0, 0, 0]
      "velocity": [vx, vy, vz],    # Default: [0, 0, 0]
      "params": {name: number}     # Optional, e.g. {"ext_enable": 1}
    }
  ],
  "forces": [
    {
      "name": string,              # "ext_point_mass" or "solid_sphere"
      "params": {name: number}     # e.g. {"rad": 0.1, "rho": 10.0, ...}
    }
  ]
}
"""
from __future__ import annotations
import json
import logging
from typing import TYPE_CHECKING, Any

import numpy as np

from ..forces import Force, load_force
from ..params import ParamSet
from ..types import Particle

if TYPE_CHECKING:
    from ..simulation import Simulation

logger = logging.getLogger(__name__)


def load_simulation_raw(path: str) -> dict[str, Any]:
    """Load raw JSON data from a scene file without object construction."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_simulation(path: str) -> "Simulation":
    """
    Load and construct a Simulation from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If an entry is malformed or names an unknown force.
    """
    sim = simulation_from_json(load_simulation_raw(path))
    logger.debug(
        "Loaded %s: %d particles, %d forces", path, len(sim.particles), len(sim.forces)
    )
    return sim


def simulation_from_json(data: dict[str, Any]) -> "Simulation":
    """Construct a Simulation from an already-parsed JSON dict."""
    # Import locally to avoid circular import
    from ..simulation import Simulation

    sim = Simulation(
        G=float(data.get("G", 1.0)),
        dt=float(data.get("dt", 1e-3)),
        integrator=data.get("integrator", "leapfrog"),
        gravity=data.get("gravity", "basic"),
        softening=float(data.get("softening", 0.0)),
    )
    sim.t = float(data.get("t", 0.0))

    for p_data in data.get("particles", []):
        sim.add(particle_from_json(p_data))
    for f_data in data.get("forces", []):
        sim.add_force(force_from_json(f_data))
    return sim


def params_from_json(d: dict[str, Any]) -> ParamSet:
    """Build a ParamSet from a name -> number mapping."""
    params = ParamSet()
    for name, value in d.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Parameter '{name}' must be a number, got {value!r}")
        params.set(name, value)
    return params


def particle_from_json(d: dict[str, Any]) -> Particle:
    """Construct a Particle from a JSON dict. The mass field is required."""
    if "m" not in d:
        raise ValueError("Particle definition missing required 'm' field.")

    return Particle(
        m=float(d["m"]),
        position=d.get("position", [0.0, 0.0, 0.0]),
        velocity=d.get("velocity", [0.0, 0.0, 0.0]),
        params=params_from_json(d.get("params", {})),
    )


def force_from_json(d: dict[str, Any]) -> Force:
    """Construct a registered Force and attach its parameters."""
    if "name" not in d:
        raise ValueError("Force definition missing required 'name' field.")

    force = load_force(d["name"])
    force.params = params_from_json(d.get("params", {}))
    return force


def particle_to_json(p: Particle) -> dict[str, Any]:
    """Serialize a Particle. Empty params are omitted."""
    result = {
        "m": p.m,
        "position": _to_list(p.position),
        "velocity": _to_list(p.velocity),
    }
    if len(p.params):
        result["params"] = p.params.to_dict()
    return result


def force_to_json(force: Force) -> dict[str, Any]:
    """Serialize a Force by registry name and parameters."""
    return {"name": force.name, "params": force.params.to_dict()}


def simulation_to_json(sim: "Simulation") -> dict[str, Any]:
    """
    Serialize a complete Simulation to a dictionary.

    Accelerations are not stored; they are recomputed on the next step.
    """
    result = {
        "G": sim.G,
        "dt": sim.dt,
        "t": sim.t,
        "particles": [particle_to_json(p) for p in sim.particles],
        "forces": [force_to_json(f) for f in sim.forces],
    }
    if sim.integrator != "leapfrog":
        result["integrator"] = sim.integrator
    if sim.gravity != "basic":
        result["gravity"] = sim.gravity
    if sim.softening != 0.0:
        result["softening"] = sim.softening
    return result


def save_simulation(sim: "Simulation", path: str, indent: int = 2) -> None:
    """Save a Simulation to a JSON file on disk."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(simulation_to_json(sim), f, indent=indent)


def _to_list(arr: Any) -> list[float]:
    if isinstance(arr, np.ndarray):
        return arr.tolist()
    return list(arr)
