# MIT License (see LICENSE)
"""
Input/Output utilities.

Typical usage:
    from extgrav.io import load_simulation, save_simulation

    sim = load_simulation("scene.json")
    sim.integrate(10.0)
    save_simulation(sim, "scene_t10.json")
"""
from .json_io import (
    load_simulation,
    load_simulation_raw,
    save_simulation,
    simulation_to_json,
    simulation_from_json,
    particle_to_json,
    particle_from_json,
    force_to_json,
    force_from_json,
)

__all__ = [
    # Loading
    "load_simulation",
    "load_simulation_raw",
    "simulation_from_json",
    "particle_from_json",
    "force_from_json",
    # Saving
    "save_simulation",
    "simulation_to_json",
    "particle_to_json",
    "force_to_json",
]
