# MIT License (see LICENSE)
"""
extgrav - External gravitational forces for N-body simulations.

Adds accelerations from sources that are not simulated bodies to particles
that opt in via the ext_enable parameter.

Main entry points:
    - Simulation: particles, G, integrator and registered forces.
    - Particle: a 3D point mass with attached parameters.
    - load_force: create an "ext_point_mass" or "solid_sphere" force.

Submodules:
    - forces: The external force laws and their registry.
    - params: Named scalar parameters (ParamSet).
    - invariants: Energy and momentum bookkeeping.
    - io: JSON serialization/deserialization.

Example:
    from extgrav import Simulation, Particle

    sim = Simulation(G=1.0, dt=1e-3)
    sim.add(Particle(m=1.0))
    planet = Particle(m=0.0, position=(1, 0, 0), velocity=(0, 1.1, 0))
    planet.enable_external()
    sim.add(planet)

    sphere = sim.load_force("solid_sphere")
    for name, value in [("rho", 10.0), ("rad", 0.1), ("x_cen", 0.1),
                        ("y_cen", 0.0), ("z_cen", 0.0)]:
        sphere.params.set_double(name, value)
    sim.add_force(sphere)
    sim.integrate(10.0)
"""
from .simulation import Simulation
from .types import Particle
from .params import ParamSet
from .forces import Force, load_force

__all__ = [
    "Simulation",
    "Particle",
    "ParamSet",
    "Force",
    "load_force",
]
