# examples/solid_sphere.py
# A test particle orbiting a unit-mass star, also pulled by a small dense sphere.
import math

import numpy as np

from extgrav import Simulation, Particle


def planet_energy(sim):
    """
    Specific orbital energy of the massless planet:
      ε = ½·v² - G·m_star/r + Φ_sphere
    """
    star, planet = sim.particles
    r = np.linalg.norm(planet.position - star.position)
    unit = Particle(m=1.0, position=planet.position, params={"ext_enable": 1})
    phi = sum(f.potential_energy(sim, [unit]) for f in sim.forces)
    return 0.5 * float(np.dot(planet.velocity, planet.velocity)) - sim.G * star.m / r + phi


def main(tmax=2.0 * math.pi * 10):
    sim = Simulation(G=1.0, dt=1e-3, integrator="leapfrog")

    star = Particle(m=1.0)
    sim.add(star)

    planet = Particle(m=0.0, position=(1.0, 0.0, 0.0), velocity=(0.0, 1.1, 0.0))
    sim.add(planet)

    sphere = sim.load_force("solid_sphere")
    sim.add_force(sphere)

    sphere.params.set_double("rho", 10.0)
    sphere.params.set_double("rad", 0.1)
    sphere.params.set_double("x_cen", 0.1)
    sphere.params.set_double("y_cen", 0.0)
    sphere.params.set_double("z_cen", 0.0)
    sim.particles[1].enable_external()

    sim.update_acceleration()
    print("initial planet acceleration:", planet.acceleration)

    e0 = planet_energy(sim)
    sim.integrate(tmax)
    e1 = planet_energy(sim)
    rel_err = abs((e1 - e0) / e0)

    print("t:", sim.t)
    print("planet pos:", planet.position)
    print("planet vel:", planet.velocity)
    print("relative energy error:", rel_err)
    return rel_err


if __name__ == "__main__":
    main()
