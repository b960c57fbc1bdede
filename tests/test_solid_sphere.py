# MIT License (see LICENSE)
import math

import numpy as np
import pytest

from extgrav import Simulation, Particle, load_force
from extgrav.forces import SphereConfig, solid_sphere_potential

# rho chosen so the total mass is exactly 1 for rad = 1
UNIT = {"rad": 1.0, "rho": 3.0 / (4.0 * math.pi), "x_cen": 0.0, "y_cen": 0.0, "z_cen": 0.0}


def make_sphere(params):
    force = load_force("solid_sphere")
    for name, value in params.items():
        force.params.set_double(name, value)
    return force


def enabled(position, m=0.0):
    p = Particle(m=m, position=position)
    p.enable_external()
    return p


def test_interior_is_linear_in_r():
    """Inside, |a|/r = G·M/R³ for every particle (= 2 here with G = 2, M = R = 1)."""
    sim = Simulation(G=2.0)
    particles = [
        enabled((0.2, 0.0, 0.0)),
        enabled((0.0, -0.5, 0.0)),
        enabled((0.3, 0.4, 0.5)),
    ]
    make_sphere(UNIT).evaluate(sim, particles)

    for p in particles:
        r = np.linalg.norm(p.position)
        assert np.linalg.norm(p.acceleration) / r == pytest.approx(2.0)
        assert np.allclose(p.acceleration, -2.0 * p.position)


def test_exterior_matches_point_mass():
    """Outside, the sphere acts like ext_point_mass with M = ρ·(4/3)·π·R³."""
    sim = Simulation(G=1.0)
    params = {"rad": 0.3, "rho": 7.0, "x_cen": 1.0, "y_cen": -1.0, "z_cen": 0.5}
    sphere = make_sphere(params)
    M = 7.0 * 4.0 / 3.0 * math.pi * 0.3 ** 3
    assert SphereConfig.from_params(sphere.params).mass == pytest.approx(M)

    point = load_force("ext_point_mass")
    for name, value in [("ext_M", M), ("ext_x", 1.0), ("ext_y", -1.0), ("ext_z", 0.5)]:
        point.params.set_double(name, value)

    for pos in [(2.0, -1.0, 0.5), (1.0, 1.0, 1.0), (-3.0, 4.0, 0.0)]:
        a = enabled(pos)
        b = enabled(pos)
        sphere.evaluate(sim, [a])
        point.evaluate(sim, [b])
        r = np.linalg.norm(np.array(pos) - np.array([1.0, -1.0, 0.5]))
        assert np.allclose(a.acceleration, b.acceleration)
        assert np.linalg.norm(a.acceleration) == pytest.approx(M / (r * r))


def test_continuous_at_surface():
    """Just inside and exactly on the surface give the same acceleration."""
    sim = Simulation(G=1.0)
    sphere = make_sphere(UNIT)
    inside = enabled((1.0 - 1e-12, 0.0, 0.0))
    surface = enabled((1.0, 0.0, 0.0))
    sphere.evaluate(sim, [inside, surface])

    assert np.allclose(inside.acceleration, surface.acceleration, rtol=1e-9)
    assert np.allclose(surface.acceleration, [-1.0, 0.0, 0.0])


def test_mixed_interior_and_exterior():
    sim = Simulation(G=1.0)
    inner = enabled((0.0, 0.0, 0.5))
    outer = enabled((0.0, 0.0, 2.0))
    make_sphere(UNIT).evaluate(sim, [inner, outer])

    assert np.allclose(inner.acceleration, [0.0, 0.0, -0.5])
    assert np.allclose(outer.acceleration, [0.0, 0.0, -0.25])


@pytest.mark.parametrize("missing", sorted(UNIT))
def test_missing_parameter_is_noop(missing):
    params = {k: v for k, v in UNIT.items() if k != missing}
    p = enabled((0.5, 0.0, 0.0))
    p.acceleration[:] = (3.0, 2.0, 1.0)
    make_sphere(params).evaluate(Simulation(), [p])
    assert np.array_equal(p.acceleration, [3.0, 2.0, 1.0])


def test_particles_without_flag_are_untouched():
    p = Particle(position=(0.5, 0.0, 0.0))
    make_sphere(UNIT).evaluate(Simulation(), [p])
    assert np.array_equal(p.acceleration, np.zeros(3))


def test_contributions_accumulate():
    sim = Simulation()
    sphere = make_sphere(UNIT)
    p = enabled((0.0, 3.0, 0.0))
    p.acceleration[:] = (0.0, 1.0, 0.0)
    sphere.evaluate(sim, [p])
    sphere.evaluate(sim, [p])
    assert np.allclose(p.acceleration, [0.0, 1.0 - 2.0 / 9.0, 0.0])


def test_reference_scenario_initial_acceleration():
    """
    Sphere rho = 10, rad = 0.1 centered at (0.1, 0, 0); planet at (1, 0, 0).
      M = 10·(4/3)·π·0.001 ≈ 0.041888, r = 0.9
      a_x = -M/0.81 ≈ -0.05171
    """
    sim = Simulation(G=1.0)
    sim.add(Particle(m=1.0))
    planet = Particle(m=0.0, position=(1.0, 0.0, 0.0), velocity=(0.0, 1.1, 0.0))
    sim.add(planet)

    sphere = sim.load_force("solid_sphere")
    sim.add_force(sphere)
    for name, value in [("rho", 10.0), ("rad", 0.1), ("x_cen", 0.1), ("y_cen", 0.0), ("z_cen", 0.0)]:
        sphere.params.set_double(name, value)
    sim.particles[1].params.set_int("ext_enable", 1)

    planet.clear_acceleration()
    sphere.evaluate(sim, sim.particles)
    M = 10.0 * 4.0 / 3.0 * math.pi * 0.001
    assert M == pytest.approx(0.041888, rel=1e-5)
    assert planet.acceleration[0] == pytest.approx(-0.05171, rel=1e-3)
    assert np.allclose(planet.acceleration[1:], 0.0)

    # Full update: star gravity (-1 along x) plus the sphere; the star is not enabled
    sim.update_acceleration()
    assert planet.acceleration[0] == pytest.approx(-1.0 - M / 0.81)
    assert np.array_equal(sim.particles[0].acceleration, np.zeros(3))


def test_potential_inside_and_outside():
    """
    U = -G·M·m·(3R² - r²)/(2R³) inside, -G·M·m/r outside; equal at r = R.
    """
    sim = Simulation(G=1.0)
    sphere = make_sphere(UNIT)
    center = enabled((0.0, 0.0, 0.0), m=2.0)
    surface = enabled((0.0, 1.0, 0.0), m=1.0)
    outside = enabled((0.0, 0.0, 4.0), m=1.0)

    assert solid_sphere_potential(sim, sphere, [center]) == pytest.approx(-3.0)
    assert solid_sphere_potential(sim, sphere, [surface]) == pytest.approx(-1.0)
    assert solid_sphere_potential(sim, sphere, [outside]) == pytest.approx(-0.25)
    assert solid_sphere_potential(sim, make_sphere({"rad": 1.0}), [center]) == 0.0
