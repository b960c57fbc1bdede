# MIT License (see LICENSE)
import json

import numpy as np
import pytest

from extgrav import Simulation, Particle
from extgrav.io import (
    force_from_json,
    load_simulation,
    particle_from_json,
    save_simulation,
    simulation_from_json,
    simulation_to_json,
)

SCENE = {
    "G": 1.0,
    "dt": 0.001,
    "particles": [
        {"m": 1.0},
        {"m": 0.0, "position": [1.0, 0.0, 0.0], "velocity": [0.0, 1.1, 0.0],
         "params": {"ext_enable": 1}},
    ],
    "forces": [
        {"name": "solid_sphere",
         "params": {"rho": 10, "rad": 0.1, "x_cen": 0.1, "y_cen": 0, "z_cen": 0}},
    ],
}


def test_load_scene_file(tmp_path):
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(SCENE), encoding="utf-8")

    sim = load_simulation(str(path))
    assert sim.N == 2
    assert not sim.particles[0].ext_enabled
    assert sim.particles[1].ext_enabled

    sphere = sim.forces[0]
    assert sphere.name == "solid_sphere"
    # integer JSON values for float parameters are coerced
    assert sphere.params.get_double("rho") == 10.0
    assert sphere.params.get_double("y_cen") == 0.0

    sim.update_acceleration()
    assert sim.particles[1].acceleration[0] == pytest.approx(-1.0 - 0.041888 / 0.81, rel=1e-5)


def test_save_and_reload(tmp_path):
    sim = simulation_from_json(SCENE)
    sim.integrate(0.5)
    path = tmp_path / "out.json"
    save_simulation(sim, str(path))

    again = load_simulation(str(path))
    assert again.t == pytest.approx(0.5)
    assert np.allclose(again.particles[1].position, sim.particles[1].position)
    assert again.particles[1].params.get_int("ext_enable") == 1
    assert again.forces[0].params.to_dict() == sim.forces[0].params.to_dict()


def test_defaults_are_omitted():
    data = simulation_to_json(Simulation())
    assert "integrator" not in data
    assert "gravity" not in data
    assert data["particles"] == [] and data["forces"] == []

    data = simulation_to_json(Simulation(integrator="verlet", gravity="none", softening=0.01))
    assert data["integrator"] == "verlet"
    assert data["gravity"] == "none"
    assert data["softening"] == 0.01


def test_malformed_entries():
    with pytest.raises(ValueError):
        particle_from_json({"position": [0, 0, 0]})
    with pytest.raises(ValueError):
        particle_from_json({"m": 1.0, "position": [0, 0]})
    with pytest.raises(ValueError):
        particle_from_json({"m": 1.0, "params": {"ext_enable": "yes"}})
    with pytest.raises(ValueError):
        particle_from_json({"m": 1.0, "params": {"ext_enable": 1.5}})
    with pytest.raises(ValueError):
        force_from_json({"params": {}})
    with pytest.raises(ValueError):
        force_from_json({"name": "warp_drive"})


def test_particle_params_round_trip():
    p = particle_from_json({"m": 0.5, "params": {"ext_enable": 1, "tag": 7}})
    assert isinstance(p, Particle)
    assert p.params.get_int("tag") == 7
    assert p.ext_enabled
