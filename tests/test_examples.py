# MIT License (see LICENSE)
import math
import runpy
from pathlib import Path

import numpy as np
import pytest

EXAMPLES = Path(__file__).resolve().parents[1] / "examples"


def test_solid_sphere_example_runs():
    """
    The reference scene has a massless planet, so its energy is tracked per
    unit mass: ε = ½v² - G·m_star/r + Φ_sphere, which is nonzero and conserved.
    """
    ns = runpy.run_path(str(EXAMPLES / "solid_sphere.py"))
    rel_err = ns["main"](tmax=0.5)
    print("relative energy error", rel_err)
    assert math.isfinite(rel_err)
    assert rel_err <= 1e-5


def test_ext_point_mass_example_runs():
    """After one period of the circular orbit the particle is back at (3, 2, 0)."""
    ns = runpy.run_path(str(EXAMPLES / "ext_point_mass.py"), run_name="__main__")
    p = ns["p"]
    assert ns["sim"].t == pytest.approx(2.0 * math.pi)
    assert np.allclose(p.position, [3.0, 2.0, 0.0], atol=1e-4)
