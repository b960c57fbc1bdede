"""
Microbenchmark: time per step vs number of particles, by phase.
Run:
  python benchmarks/bench_forces.py
"""
import time
import numpy as np
from extgrav import Simulation, Particle
from extgrav.profiler import Profiler


def run(n: int, steps: int = 200):
    prof = Profiler()
    sim = Simulation(G=1.0, dt=1e-3, gravity="none", profiler=prof)

    rng = np.random.default_rng(12345)
    for _ in range(n):
        p = Particle(m=1e-6, position=rng.uniform(-2.0, 2.0, size=3))
        p.enable_external()
        sim.add(p)

    sphere = sim.load_force("solid_sphere")
    for name, value in [("rad", 0.5), ("rho", 1.0), ("x_cen", 0.0), ("y_cen", 0.0), ("z_cen", 0.0)]:
        sphere.params.set_double(name, value)
    sim.add_force(sphere)

    point = sim.load_force("ext_point_mass")
    for name, value in [("ext_M", 1.0), ("ext_x", 3.0), ("ext_y", 0.0), ("ext_z", 0.0)]:
        point.params.set_double(name, value)
    sim.add_force(point)

    t0 = time.perf_counter()
    for _ in range(steps):
        sim.step()
    t1 = time.perf_counter()

    return (t1 - t0) / steps, prof.stats.summary()


if __name__ == "__main__":
    for n in [10, 100, 1000, 5000]:
        per_step, summary = run(n)
        print(f"N={n:5d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["forces", "integrate"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
