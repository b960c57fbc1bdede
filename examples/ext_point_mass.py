# examples/ext_point_mass.py
# A circular orbit around an external point mass; no simulated massive bodies.
import math

from extgrav import Simulation, Particle

sim = Simulation(G=1.0, dt=1e-3, gravity="none")

p = Particle(m=1e-3, position=(3.0, 2.0, 0.0), velocity=(0.0, 1.0, 0.0))
p.enable_external()
sim.add(p)

src = sim.load_force("ext_point_mass")
src.params.set_double("ext_M", 1.0)
src.params.set_double("ext_x", 2.0)
src.params.set_double("ext_y", 2.0)
src.params.set_double("ext_z", 0.0)
sim.add_force(src)

sim.integrate(2.0 * math.pi)

print("pos after one period:", p.position, "(started at [3, 2, 0])")
print("distance from source:", math.dist(p.position, (2.0, 2.0, 0.0)))
