# examples/two_charges.py
from coulomb_sim import Simulation
from coulomb_sim.core.invariants import kinetic_energy, potential_energy

sim = Simulation(seed=0)

# Like charges 2 m apart push each other away
a = sim.add_particle(charge=+1e-3, mass=10.0, position=(-1.0, 0.0, 0.0))
b = sim.add_particle(charge=+1e-3, mass=10.0, position=(+1.0, 0.0, 0.0))

e0 = kinetic_energy(sim.particles) + potential_energy(sim.particles)
sim.run(250)
e1 = kinetic_energy(sim.particles) + potential_energy(sim.particles)

print("t:", sim.time)
print("a pos", sim.store.get(a).position, "v", sim.store.get(a).velocity)
print("b pos", sim.store.get(b).position, "v", sim.store.get(b).velocity)
print("energy", e0, "->", e1)
