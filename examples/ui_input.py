# examples/ui_input.py
from coulomb_sim import Simulation

sim = Simulation(seed=7)
sim.clock.subscribe(lambda clock: print(clock.display_text))

# Text fields as typed by a user; bad values fall back to random draws
sim.add_ui_particle("0.002", "8")
sim.add_ui_particle("not a number", "12")
sim.add_ui_particle("-0.001", "-5")
sim.add_random_particle()

for p in sim.particles:
    print(p.id, p.handle.name, p.handle.color)

sim.double_timescale()
sim.double_timescale()
sim.run(100)
