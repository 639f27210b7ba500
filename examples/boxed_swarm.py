# examples/boxed_swarm.py
import logging

from coulomb_sim import Simulation, setup_logging
from coulomb_sim.renderer import DebugRenderer

setup_logging(logging.INFO)

renderer = DebugRenderer(verbose=False)
sim = Simulation(seed=42, renderer=renderer)
sim.setup_random_particles(10)

# Walls up: everyone is respawned inside the 50 m cube
sim.toggle_boundaries()

for tick in range(500):
    sim.step()
    if tick % 100 == 0:
        renderer.render_simulation(sim)

# Slow down, pause, resume
sim.halve_timescale()
sim.toggle_time()
sim.run(50)
sim.toggle_time()
sim.run(50)

print(sim.clock.display_text, "t:", sim.time, "ticks:", sim.ticks)
sim.destroy_particles()
