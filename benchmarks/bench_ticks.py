"""
Microbenchmark: time per tick vs number of particles.
The force solver is exact pairwise, so force time grows as N².
Run:
  python benchmarks/bench_ticks.py
"""
import time
from coulomb_sim import Simulation
from coulomb_sim.profiler import Profiler

def run(n: int, ticks: int = 100):
    prof = Profiler()
    sim = Simulation(seed=12345, profiler=prof)  # determinism
    sim.setup_random_particles(n)

    # warmup
    sim.run(5)
    prof.reset()

    t0 = time.perf_counter()
    sim.run(ticks)
    t1 = time.perf_counter()

    per_tick = (t1 - t0) / ticks
    return per_tick, sim.solver.pair_evaluations, prof.stats.summary()

if __name__ == "__main__":
    for n in [10, 25, 50, 100, 200]:
        per_tick, pairs, summary = run(n)
        print(f"N={n:4d}  pairs={pairs:6d}  tick={1e3*per_tick:8.3f} ms  ticks/s={1/per_tick:8.1f}")
        for k in ["forces", "integrate", "contain"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
