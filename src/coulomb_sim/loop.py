# MIT License (see LICENSE)
"""
Per-tick force application.

SimulationLoop is invoked once per fixed tick. It solves the Coulomb forces
for the current particle positions and accumulates them on each particle's
rigid body. Moving the particles is left to the integrator that runs after
it in the same tick.
"""
from __future__ import annotations

import numpy as np

from .core.forces import ForceSolver
from .store import ParticleStore


class SimulationLoop:
    """
    Fixed-tick force driver.

    Args:
        store: Source of particles.
        solver: Force solver to run each tick.
    """

    def __init__(self, store: ParticleStore, solver: ForceSolver | None = None) -> None:
        self.store = store
        self.solver = solver or ForceSolver()

    def tick(self) -> np.ndarray:
        """
        Apply this tick's net Coulomb force to every particle.

        Returns:
            Array of shape (n, 3) with the applied forces, in store order.
        """
        return self.solver.apply(self.store.iterate())
