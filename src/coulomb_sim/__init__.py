# MIT License (see LICENSE)
"""
coulomb_sim - Point charges interacting under Coulomb's law.

This package simulates charged particles in 3D with exact pairwise
electrostatic forces, a fixed-tick integrator decoupled from a variable time
scale, and optional containment walls.

Main entry points:
    - Simulation: Facade holding the particles, clock and boundaries.
    - ParticleStore: The particle collection and its lifecycle.
    - ForceSolver: Pairwise Coulomb force accumulation.
    - SimulationClock: Time scale and pause/resume.
    - BoundarySet, BoundaryController: Containment walls.

Submodules:
    - core: Force solver, integrators and invariants.
    - renderer: Optional visualization adapters.

Example:
    from coulomb_sim import Simulation

    sim = Simulation(seed=1)
    sim.setup_random_particles(10)
    for _ in range(500):
        sim.step()
"""
from .simulation import Simulation
from .store import ParticleStore
from .clock import SimulationClock
from .boundaries import Boundary, BoundarySet, BoundaryController
from .loop import SimulationLoop
from .core.forces import ForceSolver
from .types import Particle, RigidBody3D, Bounds
from .logging_config import setup_logging

__all__ = [
    # Simulation
    "Simulation",
    "SimulationLoop",
    "ParticleStore",
    "ForceSolver",
    "SimulationClock",
    # Boundaries
    "Boundary",
    "BoundarySet",
    "BoundaryController",
    # Types
    "Particle",
    "RigidBody3D",
    "Bounds",
    # Logging
    "setup_logging",
]
