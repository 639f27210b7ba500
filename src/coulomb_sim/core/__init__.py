# MIT License (see LICENSE)
"""
Core physics simulation components.

This subpackage provides:
    - Force solver: Exact pairwise Coulomb forces.
    - Integrators: Semi-implicit Euler, velocity Verlet, RK4.
    - Invariants: Energy and momentum for verification.

Typical usage:
    from coulomb_sim.core import ForceSolver, semi_implicit_euler_step

    solver = ForceSolver()
    solver.apply(store.iterate())
    for p in store:
        semi_implicit_euler_step(p.body, dt=0.02)
"""
from .forces import ForceSolver, pair_force
from .integrators import (
    semi_implicit_euler_step,
    verlet_step,
    rk4_step,
    get_integrator,
    INTEGRATORS,
)
from .invariants import kinetic_energy, potential_energy, linear_momentum

__all__ = [
    # Forces
    "ForceSolver",
    "pair_force",
    # Integrators
    "semi_implicit_euler_step",
    "verlet_step",
    "rk4_step",
    "get_integrator",
    "INTEGRATORS",
    # Invariants
    "kinetic_energy",
    "potential_energy",
    "linear_momentum",
]
