# MIT License (see LICENSE)
"""
Utilities for calculating physical invariants and conserved quantities.

Used for verifying simulation correctness and debugging stability issues.
With no boundaries active, the charges form a closed system: total linear
momentum is conserved exactly by the pairwise solver, and total energy
(kinetic + electrostatic potential) up to integration error.
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

from ..constants import K_COULOMB, DEFAULT_MIN_DISTANCE
from ..types import Particle
from ..util import norm


def kinetic_energy(particles: Sequence[Particle]) -> float:
    """
    Total kinetic energy T = Σ 0.5 * m * v², in Joules.
    """
    ke = 0.0
    for p in particles:
        v = p.velocity
        ke += 0.5 * p.mass * float(np.dot(v, v))
    return ke


def potential_energy(particles: Sequence[Particle], min_distance: float = DEFAULT_MIN_DISTANCE) -> float:
    """
    Total electrostatic potential energy U = Σ_{i<j} k q_i q_j / r_ij.

    Uses the same separation clamp as the force solver.
    """
    u = 0.0
    n = len(particles)
    for i in range(n):
        pi = particles[i]
        for j in range(i + 1, n):
            pj = particles[j]
            r = max(norm(pi.position - pj.position), min_distance)
            u += K_COULOMB * (pi.charge * pj.charge) / r
    return u


def linear_momentum(particles: Sequence[Particle]) -> np.ndarray:
    """
    Total linear momentum P = Σ m * v, as [Px, Py, Pz] in kg·m/s.
    """
    p_total = np.zeros(3, dtype=np.float64)
    for p in particles:
        p_total += p.mass * p.velocity
    return p_total
