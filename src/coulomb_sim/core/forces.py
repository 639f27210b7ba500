# MIT License (see LICENSE)
"""
Electrostatic force accumulation.

Implements Coulomb's law between every pair of point charges:

    F = k * q_i * q_j / r²,   direction = (x_i - x_j) / |x_i - x_j|

applied as +F·dir on particle i and -F·dir on particle j. Each unordered pair
is evaluated once and the two halves are exact negations of each other, so
Newton's third law holds by construction.

Key concepts:
- Exact summation, O(N²) pair evaluations per tick, no cutoff or softening.
- The separation is clamped below by `min_distance`, so near-coincident
  particles get a large but finite force.
- Exactly coincident particles have no direction; their pair contributes
  zero force.
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

from ..constants import K_COULOMB, DEFAULT_MIN_DISTANCE
from ..types import Particle
from ..util import norm, unit


def pair_force(
    p_i: np.ndarray,
    p_j: np.ndarray,
    q_i: float,
    q_j: float,
    min_distance: float = DEFAULT_MIN_DISTANCE,
) -> np.ndarray:
    """
    Force exerted on charge i by charge j.

    Like charges repel (force points from j towards i), opposite charges
    attract. Swapping the arguments yields exactly the negated vector.

    Args:
        p_i: Position of particle i as [x, y, z].
        p_j: Position of particle j as [x, y, z].
        q_i: Charge of particle i in Coulombs.
        q_j: Charge of particle j in Coulombs.
        min_distance: Lower clamp for the separation r.

    Returns:
        Force vector [Fx, Fy, Fz] in Newtons acting on particle i.
    """
    d = p_i - p_j
    r = max(norm(d), min_distance)
    # q_i * q_j first: keeps the magnitude symmetric under swapping i and j
    mag = K_COULOMB * (q_i * q_j) / (r * r)
    return mag * unit(d)


class ForceSolver:
    """
    Computes the net Coulomb force on every particle for one tick.

    Attributes:
        min_distance: Lower clamp for pair separation in meters.
        pair_evaluations: Number of pair evaluations in the last call to
                          compute(), always n(n-1)/2.
    """

    def __init__(self, min_distance: float = DEFAULT_MIN_DISTANCE) -> None:
        if min_distance <= 0:
            raise ValueError(f"min_distance must be positive, got {min_distance}")
        self.min_distance = float(min_distance)
        self.pair_evaluations = 0

    def compute(self, particles: Sequence[Particle]) -> np.ndarray:
        """
        Net force on each particle, in the order given.

        Args:
            particles: Ordered particles. Positions are read, nothing is written.

        Returns:
            Array of shape (n, 3); row k is the force on particles[k].
        """
        n = len(particles)
        forces = np.zeros((n, 3), dtype=np.float64)
        evaluations = 0
        for i in range(n):
            pi = particles[i]
            for j in range(i + 1, n):
                pj = particles[j]
                f = pair_force(pi.position, pj.position, pi.charge, pj.charge, self.min_distance)
                evaluations += 1

                # Newton's third law
                forces[i] += f
                forces[j] -= f
        self.pair_evaluations = evaluations
        return forces

    def apply(self, particles: Sequence[Particle]) -> np.ndarray:
        """
        Compute net forces and accumulate them on each particle's rigid body.

        Returns:
            The force array from compute().
        """
        forces = self.compute(particles)
        for p, f in zip(particles, forces):
            p.body.apply_force(f)
        return forces
