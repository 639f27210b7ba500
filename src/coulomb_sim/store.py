# MIT License (see LICENSE)
"""
Authoritative particle collection.

ParticleStore owns every Particle in a simulation. It assigns ids, creates
and destroys the external resources behind a particle (renderable handle
and rigid body), and supports the two bulk operations the simulation
needs: clearing everything and re-randomizing all positions.

Ids come from a counter that only clear() resets, so a store rebuilt from
empty always holds the dense range 0..count-1. Single-particle removal is
not supported.
"""
from __future__ import annotations
import logging
import math

import numpy as np

from .constants import MAX_POS
from .renderer.adapter import NullRenderer, RendererAdapter
from .types import Bounds, Particle, RigidBody3D
from .util import vec3

logger = logging.getLogger(__name__)


class ParticleStore:
    """
    Insertion-ordered collection of particles keyed by id.

    Args:
        renderer: Adapter that creates/moves/destroys renderable handles.
                  Defaults to NullRenderer.
        rng: Random generator used by regenerate_positions().
        default_bounds: Extent used when regenerate_positions() gets no bounds.
    """

    def __init__(
        self,
        renderer: RendererAdapter | None = None,
        rng: np.random.Generator | None = None,
        default_bounds: Bounds | None = None,
    ) -> None:
        self.renderer = renderer if renderer is not None else NullRenderer()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.default_bounds = default_bounds or Bounds.cube(MAX_POS)
        self._particles: dict[int, Particle] = {}
        self._next_id = 0

    def add(self, charge: float, mass: float, position) -> int:
        """
        Create a particle and return its id.

        Creates a renderable handle and a rigid body (gravity off,
        continuous collision on) for it.

        Raises:
            ValueError: If mass is not a positive finite number.
        """
        mass = float(mass)
        charge = float(charge)
        if not math.isfinite(mass) or mass <= 0:
            raise ValueError(f"Particle mass must be positive, got {mass}")
        if not math.isfinite(charge):
            raise ValueError(f"Particle charge must be finite, got {charge}")

        pos = vec3(position)
        handle = self.renderer.create_handle(charge, mass, pos)
        body = RigidBody3D(mass=mass, position=pos, use_gravity=False, continuous_collision=True)

        pid = self._next_id
        self._next_id += 1
        self._particles[pid] = Particle(id=pid, charge=charge, mass=mass, body=body, handle=handle)
        logger.debug(f"Added particle {pid} (q={charge:g} C, m={mass:g} kg)")
        return pid

    def clear(self) -> int:
        """
        Destroy every particle and empty the store.

        Destruction is best-effort: a failure on one particle is logged and
        the remaining particles are still destroyed.

        Returns:
            Number of particles whose destruction failed.
        """
        failures = 0
        for p in self._particles.values():
            p.body.release()
            try:
                self.renderer.destroy_handle(p.handle)
            except Exception as e:
                failures += 1
                logger.warning(f"Failed to destroy renderable for particle {p.id}: {e}")
        n = len(self._particles)
        self._particles = {}
        self._next_id = 0
        logger.info(f"Cleared {n} particles ({failures} destruction failures)")
        return failures

    def regenerate_positions(self, bounds: Bounds | None = None, rng: np.random.Generator | None = None) -> None:
        """
        Zero every velocity and move every particle to a random point.

        Args:
            bounds: Box to sample positions from. Defaults to default_bounds.
            rng: Generator to draw from. Defaults to the store's generator.
        """
        bounds = bounds or self.default_bounds
        rng = rng or self.rng
        for p in self._particles.values():
            p.body.velocity.fill(0.0)
            p.body.position[:] = bounds.sample(rng)
            self.renderer.move_handle(p.handle, p.body.position)
        logger.debug(f"Regenerated {len(self._particles)} particle positions in {bounds.lo}..{bounds.hi}")

    def get(self, pid: int) -> Particle:
        """Look up a particle by id. Raises KeyError if absent."""
        return self._particles[pid]

    def count(self) -> int:
        return len(self._particles)

    def iterate(self) -> list[Particle]:
        """Particles in insertion order. A new list on every call."""
        return list(self._particles.values())

    def __len__(self) -> int:
        return len(self._particles)

    def __iter__(self):
        return iter(self.iterate())

    def __contains__(self, pid: object) -> bool:
        return pid in self._particles
