# MIT License (see LICENSE)
"""
Containment volumes.

A BoundarySet is a fixed group of wall volumes around an interior box. The
whole set is either active or inactive, never partially. While active, the
walls keep particles inside the interior by reflecting them back.

BoundaryController couples the set to a ParticleStore: turning the walls on
re-randomizes every particle inside the store's spawn extent (or the whole
interior when that extent does not fit), so nothing starts outside the
walls. Turning them off leaves particles where they are.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterable

from .constants import BOUNDARY_HALF_EXTENT
from .store import ParticleStore
from .types import Bounds, RigidBody3D

logger = logging.getLogger(__name__)


@dataclass
class Boundary:
    """
    One wall volume.

    Attributes:
        name: Label, e.g. "+x".
        bounds: Box occupied by the wall.
        active: Whether the wall currently exists in the world.
    """
    name: str
    bounds: Bounds
    active: bool = False


@dataclass
class BoundarySet:
    """
    Walls enclosing an interior box, toggled together.

    Attributes:
        interior: Box the walls enclose.
        walls: The wall volumes.
    """
    interior: Bounds
    walls: list[Boundary] = field(default_factory=list)

    @classmethod
    def cube(cls, half_extent: float = BOUNDARY_HALF_EXTENT, thickness: float = 1.0) -> "BoundarySet":
        """Six slab walls around a cube of half-size `half_extent` centred at the origin."""
        h, t = half_extent, thickness
        walls = []
        for axis, label in enumerate("xyz"):
            for sign in (-1, 1):
                lo = [-h - t, -h - t, -h - t]
                hi = [h + t, h + t, h + t]
                if sign > 0:
                    lo[axis] = h
                else:
                    hi[axis] = -h
                walls.append(Boundary(name=f"{'+' if sign > 0 else '-'}{label}", bounds=Bounds(tuple(lo), tuple(hi))))
        return cls(interior=Bounds.cube(h), walls=walls)

    @property
    def active(self) -> bool:
        return bool(self.walls) and self.walls[0].active

    def set_active(self, active: bool) -> None:
        for wall in self.walls:
            wall.active = active

    def contain(self, bodies: Iterable[RigidBody3D], restitution: float = 1.0) -> int:
        """
        Push bodies that left the interior back onto its surface.

        The velocity component along each crossed axis is reversed and
        scaled by `restitution`. Does nothing while the set is inactive.

        Returns:
            Number of bodies that were reflected.
        """
        if not self.active:
            return 0
        lo, hi = self.interior.lo, self.interior.hi
        hits = 0
        for b in bodies:
            hit = False
            for axis in range(3):
                if b.position[axis] < lo[axis]:
                    b.position[axis] = lo[axis]
                    if b.velocity[axis] < 0:
                        b.velocity[axis] *= -restitution
                    hit = True
                elif b.position[axis] > hi[axis]:
                    b.position[axis] = hi[axis]
                    if b.velocity[axis] > 0:
                        b.velocity[axis] *= -restitution
                    hit = True
            hits += hit
        return hits


class BoundaryController:
    """
    Toggles a BoundarySet and repositions particles on activation.

    Args:
        boundaries: The wall set to control.
        store: Store whose particles are regenerated when walls go up.
    """

    def __init__(self, boundaries: BoundarySet, store: ParticleStore) -> None:
        self.boundaries = boundaries
        self.store = store

    @property
    def active(self) -> bool:
        return self.boundaries.active

    @property
    def spawn_bounds(self) -> Bounds:
        """The store's default extent if it fits inside the walls, else the interior."""
        default = self.store.default_bounds
        return default if default.within(self.boundaries.interior) else self.boundaries.interior

    def toggle(self) -> bool:
        """
        Deactivate the walls if active; otherwise activate them and
        regenerate every particle inside spawn_bounds.

        Returns:
            The new active state.
        """
        if self.boundaries.active:
            self.boundaries.set_active(False)
            logger.info("Boundaries disabled")
            return False

        self.boundaries.set_active(True)
        self.store.regenerate_positions(self.spawn_bounds)
        logger.info(f"Boundaries enabled, regenerated {self.store.count()} particles")
        return True
