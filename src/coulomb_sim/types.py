# MIT License (see LICENSE)
"""
Core type definitions for the point-charge simulation.

Defines the fundamental data structures:
- Bounds: Axis-aligned box used for spawning and containment.
- RigidBody3D: Kinematic state of a particle (position, velocity, mass).
- Particle: A charged particle, tying a charge to its rigid body and
  renderable handle.

Equations of motion for a point mass:
  dx/dt = v
  dv/dt = F/m
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from .util import f64, vec3


# =============================================================================
# Bounds
# =============================================================================

@dataclass(frozen=True)
class Bounds:
    """
    Axis-aligned box [lo, hi] in 3D.

    Attributes:
        lo: Minimum corner (x, y, z) in meters.
        hi: Maximum corner (x, y, z) in meters.
    """
    lo: tuple[float, float, float]
    hi: tuple[float, float, float]

    def __post_init__(self) -> None:
        lo = tuple(float(c) for c in self.lo)
        hi = tuple(float(c) for c in self.hi)
        if len(lo) != 3 or len(hi) != 3:
            raise ValueError("Bounds corners must have 3 components")
        if any(a > b for a, b in zip(lo, hi)):
            raise ValueError(f"Bounds lo {lo} exceeds hi {hi}")
        object.__setattr__(self, "lo", lo)
        object.__setattr__(self, "hi", hi)

    @classmethod
    def cube(cls, half: float, center: tuple[float, float, float] = (0.0, 0.0, 0.0)) -> "Bounds":
        """Cube of half-size `half` around `center`."""
        cx, cy, cz = center
        return cls((cx - half, cy - half, cz - half), (cx + half, cy + half, cz + half))

    def within(self, other: "Bounds") -> bool:
        """True if this box lies entirely inside `other`."""
        return all(a >= b for a, b in zip(self.lo, other.lo)) and all(a <= b for a, b in zip(self.hi, other.hi))

    def contains(self, point) -> bool:
        """True if the point lies inside or on the box."""
        p = f64(point)
        return bool(np.all(p >= self.lo) and np.all(p <= self.hi))

    def sample(self, rng: np.random.Generator) -> np.ndarray:
        """Uniformly random point inside the box."""
        return rng.uniform(self.lo, self.hi)


# =============================================================================
# Rigid Body
# =============================================================================

@dataclass
class RigidBody3D:
    """
    Point-mass rigid body owned by a particle.

    Attributes:
        mass: Mass in kg. Must be > 0.
        position: Position [x, y, z] in meters.
        velocity: Linear velocity [vx, vy, vz] in m/s.
        use_gravity: Whether the world should apply gravity. Particles
                     are created with gravity off.
        continuous_collision: Request swept collision checks for fast bodies.
        force: Accumulated force [Fx, Fy, Fz] (cleared each tick).
        alive: False once the handle has been released.
    """
    mass: float
    position: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    velocity: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    use_gravity: bool = False
    continuous_collision: bool = True
    force: np.ndarray = field(default_factory=lambda: np.zeros(3, dtype=np.float64))
    alive: bool = True

    def __post_init__(self) -> None:
        """Convert position/velocity to float64 arrays for consistent numerics."""
        self.position = vec3(self.position)
        self.velocity = vec3(self.velocity)
        self.force = vec3(self.force)

    @property
    def inv_mass(self) -> float:
        """Inverse mass (1/m). Returns 0 for non-positive mass."""
        return 0.0 if self.mass <= 0 else 1.0 / self.mass

    def apply_force(self, f: np.ndarray) -> None:
        """Accumulate a force for the current tick."""
        self.force += f

    def clear_forces(self) -> None:
        """Reset accumulated force to zero for next tick."""
        self.force[:] = 0.0

    def release(self) -> None:
        """Detach the body from the world. It is no longer integrated."""
        self.alive = False
        self.velocity.fill(0.0)
        self.force.fill(0.0)


# =============================================================================
# Particle
# =============================================================================

@dataclass(eq=False)
class Particle:
    """
    A charged point particle.

    Attributes:
        id: Identifier assigned by ParticleStore.add(), stable for the
            particle's lifetime.
        charge: Electric charge in Coulombs. The sign selects its colour.
        mass: Mass in kg (> 0), mirrored in body.mass.
        body: Rigid body holding position and velocity.
        handle: Renderable handle from the renderer adapter. Opaque here.
    """
    id: int
    charge: float
    mass: float
    body: RigidBody3D
    handle: Any = None

    @property
    def position(self) -> np.ndarray:
        return self.body.position

    @property
    def velocity(self) -> np.ndarray:
        return self.body.velocity

    @property
    def is_positive(self) -> bool:
        return self.charge >= 0
