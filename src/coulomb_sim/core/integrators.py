# MIT License (see LICENSE)
"""
Numerical integrators for point-mass dynamics.

This module provides time-stepping methods to advance a rigid body by one
fixed tick. All integrators solve
    dx/dt = v,         dv/dt = F/m
with the accumulated force held constant over the tick.

Available integrators:
- semi_implicit_euler_step: Symplectic Euler, the default. Velocity first,
  then position with the new velocity.
- verlet_step: Velocity Verlet with constant acceleration.
- rk4_step: Classical 4th-order Runge-Kutta.

Reference:
    Semi-implicit Euler: https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
    Velocity Verlet: https://en.wikipedia.org/wiki/Verlet_integration#Velocity_Verlet
"""
from __future__ import annotations
from typing import Callable

import numpy as np

from ..types import RigidBody3D


def semi_implicit_euler_step(body: RigidBody3D, dt: float) -> None:
    """
    Advance body state by dt using semi-implicit (symplectic) Euler.

    The update rule is:
        v(t+dt) = v(t) + (F/m) * dt
        x(t+dt) = x(t) + v(t+dt) * dt

    Args:
        body: Rigid body to integrate (modified in-place).
        dt: Timestep in seconds. dt == 0 leaves the body untouched.
    """
    body.velocity += body.force * (body.inv_mass * dt)
    body.position += body.velocity * dt


def verlet_step(body: RigidBody3D, dt: float) -> None:
    """
    Advance body state using velocity Verlet integration.

    With forces recomputed once per tick the acceleration is constant over
    the step, so the update reduces to:
        x(t+dt) = x(t) + v(t)*dt + 0.5*a*dt²
        v(t+dt) = v(t) + a*dt

    Args:
        body: Rigid body to integrate (modified in-place).
        dt: Timestep in seconds.
    """
    a0 = body.force * body.inv_mass
    body.position += body.velocity * dt + 0.5 * a0 * dt * dt
    body.velocity += a0 * dt


def rk4_step(body: RigidBody3D, dt: float) -> None:
    """
    Advance body state by dt using classical 4th-order Runge-Kutta.

    RK4 evaluates derivatives at 4 points within the timestep and combines
    them with weights (1, 2, 2, 1)/6. Forces are held constant over the
    timestep, since they are only re-solved once per tick.

    Args:
        body: Rigid body to integrate (modified in-place).
        dt: Timestep in seconds.

    Reference:
        https://en.wikipedia.org/wiki/Runge-Kutta_methods#The_Runge-Kutta_method
    """
    a = body.force * body.inv_mass
    x0 = body.position.copy()
    v0 = body.velocity.copy()

    # dx/dt = v, dv/dt = a (constant)
    k1x, k1v = v0, a
    k2x, k2v = v0 + 0.5 * dt * k1v, a
    k3x, k3v = v0 + 0.5 * dt * k2v, a
    k4x, k4v = v0 + dt * k3v, a

    body.position[:] = x0 + (dt / 6.0) * (k1x + 2 * k2x + 2 * k3x + k4x)
    body.velocity[:] = v0 + (dt / 6.0) * (k1v + 2 * k2v + 2 * k3v + k4v)


INTEGRATORS: dict[str, Callable[[RigidBody3D, float], None]] = {
    "semi_implicit_euler": semi_implicit_euler_step,
    "verlet": verlet_step,
    "rk4": rk4_step,
}


def get_integrator(name: str) -> Callable[[RigidBody3D, float], None]:
    """Look up an integrator by name. Raises ValueError for unknown names."""
    try:
        return INTEGRATORS[name]
    except KeyError:
        raise ValueError(f"Unknown integrator: {name}") from None
